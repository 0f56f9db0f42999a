"""devfolio rendering engine -- portfolio data in, standalone HTML out.

Quick usage::

    from devfolio.render import generate_portfolio_html, SAMPLE_PORTFOLIO_DATA

    html = generate_portfolio_html(SAMPLE_PORTFOLIO_DATA)
"""

from devfolio.render.generator import (
    THEME_REGISTRY,
    generate_creative_grid_portfolio_html,
    generate_minimalist_dark_portfolio_html,
    generate_portfolio_html,
    generate_standard_portfolio_html,
)
from devfolio.render.sample import SAMPLE_PORTFOLIO_DATA
from devfolio.render.templates import TemplateRenderer
from devfolio.render.themes import ThemeEntry, ThemeRegistry

__all__ = [
    "generate_portfolio_html",
    "generate_standard_portfolio_html",
    "generate_minimalist_dark_portfolio_html",
    "generate_creative_grid_portfolio_html",
    "SAMPLE_PORTFOLIO_DATA",
    "THEME_REGISTRY",
    "TemplateRenderer",
    "ThemeEntry",
    "ThemeRegistry",
]
