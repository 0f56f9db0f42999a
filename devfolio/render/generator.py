"""Portfolio HTML generation.

Three theme renderers turn a ``PortfolioData`` into a complete, standalone
HTML document:

* ``default``       -- Standard: stacked white cards on a light background.
* ``dark``          -- Minimalist-Dark: centered, dark palette, copyright line.
* ``creative-grid`` -- Creative-Grid: gradient hero and a responsive card grid.

``generate_portfolio_html`` dispatches on ``data.theme.id`` through
``THEME_REGISTRY``; identifiers that are not registered render with the
Standard theme.  The current time is read once at that boundary and handed to
the renderer, which is a pure function of its arguments.

Quick usage::

    from devfolio.render import generate_portfolio_html, SAMPLE_PORTFOLIO_DATA

    html = generate_portfolio_html(SAMPLE_PORTFOLIO_DATA)
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import Any, Optional

from devfolio.models import DEFAULT_THEME_ID, PortfolioData
from devfolio.render.templates import TemplateRenderer
from devfolio.render.themes import ThemeRegistry

STANDARD_TEMPLATE = "standard.html.j2"
DARK_TEMPLATE = "dark.html.j2"
CREATIVE_GRID_TEMPLATE = "creative_grid.html.j2"

THEME_REGISTRY = ThemeRegistry(default_id=DEFAULT_THEME_ID)


@lru_cache(maxsize=1)
def get_template_renderer() -> TemplateRenderer:
    """Return the shared renderer for the packaged theme templates."""
    return TemplateRenderer()


def build_context(
    data: PortfolioData,
    now: datetime,
    *,
    inject_custom_css: bool = True,
) -> dict[str, Any]:
    """Assemble the template context shared by every theme."""
    custom_css = data.custom_css if inject_custom_css and data.custom_css else ""
    return {
        "data": data,
        "user": data.user_info,
        "now": now,
        "custom_css": custom_css.strip(),
    }


def _render_theme(
    template: str,
    data: PortfolioData,
    now: datetime,
    inject_custom_css: bool,
) -> str:
    context = build_context(data, now, inject_custom_css=inject_custom_css)
    return get_template_renderer().render(template, context)


# ---------------------------------------------------------------------------
# Theme renderers
# ---------------------------------------------------------------------------


@THEME_REGISTRY.theme(DEFAULT_THEME_ID, "Default", template=STANDARD_TEMPLATE)
def generate_standard_portfolio_html(
    data: PortfolioData,
    now: datetime,
    *,
    inject_custom_css: bool = True,
) -> str:
    """Render the Standard theme."""
    return _render_theme(STANDARD_TEMPLATE, data, now, inject_custom_css)


@THEME_REGISTRY.theme("dark", "Dark Mode", template=DARK_TEMPLATE)
def generate_minimalist_dark_portfolio_html(
    data: PortfolioData,
    now: datetime,
    *,
    inject_custom_css: bool = True,
) -> str:
    """Render the Minimalist-Dark theme.

    The profile picture is shown only when ``profile_picture_url`` is set, and
    the footer carries a copyright line for ``now.year``.
    """
    return _render_theme(DARK_TEMPLATE, data, now, inject_custom_css)


@THEME_REGISTRY.theme("creative-grid", "Creative Grid", template=CREATIVE_GRID_TEMPLATE)
def generate_creative_grid_portfolio_html(
    data: PortfolioData,
    now: datetime,
    *,
    inject_custom_css: bool = True,
) -> str:
    """Render the Creative-Grid theme.

    Each project card keeps a two-slot button row; a missing repository or
    live link leaves an empty ``<div>`` in its slot.
    """
    return _render_theme(CREATIVE_GRID_TEMPLATE, data, now, inject_custom_css)


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


def generate_portfolio_html(
    data: PortfolioData,
    *,
    now: Optional[datetime] = None,
    inject_custom_css: bool = True,
    registry: Optional[ThemeRegistry] = None,
) -> str:
    """Render *data* with the theme named by ``data.theme.id``.

    Args:
        data: The portfolio to render.  Only ``theme.id`` is inspected here.
        now: Instant used for the copyright year.  Defaults to the current
            local time.
        inject_custom_css: Emit ``data.custom_css`` in a ``<style>`` block.
        registry: Theme lookup table.  Defaults to ``THEME_REGISTRY``.

    Returns:
        A complete HTML document beginning with ``<!DOCTYPE html>``.
    """
    if now is None:
        now = datetime.now()
    entry = (registry or THEME_REGISTRY).resolve(data.theme.id)
    return entry.render(data, now, inject_custom_css=inject_custom_css)
