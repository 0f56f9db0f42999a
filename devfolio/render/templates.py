"""Jinja2 template rendering for portfolio documents.

Provides the TemplateRenderer class which loads the theme templates from the
``devfolio/render/templates/`` directory and renders them with a portfolio
context.  HTML templates are autoescaped, so user-supplied text is escaped
before it reaches the document.  The custom filters registered here carry the
formatting rules every theme shares (platform labels, technology lists,
footer dates).
"""

from __future__ import annotations

import re
from datetime import date
from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

THEME_TEMPLATE_DIR = Path(__file__).parent / "templates"

_CLOSING_STYLE = re.compile(r"</(style)", re.IGNORECASE)


class TemplateRenderer:
    """Renders the Jinja2 templates that make up each theme.

    The environment is built once per instance and only read afterwards, so
    one renderer can serve any number of concurrent render calls.
    """

    def __init__(self, template_dir: str | Path = THEME_TEMPLATE_DIR) -> None:
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "html.j2"], default_for_string=True),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters.update(
            platform_label=platform_label,
            tech_list=tech_list,
            locale_date=locale_date,
            style_text=style_text,
        )

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        """Render *template_name* (e.g. ``"dark.html.j2"``) into a document."""
        return self.env.get_template(template_name).render(context)


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

def platform_label(value: str) -> str:
    """Upper-case the first character and keep the rest: ``github`` -> ``Github``."""
    return value[:1].upper() + value[1:]


def tech_list(values: list[str] | None) -> str:
    """Join technology labels with ``", "``; no labels yields ``""``."""
    return ", ".join(values or ())


def locale_date(value: date) -> str:
    """Format the date portion as a US-English locale date: ``7/28/2024``."""
    return f"{value.month}/{value.day}/{value.year}"


def style_text(value: str) -> Markup:
    """Mark CSS safe for a ``<style>`` body, neutralising closing tags."""
    return Markup(_CLOSING_STYLE.sub(r"<\\/\1", value))
