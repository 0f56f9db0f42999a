"""Static-site export.

Packages a rendered portfolio as a downloadable archive holding a single
``index.html`` (plus ``style.css`` when configured), or writes the page
straight into a directory.
"""

from __future__ import annotations

import asyncio
import io
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Optional

from devfolio.config import Config
from devfolio.errors import ExportError
from devfolio.models import PortfolioData
from devfolio.render import generate_portfolio_html
from devfolio.utils import ensure_dir, write_bytes, write_text

STYLESHEET_NAME = "style.css"


def render_index(
    data: PortfolioData,
    *,
    config: Optional[Config] = None,
    now: Optional[datetime] = None,
) -> str:
    """Render the document that becomes ``index.html``."""
    config = config or Config()
    return generate_portfolio_html(
        data,
        now=now,
        inject_custom_css=config.render.inject_custom_css,
    )


def build_archive(
    data: PortfolioData,
    *,
    config: Optional[Config] = None,
    now: Optional[datetime] = None,
) -> bytes:
    """Return the zip archive for *data* as bytes."""
    config = config or Config()
    html = render_index(data, config=config, now=now)

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(config.export.index_name, html)
        if config.export.include_custom_css_file and data.custom_css:
            archive.writestr(STYLESHEET_NAME, data.custom_css.strip() + "\n")
    return buffer.getvalue()


async def export_archive(
    data: PortfolioData,
    output_dir: str | Path | None = None,
    *,
    config: Optional[Config] = None,
    now: Optional[datetime] = None,
) -> Path:
    """Write the archive to ``<output_dir>/<archive_name>`` and return its path.

    Raises:
        ExportError: If the archive cannot be written.
    """
    config = config or Config()
    target_dir = Path(output_dir) if output_dir is not None else config.output_dir
    target = target_dir / config.export.archive_name
    content = build_archive(data, config=config, now=now)
    try:
        await asyncio.to_thread(write_bytes, target, content)
    except OSError as exc:
        raise ExportError(f"Cannot write archive to {target}: {exc}") from exc
    return target


async def export_site(
    data: PortfolioData,
    output_dir: str | Path,
    *,
    config: Optional[Config] = None,
    now: Optional[datetime] = None,
) -> Path:
    """Write ``index.html`` into *output_dir* and return its path.

    Raises:
        ExportError: If the page cannot be written.
    """
    config = config or Config()
    target = Path(output_dir) / config.export.index_name
    html = render_index(data, config=config, now=now)
    try:
        await asyncio.to_thread(ensure_dir, target.parent)
        await asyncio.to_thread(write_text, target, html)
    except OSError as exc:
        raise ExportError(f"Cannot write page to {target}: {exc}") from exc
    return target
