"""devfolio configuration.

Typed configuration for the store, the renderer options, the exporter and the
GitHub prefill client.  All settings use Pydantic v2 models so they are
validated at construction time and serialise to/from JSON or environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class GitHubConfig(BaseModel):
    """Settings for the GitHub repository-details client."""

    api_url: str = Field(default="https://api.github.com")
    user_agent: str = Field(default="PortfolioBuilderApp/1.0")
    timeout: int = Field(default=15, ge=1, description="Per-request timeout in seconds")
    token: Optional[str] = Field(
        default=None, description="Personal access token, raises the rate limit"
    )


class RenderConfig(BaseModel):
    """Options passed through to the theme renderers."""

    inject_custom_css: bool = Field(
        default=True, description="Emit the portfolio's custom CSS in a <style> block"
    )


class ExportConfig(BaseModel):
    """Naming of the exported artefacts."""

    archive_name: str = Field(default="portfolio.zip")
    index_name: str = Field(default="index.html")
    include_custom_css_file: bool = Field(
        default=False, description="Also ship custom CSS as style.css in the archive"
    )


class Config(BaseModel):
    """Global devfolio configuration.

    Instances are created once by the CLI (or the hosting application) and
    then passed to the store, exporter and client that need them.
    """

    data_dir: Path = Field(default=Path("./data"))
    output_dir: Path = Field(default=Path("./output"))
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def portfolios_dir(self) -> Path:
        """Directory holding one JSON document per portfolio."""
        return self.data_dir / "portfolios"

    @property
    def archive_path(self) -> Path:
        """Default destination of an exported archive."""
        return self.output_dir / self.export.archive_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<data_dir>/config.json``.

        Returns:
            The path where the file was written.
        """
        target = path or (self.data_dir / "config.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            DEVFOLIO_DATA_DIR, DEVFOLIO_OUTPUT_DIR,
            DEVFOLIO_GITHUB_API_URL, DEVFOLIO_GITHUB_TOKEN, DEVFOLIO_GITHUB_TIMEOUT,
            DEVFOLIO_INJECT_CUSTOM_CSS, DEVFOLIO_ARCHIVE_NAME,
            DEVFOLIO_EXPORT_CSS_FILE.
        """
        github_kwargs: dict[str, Any] = {}
        if os.environ.get("DEVFOLIO_GITHUB_API_URL"):
            github_kwargs["api_url"] = os.environ["DEVFOLIO_GITHUB_API_URL"]
        if os.environ.get("DEVFOLIO_GITHUB_TOKEN"):
            github_kwargs["token"] = os.environ["DEVFOLIO_GITHUB_TOKEN"]
        if os.environ.get("DEVFOLIO_GITHUB_TIMEOUT"):
            github_kwargs["timeout"] = os.environ["DEVFOLIO_GITHUB_TIMEOUT"]

        render_kwargs: dict[str, Any] = {}
        if os.environ.get("DEVFOLIO_INJECT_CUSTOM_CSS"):
            render_kwargs["inject_custom_css"] = _env_flag(os.environ["DEVFOLIO_INJECT_CUSTOM_CSS"])

        export_kwargs: dict[str, Any] = {}
        if os.environ.get("DEVFOLIO_ARCHIVE_NAME"):
            export_kwargs["archive_name"] = os.environ["DEVFOLIO_ARCHIVE_NAME"]
        if os.environ.get("DEVFOLIO_EXPORT_CSS_FILE"):
            export_kwargs["include_custom_css_file"] = _env_flag(
                os.environ["DEVFOLIO_EXPORT_CSS_FILE"]
            )

        return cls(
            data_dir=Path(os.environ.get("DEVFOLIO_DATA_DIR", "./data")),
            output_dir=Path(os.environ.get("DEVFOLIO_OUTPUT_DIR", "./output")),
            github=GitHubConfig(**github_kwargs),
            render=RenderConfig(**render_kwargs),
            export=ExportConfig(**export_kwargs),
        )


def _env_flag(value: str) -> bool:
    return value.strip().lower() not in ("0", "false", "no", "off", "")
