"""Pydantic v2 models for the portfolio data model.

Defines the aggregate a renderer consumes (``PortfolioData``) together with
its parts, the editor's theme/layout catalogs, and the save payload the web
editor submits.  Every model accepts both the camelCase keys used by the
editor and stored documents and the snake_case attribute names, and is
frozen: a renderer only ever reads it.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _PortfolioModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class SocialPlatform(str, Enum):
    """Social platforms offered by the editor."""
    GITHUB = "github"
    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    WEBSITE = "website"


# ---------------------------------------------------------------------------
# Portfolio parts
# ---------------------------------------------------------------------------

class UserInfo(_PortfolioModel):
    """Profile block shown in every theme's header."""
    name: str = Field(..., description="Display name")
    professional_title: str = Field(..., description="e.g. 'Full-Stack Developer'")
    about_me: str = Field(..., description="Free-text introduction, rendered verbatim")
    profile_picture_url: Optional[str] = Field(
        default=None, description="Absolute URL of the profile picture"
    )


class SocialLink(_PortfolioModel):
    """A link to one of the user's profiles.

    ``platform`` is kept as a plain string: values outside
    ``SocialPlatform`` are an upstream concern and still render.
    """
    platform: str = Field(..., description="Platform identifier, e.g. 'github'")
    url: str = Field(..., description="Link target")

    @field_validator("platform", mode="before")
    @classmethod
    def _platform_value(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value


class Project(_PortfolioModel):
    """A project entry, optionally prefilled from GitHub."""
    name: str = Field(..., description="Project name")
    description: str = Field(..., description="What the project does")
    repository_url: Optional[str] = Field(default=None, description="Source link")
    github_url: Optional[str] = Field(
        default=None, description="GitHub URL used to prefill the entry"
    )
    live_url: Optional[str] = Field(default=None, description="Deployed demo link")
    technologies: list[str] = Field(default_factory=list, description="Free-text labels")


class PortfolioTheme(_PortfolioModel):
    """Theme selector; ``id`` picks the renderer."""
    id: str = Field(..., description="Dispatch key, e.g. 'dark'")
    name: str = Field(..., description="Display name")


class PortfolioLayout(_PortfolioModel):
    """Layout selector. Only the editor UI reads it."""
    id: str = Field(..., description="Layout key, e.g. 'standard'")
    name: str = Field(..., description="Display name")


class PortfolioData(_PortfolioModel):
    """The aggregate root handed to a renderer."""
    user_id: str = Field(..., description="Owner of the portfolio")
    user_info: UserInfo
    social_links: list[SocialLink] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    theme: PortfolioTheme
    layout: PortfolioLayout
    custom_css: Optional[str] = Field(default=None, description="User stylesheet")
    last_updated_at: datetime = Field(..., description="Shown in every footer")


# ---------------------------------------------------------------------------
# Editor catalogs
# ---------------------------------------------------------------------------

DEFAULT_THEME_ID = "default"
DEFAULT_LAYOUT_ID = "standard"

THEMES: dict[str, PortfolioTheme] = {
    theme.id: theme
    for theme in (
        PortfolioTheme(id="default", name="Default"),
        PortfolioTheme(id="dark", name="Dark Mode"),
        PortfolioTheme(id="creative-grid", name="Creative Grid"),
    )
}

LAYOUTS: dict[str, PortfolioLayout] = {
    layout.id: layout
    for layout in (
        PortfolioLayout(id="standard", name="Standard"),
        PortfolioLayout(id="grid", name="Grid"),
        PortfolioLayout(id="sidebar", name="Sidebar"),
    )
}


def theme_for_id(theme_id: str) -> PortfolioTheme:
    """Return the catalog theme for *theme_id*, or an entry named after the id."""
    return THEMES.get(theme_id) or PortfolioTheme(id=theme_id, name=theme_id)


def layout_for_id(layout_id: str) -> PortfolioLayout:
    """Return the catalog layout for *layout_id*, or an entry named after the id."""
    return LAYOUTS.get(layout_id) or PortfolioLayout(id=layout_id, name=layout_id)


# ---------------------------------------------------------------------------
# Save payload
# ---------------------------------------------------------------------------

class PortfolioSaveRequest(_PortfolioModel):
    """Body the editor submits when the user saves their portfolio."""
    user_info: UserInfo
    social_links: list[SocialLink]
    projects: list[Project]
    theme_id: str = Field(default=DEFAULT_THEME_ID)
    layout_id: str = Field(default=DEFAULT_LAYOUT_ID)
    custom_css: Optional[str] = Field(default=None)

    def to_portfolio(self, user_id: str, now: datetime) -> PortfolioData:
        """Build the stored aggregate for *user_id*, stamped with *now*."""
        return PortfolioData(
            user_id=user_id,
            user_info=self.user_info,
            social_links=self.social_links,
            projects=self.projects,
            theme=theme_for_id(self.theme_id),
            layout=layout_for_id(self.layout_id),
            custom_css=self.custom_css,
            last_updated_at=now,
        )
