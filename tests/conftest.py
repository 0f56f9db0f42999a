"""Shared pytest fixtures for the devfolio test suite.

Provides reusable fixtures for:
- A small two-project portfolio ("Test User")
- An empty portfolio (no projects, no social links)
- A fixed "now" so copyright lines are stable
- A Config rooted in a temporary directory
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from devfolio.config import Config
from devfolio.models import (
    PortfolioData,
    PortfolioLayout,
    PortfolioTheme,
    Project,
    SocialLink,
    SocialPlatform,
    UserInfo,
)


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_now() -> datetime:
    """A fixed wall-clock instant for renderer calls."""
    return datetime(2030, 3, 4, 12, 0, 0)


# ---------------------------------------------------------------------------
# Portfolio data
# ---------------------------------------------------------------------------

@pytest.fixture
def portfolio_data() -> PortfolioData:
    """Two projects, two social links, default theme."""
    return PortfolioData(
        user_id="testUser123",
        user_info=UserInfo(
            name="Test User",
            professional_title="Software Tester",
            about_me="I love testing software and ensuring quality.",
            profile_picture_url="https://example.com/test-profile.jpg",
        ),
        social_links=[
            SocialLink(platform=SocialPlatform.GITHUB, url="https://github.com/testuser"),
            SocialLink(platform=SocialPlatform.LINKEDIN, url="https://linkedin.com/in/testuser"),
        ],
        projects=[
            Project(
                name="Awesome Project 1",
                description="This is the first awesome project.",
                technologies=["React", "TypeScript"],
                repository_url="https://github.com/testuser/awesome-project-1",
                live_url="https://awesome-project-1.example.com",
            ),
            Project(
                name="Super App 2",
                description="A super application that does amazing things.",
                technologies=["Node.js", "Express", "MongoDB"],
                repository_url="https://github.com/testuser/super-app-2",
            ),
        ],
        theme=PortfolioTheme(id="default", name="Default Theme"),
        layout=PortfolioLayout(id="standard", name="Standard Layout"),
        last_updated_at=datetime(2024, 1, 15),
    )


@pytest.fixture
def empty_portfolio(portfolio_data: PortfolioData) -> PortfolioData:
    """The test portfolio with no projects and no social links."""
    return portfolio_data.model_copy(update={"projects": [], "social_links": []})


@pytest.fixture
def themed(portfolio_data: PortfolioData):
    """Factory: the test portfolio with its theme switched to the given id."""

    def _themed(theme_id: str) -> PortfolioData:
        return portfolio_data.model_copy(
            update={"theme": PortfolioTheme(id=theme_id, name=theme_id)}
        )

    return _themed


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_config(tmp_path: Path) -> Config:
    """A Config whose data and output directories live under tmp_path."""
    return Config(data_dir=tmp_path / "data", output_dir=tmp_path / "output")
