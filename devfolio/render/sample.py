"""A fully populated example portfolio.

Used by the editor preview before real data loads and by the export smoke
flow, without requiring a backing store.
"""

from __future__ import annotations

from datetime import datetime

from devfolio.models import (
    PortfolioData,
    PortfolioLayout,
    PortfolioTheme,
    Project,
    SocialLink,
    SocialPlatform,
    UserInfo,
)

SAMPLE_PORTFOLIO_DATA = PortfolioData(
    user_id="user123",
    user_info=UserInfo(
        name="Alex Doe",
        professional_title="Full-Stack Developer",
        about_me=(
            "Passionate developer with experience in building web applications using "
            "modern technologies. I love solving problems and learning new things. "
            "Focused on creating intuitive and performant user experiences."
        ),
        profile_picture_url="https://example.com/profile.jpg",
    ),
    social_links=[
        SocialLink(platform=SocialPlatform.GITHUB, url="https://github.com/alexdoe"),
        SocialLink(platform=SocialPlatform.LINKEDIN, url="https://linkedin.com/in/alexdoe"),
        SocialLink(platform=SocialPlatform.TWITTER, url="https://twitter.com/alexdoe"),
    ],
    projects=[
        Project(
            name="E-commerce Platform",
            description=(
                "A full-featured e-commerce platform with product listings, cart "
                "functionality, and user accounts. Built with React, Node.js, and PostgreSQL."
            ),
            repository_url="https://github.com/alexdoe/ecommerce-platform",
            live_url="https://ecom.example.com",
            technologies=["React", "Node.js", "PostgreSQL", "TailwindCSS"],
        ),
        Project(
            name="Task Management App",
            description=(
                "A simple and intuitive task management application to help users "
                "organize their daily tasks. Features include drag-and-drop "
                "functionality and deadline reminders."
            ),
            repository_url="https://github.com/alexdoe/task-app",
            live_url="https://tasks.example.com",
            technologies=["Vue.js", "Firebase", "Vuetify"],
        ),
        Project(
            name="Personal Blog",
            description=(
                "A personal blog site to share articles and tutorials on web "
                "development. Static site generated with Next.js for performance."
            ),
            technologies=["Next.js", "Markdown", "TailwindCSS"],
        ),
    ],
    theme=PortfolioTheme(id="default", name="Default Theme"),
    layout=PortfolioLayout(id="standard", name="Standard Layout"),
    custom_css="""
    /* Example custom CSS */
    body {
      font-family: 'Roboto', sans-serif;
    }
    .container {
        max-width: 1024px;
    }
""",
    last_updated_at=datetime(2024, 7, 28),
)
