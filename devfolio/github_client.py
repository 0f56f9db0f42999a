"""Async client for the GitHub repository API.

Used by the editor to prefill a project's name, description and language from
a repository URL.  Every failure is reported on the returned
``RepositoryDetails`` (``success=False`` with an ``error`` message) rather
than raised, so a caller can show the message next to the form field.

Typical usage::

    client = GitHubClient()
    details = await client.fetch_repository("https://github.com/pallets/jinja")
    if details.success:
        project = details.to_project()
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel, Field

from devfolio.errors import InvalidRepositoryURL
from devfolio.models import Project

_GITHUB_HOST = "github.com"


class RepositoryDetails(BaseModel):
    """Structured result of a repository lookup."""

    success: bool = Field(default=True, description="Whether the lookup succeeded")
    name: str = Field(default="", description="Repository name")
    description: str = Field(default="", description="Repository description")
    language: Optional[str] = Field(default=None, description="Primary language")
    html_url: str = Field(default="", description="Repository page")
    status_code: int = Field(default=200, description="HTTP status reported to the caller")
    error: Optional[str] = Field(default=None, description="Error message on failure")

    def to_project(self) -> Project:
        """Build a project entry prefilled from this repository."""
        return Project(
            name=self.name,
            description=self.description,
            repository_url=self.html_url or None,
            github_url=self.html_url or None,
            technologies=[self.language] if self.language else [],
        )


def parse_repo_url(repo_url: str) -> tuple[str, str]:
    """Split a GitHub repository URL into ``(owner, repo)``.

    Raises:
        InvalidRepositoryURL: If the URL is malformed, not on github.com, or
            has fewer than two path segments.
    """
    parsed = urlparse(repo_url.strip())
    if not parsed.scheme or not parsed.netloc:
        raise InvalidRepositoryURL("The provided URL is invalid.")
    if parsed.hostname != _GITHUB_HOST:
        raise InvalidRepositoryURL("Invalid GitHub URL provided.")

    parts = [part for part in parsed.path.split("/") if part]
    if len(parts) < 2:
        raise InvalidRepositoryURL("Invalid GitHub repository path.")

    owner, repo = parts[0], parts[1]
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    return owner, repo


class GitHubClient:
    """Async client for ``GET /repos/{owner}/{repo}``."""

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        timeout: int = 15,
        user_agent: str = "PortfolioBuilderApp/1.0",
        token: Optional[str] = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self.token = token

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/vnd.github.v3+json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our base URL and timeout."""
        return httpx.AsyncClient(
            base_url=self.api_url,
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            headers=self._headers(),
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        if response.status_code == 404:
            return "Repository not found or is private."
        if response.status_code == 403:
            return "GitHub API rate limit exceeded or access forbidden."
        try:
            detail = response.json().get("message") or response.reason_phrase
        except ValueError:
            detail = response.reason_phrase
        return f"Failed to fetch repository details: {detail}"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def fetch_repository(self, repo_url: str) -> RepositoryDetails:
        """Look up the repository behind *repo_url*.

        Returns:
            A ``RepositoryDetails`` with the repository fields, or with
            ``success=False`` and an ``error`` describing what went wrong.
        """
        try:
            owner, repo = parse_repo_url(repo_url)
        except InvalidRepositoryURL as exc:
            return RepositoryDetails(success=False, status_code=400, error=str(exc))

        try:
            async with self._client() as client:
                response = await client.get(f"/repos/{owner}/{repo}")
        except httpx.ConnectError:
            return RepositoryDetails(
                success=False,
                status_code=502,
                error=f"Cannot connect to GitHub at {self.api_url}.",
            )
        except httpx.TimeoutException:
            return RepositoryDetails(
                success=False,
                status_code=504,
                error=f"Request to GitHub timed out after {self.timeout}s.",
            )
        except httpx.HTTPError as exc:
            return RepositoryDetails(
                success=False,
                status_code=500,
                error=f"Unexpected error talking to GitHub: {exc}",
            )

        if response.status_code >= 400:
            return RepositoryDetails(
                success=False,
                status_code=response.status_code,
                error=self._error_message(response),
            )

        try:
            data = response.json()
        except ValueError as exc:
            return RepositoryDetails(
                success=False,
                status_code=502,
                error=f"GitHub returned an unreadable response: {exc}",
            )

        return RepositoryDetails(
            name=data.get("name") or repo,
            description=data.get("description") or "",
            language=data.get("language") or None,
            html_url=data.get("html_url") or f"https://{_GITHUB_HOST}/{owner}/{repo}",
        )
