"""Exception hierarchy for the caller-side layers of devfolio.

The rendering engine itself never raises these: it always produces a
document for a valid ``PortfolioData``.  They cover storage, export and the
GitHub prefill boundary.
"""

from __future__ import annotations


class DevfolioError(Exception):
    """Base class for every error raised by devfolio."""


class StorageError(DevfolioError):
    """Raised when a stored portfolio document cannot be read or written."""

    def __init__(self, user_id: str, message: str) -> None:
        self.user_id = user_id
        super().__init__(f"Portfolio '{user_id}': {message}")


class ExportError(DevfolioError):
    """Raised when an export artefact cannot be written."""


class InvalidRepositoryURL(DevfolioError):
    """Raised when a URL does not point at a GitHub repository."""
