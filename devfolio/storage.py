"""JSON document store for portfolio records.

``PortfolioStore`` keeps one JSON document per user under a data directory,
keyed by user id.  It is an explicit handle: the hosting application builds
one at start-up from its ``Config`` and passes it to whatever needs it.
"""

from __future__ import annotations

import asyncio
import json
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from devfolio.errors import StorageError
from devfolio.models import PortfolioData, PortfolioSaveRequest
from devfolio.utils import load_json, save_json

# Plain ids are lowercase so case-insensitive file systems keep them apart.
# Anything else is stored hex-encoded behind "@", which no plain id contains.
_PLAIN_ID = re.compile(r"[a-z0-9_-]+")
_ENCODED_PREFIX = "@"
_MAX_STEM = 200


def document_name(user_id: str) -> str:
    """Return the file stem for *user_id*: ``"alice"`` or ``"@416c696365"``."""
    if _PLAIN_ID.fullmatch(user_id):
        return user_id
    return _ENCODED_PREFIX + user_id.encode("utf-8").hex()


def user_id_for(stem: str) -> Optional[str]:
    """Invert ``document_name``; ``None`` for a stem it could not have produced."""
    if not stem.startswith(_ENCODED_PREFIX):
        return stem if _PLAIN_ID.fullmatch(stem) else None
    try:
        user_id = bytes.fromhex(stem[len(_ENCODED_PREFIX):]).decode("utf-8")
    except ValueError:
        return None
    return user_id if user_id and document_name(user_id) == stem else None


class PortfolioStore:
    """File-backed portfolio documents, one JSON file per user id.

    File names come from ``document_name``, which maps distinct ids to
    distinct names.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def path_for(self, user_id: str) -> Path:
        """Return the document path for *user_id*.

        Raises:
            StorageError: If the id is empty or too long for a file name.
        """
        if not user_id:
            raise StorageError(user_id, "user id is empty")
        stem = document_name(user_id)
        if len(stem) > _MAX_STEM:
            raise StorageError(user_id, "user id is too long to store")
        return self.root / f"{stem}.json"

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def load(self, user_id: str) -> Optional[PortfolioData]:
        """Return the stored portfolio for *user_id*, or ``None`` if absent.

        Raises:
            StorageError: If the document exists but cannot be parsed, or
                belongs to a different user id.
        """
        path = self.path_for(user_id)
        if not path.exists():
            return None
        try:
            raw = await asyncio.to_thread(load_json, path)
            data = PortfolioData.model_validate(raw)
        except (json.JSONDecodeError, ValidationError) as exc:
            raise StorageError(user_id, f"corrupt document at {path}: {exc}") from exc
        if data.user_id != user_id:
            raise StorageError(
                user_id, f"document at {path} belongs to '{data.user_id}'"
            )
        return data

    def list_user_ids(self) -> list[str]:
        """Return the user ids with a document in the store, sorted.

        Files whose names ``document_name`` could not have produced are skipped.
        """
        if not self.root.is_dir():
            return []
        ids = (user_id_for(p.stem) for p in self.root.glob("*.json"))
        return sorted(user_id for user_id in ids if user_id is not None)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def save(self, data: PortfolioData) -> Path:
        """Write *data* as the document for ``data.user_id`` (create or replace)."""
        path = self.path_for(data.user_id)
        payload = data.model_dump(mode="json", by_alias=True)
        try:
            await save_json(payload, path)
        except OSError as exc:
            raise StorageError(data.user_id, f"cannot write {path}: {exc}") from exc
        return path

    async def upsert(
        self,
        user_id: str,
        request: PortfolioSaveRequest,
        now: Optional[datetime] = None,
    ) -> PortfolioData:
        """Apply an editor save request for *user_id* and persist it.

        The stored record's ``last_updated_at`` is stamped with *now*
        (defaults to the current time).
        """
        data = request.to_portfolio(user_id, now or datetime.now())
        await self.save(data)
        return data

    async def delete(self, user_id: str) -> bool:
        """Remove the document for *user_id*. Returns ``False`` if none existed."""
        path = self.path_for(user_id)
        if not path.exists():
            return False
        await asyncio.to_thread(path.unlink)
        return True
