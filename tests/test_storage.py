"""Tests for the JSON document store (devfolio.storage).

Covers:
- save / load round trip with camelCase documents
- missing and corrupt documents
- upsert from an editor save request
- delete and listing
- injective document names per user id
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

from devfolio.errors import StorageError
from devfolio.models import PortfolioSaveRequest
from devfolio.storage import PortfolioStore, document_name, user_id_for

pytestmark = pytest.mark.unit


@pytest.fixture
def store(tmp_config) -> PortfolioStore:
    return PortfolioStore(tmp_config.portfolios_dir)


@pytest.fixture
def save_request() -> PortfolioSaveRequest:
    return PortfolioSaveRequest.model_validate(
        {
            "userInfo": {
                "name": "Grace",
                "professionalTitle": "Rear Admiral",
                "aboutMe": "Found a moth.",
            },
            "socialLinks": [{"platform": "website", "url": "https://grace.example.com"}],
            "projects": [{"name": "COBOL", "description": "Business language."}],
            "themeId": "dark",
        }
    )


class TestDocumentNames:
    @pytest.mark.parametrize("user_id", ["alice", "user_123", "a-b"])
    def test_plain_ids_kept(self, user_id):
        assert document_name(user_id) == user_id

    @pytest.mark.parametrize("user_id", ["Alice", "user.1", "../../evil", "Zoë", "@alice"])
    def test_other_ids_encoded(self, user_id):
        stem = document_name(user_id)
        assert stem.startswith("@")
        assert "/" not in stem and "." not in stem
        assert user_id_for(stem) == user_id

    @pytest.mark.parametrize(
        "first, second",
        [("Alice", "alice"), ("user.1", "user-1"), ("a b", "a-b"), ("@alice", "alice")],
    )
    def test_distinct_ids_get_distinct_names(self, first, second):
        assert document_name(first) != document_name(second)

    @pytest.mark.parametrize("stem", ["Alice", "@zz", "@", "@616c696365"])
    def test_foreign_stems_rejected(self, stem):
        assert user_id_for(stem) is None


class TestPaths:
    def test_path_for_plain(self, store):
        assert store.path_for("alice") == store.root / "alice.json"

    def test_path_for_keeps_case(self, store):
        assert store.path_for("testUser123") != store.path_for("testuser123")

    def test_path_for_strips_traversal(self, store):
        assert store.path_for("../../evil").parent == store.root

    def test_empty_id(self, store):
        with pytest.raises(StorageError, match="empty"):
            store.path_for("")

    def test_overlong_id(self, store):
        with pytest.raises(StorageError, match="too long"):
            store.path_for("X" * 150)


class TestSaveLoad:
    @pytest.mark.asyncio
    async def test_round_trip(self, store, portfolio_data):
        path = await store.save(portfolio_data)
        assert path.exists()
        loaded = await store.load(portfolio_data.user_id)
        assert loaded == portfolio_data

    @pytest.mark.asyncio
    async def test_document_is_camel_case(self, store, portfolio_data):
        path = await store.save(portfolio_data)
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw["userId"] == "testUser123"
        assert raw["userInfo"]["professionalTitle"] == "Software Tester"
        assert "lastUpdatedAt" in raw

    @pytest.mark.asyncio
    async def test_load_missing_returns_none(self, store):
        assert await store.load("nobody") is None

    @pytest.mark.asyncio
    async def test_load_corrupt_json(self, store):
        path = store.path_for("broken")
        path.parent.mkdir(parents=True)
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError, match="corrupt document"):
            await store.load("broken")

    @pytest.mark.asyncio
    async def test_load_invalid_document(self, store):
        path = store.path_for("partial")
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"userId": "partial"}), encoding="utf-8")
        with pytest.raises(StorageError):
            await store.load("partial")

    @pytest.mark.asyncio
    async def test_save_replaces(self, store, portfolio_data):
        await store.save(portfolio_data)
        changed = portfolio_data.model_copy(update={"custom_css": "h1 { color: red; }"})
        await store.save(changed)
        loaded = await store.load(portfolio_data.user_id)
        assert loaded.custom_css == "h1 { color: red; }"

    @pytest.mark.asyncio
    async def test_save_unwritable(self, tmp_path: Path, portfolio_data):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = PortfolioStore(blocker)
        with pytest.raises(StorageError, match="cannot write"):
            await store.save(portfolio_data)


class TestUpsert:
    @pytest.mark.asyncio
    async def test_creates_record(self, store, save_request):
        now = datetime(2025, 2, 3, 4, 5, 6)
        data = await store.upsert("grace", save_request, now)
        assert data.user_id == "grace"
        assert data.theme.id == "dark"
        assert data.layout.id == "standard"
        assert data.last_updated_at == now
        assert await store.load("grace") == data

    @pytest.mark.asyncio
    async def test_update_bumps_timestamp(self, store, save_request):
        await store.upsert("grace", save_request, datetime(2025, 1, 1))
        updated = await store.upsert("grace", save_request, datetime(2025, 6, 1))
        loaded = await store.load("grace")
        assert loaded.last_updated_at == datetime(2025, 6, 1)
        assert loaded == updated

    @pytest.mark.asyncio
    async def test_defaults_to_current_time(self, store, save_request):
        before = datetime.now()
        data = await store.upsert("grace", save_request)
        assert data.last_updated_at >= before


class TestDeleteAndList:
    @pytest.mark.asyncio
    async def test_delete(self, store, portfolio_data):
        await store.save(portfolio_data)
        assert await store.delete(portfolio_data.user_id) is True
        assert await store.load(portfolio_data.user_id) is None

    @pytest.mark.asyncio
    async def test_delete_missing(self, store):
        assert await store.delete("nobody") is False

    @pytest.mark.asyncio
    async def test_list_user_ids(self, store, save_request):
        assert store.list_user_ids() == []
        await store.upsert("zed", save_request)
        await store.upsert("amy", save_request)
        assert store.list_user_ids() == ["amy", "zed"]


class TestUserIsolation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("owner, other", [("Alice", "alice"), ("user.1", "user-1")])
    async def test_similar_ids_do_not_share_a_document(
        self, store, portfolio_data, owner, other
    ):
        await store.save(portfolio_data.model_copy(update={"user_id": owner}))
        assert await store.load(other) is None
        assert (await store.load(owner)).user_id == owner

    @pytest.mark.asyncio
    async def test_save_does_not_overwrite_similar_id(self, store, portfolio_data):
        await store.save(portfolio_data.model_copy(update={"user_id": "Alice"}))
        await store.save(
            portfolio_data.model_copy(update={"user_id": "alice", "custom_css": "p {}"})
        )
        assert (await store.load("Alice")).custom_css is None
        assert (await store.load("alice")).custom_css == "p {}"

    @pytest.mark.asyncio
    async def test_document_for_other_user_rejected(self, store, portfolio_data):
        path = store.path_for("mallory")
        path.parent.mkdir(parents=True)
        path.write_text(portfolio_data.model_dump_json(by_alias=True), encoding="utf-8")
        with pytest.raises(StorageError, match="belongs to 'testUser123'"):
            await store.load("mallory")

    @pytest.mark.asyncio
    async def test_list_returns_stored_ids(self, store, portfolio_data):
        for user_id in ("testUser123", "user.1", "bob"):
            await store.save(portfolio_data.model_copy(update={"user_id": user_id}))
        (store.root / "README.json").write_text("{}", encoding="utf-8")
        assert store.list_user_ids() == ["bob", "testUser123", "user.1"]
