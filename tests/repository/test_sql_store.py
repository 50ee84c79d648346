"""
Unit tests for the SQL content store with a mocked async session.
"""

from contextlib import asynccontextmanager
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.dialects import postgresql

from contenthub.dbmodels import Listings, Posts, VideoGames
from contenthub.errors import NotFound, ValidationError
from contenthub.repository.base import FeedFilter, ResourceKind, UserUnique
from contenthub.repository.sql import SqlContentStore


def make_session(record=None, records=None):
    result = MagicMock()
    result.scalar_one_or_none.return_value = record
    result.scalars.return_value.all.return_value = records or []

    session = AsyncMock()
    session.add = MagicMock()
    session.execute.return_value = result
    return session


@pytest.fixture
def patched_session():
    """Patch get_async_session; yields a setter for the session to hand out."""
    holder = {}

    @asynccontextmanager
    async def fake_session():
        yield holder["session"]

    def use(session):
        holder["session"] = session
        return session

    with patch("contenthub.repository.sql.get_async_session", fake_session):
        yield use


def compiled(session) -> str:
    statement = session.execute.await_args.args[0]
    return str(statement.compile(dialect=postgresql.dialect()))


class TestResourceKind:
    def test_labels_and_models(self):
        assert ResourceKind.POST.label == "Post"
        assert ResourceKind.VIDEO_GAME.label == "VideoGame"
        assert ResourceKind.LISTING.label == "Listing"
        assert ResourceKind.POST.model is Posts
        assert ResourceKind.VIDEO_GAME.model is VideoGames
        assert ResourceKind.LISTING.model is Listings

    def test_not_found_message(self):
        error = NotFound(ResourceKind.LISTING, 12)
        assert str(error) == "Listing with ID 12 does not exist in the database."
        assert error.resource_id == 12


class TestTogglePublished:
    @pytest.mark.asyncio
    async def test_single_update_statement(self, patched_session):
        record = SimpleNamespace(id=1, published=True)
        session = patched_session(make_session(record=record))

        result = await SqlContentStore().toggle_published(ResourceKind.POST, 1)

        assert result is record
        session.execute.assert_awaited_once()
        sql = compiled(session)
        assert sql.startswith("UPDATE posts SET")
        assert "NOT posts.published" in sql
        assert "RETURNING" in sql

    @pytest.mark.asyncio
    async def test_missing_row(self, patched_session):
        patched_session(make_session(record=None))

        with pytest.raises(NotFound, match="VideoGame with ID 5 does not exist"):
            await SqlContentStore().toggle_published(ResourceKind.VIDEO_GAME, 5)


class TestUpdateResource:
    @pytest.mark.asyncio
    async def test_single_update_returning(self, patched_session):
        record = SimpleNamespace(id=2, title="Road bike", ratings=4)
        session = patched_session(make_session(record=record))

        result = await SqlContentStore().update_resource(
            ResourceKind.LISTING, 2, {"title": "Road bike", "ratings": 4}
        )

        assert result is record
        session.execute.assert_awaited_once()
        sql = compiled(session)
        assert sql.startswith("UPDATE listings SET")
        assert "title=" in sql and "ratings=" in sql
        assert "WHERE listings.id =" in sql
        assert "RETURNING" in sql

    @pytest.mark.asyncio
    async def test_missing_row(self, patched_session):
        patched_session(make_session(record=None))

        with pytest.raises(NotFound, match="Listing with ID 8 does not exist"):
            await SqlContentStore().update_resource(ResourceKind.LISTING, 8, {"ratings": 1})


class TestDeleteResource:
    @pytest.mark.asyncio
    async def test_deletes_existing_row(self, patched_session):
        record = SimpleNamespace(id=3)
        session = patched_session(make_session(record=record))

        result = await SqlContentStore().delete_resource(ResourceKind.LISTING, 3)

        assert result is record
        session.delete.assert_awaited_once_with(record)

    @pytest.mark.asyncio
    async def test_missing_row(self, patched_session):
        session = patched_session(make_session(record=None))

        with pytest.raises(NotFound, match="Post with ID 9 does not exist"):
            await SqlContentStore().delete_resource(ResourceKind.POST, 9)
        session.delete.assert_not_awaited()


class TestIncrementViewCount:
    @pytest.mark.asyncio
    async def test_atomic_increment(self, patched_session):
        session = patched_session(make_session(record=SimpleNamespace(id=1, view_count=2)))

        await SqlContentStore().increment_view_count(1)

        assert "posts.view_count +" in compiled(session)

    @pytest.mark.asyncio
    async def test_missing_row(self, patched_session):
        patched_session(make_session(record=None))

        with pytest.raises(NotFound):
            await SqlContentStore().increment_view_count(1)


class TestQueries:
    @pytest.mark.asyncio
    async def test_find_author_of_missing_resource(self, patched_session):
        patched_session(make_session(record=None))

        assert await SqlContentStore().find_author_of(ResourceKind.POST, 1) is None

    @pytest.mark.asyncio
    async def test_find_author_of(self, patched_session):
        author = SimpleNamespace(id=4)
        patched_session(make_session(record=SimpleNamespace(id=1, author=author)))

        assert await SqlContentStore().find_author_of(ResourceKind.LISTING, 1) is author

    @pytest.mark.asyncio
    async def test_feed_filters_published(self, patched_session):
        session = patched_session(make_session(records=[]))

        await SqlContentStore().feed(
            FeedFilter(search="graph", skip=2, take=5, order_by_updated_at="desc")
        )

        sql = compiled(session)
        assert "WHERE posts.published" in sql
        assert "ORDER BY posts.updated_at DESC" in sql
        assert "LIMIT" in sql and "OFFSET" in sql

    @pytest.mark.asyncio
    async def test_resources_by_user_published_filter(self, patched_session):
        session = patched_session(make_session(records=[]))

        await SqlContentStore().resources_by_user(
            ResourceKind.VIDEO_GAME, UserUnique(email="a@example.com"), published=False
        )

        sql = compiled(session)
        assert "JOIN users" in sql
        assert "video_games.published" in sql

    @pytest.mark.asyncio
    async def test_user_selector_requires_a_field(self, patched_session):
        patched_session(make_session())

        with pytest.raises(ValidationError):
            await SqlContentStore().find_user(UserUnique())

    @pytest.mark.asyncio
    async def test_create_resource(self, patched_session):
        session = patched_session(make_session())

        record = await SqlContentStore().create_resource(
            ResourceKind.POST, {"title": "Hi", "author_id": 1}
        )

        assert isinstance(record, Posts)
        session.add.assert_called_once_with(record)
        session.flush.assert_awaited_once()
