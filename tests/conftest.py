"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

import pytest

from contenthub.auth.context import ANONYMOUS, AuthContext
from contenthub.errors import NotFound, ValidationError
from contenthub.repository.base import FeedFilter, ResourceKind, UserUnique

_RESOURCE_DEFAULTS: dict[ResourceKind, dict[str, Any]] = {
    ResourceKind.POST: {"content": None, "published": False, "view_count": 0},
    ResourceKind.VIDEO_GAME: {
        "description": None,
        "published": False,
        "release_date": None,
        "categories": [],
    },
    ResourceKind.LISTING: {
        "description": None,
        "published": False,
        "ratings": 0,
        "categories": [],
    },
}


class InMemoryContentStore:
    """Content store keeping records in dicts; mirrors SqlContentStore semantics."""

    def __init__(self) -> None:
        self.users: dict[int, SimpleNamespace] = {}
        self.resources: dict[ResourceKind, dict[int, SimpleNamespace]] = {
            kind: {} for kind in ResourceKind
        }
        self._next_id = 1
        self.calls: list[str] = []

    def _new_id(self) -> int:
        new_id = self._next_id
        self._next_id += 1
        return new_id

    # Seeding helpers
    def add_user(
        self,
        email: str,
        name: str | None = None,
        roles: list[str] | None = None,
        password_hash: str = "",
    ) -> SimpleNamespace:
        now = datetime.now(UTC)
        user = SimpleNamespace(
            id=self._new_id(),
            email=email,
            name=name,
            password_hash=password_hash,
            roles=list(roles or []),
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        return user

    def add_resource(self, kind: ResourceKind, **values: Any) -> SimpleNamespace:
        now = datetime.now(UTC)
        data = {**_RESOURCE_DEFAULTS[kind], "created_at": now, "updated_at": now, **values}
        record = SimpleNamespace(id=self._new_id(), **data)
        self.resources[kind][record.id] = record
        return record

    def _matching_user_ids(self, selector: UserUnique) -> set[int]:
        if selector.id is None and not selector.email:
            raise ValidationError("userUniqueInput requires an id or an email")
        return {
            user.id
            for user in self.users.values()
            if (selector.id is None or user.id == selector.id)
            and (not selector.email or user.email == selector.email)
        }

    # ContentStore
    async def find_resource_by_id(self, kind: ResourceKind, resource_id: int) -> Any | None:
        self.calls.append("find_resource_by_id")
        return self.resources[kind].get(resource_id)

    async def find_author_of(self, kind: ResourceKind, resource_id: int) -> Any | None:
        self.calls.append("find_author_of")
        record = self.resources[kind].get(resource_id)
        if record is None:
            return None
        return self.users.get(record.author_id)

    async def find_identity_by_id(self, user_id: int) -> Any | None:
        self.calls.append("find_identity_by_id")
        return self.users.get(user_id)

    async def find_user_by_email(self, email: str) -> Any | None:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_user(self, selector: UserUnique) -> Any | None:
        ids = self._matching_user_ids(selector)
        return self.users[min(ids)] if ids else None

    async def list_users(self) -> list[Any]:
        return sorted(self.users.values(), key=lambda u: u.id)

    async def create_user(
        self, *, email: str, password_hash: str, name: str | None = None
    ) -> Any:
        return self.add_user(email, name=name, password_hash=password_hash)

    async def feed(self, feed_filter: FeedFilter) -> list[Any]:
        posts = [p for p in self.resources[ResourceKind.POST].values() if p.published]
        if feed_filter.search:
            posts = [
                p
                for p in posts
                if feed_filter.search in p.title or feed_filter.search in (p.content or "")
            ]
        if feed_filter.order_by_updated_at:
            posts.sort(
                key=lambda p: p.updated_at, reverse=feed_filter.order_by_updated_at == "desc"
            )
        else:
            posts.sort(key=lambda p: p.id)
        start = feed_filter.skip or 0
        end = start + feed_filter.take if feed_filter.take else None
        return posts[start:end]

    async def list_resources(self, kind: ResourceKind) -> list[Any]:
        return sorted(self.resources[kind].values(), key=lambda r: r.id)

    async def resources_by_user(
        self, kind: ResourceKind, selector: UserUnique, *, published: bool | None = None
    ) -> list[Any]:
        ids = self._matching_user_ids(selector)
        return [
            r
            for r in sorted(self.resources[kind].values(), key=lambda r: r.id)
            if r.author_id in ids and (published is None or r.published == published)
        ]

    async def create_resource(self, kind: ResourceKind, data: dict[str, Any]) -> Any:
        self.calls.append("create_resource")
        return self.add_resource(kind, **data)

    async def update_resource(
        self, kind: ResourceKind, resource_id: int, data: dict[str, Any]
    ) -> Any:
        record = self.resources[kind].get(resource_id)
        if record is None:
            raise NotFound(kind, resource_id)
        for key, value in data.items():
            setattr(record, key, value)
        return record

    async def delete_resource(self, kind: ResourceKind, resource_id: int) -> Any:
        self.calls.append("delete_resource")
        record = self.resources[kind].pop(resource_id, None)
        if record is None:
            raise NotFound(kind, resource_id)
        return record

    async def toggle_published(self, kind: ResourceKind, resource_id: int) -> Any:
        self.calls.append("toggle_published")
        record = self.resources[kind].get(resource_id)
        if record is None:
            raise NotFound(kind, resource_id)
        record.published = not record.published
        return record

    async def increment_view_count(self, post_id: int) -> Any:
        record = self.resources[ResourceKind.POST].get(post_id)
        if record is None:
            raise NotFound(ResourceKind.POST, post_id)
        record.view_count += 1
        return record


class UnavailableContentStore(InMemoryContentStore):
    """Store whose identity and ownership lookups always fail."""

    async def find_author_of(self, kind: ResourceKind, resource_id: int) -> Any | None:
        raise RuntimeError("database unavailable")

    async def find_identity_by_id(self, user_id: int) -> Any | None:
        raise RuntimeError("database unavailable")


def make_auth(user_id: int | None) -> AuthContext:
    if user_id is None:
        return ANONYMOUS
    return AuthContext(
        user_id=user_id,
        principal={"provider": "jwt", "subject": str(user_id)},
        token=f"token-{user_id}",
    )


@pytest.fixture
def store() -> InMemoryContentStore:
    """Store seeded with two regular users and one admin."""
    store = InMemoryContentStore()
    store.add_user("alice@example.com", name="Alice")
    store.add_user("bob@example.com", name="Bob")
    store.add_user("admin@example.com", name="Admin", roles=["ADMIN"])
    return store


@pytest.fixture
def unavailable_store() -> UnavailableContentStore:
    store = UnavailableContentStore()
    store.add_user("alice@example.com", name="Alice")
    return store


@pytest.fixture
def alice(store: InMemoryContentStore) -> SimpleNamespace:
    return store.users[1]


@pytest.fixture
def bob(store: InMemoryContentStore) -> SimpleNamespace:
    return store.users[2]


@pytest.fixture
def admin(store: InMemoryContentStore) -> SimpleNamespace:
    return store.users[3]


@pytest.fixture
def auth_for() -> Callable[[int | None], AuthContext]:
    """Build an AuthContext for a user id (None for anonymous)."""
    return make_auth


@pytest.fixture
def anonymous() -> AuthContext:
    return ANONYMOUS


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
