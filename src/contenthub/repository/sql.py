"""SQLAlchemy implementation of the content store."""

from __future__ import annotations

from typing import Any

from sqlalchemy import not_, or_, select, update
from sqlalchemy.orm import selectinload

from ..database.connection import get_async_session
from ..dbmodels import Posts, Users
from ..errors import NotFound, ValidationError
from ..logging import get_logger
from .base import FeedFilter, ResourceKind, UserUnique

logger = get_logger(__name__)


def _user_condition(selector: UserUnique):
    if selector.id is None and not selector.email:
        raise ValidationError("userUniqueInput requires an id or an email")
    if selector.id is not None and selector.email:
        return (Users.id == selector.id) & (Users.email == selector.email)
    if selector.id is not None:
        return Users.id == selector.id
    return Users.email == selector.email


class SqlContentStore:
    """Content store backed by the shared async session pool.

    Every call opens its own session, so a single call is one transaction.
    """

    async def find_resource_by_id(self, kind: ResourceKind, resource_id: int) -> Any | None:
        model = kind.model
        async with get_async_session() as session:
            result = await session.execute(select(model).where(model.id == resource_id))
            return result.scalar_one_or_none()

    async def find_author_of(self, kind: ResourceKind, resource_id: int) -> Users | None:
        model = kind.model
        async with get_async_session() as session:
            stmt = select(model).where(model.id == resource_id).options(selectinload(model.author))
            result = await session.execute(stmt)
            record = result.scalar_one_or_none()
            if record is None:
                return None
            return record.author

    async def find_identity_by_id(self, user_id: int) -> Users | None:
        async with get_async_session() as session:
            result = await session.execute(select(Users).where(Users.id == user_id))
            return result.scalar_one_or_none()

    async def find_user_by_email(self, email: str) -> Users | None:
        async with get_async_session() as session:
            result = await session.execute(select(Users).where(Users.email == email))
            return result.scalar_one_or_none()

    async def find_user(self, selector: UserUnique) -> Users | None:
        condition = _user_condition(selector)
        async with get_async_session() as session:
            result = await session.execute(select(Users).where(condition))
            return result.scalar_one_or_none()

    async def list_users(self) -> list[Users]:
        async with get_async_session() as session:
            result = await session.execute(select(Users).order_by(Users.id))
            return list(result.scalars().all())

    async def create_user(
        self, *, email: str, password_hash: str, name: str | None = None
    ) -> Users:
        async with get_async_session() as session:
            user = Users()
            user.email = email
            user.name = name
            user.password_hash = password_hash
            user.roles = []
            session.add(user)
            await session.flush()
            await session.refresh(user)
            logger.info("User created", user_id=user.id)
            return user

    async def feed(self, feed_filter: FeedFilter) -> list[Posts]:
        stmt = select(Posts).where(Posts.published)
        if feed_filter.search:
            stmt = stmt.where(
                or_(
                    Posts.title.contains(feed_filter.search),
                    Posts.content.contains(feed_filter.search),
                )
            )
        if feed_filter.order_by_updated_at == "asc":
            stmt = stmt.order_by(Posts.updated_at.asc())
        elif feed_filter.order_by_updated_at == "desc":
            stmt = stmt.order_by(Posts.updated_at.desc())
        else:
            stmt = stmt.order_by(Posts.id)
        if feed_filter.skip:
            stmt = stmt.offset(feed_filter.skip)
        if feed_filter.take:
            stmt = stmt.limit(feed_filter.take)

        async with get_async_session() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def list_resources(self, kind: ResourceKind) -> list[Any]:
        model = kind.model
        async with get_async_session() as session:
            result = await session.execute(select(model).order_by(model.id))
            return list(result.scalars().all())

    async def resources_by_user(
        self, kind: ResourceKind, selector: UserUnique, *, published: bool | None = None
    ) -> list[Any]:
        model = kind.model
        condition = _user_condition(selector)
        stmt = (
            select(model)
            .join(Users, model.author_id == Users.id)
            .where(condition)
            .order_by(model.id)
        )
        if published is not None:
            stmt = stmt.where(model.published == published)

        async with get_async_session() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def create_resource(self, kind: ResourceKind, data: dict[str, Any]) -> Any:
        record = kind.model(**data)
        async with get_async_session() as session:
            session.add(record)
            await session.flush()
            await session.refresh(record)
            logger.info(
                "Resource created",
                kind=kind.value,
                resource_id=record.id,
                author_id=record.author_id,
            )
            return record

    async def update_resource(
        self, kind: ResourceKind, resource_id: int, data: dict[str, Any]
    ) -> Any:
        model = kind.model
        stmt = update(model).where(model.id == resource_id).values(**data).returning(model)
        async with get_async_session() as session:
            result = await session.execute(stmt)
            record = result.scalar_one_or_none()
            if record is None:
                raise NotFound(kind, resource_id)
            return record

    async def delete_resource(self, kind: ResourceKind, resource_id: int) -> Any:
        model = kind.model
        async with get_async_session() as session:
            result = await session.execute(select(model).where(model.id == resource_id))
            record = result.scalar_one_or_none()
            if record is None:
                raise NotFound(kind, resource_id)
            await session.delete(record)
            logger.info("Resource deleted", kind=kind.value, resource_id=resource_id)
            return record

    async def toggle_published(self, kind: ResourceKind, resource_id: int) -> Any:
        # Flip in a single UPDATE, no read-modify-write
        model = kind.model
        stmt = (
            update(model)
            .where(model.id == resource_id)
            .values(published=not_(model.published))
            .returning(model)
        )
        async with get_async_session() as session:
            result = await session.execute(stmt)
            record = result.scalar_one_or_none()
            if record is None:
                raise NotFound(kind, resource_id)
            return record

    async def increment_view_count(self, post_id: int) -> Posts:
        stmt = (
            update(Posts)
            .where(Posts.id == post_id)
            .values(view_count=Posts.view_count + 1)
            .returning(Posts)
        )
        async with get_async_session() as session:
            result = await session.execute(stmt)
            record = result.scalar_one_or_none()
            if record is None:
                raise NotFound(ResourceKind.POST, post_id)
            return record
