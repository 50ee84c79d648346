"""Storage collaborator for users, posts, video games and listings."""

from .base import ContentStore, FeedFilter, ResourceKind, UserUnique
from .sql import SqlContentStore

__all__ = ["ContentStore", "FeedFilter", "ResourceKind", "SqlContentStore", "UserUnique"]
