"""
Policy table: which rule guards which query or mutation
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from ..repository.base import ResourceKind
from .rules import (
    Rule,
    allow,
    and_,
    deny,
    is_admin,
    is_authenticated,
    is_owner,
    or_,
)


class OperationCategory(Enum):
    QUERY = "query"
    MUTATION = "mutation"


class PolicyTable:
    """Fixed mapping from (category, operation name) to a rule.

    Operations without an entry resolve to ``deny()``.
    """

    def __init__(
        self,
        query: Mapping[str, Rule] | None = None,
        mutation: Mapping[str, Rule] | None = None,
    ):
        self._rules: dict[OperationCategory, dict[str, Rule]] = {
            OperationCategory.QUERY: dict(query or {}),
            OperationCategory.MUTATION: dict(mutation or {}),
        }

    def rule_for(self, category: OperationCategory, name: str) -> Rule:
        return self._rules[category].get(name, deny())

    def has_entry(self, category: OperationCategory, name: str) -> bool:
        return name in self._rules[category]

    def operations(self, category: OperationCategory) -> list[str]:
        return sorted(self._rules[category])

    def describe(self) -> dict[str, dict[str, Any]]:
        """JSON-serializable view of every entry."""
        return {
            category.value: {name: rule.to_dict() for name, rule in sorted(rules.items())}
            for category, rules in self._rules.items()
        }


authenticated = is_authenticated()

permissions = PolicyTable(
    query={
        "feed": allow(),
        "allUsers": and_(authenticated, is_admin()),
        "me": authenticated,
        "postById": authenticated,
        "draftsByUser": authenticated,
        "allVideoGames": authenticated,
        "videoGameById": authenticated,
        "videoGamesByUser": authenticated,
        "allListings": authenticated,
        "listingById": authenticated,
        "listingsByUser": authenticated,
    },
    mutation={
        "signup": allow(),
        "login": allow(),
        "createDraft": authenticated,
        "deletePost": is_owner(ResourceKind.POST),
        "incrementPostViewCount": authenticated,
        "togglePublishPost": is_owner(ResourceKind.POST),
        "createVideoGame": authenticated,
        "togglePublishVideoGame": and_(authenticated, is_admin()),
        "deleteVideoGame": and_(
            authenticated, or_(is_admin(), is_owner(ResourceKind.VIDEO_GAME))
        ),
        "createListing": authenticated,
        "togglePublishListing": and_(
            authenticated, or_(is_owner(ResourceKind.LISTING), is_admin())
        ),
        "deleteListing": and_(authenticated, or_(is_admin(), is_owner(ResourceKind.LISTING))),
    },
)
