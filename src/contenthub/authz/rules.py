"""
Permission rules as explicit, immutable variants.

A rule is a tree of ``Leaf`` predicates joined by ``And``/``Or`` nodes. Rules
hold no reference to the request or the store; ``evaluate`` receives both
through a ``RuleContext`` and walks the tree left to right.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from ..errors import AuthorizationEvaluationError
from ..logging import get_logger
from ..repository.base import ResourceKind

if TYPE_CHECKING:
    from ..auth.context import AuthContext
    from ..repository.base import ContentStore

logger = get_logger(__name__)

DEFAULT_ADMIN_ROLE = "ADMIN"


class LeafKind(Enum):
    """Primitive predicates understood by the interpreter."""

    ALLOW = "allow"
    DENY = "deny"
    AUTHENTICATED = "is_authenticated"
    OWNER = "is_owner"
    ADMIN = "is_admin"


@dataclass(frozen=True)
class Leaf:
    kind: LeafKind
    params: tuple[tuple[str, Any], ...] = ()

    def param(self, name: str, default: Any = None) -> Any:
        return dict(self.params).get(name, default)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"rule": self.kind.value}
        for name, value in self.params:
            data[name] = value.value if isinstance(value, Enum) else value
        return data


@dataclass(frozen=True)
class And:
    children: tuple[Rule, ...] = field(default=())

    def to_dict(self) -> dict[str, Any]:
        return {"and": [child.to_dict() for child in self.children]}


@dataclass(frozen=True)
class Or:
    children: tuple[Rule, ...] = field(default=())

    def to_dict(self) -> dict[str, Any]:
        return {"or": [child.to_dict() for child in self.children]}


Rule = Union[Leaf, And, Or]


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule may consult, passed explicitly per operation."""

    auth: AuthContext
    args: Mapping[str, Any]
    store: ContentStore
    admin_role: str = DEFAULT_ADMIN_ROLE


# Constructors


def allow() -> Leaf:
    return Leaf(LeafKind.ALLOW)


def deny() -> Leaf:
    return Leaf(LeafKind.DENY)


def is_authenticated() -> Leaf:
    return Leaf(LeafKind.AUTHENTICATED)


def is_owner(kind: ResourceKind, arg: str = "id") -> Leaf:
    """Caller is the author of the resource whose id is in ``args[arg]``."""
    return Leaf(LeafKind.OWNER, (("resource", kind), ("arg", arg)))


def is_admin() -> Leaf:
    return Leaf(LeafKind.ADMIN)


def and_(*rules: Rule) -> And:
    if not rules:
        raise ValueError("and_() requires at least one rule")
    return And(tuple(rules))


def or_(*rules: Rule) -> Or:
    if not rules:
        raise ValueError("or_() requires at least one rule")
    return Or(tuple(rules))


# Interpreter


async def evaluate(rule: Rule, ctx: RuleContext) -> bool:
    """
    Evaluate a rule against one operation.

    And short-circuits on the first False and lets evaluation errors
    propagate. Or short-circuits on the first True; an error raised by one
    branch is held back and only re-raised when no later branch grants
    access.

    Raises:
        AuthorizationEvaluationError: If a lookup needed for the verdict failed
    """
    if isinstance(rule, Leaf):
        return await _evaluate_leaf(rule, ctx)

    if isinstance(rule, And):
        for child in rule.children:
            if not await evaluate(child, ctx):
                return False
        return True

    if isinstance(rule, Or):
        pending_error: AuthorizationEvaluationError | None = None
        for child in rule.children:
            try:
                if await evaluate(child, ctx):
                    return True
            except AuthorizationEvaluationError as e:
                logger.warning("Rule branch failed, trying remaining branches", error=str(e))
                pending_error = pending_error or e
        if pending_error is not None:
            raise pending_error
        return False

    raise TypeError(f"Unknown rule type: {type(rule).__name__}")


async def _evaluate_leaf(leaf: Leaf, ctx: RuleContext) -> bool:
    if leaf.kind is LeafKind.ALLOW:
        return True
    if leaf.kind is LeafKind.DENY:
        return False
    if leaf.kind is LeafKind.AUTHENTICATED:
        return ctx.auth.is_authenticated
    if leaf.kind is LeafKind.OWNER:
        return await _is_owner(leaf.param("resource"), leaf.param("arg", "id"), ctx)
    if leaf.kind is LeafKind.ADMIN:
        return await _is_admin(ctx)
    raise TypeError(f"Unknown rule kind: {leaf.kind}")


def _coerce_id(raw: Any) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


async def _is_owner(kind: ResourceKind, arg: str, ctx: RuleContext) -> bool:
    if not ctx.auth.is_authenticated:
        return False

    resource_id = _coerce_id(ctx.args.get(arg))
    if resource_id is None:
        return False

    try:
        author = await ctx.store.find_author_of(kind, resource_id)
    except Exception as e:
        raise AuthorizationEvaluationError(
            f"Could not resolve author of {kind.label} {resource_id}"
        ) from e

    if author is None:
        logger.debug("Ownership check on missing resource", kind=kind.value, resource_id=resource_id)
        return False

    return author.id == ctx.auth.user_id


async def _is_admin(ctx: RuleContext) -> bool:
    if not ctx.auth.is_authenticated:
        return False

    try:
        user = await ctx.store.find_identity_by_id(ctx.auth.user_id)
    except Exception as e:
        raise AuthorizationEvaluationError(
            f"Could not resolve roles of user {ctx.auth.user_id}"
        ) from e

    if user is None:
        return False

    return ctx.admin_role in (user.roles or [])
