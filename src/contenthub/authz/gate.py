"""
Dispatch gate: evaluate the policy rule, then run the operation's action
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any

from ..errors import AuthorizationEvaluationError, Forbidden, Unauthenticated
from ..logging import get_logger, set_operation_context
from .policy import OperationCategory, PolicyTable
from .rules import DEFAULT_ADMIN_ROLE, RuleContext, evaluate

if TYPE_CHECKING:
    from ..auth.context import AuthContext
    from ..repository.base import ContentStore

logger = get_logger(__name__)

Action = Callable[["ContentStore", "AuthContext", Mapping[str, Any]], Awaitable[Any]]


class Dispatcher:
    """Pairs a policy table with the action behind each operation."""

    def __init__(
        self,
        policy: PolicyTable,
        query: Mapping[str, Action] | None = None,
        mutation: Mapping[str, Action] | None = None,
        admin_role: str = DEFAULT_ADMIN_ROLE,
    ):
        self.policy = policy
        self.admin_role = admin_role
        self._actions: dict[OperationCategory, dict[str, Action]] = {
            OperationCategory.QUERY: dict(query or {}),
            OperationCategory.MUTATION: dict(mutation or {}),
        }

    def action_for(self, category: OperationCategory, name: str) -> Action | None:
        return self._actions[category].get(name)

    def operations(self, category: OperationCategory) -> list[str]:
        return sorted(self._actions[category])

    async def authorize(
        self,
        name: str,
        category: OperationCategory,
        args: Mapping[str, Any],
        auth: AuthContext,
        store: ContentStore,
    ) -> None:
        """
        Evaluate the rule for an operation and raise unless it allows.

        Raises:
            Unauthenticated: Rule denied and the caller has no identity
            Forbidden: Rule denied an identified caller, or evaluation failed
        """
        rule = self.policy.rule_for(category, name)
        ctx = RuleContext(auth=auth, args=args, store=store, admin_role=self.admin_role)

        try:
            allowed = await evaluate(rule, ctx)
        except AuthorizationEvaluationError as e:
            logger.error(
                "Rule evaluation failed, denying operation",
                operation=name,
                category=category.value,
                user_id=auth.user_id,
                error=str(e),
            )
            raise Forbidden(name) from e

        if allowed:
            logger.debug(
                "Operation authorized",
                operation=name,
                category=category.value,
                user_id=auth.user_id,
            )
            return

        logger.info(
            "Operation denied",
            operation=name,
            category=category.value,
            user_id=auth.user_id,
        )
        if not auth.is_authenticated:
            raise Unauthenticated(name)
        raise Forbidden(name)

    async def authorize_and_dispatch(
        self,
        name: str,
        category: OperationCategory,
        args: Mapping[str, Any],
        auth: AuthContext,
        store: ContentStore,
    ) -> Any:
        """Authorize an operation and, only when allowed, await its action."""
        set_operation_context(name, category.value)
        action = self.action_for(category, name)
        if action is None:
            logger.warning("Unknown operation rejected", operation=name, category=category.value)
            raise Forbidden(name)

        await self.authorize(name, category, args, auth, store)
        return await action(store, auth, args)
