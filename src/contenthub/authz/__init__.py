"""Authorization rule engine and dispatch gate."""

from .gate import Action, Dispatcher
from .policy import OperationCategory, PolicyTable, permissions
from .rules import (
    And,
    Leaf,
    LeafKind,
    Or,
    Rule,
    RuleContext,
    allow,
    and_,
    deny,
    evaluate,
    is_admin,
    is_authenticated,
    is_owner,
    or_,
)

__all__ = [
    "Action",
    "And",
    "Dispatcher",
    "Leaf",
    "LeafKind",
    "OperationCategory",
    "Or",
    "PolicyTable",
    "Rule",
    "RuleContext",
    "allow",
    "and_",
    "deny",
    "evaluate",
    "is_admin",
    "is_authenticated",
    "is_owner",
    "or_",
    "permissions",
]
