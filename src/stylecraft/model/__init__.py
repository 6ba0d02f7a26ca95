"""stylecraft model layer -- public type re-exports."""

from stylecraft.model.nodes import (
    AtRule,
    Declaration,
    Node,
    Rule,
    Scalar,
    ensure_scalar,
    iter_nodes,
    make_at_rule,
    make_declaration,
    make_rule,
    wrap_in_at_rules,
)

__all__ = [
    # nodes
    "Declaration",
    "Rule",
    "AtRule",
    "Node",
    "Scalar",
    # factories
    "ensure_scalar",
    "make_declaration",
    "make_rule",
    "make_at_rule",
    "wrap_in_at_rules",
    # traversal
    "iter_nodes",
]
