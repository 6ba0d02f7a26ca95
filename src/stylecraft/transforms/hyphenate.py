"""Hyphenation transform: rewrites camelCase property names as CSS kebab-case."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import replace

from stylecraft.model.nodes import AtRule, Declaration, Node, Rule

_UPPER_RE = re.compile(r"([A-Z])")


def hyphenate(prop: str) -> str:
    """Convert a camelCase property name to kebab-case.

    Custom properties (``--*``) are returned unchanged. A leading capital or
    ``ms`` prefix becomes a vendor prefix: ``WebkitTransition`` ->
    ``-webkit-transition``, ``msFlex`` -> ``-ms-flex``.
    """
    if prop.startswith("--"):
        return prop
    name = _UPPER_RE.sub(r"-\1", prop)
    if name.startswith("ms-"):
        name = "-" + name
    return name.lower()


class HyphenatePropertiesTransform:
    """Hyphenate every declaration name, recursing into rules and at-rules."""

    def apply(self, nodes: Sequence[Node]) -> list[Node]:
        return [self._apply_node(node) for node in nodes]

    def _apply_node(self, node: Node) -> Node:
        if isinstance(node, Declaration):
            prop = hyphenate(node.prop)
            return node if prop == node.prop else replace(node, prop=prop)
        if isinstance(node, (Rule, AtRule)) and node.nodes:
            return replace(node, nodes=tuple(self.apply(node.nodes)))
        return node
