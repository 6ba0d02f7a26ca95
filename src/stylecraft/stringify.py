"""Serialize CSS nodes to text.

Pretty output nests each block one indent deeper::

    .foo {
      color: red;
    }
    @media (min-width: 200px) {
      .foo {
        color: orange;
      }
    }

Minified output drops all optional whitespace and the last semicolon of each
block: ``.foo{color:red}@media (min-width: 200px){.foo{color:orange}}``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal

from stylecraft.config import OutputConfig
from stylecraft.model.nodes import AtRule, Declaration, Node, Rule, Scalar

__all__ = ["serialize", "format_value"]


def format_value(value: Scalar) -> str:
    """Render a declaration value; floats use fixed notation, never exponents.

    >>> format_value(1e-7)
    '0.0000001'
    >>> format_value(2.0)
    '2'
    """
    if isinstance(value, float) and math.isfinite(value):
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    return str(value)


def _head(node: Rule | AtRule) -> str:
    return node.selector if isinstance(node, Rule) else node.directive


def _pretty(node: Node, indent: str, level: int) -> str:
    pad = indent * level
    if isinstance(node, Declaration):
        return f"{pad}{node.prop}: {format_value(node.value)};"
    if isinstance(node, AtRule) and node.nodes is None:
        return f"{pad}{node.directive};"
    if not node.nodes:
        return f"{pad}{_head(node)} {{}}"
    body = "\n".join(_pretty(child, indent, level + 1) for child in node.nodes)
    return f"{pad}{_head(node)} {{\n{body}\n{pad}}}"


def _minified(node: Node) -> str:
    if isinstance(node, Declaration):
        return f"{node.prop}:{format_value(node.value)};"
    if isinstance(node, AtRule) and node.nodes is None:
        return f"{node.directive};"
    body = "".join(_minified(child) for child in node.nodes or ())
    return f"{_head(node)}{{{body.removesuffix(';')}}}"


def serialize(nodes: Iterable[Node], config: OutputConfig | None = None) -> str:
    """Render *nodes* as CSS text, without a trailing newline."""
    config = config or OutputConfig()
    if config.minify:
        return "".join(_minified(node) for node in nodes)
    return "\n".join(_pretty(node, config.indent, 0) for node in nodes)
