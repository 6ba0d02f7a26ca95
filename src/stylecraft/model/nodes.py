"""CSS output nodes: Declaration, Rule, and AtRule dataclasses plus their factories."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from stylecraft.errors import InvalidValueError

Scalar = str | int | float


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    prop: str
    value: Scalar

    @property
    def is_custom_property(self) -> bool:
        return self.prop.startswith("--")


@dataclass(frozen=True)
class Rule:
    """A style rule: a rendered selector and its child nodes."""

    selector: str
    nodes: tuple[Node, ...] = ()


@dataclass(frozen=True)
class AtRule:
    """An at-rule such as ``@media (min-width: 200px)``.

    ``nodes`` is ``None`` for body-less statements (``@import "a.css";``)
    and a tuple, possibly empty, for block at-rules.
    """

    name: str
    params: str = ""
    nodes: tuple[Node, ...] | None = None

    @property
    def directive(self) -> str:
        """The at-rule head as written, e.g. ``@screen sm``."""
        if self.params:
            return f"@{self.name} {self.params}"
        return f"@{self.name}"

    @property
    def has_block(self) -> bool:
        return self.nodes is not None


Node = Declaration | Rule | AtRule


def ensure_scalar(prop: str, value: object) -> Scalar:
    """Return *value* unchanged if it is a str, int or float.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise InvalidValueError(prop, value)
    return value


def make_declaration(prop: str, value: object) -> Declaration:
    """Build a Declaration, keeping *prop* and *value* exactly as given.

    Raises :class:`InvalidValueError` for anything that is not a scalar.
    """
    return Declaration(prop=prop, value=ensure_scalar(prop, value))


def make_rule(selector: str, nodes: Iterable[Node] = ()) -> Rule:
    return Rule(selector=selector, nodes=tuple(nodes))


def make_at_rule(
    name: str, params: str = "", nodes: Iterable[Node] | None = None
) -> AtRule:
    return AtRule(
        name=name,
        params=params,
        nodes=None if nodes is None else tuple(nodes),
    )


def wrap_in_at_rules(node: Node, directives: Sequence[tuple[str, str]]) -> Node:
    """Wrap *node* in a chain of block at-rules.

    *directives* is a sequence of ``(name, params)`` pairs, outermost first.
    """
    for name, params in reversed(directives):
        node = make_at_rule(name, params, [node])
    return node


def children(node: Node) -> tuple[Node, ...]:
    """Return the direct children of *node* (empty for declarations and statements)."""
    if isinstance(node, Declaration):
        return ()
    return node.nodes or ()


def iter_nodes(nodes: Iterable[Node], depth: int = 0) -> Iterator[tuple[int, Node]]:
    """Depth-first walk yielding ``(depth, node)`` pairs in document order."""
    for node in nodes:
        yield depth, node
        yield from iter_nodes(children(node), depth + 1)
