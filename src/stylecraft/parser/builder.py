"""Tree builder: flattens nested style objects into ordered CSS nodes.

Example::

    parse_object_styles({
        ".foo": {
            "color": "red",
            "&:hover": {"color": "orange"},
            "@media (min-width: 200px)": {"color": "blue"},
        },
    })

produces, in order, ``.foo {color: red}``, ``.foo:hover {color: orange}`` and
``@media (min-width: 200px) { .foo {color: blue} }``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from stylecraft.errors import InvalidInputError
from stylecraft.model.nodes import (
    Declaration,
    Node,
    ensure_scalar,
    make_at_rule,
    make_declaration,
    make_rule,
)
from stylecraft.parser.keys import KeyKind, classify_key, is_sequence
from stylecraft.parser.selectors import Selector, compose_selector, parse_directive

__all__ = ["StyleDefinition", "StyleInput", "parse_object_styles", "normalize_input"]

logger = logging.getLogger(__name__)

StyleDefinition = Mapping[str, Any]
StyleInput = StyleDefinition | Sequence[StyleDefinition]


def normalize_input(definitions: StyleInput) -> tuple[StyleDefinition, ...]:
    """Collapse a single definition or a sequence of them into a tuple."""
    if isinstance(definitions, Mapping):
        return (definitions,)
    if is_sequence(definitions) and all(isinstance(d, Mapping) for d in definitions):
        return tuple(definitions)
    raise InvalidInputError(
        "Expected a style definition mapping or a sequence of them, "
        f"got {type(definitions).__name__}"
    )


def _as_list(value: object) -> list[Any]:
    return list(value) if is_sequence(value) else [value]  # type: ignore[call-overload]


def _leaf_nodes(key: str, kind: KeyKind, value: object) -> list[Node]:
    """Nodes emitted directly into the current block: declarations and statements."""
    if kind is KeyKind.AT_STATEMENT:
        name, params = parse_directive(key)
        nodes: list[Node] = []
        for item in _as_list(value):
            text = str(ensure_scalar(key, item))
            nodes.append(make_at_rule(name, f"{params} {text}".strip()))
        return nodes
    return [make_declaration(key, item) for item in _as_list(value)]


def _build(
    definition: StyleDefinition, selector: Selector, in_at_rule: bool = False
) -> list[Node]:
    """Build the nodes for one definition nested under *selector*.

    Direct declarations come first, as a single rule (or bare nodes inside an
    at-rule such as ``@font-face``), followed by every nested block in source
    order. Declarations with neither a selector nor an enclosing at-rule are
    dropped; body-less statements like ``@import`` are kept.
    """
    own: list[Node] = []
    nested: list[tuple[str, KeyKind, Any]] = []
    for key, value in definition.items():
        kind = classify_key(key, value)
        if kind in (KeyKind.SELECTOR, KeyKind.AT_RULE):
            nested.append((key, kind, value))
        else:
            own.extend(_leaf_nodes(key, kind, value))

    result: list[Node] = []
    if own:
        if selector:
            result.append(make_rule(selector.render(), own))
        elif in_at_rule:
            result.extend(own)
        else:
            dropped = [node for node in own if isinstance(node, Declaration)]
            if dropped:
                logger.debug(
                    "Dropped %d top-level declaration(s) outside any rule", len(dropped)
                )
            result.extend(node for node in own if not isinstance(node, Declaration))
    elif selector and nested:
        logger.debug("Elided empty selector %r", selector.render())

    for key, kind, value in nested:
        blocks = _as_list(value)
        if kind is KeyKind.SELECTOR:
            child = compose_selector(selector, key)
            for block in blocks:
                result.extend(_build(block, child, in_at_rule))
        else:
            name, params = parse_directive(key)
            if selector:
                logger.debug("Bubbling @%s %s around %r", name, params, selector.render())
            for block in blocks:
                result.append(make_at_rule(name, params, _build(block, selector, True)))
    return result


def parse_object_styles(definitions: StyleInput) -> list[Node]:
    """Convert a style object (or a list of them) into an ordered list of CSS nodes.

    Each definition in a list is processed independently and the results are
    concatenated, so a selector repeated across definitions yields separate
    rules. Raises :class:`InvalidInputError` for a malformed top-level input and
    :class:`InvalidValueError` for a declaration value that is not a scalar.
    """
    nodes: list[Node] = []
    for index, definition in enumerate(normalize_input(definitions)):
        logger.debug("Building definition %d (%d keys)", index, len(definition))
        nodes.extend(_build(definition, Selector.root()))
    return nodes
