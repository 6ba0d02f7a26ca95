"""Key classification: decides what a style-definition entry represents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum


class KeyKind(Enum):
    """What a single ``key: value`` entry of a style definition emits."""

    DECLARATION = "declaration"  # backgroundColor: red / --brand: #fff
    SELECTOR = "selector"  # '.foo': {...} / '&:hover': {...}
    AT_RULE = "at_rule"  # '@media (min-width: 200px)': {...}
    AT_STATEMENT = "at_statement"  # '@import': '"base.css"'


def is_sequence(value: object) -> bool:
    """True for lists and tuples of values, never for strings."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def is_block(value: object) -> bool:
    """True when *value* is a nested definition or a non-empty sequence of them."""
    if isinstance(value, Mapping):
        return True
    if is_sequence(value) and value:
        return all(isinstance(item, Mapping) for item in value)  # type: ignore[union-attr]
    return False


def classify_key(key: str, value: object) -> KeyKind:
    """Classify one entry by the key's prefix and the value's shape.

    Anything that is neither an at-rule nor a nested block is a declaration;
    malformed values are left for the node factory to reject.
    """
    if key.startswith("@"):
        return KeyKind.AT_RULE if is_block(value) else KeyKind.AT_STATEMENT
    if is_block(value):
        return KeyKind.SELECTOR
    return KeyKind.DECLARATION
