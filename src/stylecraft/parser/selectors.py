"""Selector composition: joining nested selector keys onto their parent selector.

Composition rules, applied per comma-separated alternative:
    ``&`` anywhere in the key    every ``&`` becomes the parent text  (``&.bar`` -> ``.foo.bar``)
    key starting with ``:``      merged onto the parent              (``:hover`` -> ``.foo:hover``)
    anything else                descendant, joined with one space   (``.bar`` -> ``.foo .bar``)

At the root (no parent) the key stands alone and never gains a leading space.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["Selector", "compose_selector", "parse_directive", "split_selector_list"]

_DIRECTIVE_RE = re.compile(r"^@(?P<name>[\w-]*)\s*(?P<params>.*)$", re.DOTALL)

_OPENERS = {"(": ")", "[": "]"}


def split_selector_list(text: str) -> tuple[str, ...]:
    """Split a selector list on top-level commas.

    Commas inside parentheses, brackets or quotes do not split, so
    ``:is(.a, .b), .c`` yields two alternatives. Empty alternatives are dropped.
    """
    parts: list[str] = []
    closers: list[str] = []
    quote = ""
    start = 0
    for i, ch in enumerate(text):
        if quote:
            if ch == quote and text[i - 1] != "\\":
                quote = ""
        elif ch in ("'", '"'):
            quote = ch
        elif ch in _OPENERS:
            closers.append(_OPENERS[ch])
        elif closers and ch == closers[-1]:
            closers.pop()
        elif ch == "," and not closers:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return tuple(p for p in (part.strip() for part in parts) if p)


@dataclass(frozen=True)
class Selector:
    """A selector list: an ordered tuple of complex-selector alternatives.

    The empty selector is the root context (no enclosing rule).
    """

    parts: tuple[str, ...] = ()

    @classmethod
    def root(cls) -> Selector:
        return cls()

    @classmethod
    def parse(cls, text: str) -> Selector:
        return cls(split_selector_list(text))

    @property
    def is_root(self) -> bool:
        return not self.parts

    def render(self) -> str:
        return ", ".join(self.parts)

    def __bool__(self) -> bool:
        return bool(self.parts)

    def __str__(self) -> str:
        return self.render()


def _join(parent: str, key: str) -> str:
    if "&" in key:
        return key.replace("&", parent).strip()
    if not parent:
        return key
    if key.startswith(":"):
        return parent + key
    return f"{parent} {key}"


def compose_selector(parent: Selector | None, key: str) -> Selector:
    """Compute the selector for *key* nested under *parent*.

    Both sides may be selector lists; the result is their cartesian product,
    parent alternatives outermost. Malformed selectors pass through unchanged,
    and a key with no alternatives (``""``, ``","``) keeps the parent selector.
    """
    alternatives = split_selector_list(key)
    if not alternatives:
        return parent if parent is not None else Selector.root()
    if parent is None or parent.is_root:
        joined = [_join("", alt) for alt in alternatives]
    else:
        joined = [_join(outer, alt) for outer in parent.parts for alt in alternatives]
    return Selector(tuple(part for part in joined if part))


def parse_directive(key: str) -> tuple[str, str]:
    """Split an at-rule key into ``(name, params)``.

    >>> parse_directive("@media (min-width: 200px)")
    ('media', '(min-width: 200px)')
    >>> parse_directive("@screen sm")
    ('screen', 'sm')
    """
    match = _DIRECTIVE_RE.match(key.strip())
    if match is None:
        return key.lstrip("@"), ""
    return match.group("name"), match.group("params").strip()
