"""Error types raised while turning style objects into CSS nodes."""

from __future__ import annotations


class StyleError(Exception):
    """Base class for all stylecraft errors."""


class InvalidValueError(StyleError):
    """Raised when a declaration value is not a CSS-representable scalar."""

    def __init__(self, prop: str, value: object) -> None:
        self.prop = prop
        self.value = value
        super().__init__(
            f"Invalid value for {prop!r}: expected str, int or float, "
            f"got {type(value).__name__}"
        )


class InvalidInputError(StyleError):
    """Raised when the top-level input is not a style definition or a sequence of them."""
