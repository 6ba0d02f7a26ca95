"""Output settings shared by :func:`stylecraft.to_css` and the CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OutputConfig:
    indent: str = "  "
    minify: bool = False
    hyphenate: bool = True  # camelCase -> kebab-case property names

    @classmethod
    def from_options(
        cls, indent: int = 2, minify: bool = False, hyphenate: bool = True
    ) -> OutputConfig:
        """Build a config from CLI-style options, where *indent* is a space count."""
        if indent < 0:
            raise ValueError("indent must be zero or a positive number of spaces")
        return cls(indent=" " * indent, minify=minify, hyphenate=hyphenate)
