"""Base protocol for node transforms."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from stylecraft.model.nodes import Node


class Transform(Protocol):
    """A nodes-to-nodes transformation step run after the tree is built."""

    def apply(self, nodes: Sequence[Node]) -> list[Node]: ...
