"""Data models for keygraph."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

MAX_KEY = 2**64 - 1


class Owner(Enum):
    """Where a node's value lives. Informational only."""

    LOCAL = "local"
    REMOTE = "remote"


class NodeStatus(Enum):
    """Outcome of Graph.add_node."""

    INSERTED = "inserted"
    UPDATED = "updated"


@dataclass
class Node:
    """A graph node.

    ``value`` is a reference to a caller-owned object; the graph stores it
    as-is and never copies or inspects it.
    """

    key: int
    value: Any
    owner: Owner = Owner.LOCAL
    children: list[int] = field(default_factory=list)
