"""
Component labels and the registry of alive components.

The registry is a union-find over label ids:
- create(): issue a new id, alive on its own
- find(id): canonical alive id of the component id belongs to
- absorb(a, b): merge two components; the smaller canonical id survives

Absorbed ids stay resolvable, so a cell still pointing at an evicted id
resolves to the survivor instead of going stale.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from island_types import ComponentLabel

logger = logging.getLogger(__name__)

__all__ = ["COLORS", "EMOJIS", "LabelRegistry", "LabelStyler"]


# simple_chalk style names, cycled by label id
COLORS: tuple[str, ...] = (
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "redBright",
    "greenBright",
    "yellowBright",
    "blueBright",
)

EMOJIS: tuple[str, ...] = (
    "❎", "🅰", "🆎", "🆒", "🆔", "🆚", "🈯", "🌾", "🍚", "🍜",
    "🍝", "🍞", "🍟", "🍡", "🍵", "🍸", "🎀", "🎁", "🎂", "🎃",
    "🎄", "🎾", "🐍", "🐵", "🐶", "🐷", "🐸", "🐹", "🐺", "🐻",
    "👀", "👙", "👶", "👿", "💊", "💚", "💩", "💪", "💰", "🔑",
)


class LabelStyler:
    """Hands out display attributes for newly created labels."""

    def __init__(self, colors: tuple[str, ...] = COLORS, emojis: tuple[str, ...] = EMOJIS) -> None:
        self.colors = colors
        self._emojis = list(emojis)

    def color_for(self, label_id: int) -> str | None:
        if not self.colors:
            return None
        return self.colors[(label_id - 1) % len(self.colors)]

    def pop_emoji(self) -> str | None:
        """Take the next emoji off the stack, or None once it is exhausted."""
        return self._emojis.pop() if self._emojis else None

    def style(self, label_id: int) -> ComponentLabel:
        return ComponentLabel(label_id, color=self.color_for(label_id), emoji=self.pop_emoji())


class LabelRegistry:
    """
    Alive component labels keyed by id, with merge resolution.

    `len(registry)` is the number of components that have not been absorbed.

    Example:
        >>> registry = LabelRegistry()
        >>> a, b = registry.create(), registry.create()
        >>> registry.absorb(b.id, a.id)
        1
        >>> len(registry), registry.find(2)
        (1, 1)
    """

    def __init__(self, styler: LabelStyler | None = None) -> None:
        self.styler = styler if styler is not None else LabelStyler()
        self.counter = 0
        self._labels: dict[int, ComponentLabel] = {}
        self._parent: dict[int, int] = {}

    def create(self) -> ComponentLabel:
        """Issue a label with the next id and register it as alive."""
        self.counter += 1
        label = self.styler.style(self.counter)
        self._labels[label.id] = label
        self._parent[label.id] = label.id
        return label

    def find(self, label_id: int) -> int:
        """
        Return the canonical alive id for label_id.

        Uses path compression. Ids this registry never issued resolve to
        themselves.
        """
        root = label_id
        while self._parent.get(root, root) != root:
            root = self._parent[root]

        current = label_id
        while self._parent.get(current, current) != root:
            next_id = self._parent[current]
            self._parent[current] = root
            current = next_id

        return root

    def resolve(self, label_id: int | None) -> ComponentLabel | None:
        """Return the canonical label for label_id, or None if it is not alive."""
        if label_id is None:
            return None
        return self._labels.get(self.find(label_id))

    def absorb(self, a: int, b: int) -> int:
        """
        Merge the components of a and b.

        The larger canonical id is evicted and points at the smaller one.

        Returns:
            The surviving canonical id
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return root_a

        survivor, absorbed = min(root_a, root_b), max(root_a, root_b)
        self._parent[absorbed] = survivor
        self._labels.pop(absorbed, None)
        logger.debug("absorb: %d -> %d (%d alive)", absorbed, survivor, len(self._labels))
        return survivor

    def labels(self) -> dict[int, ComponentLabel]:
        """Copy of the alive id -> label mapping, ascending by id."""
        return dict(sorted(self._labels.items()))

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label_id: object) -> bool:
        return label_id in self._labels

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._labels))

    def __repr__(self) -> str:
        return f"LabelRegistry(alive={len(self)}, counter={self.counter})"
