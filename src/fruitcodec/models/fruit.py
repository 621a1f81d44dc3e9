from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple

from fruitcodec.core.exceptions import DecodeError


class Fruit(Enum):
    """Record category. External labels live in the table below, not in the member values."""

    APPLE = "Apple"
    ORANGE = "Orange"
    BANANA = "Banana"

    @property
    def label(self) -> str:
        return _LABEL_BY_FRUIT[self]

    @classmethod
    def labels(cls) -> Tuple[str, ...]:
        return tuple(_LABEL_BY_FRUIT[fruit] for fruit in cls)

    @classmethod
    def lookup(cls, label: str) -> Optional["Fruit"]:
        return _FRUIT_BY_LABEL.get(label)

    @classmethod
    def from_label(cls, label: str) -> "Fruit":
        """Resolve a canonical label (case-sensitive); raise DecodeError for anything else."""
        fruit = cls.lookup(label)
        if fruit is None:
            raise DecodeError.unknown_variant(label, cls.labels())
        return fruit


_LABEL_BY_FRUIT: Dict[Fruit, str] = {
    Fruit.APPLE: "apple",
    Fruit.ORANGE: "orange",
    Fruit.BANANA: "banana",
}

_FRUIT_BY_LABEL: Dict[str, Fruit] = {label: fruit for fruit, label in _LABEL_BY_FRUIT.items()}
