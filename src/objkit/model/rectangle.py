"""Rectangle model: a plain value with a derived area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """An immutable width/height pair.

    Dimensions are not validated; negative values are accepted as given.
    """

    width: float
    height: float

    def area(self) -> float:
        """Return ``width * height``, computed on every call."""
        return self.width * self.height
