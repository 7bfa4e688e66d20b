"""Selector model: part kinds, their canonical order, and combinators."""

from __future__ import annotations

from enum import StrEnum


class PartKind(StrEnum):
    """Kinds of simple selector inside one compound selector.

    Members are declared in the order CSS requires them to appear.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return PART_ORDER.index(self)

    def render(self, value: str) -> str:
        """Wrap *value* in this kind's syntax (``#id``, ``[attr]`` ...)."""
        return _TEMPLATES[self].format(value)


class Combinator(StrEnum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    GENERAL_SIBLING = "~"
    ADJACENT_SIBLING = "+"


PART_ORDER: tuple[PartKind, ...] = tuple(PartKind)

# At most one of each per compound selector.
EXCLUSIVE_PARTS = frozenset({
    PartKind.ELEMENT,
    PartKind.ID,
    PartKind.PSEUDO_ELEMENT,
})

_TEMPLATES: dict[PartKind, str] = {
    PartKind.ELEMENT: "{}",
    PartKind.ID: "#{}",
    PartKind.CLASS: ".{}",
    PartKind.ATTRIBUTE: "[{}]",
    PartKind.PSEUDO_CLASS: ":{}",
    PartKind.PSEUDO_ELEMENT: "::{}",
}
