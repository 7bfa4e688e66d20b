"""Selector builder error types."""

from __future__ import annotations

from objkit.selector.model import PartKind

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
PART_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Raised when a part cannot be appended to a selector."""

    def __init__(self, message: str, kind: PartKind) -> None:
        self.kind = kind
        super().__init__(message)


class DuplicatePartError(SelectorError):
    """An element, id or pseudo-element was supplied a second time."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(DUPLICATE_PART_MESSAGE, kind)


class PartOrderError(SelectorError):
    """A part was supplied after a part that must follow it."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(PART_ORDER_MESSAGE, kind)
