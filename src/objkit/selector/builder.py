"""Fluent, immutable builder for CSS complex selectors.

Each call returns a new builder, so a partial selector can be shared and
extended in several directions::

    base = css_selector_builder.element("div")
    base.id("main").stringify()    # 'div#main'
    base.class_("row").stringify() # 'div.row'

Within one compound selector the parts must follow the CSS order
``element#id.class[attr]:pseudo-class::pseudo-element``; element, id and
pseudo-element may appear only once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from objkit.selector.errors import DuplicatePartError, PartOrderError
from objkit.selector.model import EXCLUSIVE_PARTS, Combinator, PartKind

__all__ = ["Stringifiable", "SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


class Stringifiable(Protocol):
    """Anything that can render itself as selector text."""

    def stringify(self) -> str: ...


def check_part(used: frozenset[PartKind], kind: PartKind) -> None:
    """Raise if *kind* may not follow the parts already in *used*."""
    if kind in EXCLUSIVE_PARTS and kind in used:
        logger.debug("Rejected %s: already present", kind)
        raise DuplicatePartError(kind)
    later = [u for u in used if u.rank > kind.rank]
    if later:
        logger.debug("Rejected %s: must precede %s", kind, ", ".join(sorted(later)))
        raise PartOrderError(kind)


@dataclass(frozen=True)
class SelectorBuilder:
    """Accumulated selector text plus the part kinds used since the last combinator."""

    text: str = ""
    used: frozenset[PartKind] = field(default_factory=frozenset)

    def part(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Append a *kind* part holding *value* verbatim."""
        check_part(self.used, kind)
        return SelectorBuilder(
            text=self.text + kind.render(value),
            used=self.used | {kind},
        )

    def element(self, value: str) -> SelectorBuilder:
        return self.part(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.part(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.part(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.part(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.part(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.part(PartKind.PSEUDO_ELEMENT, value)

    @staticmethod
    def combine(
        left: Stringifiable,
        combinator: Combinator | str,
        right: Stringifiable,
    ) -> SelectorBuilder:
        """Join two selectors as ``left <combinator> right``.

        The combinator is inserted as given and padded with one space on each
        side, so the descendant combinator yields three spaces.
        """
        return SelectorBuilder(
            text=f"{left.stringify()} {combinator} {right.stringify()}"
        )

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


css_selector_builder = SelectorBuilder()
