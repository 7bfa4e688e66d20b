from objkit.selector.builder import SelectorBuilder, Stringifiable, css_selector_builder
from objkit.selector.errors import DuplicatePartError, PartOrderError, SelectorError
from objkit.selector.model import EXCLUSIVE_PARTS, PART_ORDER, Combinator, PartKind

__all__ = [
    "SelectorBuilder",
    "Stringifiable",
    "css_selector_builder",
    "SelectorError",
    "DuplicatePartError",
    "PartOrderError",
    "PartKind",
    "Combinator",
    "PART_ORDER",
    "EXCLUSIVE_PARTS",
]
