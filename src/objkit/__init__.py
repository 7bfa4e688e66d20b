"""objkit: rectangle values, JSON capability codec and a CSS selector builder."""

from __future__ import annotations

__version__ = "0.1.0"

from objkit.config import CodecConfig
from objkit.model import Rectangle
from objkit.selector import Combinator, SelectorBuilder, css_selector_builder
from objkit.serialization import decode, from_json, to_json

__all__ = [
    "__version__",
    "CodecConfig",
    "Rectangle",
    "Combinator",
    "SelectorBuilder",
    "css_selector_builder",
    "decode",
    "from_json",
    "to_json",
]
