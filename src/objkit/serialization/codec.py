"""JSON codec: serialise records and rebuild them with their behaviour attached.

``to_json`` delegates to the standard :mod:`json` encoder, rendering objects as
their own data fields. ``from_json`` parses text back into a record and binds
it to a capability class, so the class's methods work on the parsed fields
without ``__init__`` ever running::

    circle = from_json(Circle, '{"radius":10}')
    circle.area()
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objkit.config import CodecConfig
from objkit.serialization.errors import DecodeError, EncodeError

__all__ = ["to_json", "decode", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_CONFIG = CodecConfig()
_MISSING = object()


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    return names


def _own_fields(obj: Any) -> dict[str, Any]:
    """Encoder fallback: expose an object's own data fields, methods omitted.

    Reads instance ``__dict__`` and any assigned ``__slots__``; unset slots are
    skipped.
    """
    if callable(obj):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    if dataclasses.is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    slots = _slot_names(type(obj))
    if not slots and not hasattr(obj, "__dict__"):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    fields: dict[str, Any] = {}
    for name in slots:
        value = getattr(obj, name, _MISSING)
        if value is not _MISSING and not callable(value):
            fields[name] = value
    if hasattr(obj, "__dict__"):
        for key, value in vars(obj).items():
            if not callable(value):
                fields[key] = value
    return fields


def to_json(obj: Any, config: CodecConfig | None = None) -> str:
    """Return the JSON text of *obj*.

    Keys keep their enumeration order: insertion order for dicts, declaration
    order for dataclass fields.
    """
    cfg = config or _DEFAULT_CONFIG
    try:
        return json.dumps(
            obj,
            indent=cfg.indent,
            separators=cfg.separators,
            ensure_ascii=cfg.ensure_ascii,
            sort_keys=cfg.sort_keys,
            allow_nan=cfg.allow_nan,
            default=_own_fields,
        )
    except (TypeError, ValueError) as exc:
        raise EncodeError(str(exc)) from exc


def decode(text: str) -> Any:
    """Parse JSON *text* into plain Python values."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("JSON decode failed at %d:%d: %s", exc.lineno, exc.colno, exc.msg)
        raise DecodeError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno
        ) from exc


def from_json(capability: type[T], text: str) -> T:
    """Parse *text* and return it as an instance of *capability*.

    The parsed fields are copied onto a bare instance; no constructor runs and
    nothing checks that the fields match what the methods expect. A missing
    field shows up as :class:`AttributeError` when a method reads it.
    """
    data = decode(text)
    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object for {capability.__name__}, "
            f"got {type(data).__name__}"
        )
    instance = capability.__new__(capability)
    for key, value in data.items():
        if key.startswith("__") and key.endswith("__"):
            raise DecodeError(
                f"{capability.__name__} cannot hold field {key!r}: reserved name"
            )
        try:
            object.__setattr__(instance, key, value)
        except (AttributeError, TypeError) as exc:
            raise DecodeError(
                f"{capability.__name__} cannot hold field {key!r}: {exc}"
            ) from exc
    logger.debug("Decoded %s with fields %s", capability.__name__, list(data))
    return instance
