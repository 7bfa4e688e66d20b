from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class CodecConfig:
    indent: int | None = None
    separators: tuple[str, str] = (",", ":")  # compact, like JSON.stringify
    ensure_ascii: bool = False
    sort_keys: bool = False
    allow_nan: bool = True

    def pretty(self, indent: int = 2) -> CodecConfig:
        """Return a copy that emits indented, human-readable JSON."""
        return replace(self, indent=indent, separators=(",", ": "))
