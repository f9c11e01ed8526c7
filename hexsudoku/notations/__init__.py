"""Notation registry and base class.

A notation maps the characters of a puzzle text to cell values and back.
Cell values are always ``0 .. side - 1``; how they are spelled is up to the
notation.
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from ..core.errors import FormatError


class Notation:
    """Base notation adapter."""
    name: str = "notation"
    symbols: str = ""
    blanks: str = "."
    case_sensitive: bool = True

    def max_side(self) -> int:
        return len(self.symbols)

    def decode(self, ch: str, side: int) -> Optional[int]:
        """Return the value spelled by ``ch`` or None for a blank."""
        key = ch if self.case_sensitive else ch.lower()
        if key in self.blanks:
            return None
        value = self.symbols.find(key)
        if value < 0 or value >= side:
            raise FormatError(f"invalid {self.name} symbol {ch!r} for a board of side {side}")
        return value

    def encode(self, value: Optional[int]) -> str:
        if value is None:
            return self.blanks[0]
        return self.symbols[value]


NOTATION_REGISTRY: Dict[str, Type[Notation]] = {}


def register_notation(cls: Type[Notation]) -> Type[Notation]:
    NOTATION_REGISTRY[cls.name] = cls
    return cls


def get_notation(notation: str | Notation) -> Notation:
    """Resolve a notation name (or pass an instance through)."""
    if isinstance(notation, Notation):
        return notation
    try:
        return NOTATION_REGISTRY[notation]()
    except KeyError:
        known = ", ".join(sorted(NOTATION_REGISTRY))
        raise FormatError(f"unknown notation {notation!r} (expected one of: {known})") from None


from . import classic, hexadecimal  # noqa: E402,F401  register built-ins
