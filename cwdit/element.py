"""Morse element, gap and decoded-event types."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Element(enum.Enum):
    """A key-down Morse element."""

    DIT = "dit"
    DAH = "dah"

    def glyph(self) -> str:
        """ASCII glyph: ``.`` for a dit, ``-`` for a dah."""
        return "." if self is Element.DIT else "-"


class Gap(enum.Enum):
    """A key-up interval."""

    INTRA_CHAR = "intra_char"
    CHAR = "char"
    WORD = "word"


class DecodedKind(enum.Enum):
    """The kind of a decoder event."""

    CHAR = "char"
    UNKNOWN = "unknown"
    WORD_BREAK = "word_break"


@dataclass(frozen=True)
class Decoded:
    """One event produced by the decoder."""

    kind: DecodedKind
    ch: str | None = None

    @classmethod
    def char(cls, ch: str) -> Decoded:
        """A decoded character."""
        return cls(DecodedKind.CHAR, ch)

    @classmethod
    def unknown(cls) -> Decoded:
        """A pattern that matched no known character."""
        return cls(DecodedKind.UNKNOWN)

    @classmethod
    def word_break(cls) -> Decoded:
        """A word boundary."""
        return cls(DecodedKind.WORD_BREAK)

    def render(self) -> str:
        """Text form: the character, a space for a word break, ``?`` if unknown."""
        if self.kind is DecodedKind.CHAR:
            return self.ch or ""
        if self.kind is DecodedKind.WORD_BREAK:
            return " "
        return "?"