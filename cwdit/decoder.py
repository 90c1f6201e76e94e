"""Streaming Morse decoder.

The decoder consumes a run-length stream of key-up / key-down intervals,
one call to :meth:`Decoder.push` per interval, and returns
:class:`~cwdit.element.Decoded` events as characters and word breaks are
recognised. Durations may be in any unit matching the timing estimator.
"""

from __future__ import annotations

from . import alphabet
from .element import Decoded, Gap
from .timing import TimingEstimator

MAX_PATTERN = 10
"""Most glyphs kept for one character; extra glyphs are dropped."""


class Decoder:
    """Streaming Morse decoder fed with (mark, duration) intervals."""

    def __init__(self, timing: TimingEstimator, adapt: bool = True) -> None:
        self._timing = timing
        self._adapt = adapt
        self._pattern: list[str] = []
        self._any_char_emitted = False
        self._pending_word_break = False

    def timing(self) -> TimingEstimator:
        """The current timing estimator."""
        return self._timing

    def push(self, mark: bool, duration: int) -> list[Decoded]:
        """Feed one interval and return the zero, one or two events it produced."""
        out: list[Decoded] = []
        if mark:
            element = self._timing.classify_mark(duration)
            if len(self._pattern) < MAX_PATTERN:
                self._pattern.append(element.glyph())
            if self._adapt:
                self._timing.observe_mark(duration, element)
            return out

        gap = self._timing.classify_gap(duration)
        if gap is Gap.CHAR:
            self._flush(out)
        elif gap is Gap.WORD:
            self._flush(out)
            # Deferred so trailing silence does not leave a dangling break.
            if self._any_char_emitted:
                self._pending_word_break = True
        return out

    def finish(self) -> list[Decoded]:
        """Flush any in-progress character at the end of the stream."""
        out: list[Decoded] = []
        self._flush(out)
        return out

    def _flush(self, out: list[Decoded]) -> None:
        if not self._pattern:
            return
        ch = alphabet.char_for_pattern("".join(self._pattern))
        decoded = Decoded.char(ch) if ch is not None else Decoded.unknown()
        if self._pending_word_break:
            out.append(Decoded.word_break())
            self._pending_word_break = False
        out.append(decoded)
        self._any_char_emitted = True
        self._pattern.clear()