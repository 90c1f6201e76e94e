"""Decoder wrapper that derives the initial dot-unit from the input itself.

When the seed speed is far from the real keying speed, the first characters
come out wrong. :class:`BootstrapDecoder` holds back the first
``target_marks`` marks and any gaps between them, estimates the dot-unit
from the observed mark durations, and then replays the held-back intervals
through a freshly seeded :class:`~cwdit.decoder.Decoder`. After that it
passes every interval straight through.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence

from .decoder import Decoder
from .element import Decoded
from .timing import TimingEstimator

DEFAULT_BOOTSTRAP_MARKS = 8
"""Marks held back before calibration: two or three typical characters."""


def estimate_unit_from_marks(durations: Sequence[int]) -> int:
    """Estimate the dot-unit as the median of the shorter half of the marks.

    This picks the dit peak of the dit/dah distribution and ignores a few
    outliers in either direction. The result is at least 1.
    """
    if not durations:
        raise ValueError("at least one mark duration is required")
    ordered = sorted(durations)
    half = len(ordered) // 2
    lower = ordered[: max(half, 1)]
    return max(lower[len(lower) // 2], 1)


class BootstrapDecoder:
    """A :class:`Decoder` with a calibration phase at the start of the stream."""

    def __init__(
        self,
        seed_timing: TimingEstimator,
        target_marks: int = DEFAULT_BOOTSTRAP_MARKS,
        adapt: bool = True,
    ) -> None:
        if target_marks <= 0:
            raise ValueError("target_marks must be positive")
        self._seed_timing = seed_timing
        self._target_marks = target_marks
        self._adapt = adapt
        self._inner: Decoder | None = None
        self._marks_observed = 0
        self._buffered: list[tuple[bool, int]] = []

    def is_bootstrapped(self) -> bool:
        """Whether calibration has finished; before that, ``push`` only buffers."""
        return self._inner is not None

    def timing(self) -> TimingEstimator:
        """The seed estimate during calibration, the live estimate afterwards."""
        if self._inner is None:
            return self._seed_timing
        return self._inner.timing()

    def push(self, mark: bool, duration: int) -> list[Decoded]:
        """Feed one interval.

        Returns nothing while calibrating, and the whole buffered history's
        events on the interval that completes calibration.
        """
        if self._inner is not None:
            return self._inner.push(mark, duration)

        self._buffered.append((mark, duration))
        if mark:
            self._marks_observed += 1
        if self._marks_observed < self._target_marks:
            return []
        inner = self._finalize_bootstrap()
        return self._replay_buffered(inner)

    def finish(self) -> list[Decoded]:
        """Flush the stream, calibrating from what was seen if it ended early."""
        if self._inner is not None:
            return self._inner.finish()
        inner = self._finalize_bootstrap()
        out = self._replay_buffered(inner)
        out.extend(inner.finish())
        return out

    def _finalize_bootstrap(self) -> Decoder:
        marks = [duration for is_mark, duration in self._buffered if is_mark]
        if marks:
            timing = TimingEstimator.from_unit(estimate_unit_from_marks(marks))
        else:
            timing = copy.copy(self._seed_timing)
        self._inner = Decoder(timing, adapt=self._adapt)
        return self._inner

    def _replay_buffered(self, inner: Decoder) -> list[Decoded]:
        events, self._buffered = self._buffered, []
        out: list[Decoded] = []
        for mark, duration in events:
            out.extend(inner.push(mark, duration))
        return out