"""Adaptive estimation of the Morse dot-unit and interval classification.

Nominal timing in dot units: dit 1, dah 3, intra-character gap 1,
inter-character gap 3, word gap 7. Classification uses the midpoints
2 T and 5 T as thresholds.
"""

from __future__ import annotations

import math

from .element import Element, Gap

MIN_UNIT = 1.0
"""Smallest dot-unit the estimator will hold."""

DIT_ADAPT_ALPHA = 0.2
"""Weight given to a newly observed dit when adapting the dot-unit."""


class TimingEstimator:
    """Adaptive estimator of the Morse dot-unit ``T``.

    Durations are in whatever unit the caller uses (samples, milliseconds,
    ticks), as long as it is used consistently.
    """

    __slots__ = ("_unit",)

    def __init__(self, unit: float = MIN_UNIT) -> None:
        self._unit = max(float(unit), MIN_UNIT)

    def __repr__(self) -> str:
        return f"TimingEstimator(unit={self._unit!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimingEstimator):
            return NotImplemented
        return self._unit == other._unit

    def __copy__(self) -> TimingEstimator:
        return TimingEstimator(self._unit)

    @classmethod
    def from_unit(cls, unit: int) -> TimingEstimator:
        """Create an estimator with the given dot-unit."""
        return cls(unit)

    @classmethod
    def from_wpm(cls, wpm: float, sample_rate_hz: float) -> TimingEstimator:
        """Create an estimator from words per minute (PARIS) and a sample rate."""
        if not wpm > 0.0:
            raise ValueError("wpm must be positive")
        if not sample_rate_hz > 0.0:
            raise ValueError("sample_rate_hz must be positive")
        return cls(1.2 * sample_rate_hz / wpm)

    def unit(self) -> int:
        """Current dot-unit, rounded to the nearest whole unit."""
        return math.floor(self._unit + 0.5)

    def wpm(self, sample_rate_hz: float) -> float:
        """Effective words per minute at the given sample rate."""
        return 1.2 * sample_rate_hz / self._unit

    def classify_mark(self, duration: int) -> Element:
        """Classify a key-down interval: below 2 T is a dit, otherwise a dah."""
        if duration < 2.0 * self._unit:
            return Element.DIT
        return Element.DAH

    def classify_gap(self, duration: int) -> Gap:
        """Classify a key-up interval using the 2 T and 5 T thresholds."""
        if duration < 2.0 * self._unit:
            return Gap.INTRA_CHAR
        if duration < 5.0 * self._unit:
            return Gap.CHAR
        return Gap.WORD

    def observe_mark(self, duration: int, element: Element) -> None:
        """Nudge the dot-unit toward an observed mark.

        Dahs count at a third of their length and with half the weight of dits.
        """
        if element is Element.DIT:
            target = float(duration)
            alpha = DIT_ADAPT_ALPHA
        else:
            target = duration / 3.0
            alpha = DIT_ADAPT_ALPHA * 0.5
        self._unit = max((1.0 - alpha) * self._unit + alpha * target, MIN_UNIT)