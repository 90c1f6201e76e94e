"""Helpers for feeding live audio-callback data into a sample queue.

Audio callbacks deliver interleaved frames in the device's native sample
type. These helpers normalise such samples to floats in ``[-1.0, 1.0]``,
take channel 0 of each frame, and enqueue it without ever blocking the
callback. When the consumer falls behind, samples are dropped and counted
as overruns.
"""

from __future__ import annotations

import queue
from collections.abc import Callable, Sequence
from typing import Any

_I16_MAX = 32767
_U16_MIDPOINT = 0x8000


def f32_to_float(value: float) -> float:
    """Float samples are already normalised and pass through unchanged."""
    return float(value)


def i16_to_float(value: int) -> float:
    """Scale a signed 16-bit sample by its positive full-scale value."""
    return value / _I16_MAX


def u16_to_float(value: int) -> float:
    """Scale an unsigned 16-bit sample, whose silence sits at ``0x8000``."""
    return (value - _U16_MIDPOINT) / 32768.0


def forward_frames(
    data: Sequence[Any],
    channels: int,
    sink: queue.Queue,
    convert: Callable[[Any], float] = f32_to_float,
) -> int:
    """Enqueue channel 0 of every interleaved frame in ``data``.

    ``sink`` is never waited on: a sample that does not fit is dropped.
    Returns the number of samples dropped because the sink was full.
    """
    step = max(channels, 1)
    overruns = 0
    for raw in data[::step]:
        try:
            sink.put_nowait(convert(raw))
        except queue.Full:
            overruns += 1
    return overruns