"""CW audio synthesiser: renders Morse-keyed tones to a mono 16-bit WAV."""

from __future__ import annotations

import io
import math
import struct
import wave
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from . import alphabet

_I16_MAX = 32767


@dataclass
class Track:
    """One keyed tone: a message, its speed in WPM, and its frequency."""

    text: str
    wpm: float
    tone_hz: float


@dataclass
class SynthOptions:
    """Rendering options shared by all tracks."""

    sample_rate: int = 8000
    lead_silence_s: float = 0.2
    tail_silence_s: float = 0.2
    ramp_ms: float = 10.0
    amplitude: float = 0.8
    """Peak output amplitude in [0.0, 1.0] relative to 16-bit full scale."""


class SynthError(Exception):
    """Base class for synthesis errors."""


class UnknownCharError(SynthError):
    """The message holds a character with no Morse pattern."""

    def __init__(self, ch: str) -> None:
        super().__init__(f"no Morse pattern for character {ch!r}")
        self.ch = ch


class EmptyTracksError(SynthError):
    """No tracks were supplied."""

    def __init__(self) -> None:
        super().__init__("at least one track is required")


def keying_samples(track: Track, sample_rate: int) -> list[bool]:
    """Return the keying stream for ``track``: True where the tone is on."""
    dot = math.floor(1.2 * sample_rate / track.wpm + 0.5)
    keying: list[bool] = []
    for word_index, word in enumerate(track.text.split(" ")):
        if word_index:
            keying.extend([False] * (7 * dot))
        for char_index, ch in enumerate(word):
            if char_index:
                keying.extend([False] * (3 * dot))
            pattern = alphabet.pattern_for_char(ch)
            if pattern is None:
                raise UnknownCharError(ch)
            for elem_index, glyph in enumerate(pattern):
                if elem_index:
                    keying.extend([False] * dot)
                keying.extend([True] * (dot if glyph == "." else 3 * dot))
    return keying


def synth_bytes(tracks: Sequence[Track], options: SynthOptions | None = None) -> bytes:
    """Render ``tracks``, mixed into one channel, as a complete WAV file.

    Every track starts right after the lead silence; tracks may overlap.
    """
    if not tracks:
        raise EmptyTracksError()
    options = options or SynthOptions()
    sample_rate = options.sample_rate
    keyings = [keying_samples(track, sample_rate) for track in tracks]
    longest = max(len(k) for k in keyings)

    lead = int(options.lead_silence_s * sample_rate)
    tail = int(options.tail_silence_s * sample_rate)
    mix = [0.0] * (lead + longest + tail)

    ramp = max(int(options.ramp_ms * sample_rate / 1000.0), 1)
    step = 1.0 / ramp

    for track, keying in zip(tracks, keyings):
        ang = 2.0 * math.pi * track.tone_hz / sample_rate
        env = 0.0
        for pos, on in enumerate(keying, start=lead):
            target = 1.0 if on else 0.0
            if abs(target - env) < step:
                env = target
            elif env < target:
                env += step
            else:
                env -= step
            mix[pos] += env * math.sin(ang * pos)

    # Keep the post-mix peak at or below `amplitude`; a mix already under
    # unit peak is scaled so its peak lands exactly at `amplitude`.
    peak = max(max((abs(x) for x in mix), default=0.0), 1.0)
    scale = min(max(options.amplitude, 0.0), 1.0) / peak

    frames = struct.pack(
        f"<{len(mix)}h",
        *(int(min(max(s * scale, -1.0), 1.0) * _I16_MAX) for s in mix),
    )
    buf = io.BytesIO()
    with wave.open(buf, "wb") as writer:
        writer.setnchannels(1)
        writer.setsampwidth(2)
        writer.setframerate(sample_rate)
        writer.writeframes(frames)
    return buf.getvalue()


def synth_to_path(
    path: str | PathLike[str],
    tracks: Sequence[Track],
    options: SynthOptions | None = None,
) -> None:
    """Render ``tracks`` and write the WAV file to ``path``."""
    data = synth_bytes(tracks, options)
    Path(path).write_bytes(data)