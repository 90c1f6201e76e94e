"""Mono PCM WAV file source.

The whole file is read into memory and played back as float samples in
``[-1.0, 1.0]``. 16-, 24- and 32-bit integer data is scaled by the full-scale
value of its bit depth; 32-bit float data is passed through.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO

from .source import DecodeError, Source, UnsupportedFormatError

_FORMAT_PCM = 0x0001
_FORMAT_FLOAT = 0x0003
_FORMAT_EXTENSIBLE = 0xFFFE


@dataclass(frozen=True)
class _WavFormat:
    format_code: int
    channels: int
    sample_rate: int
    bits_per_sample: int

    @property
    def bytes_per_sample(self) -> int:
        return (self.bits_per_sample + 7) // 8


class WavSource(Source):
    """Plays back the samples of a mono WAV file."""

    def __init__(self, samples: Iterable[float], sample_rate: float) -> None:
        self._samples = list(samples)
        self._cursor = 0
        self._sample_rate = float(sample_rate)

    @classmethod
    def from_path(cls, path: str | PathLike[str]) -> WavSource:
        """Open a WAV file on disk."""
        with open(path, "rb") as stream:
            return cls.from_stream(stream)

    @classmethod
    def from_bytes(cls, data: bytes) -> WavSource:
        """Decode a complete WAV file held in memory."""
        fmt, payload = _parse_container(bytes(data))
        if fmt.channels != 1:
            raise UnsupportedFormatError(
                f"expected mono WAV, got {fmt.channels} channels"
            )
        return cls(_decode_samples(fmt, payload), fmt.sample_rate)

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> WavSource:
        """Read a WAV file from a binary stream."""
        return cls.from_bytes(stream.read())

    def sample_rate(self) -> float:
        return self._sample_rate

    def read(self, size: int) -> list[float]:
        if size < 0:
            raise ValueError("size must not be negative")
        chunk = self._samples[self._cursor : self._cursor + size]
        self._cursor += len(chunk)
        return chunk

    def __len__(self) -> int:
        return len(self._samples)


def _parse_container(data: bytes) -> tuple[_WavFormat, bytes]:
    if len(data) < 12 or data[:4] != b"RIFF" or data[8:12] != b"WAVE":
        raise DecodeError("wav header: not a RIFF WAVE file")
    fmt: _WavFormat | None = None
    pos = 12
    while pos + 8 <= len(data):
        chunk_id, size = struct.unpack_from("<4sI", data, pos)
        pos += 8
        body = data[pos : pos + size]
        if chunk_id == b"fmt ":
            fmt = _parse_fmt(body)
        elif chunk_id == b"data":
            if fmt is None:
                raise DecodeError("wav header: data chunk before fmt chunk")
            if len(body) < size:
                raise DecodeError("wav sample: data chunk is truncated")
            return fmt, body
        pos += size + (size & 1)
    if fmt is None:
        raise DecodeError("wav header: missing fmt chunk")
    raise DecodeError("wav header: missing data chunk")


def _parse_fmt(body: bytes) -> _WavFormat:
    if len(body) < 16:
        raise DecodeError("wav header: fmt chunk too short")
    code, channels, rate, _byte_rate, block_align, bits = struct.unpack_from(
        "<HHIIHH", body
    )
    if code == _FORMAT_EXTENSIBLE:
        if len(body) < 40:
            raise DecodeError("wav header: extensible fmt chunk too short")
        (code,) = struct.unpack_from("<H", body, 24)
    if channels == 0:
        raise DecodeError("wav header: zero channels")
    if bits == 0:
        raise DecodeError("wav header: zero bits per sample")
    fmt = _WavFormat(code, channels, rate, bits)
    if block_align != channels * fmt.bytes_per_sample:
        raise DecodeError("wav header: block alignment does not match sample size")
    return fmt


def _format_name(code: int) -> str:
    if code == _FORMAT_PCM:
        return "Int"
    if code == _FORMAT_FLOAT:
        return "Float"
    return f"0x{code:04x}"


def _decode_samples(fmt: _WavFormat, payload: bytes) -> list[float]:
    width = fmt.bytes_per_sample
    usable = payload[: len(payload) // width * width]
    code, bits = fmt.format_code, fmt.bits_per_sample

    if code == _FORMAT_PCM and bits == 16:
        scale = float(2**15 - 1)
        return [v / scale for (v,) in struct.iter_unpack("<h", usable)]
    if code == _FORMAT_PCM and bits == 24:
        scale = float(2**23 - 1)
        view = memoryview(usable)
        return [
            int.from_bytes(view[i : i + 3], "little", signed=True) / scale
            for i in range(0, len(usable), 3)
        ]
    if code == _FORMAT_PCM and bits == 32:
        scale = float(2**31 - 1)
        return [v / scale for (v,) in struct.iter_unpack("<i", usable)]
    if code == _FORMAT_FLOAT and bits == 32:
        return [v for (v,) in struct.iter_unpack("<f", usable)]
    raise UnsupportedFormatError(f"sample format {_format_name(code)} at {bits} bits")