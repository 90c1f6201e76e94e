"""Sample sources: a common interface and its errors."""

from __future__ import annotations

import abc


class SourceError(Exception):
    """Base class for errors raised by sample sources."""

    prefix = "source error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class UnsupportedFormatError(SourceError):
    """The input is in a format this source does not handle."""

    prefix = "unsupported format"


class DecodeError(SourceError):
    """The input is malformed and could not be decoded."""

    prefix = "decode error"


class Source(abc.ABC):
    """A stream of samples at a fixed sample rate."""

    @abc.abstractmethod
    def sample_rate(self) -> float:
        """Sample rate of the stream, in hertz."""

    @abc.abstractmethod
    def read(self, size: int) -> list[float]:
        """Return up to ``size`` samples; an empty list marks the end of stream."""

    def read_all(self, chunk_size: int = 4096) -> list[float]:
        """Read the remaining samples in chunks of ``chunk_size`` until the end."""
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        samples: list[float] = []
        while chunk := self.read(chunk_size):
            samples.extend(chunk)
        return samples