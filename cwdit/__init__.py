"""Morse code alphabet, timing, streaming decoding, WAV input and CW synthesis."""

__version__ = "0.1.0"