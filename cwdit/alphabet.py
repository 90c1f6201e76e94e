"""International Morse alphabet: character to pattern conversions.

Patterns are strings of ``.`` (dit) and ``-`` (dah).
"""

from __future__ import annotations

TABLE: tuple[tuple[str, str], ...] = (
    ("A", ".-"),
    ("B", "-..."),
    ("C", "-.-."),
    ("D", "-.."),
    ("E", "."),
    ("F", "..-."),
    ("G", "--."),
    ("H", "...."),
    ("I", ".."),
    ("J", ".---"),
    ("K", "-.-"),
    ("L", ".-.."),
    ("M", "--"),
    ("N", "-."),
    ("O", "---"),
    ("P", ".--."),
    ("Q", "--.-"),
    ("R", ".-."),
    ("S", "..."),
    ("T", "-"),
    ("U", "..-"),
    ("V", "...-"),
    ("W", ".--"),
    ("X", "-..-"),
    ("Y", "-.--"),
    ("Z", "--.."),
    ("0", "-----"),
    ("1", ".----"),
    ("2", "..---"),
    ("3", "...--"),
    ("4", "....-"),
    ("5", "....."),
    ("6", "-...."),
    ("7", "--..."),
    ("8", "---.."),
    ("9", "----."),
    (".", ".-.-.-"),
    (",", "--..--"),
    ("?", "..--.."),
    ("'", ".----."),
    ("!", "-.-.--"),
    ("/", "-..-."),
    ("(", "-.--."),
    (")", "-.--.-"),
    ("&", ".-..."),
    (":", "---..."),
    (";", "-.-.-."),
    ("=", "-...-"),
    ("+", ".-.-."),
    ("-", "-....-"),
    ("_", "..--.-"),
    ('"', ".-..-."),
    ("$", "...-..-"),
    ("@", ".--.-."),
)

_BY_PATTERN: dict[str, str] = {pattern: ch for ch, pattern in TABLE}
_BY_CHAR: dict[str, str] = dict(TABLE)


def char_for_pattern(pattern: str) -> str | None:
    """Return the character for a pattern, or ``None`` if it is unknown."""
    return _BY_PATTERN.get(pattern)


def pattern_for_char(ch: str) -> str | None:
    """Return the pattern for a character; ASCII letters are case-insensitive."""
    if "a" <= ch <= "z":
        ch = ch.upper()
    return _BY_CHAR.get(ch)