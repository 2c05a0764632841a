"""Letter counting, relative frequencies and per-letter language guesses."""

from __future__ import annotations

import struct
from enum import Enum
from string import ascii_letters


class Language(Enum):
    """Languages a letter frequency can be matched against."""

    ENGLISH = "E"
    FRENCH = "F"
    GERMAN = "G"
    SPANISH = "S"

    @property
    def label(self) -> str:
        """Human-readable name of the language."""
        return self.name.capitalize()


# Reference frequencies (percent) per letter, ordered English, French, German, Spanish.
REFERENCE_FREQUENCIES: dict[str, tuple[float, float, float, float]] = {
    "a": (8.167, 7.636, 6.516, 11.525),
    "b": (1.492, 0.901, 1.886, 2.215),
    "c": (2.782, 3.260, 2.732, 4.019),
    "d": (4.253, 3.669, 5.076, 5.010),
    "e": (12.702, 14.715, 16.396, 12.181),
    "f": (2.228, 1.066, 1.656, 0.692),
    "g": (2.015, 0.866, 3.009, 1.768),
    "h": (6.094, 0.737, 4.577, 0.703),
    "i": (6.966, 7.529, 6.550, 6.247),
    "j": (0.153, 0.613, 0.268, 0.493),
    "k": (0.772, 0.049, 1.417, 0.011),
    "l": (4.025, 5.456, 3.437, 4.967),
    "m": (2.406, 2.968, 2.534, 3.157),
    "n": (6.749, 7.095, 9.776, 6.712),
    "o": (5.507, 5.796, 2.594, 8.683),
    "p": (1.929, 2.521, 0.670, 2.510),
    "q": (0.095, 1.362, 0.018, 0.877),
    "r": (5.987, 6.693, 7.003, 6.871),
    "s": (6.327, 7.948, 7.270, 7.977),
    "t": (9.056, 7.244, 6.154, 4.632),
    "u": (2.758, 6.311, 4.166, 2.927),
    "v": (0.978, 1.838, 0.846, 1.138),
    "w": (2.360, 0.074, 1.921, 0.017),
    "x": (0.150, 0.427, 0.034, 0.215),
    "y": (1.974, 0.128, 0.039, 1.008),
    "z": (0.074, 0.326, 1.134, 0.467),
}

_LANGUAGE_ORDER = (Language.ENGLISH, Language.FRENCH, Language.GERMAN, Language.SPANISH)


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def count_occurrences(text: str, letter: str) -> int:
    """Count case-insensitive occurrences of the first character of ``letter``.

    Only ASCII letters are counted; any other character yields 0.
    """
    target = letter[:1]
    if not target or target not in ascii_letters:
        return 0
    wanted = {target.lower(), target.upper()}
    return sum(ch in wanted for ch in text)


def count_letters(text: str) -> int:
    """Count the ASCII letters in ``text``."""
    return sum(ch in ascii_letters for ch in text)


def frequency(text: str, occurrences: int) -> float:
    """Percentage of the letters of ``text`` that ``occurrences`` represents."""
    letters = count_letters(text)
    if letters == 0:
        raise ValueError("text contains no letters")
    return _f32(_f32(occurrences * 100) / letters)


def closest_language(letter: str, freq: float) -> Language:
    """Match a letter frequency against the reference table.

    Deviations are signed; only the first negative one is folded to its
    magnitude. The deviations are then walked in language order, moving
    to the next candidate each time the current one is beaten.
    """
    key = letter[:1].lower()
    if key not in REFERENCE_FREQUENCIES:
        raise ValueError(f"no reference frequencies for {letter!r}")
    value = _f32(freq)
    diffs = [_f32(value - ref) for ref in REFERENCE_FREQUENCIES[key]]
    first_negative = next((i for i, d in enumerate(diffs) if d < 0), None)
    if first_negative is not None:
        diffs[first_negative] = -diffs[first_negative]

    result = Language.ENGLISH
    best = 0
    for candidate, language in enumerate(_LANGUAGE_ORDER[1:], start=1):
        if diffs[best] > diffs[candidate]:
            result = language
            best += 1
    return result