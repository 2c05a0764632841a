"""Text rendering of letter counts and frequencies."""

from __future__ import annotations

import struct


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def format_frequency(freq: float) -> str:
    """Render a percentage between 0 and 100.

    The hundredths are written without zero padding, so 5.05 renders as
    ``5.5``; a zero fraction renders as ``00``.
    """
    value = _f32(freq)
    if not 0.0 <= value <= 100.0:
        raise ValueError(f"frequency out of range: {freq!r}")
    if value == 100.0:
        return "100.00"
    whole = int(value)
    tens = int(value / 10.0)
    parts = []
    if tens:
        parts.append(str(tens))
    parts.append(str(whole % 10))
    parts.append(".")
    cents = int(_f32(_f32(value - whole) * 100))
    parts.append(str(cents))
    if cents == 0:
        parts.append("0")
    return "".join(parts)


def format_result(letter: str, occurrences: int, freq: float) -> str:
    """Render one result line such as ``a:3 (12.50%)``."""
    return f"{letter[:1]}:{occurrences} ({format_frequency(freq)}%)"