"""Deterministic palette colors for workout templates and types.

Two independent strategies share one palette:

- ``build_color_map`` assigns colors in first-occurrence order of a name list.
- ``pastel_for_workout_type`` hashes a single name, so any caller gets the
  same color without shared state.

The palette order and hash constants decide which color an existing name
receives; changing either recolors every user's history.
"""

import math
import re
from collections.abc import Iterable
from decimal import Decimal

WORKOUT_COLORS: tuple[str, ...] = (
    # Priority pastels
    "#A8E6CF",  # pastel green
    "#A8D8EA",  # pastel blue
    "#FFF3B0",  # pastel yellow
    "#FFB3B3",  # pastel red
    "#FFCC99",  # pastel orange
    "#C9B1FF",  # pastel purple
    "#C8D6E5",  # pastel silver
    # Additional distinct pastels
    "#88E5D9",  # pastel teal
    "#C5E99B",  # pastel lime
    # Regular colors for when pastels would look too similar
    "#FF7F7F",  # coral
    "#5B9BD5",  # medium blue
    "#F4C542",  # gold
    "#7EC8A0",  # sage
)

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
_UINT32_MASK = 0xFFFFFFFF

_HEX_COLOR = re.compile(r"#?([0-9a-fA-F]{6})")


def color_for_index(index: int) -> str:
    """Palette color for an index, cycling past the palette length."""
    return WORKOUT_COLORS[index % len(WORKOUT_COLORS)]


def build_color_map(names: Iterable[str]) -> dict[str, str]:
    """Assign palette colors to names in first-occurrence order.

    Repeated names reuse the color of their first occurrence and do not
    consume a palette slot.

    Example:
        build_color_map(["Push", "Pull", "Push", "Legs"])
        -> {"Push": WORKOUT_COLORS[0], "Pull": WORKOUT_COLORS[1], "Legs": WORKOUT_COLORS[2]}
    """
    colors: dict[str, str] = {}
    for name in names:
        if name not in colors:
            colors[name] = color_for_index(len(colors))
    return colors


def _utf16_code_units(s: str) -> list[int]:
    data = s.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def hash_string(s: str) -> int:
    """32-bit FNV-1a hash over the UTF-16 code units of ``s`` (unsigned)."""
    h = FNV_OFFSET_BASIS
    for code in _utf16_code_units(s):
        h = ((h ^ code) * FNV_PRIME) & _UINT32_MASK
    return h


def pastel_for_workout_type(workout_type: str) -> str:
    """Stable color for a workout type, ignoring case and surrounding whitespace."""
    key = workout_type.strip().lower()
    return WORKOUT_COLORS[hash_string(key) % len(WORKOUT_COLORS)]


def _format_alpha(alpha: float) -> str:
    """Render a number the way JavaScript's ``String(number)`` does.

    Shortest round-trip digits, positional between 1e-7 and 1e21 and
    ``1e-7`` / ``1.5e+21`` style exponents outside that range.
    """
    value = float(alpha)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # Position of the decimal point relative to the digits

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * (-n) + digits
    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"


def hex_to_rgba(hex_color: str, alpha: float) -> str:
    """Convert ``#RRGGBB`` (``#`` optional) to a CSS ``rgba()`` string.

    Anything that is not exactly six hex digits yields transparent-black
    ``rgba(0,0,0,alpha)``.
    """
    match = _HEX_COLOR.fullmatch(hex_color.strip())
    if match is None:
        return f"rgba(0,0,0,{_format_alpha(alpha)})"
    value = int(match.group(1), 16)
    r = (value >> 16) & 255
    g = (value >> 8) & 255
    b = value & 255
    return f"rgba({r}, {g}, {b}, {_format_alpha(alpha)})"
