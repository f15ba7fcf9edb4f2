"""Utility functions for the userpic server."""

import math
import logging
from decimal import Decimal
from typing import Any, Union

from config import settings

logger = logging.getLogger(__name__)

Number = Union[int, float]


def clamp(value: Number, minimum: Number, maximum: Number) -> Number:
    """Bound value to [minimum, maximum]. Callers must keep minimum <= maximum."""
    return min(max(value, minimum), maximum)


def js_round(value: float) -> int:
    """Round half up, the way display runtimes round layout values."""
    return math.floor(value + 0.5)


def pixel_snap(value: float, ratio: float = None) -> float:
    """Round a layout value to the nearest physical pixel.

    Only used for offsets. Sizes that feed layout measurement are left alone so
    rounding never loops back into measurement.
    """
    ratio = ratio or settings.PIXEL_RATIO
    return js_round(value * ratio) / ratio


def pixel_size_for_layout(size: float, ratio: float = None) -> int:
    """Convert a layout size to a whole number of physical pixels."""
    ratio = ratio or settings.PIXEL_RATIO
    return js_round(size * ratio)


def is_text_content(value: Any) -> bool:
    """Numbers and strings are drawn as text, anything else is an opaque node."""
    return isinstance(value, (int, float, str)) and not isinstance(value, bool)


def is_present(value: Any) -> bool:
    """Presence gate for badge values.

    None, False, empty text, zero and NaN all count as absent. Zero is
    suppressed on purpose: a badge showing "0" is never drawn.
    """
    if value is None or value is False:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    if is_text_content(value):
        return bool(value)
    return True


def number_to_string(value: Number) -> str:
    """Shortest decimal rendering, as display runtimes print numbers.

    No grouping and no trailing ".0". Exponent form only below 1e-6 or from
    1e21 up, written "1e-7" and "1e+21".
    """
    if isinstance(value, int) and abs(value) < 10**21:
        return str(value)
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr gives the shortest digits that round-trip
    parsed = Decimal(repr(abs(value))).as_tuple()
    raw_digits = "".join(str(d) for d in parsed.digits)
    point = len(raw_digits) + parsed.exponent
    digits = raw_digits.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        text = digits + "0" * (point - k)
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        exponent = point - 1
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        text = f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"
    return sign + text


def format_badge_value(value: Union[Number, str], limit: int) -> str:
    """Returns the text shown inside a badge."""
    if isinstance(value, str):
        return value
    if value > limit:
        return f"{limit}+"
    return number_to_string(value)


def color_scheme(light: str, dark: str) -> str:
    """Pick the color matching the configured color scheme."""
    return dark if settings.COLOR_SCHEME == "dark" else light


def default_color() -> str:
    """Default avatar background for the active color scheme."""
    return color_scheme(settings.DEFAULT_COLORS["light"], settings.DEFAULT_COLORS["dark"])
