"""Deterministic initials avatars derived from a display name."""

import base64
from typing import List, NamedTuple, Optional
from xml.sax.saxutils import escape

ATTR_ENTITIES = {'"': "&quot;"}

PALETTE: List[str] = [
    "#ff3b30",
    "#ff9500",
    "#ffcc00",
    "#34c759",
    "#00c7be",
    "#30b0c7",
    "#32ade6",
    "#007aff",
    "#5856d6",
    "#af52de",
    "#ff2d55",
    "#a2845e",
]


class Identity(NamedTuple):
    """Initials and optional color for a name."""

    initials: str
    color: Optional[str]


def get_initials(name: str) -> str:
    """
    First letter of each of the first two words, uppercased.

    A single word yields a single letter; an empty or blank name yields "".
    """
    if not name:
        return ""
    return "".join(word[0] for word in name.split()[:2]).upper()


def string_hash(text: str) -> int:
    """
    Hash a string to a non-negative integer.

    The accumulation runs over UTF-16 code units with 32-bit signed wraparound
    (h = code + (h << 5) - h, seed 0), so the result is the same on every
    platform and in every process, unlike the builtin hash().

    Args:
        text: The string to hash

    Returns:
        Absolute value of the 32-bit accumulator
    """
    encoded = text.encode("utf-16-le")
    value = 0
    for i in range(0, len(encoded), 2):
        code = encoded[i] | (encoded[i + 1] << 8)
        value = (code + ((value << 5) - value)) & 0xFFFFFFFF
    if value & 0x80000000:
        value -= 0x100000000
    return abs(value)


def pick_color(name: str, palette: List[str] = None) -> str:
    """Select a palette entry for a name."""
    palette = palette or PALETTE
    return palette[string_hash(name) % len(palette)]


def derive_identity(name: str, colorize: bool = False) -> Identity:
    """
    Derive the visual identity shown when no image is usable.

    Args:
        name: Display name
        colorize: Whether to pick a color from the palette

    Returns:
        Identity with initials and a color (None unless colorize)
    """
    name = name or ""
    return Identity(get_initials(name), pick_color(name) if colorize else None)


def generate_initials_svg(
    initials: str,
    background: str,
    size: float,
    radius: float = None,
    text_color: str = "#fff",
) -> str:
    """
    Render an initials avatar as an inline SVG data URI.

    Args:
        initials: Text to draw, usually two letters
        background: Fill color of the shape
        size: Width and height in layout units
        radius: Corner radius, half the size gives a circle
        text_color: Fill color of the text

    Returns:
        Data URI string with inline SVG
    """
    radius = size / 2 if radius is None else radius
    font_size = size / 2.5

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size:g}" height="{size:g}" viewBox="0 0 {size:g} {size:g}">',
        f'<rect width="{size:g}" height="{size:g}" rx="{radius:g}" ry="{radius:g}" fill="{escape(background, ATTR_ENTITIES)}"/>',
        f'<text x="50%" y="50%" dominant-baseline="central" text-anchor="middle" '
        f'font-family="system-ui, sans-serif" font-size="{font_size:g}" fill="{escape(text_color, ATTR_ENTITIES)}">'
        f"{escape(initials)}</text>",
        "</svg>",
    ]
    svg_content = "".join(svg_parts)

    # Return as base64 encoded data URI (more reliable than URL encoding)
    svg_bytes = svg_content.encode("utf-8")
    svg_base64 = base64.b64encode(svg_bytes).decode("ascii")
    return f"data:image/svg+xml;base64,{svg_base64}"
