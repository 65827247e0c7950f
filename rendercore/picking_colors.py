"""Encoding object identifiers as flat colours for colour-buffer picking.

Each object is drawn in a unique colour; reading back the pixel under the
cursor gives the identifier of the object there. A white pixel means the
background was hit.
"""

from __future__ import annotations

__all__ = [
    "BACKGROUND_ID",
    "pick_id_to_color",
    "color_to_pick_id",
    "describe_pick",
]

BACKGROUND_ID = 0x00FFFFFF


def _check_channel(name: str, value: int) -> int:
    value = int(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} channel {value} is outside 0..255")
    return value


def pick_id_to_color(index: int) -> tuple[int, int, int]:
    """Split a 24-bit identifier into (red, green, blue) bytes.

    Red holds the lowest byte and blue the highest. Divide by 255 to get
    the colour a shader expects.
    """
    index = int(index)
    if not 0 <= index <= 0xFFFFFF:
        raise ValueError(f"pick id {index} does not fit in 24 bits")
    red = index & 0x0000FF
    green = (index & 0x00FF00) >> 8
    blue = (index & 0xFF0000) >> 16
    return red, green, blue


def color_to_pick_id(red: int, green: int, blue: int) -> int:
    """Rebuild the identifier from the bytes of a read-back pixel."""
    red = _check_channel("red", red)
    green = _check_channel("green", green)
    blue = _check_channel("blue", blue)
    return red + green * 256 + blue * 256 * 256


def describe_pick(red: int, green: int, blue: int) -> str:
    """Human-readable result of a pick: "background" or "mesh <id>"."""
    picked = color_to_pick_id(red, green, blue)
    if picked == BACKGROUND_ID:
        return "background"
    return f"mesh {picked}"