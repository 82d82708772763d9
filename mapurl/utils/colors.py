"""
Color resolution for path styles.

Turns user supplied colors (hex strings or named colors) into a
six digit RGB hex string.

Six digit strings are always read as hex, with or without a "#" or "0x"
prefix, even when they start with a digit. Report engines that parse a
leading digit as a decimal RGB integer ("123456" -> 01e240) resolve such
values differently; pass decimal colors already converted to hex.
"""
import re
from typing import Optional

from mapurl.core.logging_config import logger

BLACK = "000000"
WHITE = "ffffff"

# java.awt.Color palette, which report templates refer to by name
NAMED_COLORS = {
    "black": BLACK,
    "blue": "0000ff",
    "cyan": "00ffff",
    "darkgray": "404040",
    "gray": "808080",
    "green": "00ff00",
    "lightgray": "c0c0c0",
    "magenta": "ff00ff",
    "orange": "ffc800",
    "pink": "ffafaf",
    "red": "ff0000",
    "white": WHITE,
    "yellow": "ffff00",
}

_HEX_RE = re.compile(r"^(?:#|0x)?([0-9a-fA-F]{6})$")


def resolve_color_hex(value: Optional[str], default: str = BLACK) -> str:
    """
    Resolve a color to a lowercase RRGGBB hex string.

    Args:
        value: "#RRGGBB", "RRGGBB", "0xRRGGBB" or a color name
        default: Hex used when the value is not recognised

    Returns:
        Six character lowercase hex string
    """
    if not value:
        return default

    text = value.strip()
    match = _HEX_RE.match(text)
    if match:
        return match.group(1).lower()

    named = NAMED_COLORS.get(text.lower())
    if named:
        return named

    logger.warning(f"Unrecognised color '{value}', using #{default}")
    return default
