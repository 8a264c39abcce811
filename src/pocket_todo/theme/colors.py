"""Hex color helpers.

Colors are kept as hex strings everywhere; conversion happens at the edge
(console rendering, or whatever UI toolkit consumes the palette).
"""
from __future__ import annotations

RGBA = tuple[int, int, int, int]

# Result for malformed input: near-black and almost fully transparent.
FALLBACK_RGBA: RGBA = (1, 1, 0, 1)

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def parse_hex(hex_code: str) -> RGBA:
    """Parse RGB (12-bit), RRGGBB (24-bit) or AARRGGBB (32-bit) into 0-255 RGBA.

    Any non-alphanumeric characters (leading '#', spaces) are stripped first.
    Other lengths or non-hex digits give FALLBACK_RGBA.
    """
    h = ''.join(c for c in hex_code if c.isalnum())
    if not h or any(c not in _HEX_DIGITS for c in h):
        return FALLBACK_RGBA
    n = int(h, 16)
    if len(h) == 3:
        return (n >> 8) * 17, (n >> 4 & 0xF) * 17, (n & 0xF) * 17, 255
    if len(h) == 6:
        return n >> 16, n >> 8 & 0xFF, n & 0xFF, 255
    if len(h) == 8:
        return n >> 16 & 0xFF, n >> 8 & 0xFF, n & 0xFF, n >> 24
    return FALLBACK_RGBA


def to_hex(rgba: RGBA) -> str:
    r, g, b, a = rgba
    if a == 255:
        return f"#{r:02X}{g:02X}{b:02X}"
    return f"#{a:02X}{r:02X}{g:02X}{b:02X}"


def _fg_truecolor(r: int, g: int, b: int) -> str:
    """Generate ANSI escape code for truecolor foreground."""
    return f"\033[38;2;{r};{g};{b}m"


RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
STRIKE = "\033[9m"


def ansi_fg(hex_code: str) -> str:
    """ANSI foreground sequence for a hex color (alpha is ignored)."""
    r, g, b, _ = parse_hex(hex_code)
    return _fg_truecolor(r, g, b)


def paint(text: str, *styles: str, enabled: bool = True) -> str:
    """Apply ANSI styles to text; returns text unchanged when disabled."""
    if not enabled or not styles:
        return text
    return ''.join(styles) + text + RESET
