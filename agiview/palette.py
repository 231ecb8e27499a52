"""
agiview.palette — fixed 16-colour EGA palette used by AGI View resources.
"""
from __future__ import annotations

RGB  = tuple[int, int, int]
RGBA = tuple[int, int, int, int]

PALETTE: tuple[RGB, ...] = (
    (0x00, 0x00, 0x00),
    (0x00, 0x00, 0xAA),
    (0x00, 0xAA, 0x00),
    (0x00, 0xAA, 0xAA),
    (0xAA, 0x00, 0x00),
    (0xAA, 0x00, 0xAA),
    (0xAA, 0x55, 0x00),
    (0xAA, 0xAA, 0xAA),
    (0x55, 0x55, 0x55),
    (0x55, 0x55, 0xFF),
    (0x55, 0xFF, 0x55),
    (0x55, 0xFF, 0xFF),
    (0xFF, 0x55, 0x55),
    (0xFF, 0x55, 0xFF),
    (0xFF, 0xFF, 0x55),
    (0xFF, 0xFF, 0xFF),
)

TRANSPARENT: RGBA = (0, 0, 0, 0)


def rgba(color: int, transparency_color: int) -> RGBA:
    """Map a 4-bit colour index to an RGBA tuple for a cel."""
    if not 0 <= color < len(PALETTE):
        raise ValueError(f"palette index out of range: {color}")
    if color == transparency_color:
        return TRANSPARENT
    r, g, b = PALETTE[color]
    return (r, g, b, 0xFF)
