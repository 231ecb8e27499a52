"""
agiview.cel — RLE pixel stream decoder for a single cel.

Each row is a sequence of run bytes ended by 0x00:
  high nibble → colour index (0–15)
  low nibble  → repeat count (1–15)
There is no per-row length; exactly `cel.height` terminators are read.
Every logical pixel is emitted twice to give the doubled-width row.
"""
from __future__ import annotations

from typing import Iterator

from .cursor import ByteCursor
from .errors import CorruptResource, OutOfBounds
from .palette import RGBA, rgba
from .view import Cel


def _runs(cur: ByteCursor, cel: Cel) -> Iterator[list[tuple[int, int]]]:
    """Yield each row as a list of (colour, count) runs."""
    cur.seek(cel.data_offset)
    for y in range(cel.height):
        row: list[tuple[int, int]] = []
        try:
            byte = cur.read_u8()
            while byte:
                row.append((byte >> 4, byte & 0x0F))
                byte = cur.read_u8()
        except OutOfBounds as exc:
            raise CorruptResource(
                f"cel at {cel.header_offset:#06x}: pixel data ends in row {y} "
                f"of {cel.height}"
            ) from exc
        yield row


def decode_cel(cur: ByteCursor, cel: Cel) -> Iterator[list[RGBA]]:
    """
    Lazily decode *cel* into rows of RGBA pixels, doubled horizontally.

    The cursor is consumed sequentially from cel.data_offset; the generator
    is single-pass.  Raises CorruptResource if the source ends before the
    last row terminator.
    """
    for row in _runs(cur, cel):
        out: list[RGBA] = []
        for color, count in row:
            px = rgba(color, cel.transparency_color)
            out.extend([px, px] * count)
        yield out


def decode_cel_indices(cur: ByteCursor, cel: Cel) -> Iterator[list[int]]:
    """Decode *cel* into rows of raw palette indices (not doubled)."""
    for row in _runs(cur, cel):
        out: list[int] = []
        for color, count in row:
            out.extend([color] * count)
        yield out
