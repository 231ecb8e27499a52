"""
agiview.view — AGI View resource structure and parser.

View resource layout (all integers little-endian)
-------------------------------------------------
  [0x02]          num_loops (uint8)
  [0x05..]        num_loops × uint16 absolute loop offsets

Loop (at loop offset)
  [+0]            num_cels (uint8)
  [+1..]          num_cels × uint16 cel header offsets, relative to the loop

Cel header (at loop offset + relative offset)
  [+0]            width  (uint8, in un-doubled pixels)
  [+1]            height (uint8)
  [+2]            info byte:
                    bit 7     → mirrored
                    bits 6-4  → home loop (the loop the stored bitmap faces)
                    bits 3-0  → transparency colour
  [+3..]          RLE pixel stream (see agiview.cel)

Two cels in different loops may resolve to the same header bytes; the
compositor flips such a cel when it is drawn outside its home loop.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .cursor import ByteCursor
from .errors import CorruptResource, OutOfBounds

_NUM_LOOPS_OFFSET    = 0x02
_LOOP_TABLE_OFFSET   = 0x05
CEL_HEADER_SIZE      = 3

MAX_LOOPS = 255
MAX_CELS  = 255


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Cel:
    header_offset: int
    data_offset: int
    width: int
    height: int
    transparency_color: int
    is_mirrored: bool
    home_loop_index: int


@dataclass
class Loop:
    offset: int
    cels: list[Cel] = field(default_factory=list)
    # Filled in by measure_view(); not stored in the resource.
    total_width: int = 0
    total_height: int = 0


@dataclass
class View:
    loops: list[Loop] = field(default_factory=list)

    @property
    def num_loops(self) -> int:
        return len(self.loops)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def decode_info(info: int) -> tuple[bool, int, int]:
    """Split a cel info byte into (is_mirrored, home_loop_index, transparency_color)."""
    return bool(info & 0x80), (info & 0x70) >> 4, info & 0x0F


def _read_cel(cur: ByteCursor, header_offset: int) -> Cel:
    cur.seek(header_offset)
    width  = cur.read_u8()
    height = cur.read_u8()
    mirrored, home_loop, transparency = decode_info(cur.read_u8())
    return Cel(
        header_offset=header_offset,
        data_offset=cur.tell(),
        width=width,
        height=height,
        transparency_color=transparency,
        is_mirrored=mirrored,
        home_loop_index=home_loop,
    )


def _read_loop(cur: ByteCursor, offset: int) -> Loop:
    cur.seek(offset)
    num_cels = cur.read_u8()
    if num_cels > MAX_CELS:
        raise CorruptResource(f"loop at {offset:#06x} declares {num_cels} cels")
    # The whole offset table is read before any header seek.
    header_offsets = [offset + cur.read_u16_le() for _ in range(num_cels)]
    return Loop(offset=offset, cels=[_read_cel(cur, h) for h in header_offsets])


def parse_view(source: ByteCursor | bytes | bytearray) -> View:
    """
    Walk the loop and cel offset tables and return a View.

    Loop totals are left at zero; call measure_view() (composite() does)
    before relying on them.  Raises CorruptResource if any table entry
    points outside the resource.
    """
    cur = source if isinstance(source, ByteCursor) else ByteCursor(source)
    try:
        cur.seek(_NUM_LOOPS_OFFSET)
        num_loops = cur.read_u8()
        if num_loops == 0:
            raise CorruptResource("view has no loops")
        if num_loops > MAX_LOOPS:
            raise CorruptResource(f"view declares {num_loops} loops")

        cur.seek(_LOOP_TABLE_OFFSET)
        loop_offsets = [cur.read_u16_le() for _ in range(num_loops)]
        return View(loops=[_read_loop(cur, off) for off in loop_offsets])
    except OutOfBounds as exc:
        raise CorruptResource(f"truncated view resource: {exc}") from exc


# ---------------------------------------------------------------------------
# Size measurement
# ---------------------------------------------------------------------------

def measure_view(view: View) -> tuple[int, int]:
    """
    Compute every loop's total_width/total_height and return the canvas size.

    Width is doubled to make up for AGI's double-wide pixels.
    """
    width = 0
    height = 0
    for loop in view.loops:
        loop.total_width  = sum(cel.width for cel in loop.cels)
        loop.total_height = max((cel.height for cel in loop.cels), default=0)
        width   = max(width, loop.total_width)
        height += loop.total_height
    return width * 2, height
