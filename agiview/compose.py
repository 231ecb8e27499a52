"""
agiview.compose — lay out every loop's cels on one RGBA canvas.

Loops are stacked top to bottom in storage order, each band as tall as its
tallest cel.  Within a loop, cels run left to right, each band 2 × width
columns wide.  A cel that is mirrored and drawn outside its home loop is
written right to left.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from PIL import Image as PILImage

from .palette import RGBA
from .view import Cel, View, measure_view

CelDecoder = Callable[[Cel], Iterable[list[RGBA]]]


@dataclass
class Canvas:
    width: int
    height: int
    pixels: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if not self.pixels:
            # Transparent black.
            self.pixels = bytearray(self.width * self.height * 4)

    def get_pixel(self, x: int, y: int) -> RGBA:
        i = (y * self.width + x) * 4
        r, g, b, a = self.pixels[i: i + 4]
        return (r, g, b, a)

    def put_pixel(self, x: int, y: int, px: RGBA) -> None:
        i = (y * self.width + x) * 4
        self.pixels[i: i + 4] = bytes(px)

    def to_image(self) -> PILImage.Image:
        return PILImage.frombytes("RGBA", (self.width, self.height), bytes(self.pixels))


def is_flipped(cel: Cel, loop_index: int) -> bool:
    return cel.is_mirrored and cel.home_loop_index != loop_index


def _draw_cel(canvas: Canvas, rows: Iterable[list[RGBA]], cel: Cel,
              band_x: int, band_y: int, flipped: bool) -> None:
    band_w = cel.width * 2
    for dy, row in enumerate(rows):
        if dy >= cel.height:
            break
        y = band_y + dy
        # Anything past the declared width is dropped rather than spilling
        # into the neighbouring cel.
        x, step = (band_x + band_w - 1, -1) if flipped else (band_x, 1)
        for px in row[:band_w]:
            canvas.put_pixel(x, y, px)
            x += step


def composite(view: View, decode: CelDecoder) -> Canvas:
    """
    Measure *view*, then decode and draw every cel into a new Canvas.

    *decode* maps a Cel to its rows of doubled RGBA pixels, typically
    ``functools.partial(decode_cel, cursor)``.
    """
    width, height = measure_view(view)
    canvas = Canvas(width, height)

    band_y = 0
    for i, loop in enumerate(view.loops):
        band_x = 0
        for cel in loop.cels:
            _draw_cel(canvas, decode(cel), cel, band_x, band_y, is_flipped(cel, i))
            band_x += cel.width * 2
        band_y += loop.total_height
    return canvas
