"""
agiview.convert — AGI View resource → PNG/BMP converter.

Port of agiview2bmp (Thomas Foster), which walks a View resource and saves
every loop and cel as one bitmap next to the input, named ``<input>.bmp``.
This port appends ``.png`` by default so that transparency survives.

Pipeline
--------
  raw bytes → parse_view() → measure_view() → decode_cel() per cel
            → composite() → Canvas → Pillow → file

Each input is handled on its own: a failure in one file is reported in its
ConversionResult and the rest of the batch carries on.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Iterable, Optional

from PIL import Image as PILImage

from .cel import decode_cel
from .compose import Canvas, composite
from .cursor import ByteCursor
from .errors import CorruptResource
from .view import parse_view

FORMATS = ("png", "bmp")
DEFAULT_FORMAT = "png"

_PIL_FORMATS = {"bmp": "BMP", "png": "PNG"}


@dataclass
class ConversionResult:
    source: Path
    dest: Optional[Path] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def render_view(cur: ByteCursor) -> Canvas:
    """Parse the resource under *cur* and composite all of its cels."""
    view = parse_view(cur)
    return composite(view, partial(decode_cel, cur))


def view_to_image(data: bytes | bytearray) -> PILImage.Image:
    """Decode an in-memory View resource to a PIL Image (RGBA)."""
    return render_view(ByteCursor(data)).to_image()


def read_view(path: str | Path) -> PILImage.Image:
    """Decode a View resource file to a PIL Image (RGBA)."""
    return render_view(ByteCursor.from_path(path)).to_image()


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------

def default_dest(path: str | Path, fmt: str = DEFAULT_FORMAT,
                 outdir: str | Path | None = None) -> Path:
    """``VIEW.001`` → ``VIEW.001.png`` (extension appended, not replaced)."""
    path = Path(path)
    name = f"{path.name}.{fmt.lower()}"
    return (Path(outdir) if outdir else path.parent) / name


def convert_view(path: str | Path, dest: str | Path | None = None,
                 fmt: str = DEFAULT_FORMAT) -> Path:
    """
    Convert one View file to an image and return the path written.

    PNG keeps the alpha channel.  Pillow writes BMP without one, so
    transparent pixels come out opaque black in a BMP.
    """
    fmt = fmt.lower()
    if fmt not in _PIL_FORMATS:
        raise ValueError(f"unsupported output format '{fmt}'. Choices: {', '.join(FORMATS)}")
    canvas = render_view(ByteCursor.from_path(path))
    if canvas.width == 0 or canvas.height == 0:
        raise CorruptResource(f"{Path(path).name}: view contains no pixels")
    out = Path(dest) if dest is not None else default_dest(path, fmt)
    canvas.to_image().save(str(out), format=_PIL_FORMATS[fmt])
    return out


def convert_views(paths: Iterable[str | Path], outdir: str | Path | None = None,
                  fmt: str = DEFAULT_FORMAT) -> list[ConversionResult]:
    """Convert several View files; one failure never stops the others."""
    fmt = fmt.lower()
    if outdir:
        Path(outdir).mkdir(parents=True, exist_ok=True)
    results: list[ConversionResult] = []
    for p in (Path(p) for p in paths):
        result = ConversionResult(source=p)
        try:
            result.dest = convert_view(p, default_dest(p, fmt, outdir), fmt)
        except (ValueError, OSError) as exc:
            result.error = exc
        results.append(result)
    return results
