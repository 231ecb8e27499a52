"""
agiview – decode Sierra AGI View (sprite) resources into bitmaps.

Public API re-exports:

  from agiview.cursor  import ByteCursor
  from agiview.view    import Cel, Loop, View, parse_view, measure_view
  from agiview.cel     import decode_cel, decode_cel_indices
  from agiview.compose import Canvas, composite
  from agiview.convert import (read_view, view_to_image, convert_view,
                               convert_views, ConversionResult)
"""

from .errors   import ViewError, SourceUnavailable, OutOfBounds, CorruptResource
from .palette  import PALETTE, TRANSPARENT
from .cursor   import ByteCursor
from .view     import Cel, Loop, View, parse_view, measure_view, decode_info
from .cel      import decode_cel, decode_cel_indices
from .compose  import Canvas, composite
from .convert  import (
    ConversionResult,
    convert_view,
    convert_views,
    read_view,
    render_view,
    view_to_image,
)

__version__ = "1.0.0"

__all__ = [
    "ViewError", "SourceUnavailable", "OutOfBounds", "CorruptResource",
    "PALETTE", "TRANSPARENT",
    "ByteCursor",
    "Cel", "Loop", "View", "parse_view", "measure_view", "decode_info",
    "decode_cel", "decode_cel_indices",
    "Canvas", "composite",
    "ConversionResult", "convert_view", "convert_views",
    "read_view", "render_view", "view_to_image",
]
