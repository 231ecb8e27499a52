"""
agiview.cursor — bounds-checked little-endian reader over an in-memory blob.

Every table-driven seek/read in the parser and decoder goes through a
ByteCursor, so a truncated or hostile file raises OutOfBounds instead of
reading garbage.
"""
from __future__ import annotations

import struct
from pathlib import Path

from .errors import OutOfBounds, SourceUnavailable


class ByteCursor:
    def __init__(self, data: bytes | bytearray) -> None:
        self._data = bytes(data)
        self._pos  = 0

    @classmethod
    def from_path(cls, path: str | Path) -> "ByteCursor":
        """Read *path* into memory; any OS-level failure becomes SourceUnavailable."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise SourceUnavailable(f"could not open view file '{path}': {exc.strerror or exc}") from exc
        return cls(data)

    def __len__(self) -> int:
        return len(self._data)

    def tell(self) -> int:
        return self._pos

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def seek(self, offset: int) -> None:
        if offset < 0 or offset > len(self._data):
            raise OutOfBounds(
                f"seek to {offset:#06x} outside source of {len(self._data)} bytes"
            )
        self._pos = offset

    def _take(self, n: int) -> int:
        start = self._pos
        if start + n > len(self._data):
            raise OutOfBounds(
                f"read of {n} byte(s) at {start:#06x} past end of source "
                f"({len(self._data)} bytes)"
            )
        self._pos = start + n
        return start

    def read_u8(self) -> int:
        return self._data[self._take(1)]

    def read_u16_le(self) -> int:
        value, = struct.unpack_from("<H", self._data, self._take(2))
        return value
