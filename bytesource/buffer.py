# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""In-memory origin: a byte string with a read cursor."""

from __future__ import annotations

from .origin import Origin, OriginKind


class Buffer(Origin):
    """Immutable bytes plus a cursor."""

    kind = OriginKind.MEMORY

    def __init__(self, data: bytes | bytearray | memoryview):
        self._data = bytes(data)
        self._pos = 0

    def read(self, length: int) -> bytes:
        """Return up to `length` bytes and advance the cursor."""
        end = min(self._pos + length, len(self._data))
        chunk = self._data[self._pos : end]
        self._pos += len(chunk)
        return chunk

    def tell(self) -> int:
        return self._pos

    def seek(self, position: int) -> None:
        self._pos = position

    def size(self) -> int:
        return len(self._data)
