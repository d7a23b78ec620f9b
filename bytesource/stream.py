# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Stream origin over an external byte handle, plus URI opening."""

from __future__ import annotations

import io
import logging
import os
import stat
import urllib.parse
import urllib.request
from typing import BinaryIO

from .origin import InvalidArgumentError, Origin, OriginKind

logger = logging.getLogger(__name__)


class Stream(Origin):
    """Pull-based origin reading from a binary handle.

    The handle is read only on demand. Its length is resolved once, the first
    time it is needed:
      - regular files report their size from `os.fstat`;
      - other seekable streams are measured by seeking to the end and back;
      - anything else (pipes, sockets, request bodies) reports 0.

    Non-seekable handles keep their own cursor count, since `tell()` is not
    available on them.
    """

    kind = OriginKind.STREAM

    def __init__(
        self, handle: BinaryIO, close_handle: bool = True, owner: object | None = None
    ):
        self.handle = handle
        # Text wrappers close their binary buffer when collected.
        self.owner = owner
        self.close_handle = close_handle
        self._size: int | None = None
        self._seekable = _is_seekable(handle)
        self._pos = handle.tell() if self._seekable else 0

    @property
    def seekable(self) -> bool:
        return self._seekable

    def read(self, length: int) -> bytes:
        """Return up to `length` bytes from the handle and advance the cursor."""
        # Raw non-blocking handles answer None when no data is ready.
        chunk = self.handle.read(length) or b""
        self._pos += len(chunk)
        return chunk

    def tell(self) -> int:
        return self._pos

    def seek(self, position: int) -> None:
        if self._seekable:
            self.handle.seek(position)
        elif position != self._pos:
            raise io.UnsupportedOperation("stream is not seekable")
        self._pos = position

    def size(self) -> int:
        if self._size is None:
            self._size = self._resolve_size()
        return self._size

    def _resolve_size(self) -> int:
        try:
            info = os.fstat(self.handle.fileno())
        except (AttributeError, OSError, ValueError):
            info = None
        if info is not None and stat.S_ISREG(info.st_mode):
            logger.debug("size of %r from file metadata: %d", self.handle, info.st_size)
            return info.st_size

        if self._seekable:
            current = self.handle.tell()
            end = self.handle.seek(0, io.SEEK_END)
            self.handle.seek(current)
            logger.debug("size of %r from seeking to the end: %d", self.handle, end)
            return end

        logger.debug("%r reports no length, using 0", self.handle)
        return 0

    def close(self) -> None:
        closer = self.owner if self.owner is not None else self.handle
        close = getattr(closer, "close", None)
        if self.close_handle and callable(close) and not self.closed:
            logger.debug("closing %r", closer)
            close()

    @property
    def closed(self) -> bool:
        return bool(getattr(self.handle, "closed", False))


def _is_seekable(handle: object) -> bool:
    seekable = getattr(handle, "seekable", None)
    if not callable(seekable):
        return False
    try:
        return bool(seekable())
    except ValueError:  # closed file
        return False


def open_uri(uri: str) -> BinaryIO:
    """Open a path, `file://` URI or `data:` URI as a binary handle.

    The caller owns the returned handle.

    Raises:
        InvalidArgumentError: If the URI scheme is not supported.
        FileNotFoundError: If a path does not point to an existing file.
    """
    parsed = urllib.parse.urlparse(uri)
    if parsed.scheme == "data":
        # Inline content: decoding the URI is all there is to read.
        with urllib.request.urlopen(uri) as response:
            return io.BytesIO(response.read())

    if parsed.scheme == "file":
        path = urllib.request.url2pathname(parsed.path)
    elif not parsed.scheme or len(parsed.scheme) == 1 or os.path.exists(uri):
        # bare path, drive letter, or a relative name with a colon
        path = uri
    else:
        raise InvalidArgumentError(f"unsupported URI scheme: {parsed.scheme}")

    if not os.path.isfile(path):
        raise FileNotFoundError(f"resource does not exist: {uri}")
    return open(path, "rb")
