# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Uniform random-access view over a string or an open stream."""

from __future__ import annotations

import io
import operator
from collections.abc import Iterator
from typing import Any

from .buffer import Buffer
from .origin import InvalidArgumentError, Origin, OriginKind
from .stream import Stream, open_uri

DEFAULT_CHUNK_SIZE = 65_536


class ByteSource:
    """Readable, seekable, stringifiable byte sequence.

    Wraps either in-memory data (`str`, `bytes`, `bytearray`, `memoryview`)
    or a binary stream handle. Reads are bounded and best-effort: asking for
    more than what remains returns a shorter (possibly empty) result.

    A wrapped handle is owned by the source and closed by `close()` or on
    leaving a `with` block, unless `close_origin=False` is given.

    Materializing the whole content with `bytes(source)` or `str(source)`
    rewinds first and leaves the cursor at the end of the sequence.
    """

    def __init__(
        self,
        origin: Any,
        *,
        encoding: str = "utf-8",
        errors: str = "surrogateescape",
        close_origin: bool = True,
    ):
        self._origin = _make_origin(origin, encoding, errors, close_origin)
        self.encoding = encoding
        self.errors = errors

    @classmethod
    def from_uri(cls, uri: str, **kwargs: Any) -> ByteSource:
        """Open a path, `file://` or `data:` URI and wrap the resulting handle."""
        return cls(open_uri(uri), **kwargs)

    @property
    def kind(self) -> OriginKind:
        return self._origin.kind

    @property
    def closed(self) -> bool:
        return self._origin.closed

    @property
    def remaining(self) -> int:
        """Bytes left between the cursor and the end of the sequence."""
        return max(self.get_size() - self.tell(), 0)

    def read(self, length: int) -> bytes:
        """Return up to `length` bytes from the cursor and advance past them.

        Raises:
            InvalidArgumentError: If `length` is not positive or not an integer.
        """
        length = _as_int(length, "length")
        if length <= 0:
            raise InvalidArgumentError("length must be positive")
        return self._origin.read(length)

    def tell(self) -> int:
        return self._origin.tell()

    def seek(self, position: int) -> None:
        """Move the cursor to an absolute `position` within `[0, size]`.

        Raises:
            InvalidArgumentError: If `position` is outside the sequence or not an integer.
        """
        position = _as_int(position, "position")
        if position < 0 or position > self.get_size():
            raise InvalidArgumentError("position out of bounds")
        self._origin.seek(position)

    def rewind(self, offset: int = 0) -> None:
        """Move the cursor to `offset` bytes from the start.

        Offsets past the end land on the end of the sequence. A non-seekable
        stream that has already been read from cannot go back and raises
        `io.UnsupportedOperation`.

        Raises:
            InvalidArgumentError: If `offset` is negative or not an integer.
        """
        offset = _as_int(offset, "offset")
        if offset < 0:
            raise InvalidArgumentError("offset must not be negative")
        self._origin.seek(min(offset, self.get_size()))

    def get_size(self) -> int:
        return self._origin.size()

    def chunks(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        """Yield successive reads from the cursor until one comes back empty."""
        chunk_size = _as_int(chunk_size, "chunk size")
        if chunk_size <= 0:
            raise InvalidArgumentError("chunk size must be positive")
        while True:
            chunk = self._origin.read(chunk_size)
            if not chunk:
                return
            yield chunk

    def close(self) -> None:
        self._origin.close()

    def __enter__(self) -> ByteSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __bytes__(self) -> bytes:
        size = self.get_size()
        if not size:
            return b""
        self.seek(0)
        parts = []
        left = size
        while left:
            chunk = self.read(left)
            if not chunk:
                break
            parts.append(chunk)
            left -= len(chunk)
        return b"".join(parts)

    def __str__(self) -> str:
        return bytes(self).decode(self.encoding, self.errors)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} kind={self.kind.value} position={self.tell()}>"


StringSource = ByteSource


def _as_int(value: Any, name: str) -> int:
    try:
        return int(operator.index(value))
    except TypeError:
        raise InvalidArgumentError(
            f"{name} must be an integer, not {type(value).__name__}"
        ) from None


def _make_origin(
    origin: Any, encoding: str, errors: str, close_origin: bool
) -> Origin:
    if isinstance(origin, str):
        return Buffer(origin.encode(encoding, errors))
    if isinstance(origin, (bytes, bytearray, memoryview)):
        return Buffer(origin)
    if isinstance(origin, io.TextIOBase):
        binary = getattr(origin, "buffer", None)
        if binary is None:
            raise InvalidArgumentError(
                f"text stream without a binary buffer: {origin!r}"
            )
        return Stream(binary, close_handle=close_origin, owner=origin)
    if callable(getattr(origin, "read", None)):
        return Stream(origin, close_handle=close_origin)
    raise InvalidArgumentError(
        f"origin must be a string, bytes or a readable stream, not {type(origin).__name__}"
    )
