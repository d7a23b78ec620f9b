# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Origin primitives shared by byte sources.

Minimal model of "where the bytes come from", with exactly two variants.

Intent:
  - Keep the variant explicit: every origin carries an `OriginKind` tag that
    is fixed when it is created.
  - Keep the cursor with the data: origins own their read position, the
    wrapping `ByteSource` only validates arguments and dispatches.

Defined here:
  - InvalidArgumentError: the single misuse error of the package.
  - OriginKind: memory/stream tag.
  - Origin: base class with hooks for reading, positioning and sizing.
"""

from __future__ import annotations

from enum import Enum


class InvalidArgumentError(ValueError):
    """Raised when a byte source is built or driven with an invalid argument."""


class OriginKind(str, Enum):
    """Kind of origin backing a byte source.

    MEMORY origins hold their bytes and know their length up front; STREAM
    origins pull from an external handle and resolve their length lazily.
    """

    MEMORY = "memory"
    STREAM = "stream"


class Origin:
    """Base origin with a read cursor.

    Responsibilities:
      - Return bounded chunks from the cursor (`read`).
      - Report and move the cursor (`tell`, `seek`).
      - Report the total length of the sequence (`size`).
      - Release whatever it holds (`close`).

    Subclasses assume their arguments were already validated.
    """

    kind: OriginKind

    def read(self, length: int) -> bytes:  # pragma: no cover - base hook
        raise NotImplementedError

    def tell(self) -> int:  # pragma: no cover - base hook
        raise NotImplementedError

    def seek(self, position: int) -> None:  # pragma: no cover - base hook
        raise NotImplementedError

    def size(self) -> int:  # pragma: no cover - base hook
        raise NotImplementedError

    def close(self) -> None:
        """Release the underlying resource. Nothing to do by default."""

    @property
    def closed(self) -> bool:
        return False
