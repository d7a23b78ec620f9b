# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

"""Uniform readable, seekable, stringifiable views over strings and streams."""

from .buffer import Buffer
from .origin import InvalidArgumentError, Origin, OriginKind
from .source import ByteSource, StringSource
from .stream import Stream, open_uri

__all__ = [
    "Buffer",
    "ByteSource",
    "InvalidArgumentError",
    "Origin",
    "OriginKind",
    "Stream",
    "StringSource",
    "open_uri",
]
