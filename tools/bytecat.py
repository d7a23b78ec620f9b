# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

from __future__ import annotations

import argparse
import logging
import sys

from bytesource.origin import InvalidArgumentError
from bytesource.source import ByteSource


def open_source(uri: str) -> ByteSource:
    if uri == "-":
        return ByteSource(sys.stdin.buffer, close_origin=False)
    return ByteSource.from_uri(uri)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the size, a byte range or the whole content of a source."
    )
    parser.add_argument("uri", help="Path, file:// or data: URI to read ('-' for stdin).")
    parser.add_argument(
        "--offset", type=int, default=0, help="Position to start reading from (default: 0)."
    )
    parser.add_argument(
        "--length",
        type=int,
        default=None,
        help="How many bytes to read (default: everything after the offset).",
    )
    parser.add_argument("--size", action="store_true", help="Only print the size in bytes.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        with open_source(args.uri) as source:
            if args.size:
                print(source.get_size())
                return 0
            if args.offset:
                source.seek(args.offset)
            out = sys.stdout.buffer
            if args.length is None:
                for chunk in source.chunks():
                    out.write(chunk)
            else:
                out.write(source.read(args.length))
            out.flush()
    except InvalidArgumentError as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1
    except OSError as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
