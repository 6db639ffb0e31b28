"""Byte and line readers used by the detectors.

Every reader opens the file read-only inside a ``with`` block, so the handle
is released on every exit path, including a :exc:`UnicodeDecodeError` raised
halfway through a trial decode.
"""

from __future__ import annotations

import contextlib
import functools
import os
from collections.abc import Iterator
from pathlib import Path

from filecharset.registry import Charset

#: Size of the blocks read by byte-level scans.
DEFAULT_CHUNK_SIZE: int = 65_536


def file_size(path: str | os.PathLike[str]) -> int:
    """Return the size of *path* in bytes."""
    return Path(path).stat().st_size


def read_prefix(path: str | os.PathLike[str], size: int) -> bytes:
    """Return up to *size* leading bytes of *path*, undecoded."""
    with Path(path).open("rb") as f:
        return f.read(size)


@contextlib.contextmanager
def open_chunks(
    path: str | os.PathLike[str], chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[Iterator[bytes]]:
    """Yield an iterator over the raw content of *path* in fixed-size blocks."""
    with Path(path).open("rb") as f:
        yield iter(functools.partial(f.read, chunk_size), b"")


@contextlib.contextmanager
def open_lines(
    path: str | os.PathLike[str], charset: Charset
) -> Iterator[Iterator[str]]:
    """Yield a lazy iterator over the lines of *path* decoded as *charset*.

    Decoding is strict and streamed: malformed input surfaces as
    :exc:`UnicodeDecodeError` from the iterator at the point it is read.
    ``\\n``, ``\\r`` and ``\\r\\n`` all end a line; terminators are stripped.
    """
    with Path(path).open(
        "r", encoding=charset.python_codec, errors="strict", newline=None
    ) as f:
        yield (line.rstrip("\n") for line in f)


def count_lines(path: str | os.PathLike[str], charset: Charset) -> int:
    """Decode all of *path* as *charset* and return the number of lines.

    :raises UnicodeDecodeError: If the content is not valid in *charset*.
    :raises OSError: If the file cannot be read.
    """
    with open_lines(path, charset) as lines:
        return sum(1 for _ in lines)


def has_charset(path: str | os.PathLike[str], charset: Charset) -> bool:
    """Return True if *path* decodes cleanly as *charset* into at least one line.

    An empty file never tests positive: for empty content ASCII or UTF-8 is
    always the better answer than some exotic multi-byte charset.

    :raises OSError: If the file cannot be read.
    """
    try:
        return count_lines(path, charset) != 0
    except UnicodeDecodeError:
        return False
