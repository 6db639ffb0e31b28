"""Byte and character classifiers: printable ASCII versus binary."""

from __future__ import annotations

import os

from filecharset.reader import open_chunks

# Control codes that may legitimately appear in text: BEL, BS, HT, LF, VT,
# FF, CR and ESC.
_ALLOWED_CONTROL_CODES: frozenset[int] = frozenset(
    {0x07, 0x08, 0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x1B}
)

# Bytes that mark a file as binary: everything below 0x20 except the allowed
# control codes.  bytes.translate deletes these, so a length change means
# at least one was present.
_BINARY_DELETE: bytes = bytes(
    b for b in range(0x20) if b not in _ALLOWED_CONTROL_CODES
)

# Bytes a pure-ASCII file may contain: the allowed control codes plus
# printable ASCII (0x20-0x7E).
ALLOWED_ASCII: bytes = bytes(sorted(_ALLOWED_CONTROL_CODES)) + bytes(
    range(0x20, 0x7F)
)


def is_printable_ascii(char: str) -> bool:
    """Return True if *char* is printable ASCII or an allowed control code."""
    code_point = ord(char)
    return code_point in _ALLOWED_CONTROL_CODES or 0x20 <= code_point <= 0x7E


def is_binary_byte(byte: int) -> bool:
    """Return True if *byte* is a control code that never appears in text."""
    byte &= 0xFF
    return byte < 0x20 and byte not in _ALLOWED_CONTROL_CODES


def is_binary_file(path: str | os.PathLike[str]) -> bool:
    """Return True if any byte of *path* is a binary control code.

    UTF-16 files almost always test positive here (Latin text has a NUL in
    every code unit), so the UTF-16 detectors must run before anything that
    relies on this check.

    :raises OSError: If the file cannot be read.
    """
    with open_chunks(path) as chunks:
        return any(
            len(chunk.translate(None, _BINARY_DELETE)) != len(chunk)
            for chunk in chunks
        )
