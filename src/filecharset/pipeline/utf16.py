"""Stage: UTF-16 detection, big- and little-endian.

In the metadata pass only the byte-order mark is checked.  In the content
pass the whole file is decoded and every character is classified by Unicode
block: text that is really UTF-16 stays within a handful of blocks, whereas
arbitrary bytes decoded as UTF-16 scatter across many.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Literal

from filecharset.enums import DetectionPass
from filecharset.reader import file_size, open_lines, read_prefix
from filecharset.registry import UTF_16BE, UTF_16LE, Charset
from filecharset.unicode_blocks import block_of

_LOGGER = logging.getLogger(__name__)

_BOM: int = 0xFEFF
_BOM_LENGTH = 2

#: Unicode blocks commonly present in source code files.
ALLOWED_UNICODE_BLOCKS: frozenset[str] = frozenset(
    {
        "Basic Latin",
        "Latin-1 Supplement",
        "Box Drawing",
        "Greek and Coptic",
        "Mathematical Operators",
        "Supplemental Mathematical Operators",
        "Arrows",
        "Letterlike Symbols",
    }
)

#: How many blocks outside :data:`ALLOWED_UNICODE_BLOCKS` a file may use
#: before the UTF-16 hypothesis is rejected.  Locale-specific text usually
#: adds a single block (e.g. Cyrillic); Chinese without a BOM adds three:
#: CJK Symbols and Punctuation, CJK Unified Ideographs, and Halfwidth and
#: Fullwidth Forms.
EXTRA_UNICODE_BLOCK_LIMIT = 3

# Every code point below U+0100 is in Basic Latin or Latin-1 Supplement.
_ALWAYS_ALLOWED_BELOW = 0x100


def detect_utf16_be(
    path: str | os.PathLike[str],
    detection_pass: DetectionPass,
    logger: logging.Logger = _LOGGER,
) -> Charset | None:
    """Return UTF-16BE if *path* looks like big-endian UTF-16."""
    return _detect_utf16(path, detection_pass, UTF_16BE, "big", logger)


def detect_utf16_le(
    path: str | os.PathLike[str],
    detection_pass: DetectionPass,
    logger: logging.Logger = _LOGGER,
) -> Charset | None:
    """Return UTF-16LE if *path* looks like little-endian UTF-16."""
    return _detect_utf16(path, detection_pass, UTF_16LE, "little", logger)


def _detect_utf16(
    path: str | os.PathLike[str],
    detection_pass: DetectionPass,
    charset: Charset,
    byteorder: Literal["big", "little"],
    logger: logging.Logger,
) -> Charset | None:
    try:
        if detection_pass is DetectionPass.CONTENT_SCAN:
            found = has_utf16_content(path, charset, logger)
        else:
            found = has_utf16_bom(path, byteorder)
    except OSError:
        logger.warning("When reading file: %s", path, exc_info=True)
        return None
    return charset if found else None


def has_utf16_bom(
    path: str | os.PathLike[str], byteorder: Literal["big", "little"]
) -> bool:
    """Return True if the first code unit of *path* in *byteorder* is U+FEFF.

    :raises OSError: If the file cannot be read.
    """
    if file_size(path) < _BOM_LENGTH:
        return False
    head = read_prefix(path, _BOM_LENGTH)
    return len(head) == _BOM_LENGTH and int.from_bytes(head, byteorder) == _BOM


def has_utf16_content(
    path: str | os.PathLike[str],
    charset: Charset,
    logger: logging.Logger = _LOGGER,
) -> bool:
    """Return True if *path* decodes as *charset* into plausible text.

    The decode stops early as soon as more than
    :data:`EXTRA_UNICODE_BLOCK_LIMIT` unexpected blocks have been seen.

    :raises OSError: If the file cannot be read.
    """
    t0 = time.perf_counter()
    line_count = 0
    char_count = 0
    extra_blocks: set[str] = set()
    try:
        with open_lines(path, charset) as lines:
            for line in lines:
                line_count += 1
                char_count += len(line)
                for char in set(line):
                    if ord(char) < _ALWAYS_ALLOWED_BELOW:
                        continue
                    block = block_of(char)
                    if block in ALLOWED_UNICODE_BLOCKS:
                        continue
                    extra_blocks.add(block)
                    if len(extra_blocks) > EXTRA_UNICODE_BLOCK_LIMIT:
                        logger.debug(
                            "%s: rejecting %s; unexpected Unicode blocks: %s",
                            path,
                            charset,
                            sorted(extra_blocks),
                        )
                        return False
    except UnicodeDecodeError:
        return False
    finally:
        logger.debug(
            "%s: testing for %s; %d line(s) read; %d char(s) processed in %.3f ms.",
            path,
            charset,
            line_count,
            char_count,
            (time.perf_counter() - t0) * 1000,
        )
    return True
