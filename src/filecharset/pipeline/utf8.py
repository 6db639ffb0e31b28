"""Stage: UTF-8 detection.

No Unicode block heuristic is applied here: this stage always runs after the
UTF-16 family, which has already claimed anything that decodes as UTF-16.
"""

from __future__ import annotations

import logging
import os
import time

from filecharset.enums import DetectionPass
from filecharset.reader import count_lines, file_size, read_prefix
from filecharset.registry import UTF_8, Charset

_LOGGER = logging.getLogger(__name__)

_BOM: bytes = b"\xef\xbb\xbf"


def detect_utf8(
    path: str | os.PathLike[str],
    detection_pass: DetectionPass,
    logger: logging.Logger = _LOGGER,
) -> Charset | None:
    """Return UTF-8 if *path* has a UTF-8 BOM or decodes cleanly as UTF-8.

    :param path: The file to examine.
    :param detection_pass: The current pipeline pass.
    :param logger: Sink for diagnostics.
    :returns: :data:`~filecharset.registry.UTF_8`, or ``None``.
    """
    try:
        if detection_pass is DetectionPass.CONTENT_SCAN:
            found = has_utf8_content(path, logger)
        else:
            found = has_utf8_bom(path)
    except OSError:
        logger.warning("When reading file: %s", path, exc_info=True)
        return None
    return UTF_8 if found else None


def has_utf8_bom(path: str | os.PathLike[str]) -> bool:
    """Return True if *path* starts with ``EF BB BF``."""
    if file_size(path) < len(_BOM):
        return False
    return read_prefix(path, len(_BOM)) == _BOM


def has_utf8_content(
    path: str | os.PathLike[str], logger: logging.Logger = _LOGGER
) -> bool:
    """Return True if all of *path* decodes as UTF-8."""
    t0 = time.perf_counter()
    try:
        line_count = count_lines(path, UTF_8)
    except UnicodeDecodeError:
        return False
    logger.debug(
        "%s: testing for %s; %d line(s) read in %.3f ms.",
        path,
        UTF_8,
        line_count,
        (time.perf_counter() - t0) * 1000,
    )
    return True
