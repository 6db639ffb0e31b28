"""Charset detection for source files, from their bytes alone."""

from __future__ import annotations

import logging
import os

from filecharset._utils import _resolve_logger, _validate_path
from filecharset.enums import DetectionPass, DetectionStatus
from filecharset.pipeline import DetectionResult
from filecharset.pipeline.binary import is_binary_file
from filecharset.pipeline.orchestrator import resolve_default, run_pipeline
from filecharset.registry import Charset, lookup_charset

__version__ = "1.0.0"
__all__ = [
    "Charset",
    "DetectionPass",
    "DetectionResult",
    "DetectionStatus",
    "charset_or_default",
    "charset_or_none",
    "detect",
    "is_binary_file",
    "lookup_charset",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def charset_or_none(
    path: str | os.PathLike[str],
    read_content: bool = False,
    logger: logging.Logger | None = None,
) -> Charset | None:
    """Return the charset of the file at *path*, or ``None``.

    ``None`` means the charset could not be determined, which includes
    binary files.  Read errors are logged and never raised.

    :param path: The file to examine.
    :param read_content: Skip the byte-order-mark pass and decode the content
        straight away.
    :param logger: Where diagnostics go.  Defaults to the ``filecharset``
        logger, which is silent unless logging is configured.
    """
    _validate_path(path)
    return run_pipeline(path, read_content, _resolve_logger(logger))


def charset_or_default(
    path: str | os.PathLike[str], logger: logging.Logger | None = None
) -> Charset | None:
    """Return the charset of the file at *path*, or ``None`` if it is binary.

    Text files no detector recognizes are assumed to be ISO-8859-1.
    """
    return detect(path, logger=logger).charset


def detect(
    path: str | os.PathLike[str],
    read_content: bool = False,
    logger: logging.Logger | None = None,
) -> DetectionResult:
    """Detect the charset of the file at *path*.

    :param read_content: Skip the byte-order-mark pass, as for
        :func:`charset_or_none`.  The ISO-8859-1 fallback still applies.
    :returns: A :class:`DetectionResult` whose status tells a detected
        charset from an assumed default, a binary file, or an unreadable one.
    """
    _validate_path(path)
    return resolve_default(path, read_content, _resolve_logger(logger))
