"""Pipeline orchestrator: runs all detection stages in sequence."""

from __future__ import annotations

import logging
import os

from filecharset.enums import DetectionPass, DetectionStatus, DetectorKind
from filecharset.pipeline import DetectionResult, Detector
from filecharset.pipeline.ascii import detect_ascii
from filecharset.pipeline.binary import is_binary_file
from filecharset.pipeline.chinese import CHINESE_CHARSETS, detect_chinese
from filecharset.pipeline.modeline import detect_mode_line
from filecharset.pipeline.utf8 import detect_utf8
from filecharset.pipeline.utf16 import detect_utf16_be, detect_utf16_le
from filecharset.registry import (
    ISO_8859_1,
    US_ASCII,
    UTF_8,
    UTF_16BE,
    UTF_16LE,
    Charset,
)

_LOGGER = logging.getLogger(__name__)

#: Charset assumed for text files none of the detectors recognizes.  It maps
#: every byte value to a character, so decoding with it never fails.
DEFAULT_CHARSET: Charset = ISO_8859_1

# The order is load-bearing: the first detector to report a charset wins.
# UTF-8 must run after the whole UTF-16 family: UTF-16 text restricted to
# Basic Latin and Latin-1 Supplement can also be structurally valid UTF-8,
# so running UTF-8 first would steal correct UTF-16 detections.
DETECTORS: tuple[Detector, ...] = (
    Detector(DetectorKind.MODE_LINE, (), detect_mode_line),
    Detector(DetectorKind.ASCII, (US_ASCII,), detect_ascii),
    Detector(DetectorKind.UTF16_BE, (UTF_16BE,), detect_utf16_be),
    Detector(DetectorKind.UTF16_LE, (UTF_16LE,), detect_utf16_le),
    Detector(DetectorKind.UTF8, (UTF_8,), detect_utf8),
    Detector(DetectorKind.CHINESE, CHINESE_CHARSETS, detect_chinese),
)

# Cheap byte-order-mark checks first; full decodes only when those fail.
_ALL_PASSES: tuple[DetectionPass, ...] = (
    DetectionPass.METADATA_ONLY,
    DetectionPass.CONTENT_SCAN,
)


def run_pass(
    path: str | os.PathLike[str],
    detection_pass: DetectionPass,
    logger: logging.Logger = _LOGGER,
) -> Charset | None:
    """Run every detector once, in order, and return the first charset found.

    Detectors after the first success are never invoked.
    """
    for detector in DETECTORS:
        charset = detector.detect(path, detection_pass, logger)
        if charset is not None:
            logger.debug(
                "%s: %s detected by %s (%s pass)",
                path,
                charset,
                detector.kind.value,
                detection_pass.value,
            )
            return charset
    return None


def run_pipeline(
    path: str | os.PathLike[str],
    read_content: bool = False,
    logger: logging.Logger = _LOGGER,
) -> Charset | None:
    """Detect the charset of *path*.

    The metadata-only pass runs first; the content pass runs only if it
    found nothing.  With *read_content* the metadata pass is skipped.

    :param path: The file to examine.
    :param read_content: Go straight to the content pass.
    :param logger: Sink for diagnostics.
    :returns: The detected charset, or ``None`` if it is undetermined.
    """
    passes = (DetectionPass.CONTENT_SCAN,) if read_content else _ALL_PASSES
    for detection_pass in passes:
        charset = run_pass(path, detection_pass, logger)
        if charset is not None:
            return charset
    logger.debug("%s: charset undetermined", path)
    return None


def resolve_default(
    path: str | os.PathLike[str],
    read_content: bool = False,
    logger: logging.Logger = _LOGGER,
) -> DetectionResult:
    """Detect the charset of *path*, falling back to :data:`DEFAULT_CHARSET`.

    The fallback applies to text files only: if nothing was detected and the
    file contains binary control bytes, the result is
    :attr:`DetectionStatus.BINARY` with no charset.  *read_content* is passed
    on to :func:`run_pipeline`.
    """
    charset = run_pipeline(path, read_content, logger)
    if charset is not None:
        return DetectionResult(charset, DetectionStatus.DETECTED)
    try:
        binary = is_binary_file(path)
    except OSError:
        logger.warning("When reading file: %s", path, exc_info=True)
        return DetectionResult(None, DetectionStatus.UNDETERMINED)
    if binary:
        return DetectionResult(None, DetectionStatus.BINARY)
    return DetectionResult(DEFAULT_CHARSET, DetectionStatus.DEFAULTED)
