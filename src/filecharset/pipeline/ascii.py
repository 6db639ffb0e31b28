"""Stage: pure ASCII detection."""

from __future__ import annotations

import logging
import os

from filecharset.enums import DetectionPass
from filecharset.pipeline.binary import ALLOWED_ASCII
from filecharset.reader import open_chunks
from filecharset.registry import US_ASCII, Charset

_LOGGER = logging.getLogger(__name__)


def detect_ascii(
    path: str | os.PathLike[str],
    detection_pass: DetectionPass,
    logger: logging.Logger = _LOGGER,
) -> Charset | None:
    """Return US-ASCII if every byte of *path* is printable ASCII.

    ASCII has no byte-order mark, so nothing is reported in the metadata
    pass.  An empty file is ASCII.

    :param path: The file to examine.
    :param detection_pass: The current pipeline pass.
    :param logger: Sink for diagnostics.
    :returns: :data:`~filecharset.registry.US_ASCII`, or ``None``.
    """
    if detection_pass is not DetectionPass.CONTENT_SCAN:
        return None
    try:
        with open_chunks(path) as chunks:
            if any(chunk.translate(None, ALLOWED_ASCII) for chunk in chunks):
                return None
    except OSError:
        logger.warning("When reading file: %s", path, exc_info=True)
        return None
    return US_ASCII
