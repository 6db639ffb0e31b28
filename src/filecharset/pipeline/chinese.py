"""Stage: Chinese multi-byte charsets, by trial decode."""

from __future__ import annotations

import logging
import os

from filecharset.enums import DetectionPass
from filecharset.reader import has_charset
from filecharset.registry import Charset, supported_charsets

_LOGGER = logging.getLogger(__name__)

#: Candidates in trial order.  Earlier charsets are mostly subsets of later
#: ones (not Big5), so the narrowest charset that decodes the file wins.
CANDIDATE_NAMES: tuple[str, ...] = (
    # The original standard, dated 1980 (a.k.a. EUC-CN).
    "GB2312",
    # Extension of GB2312, established in 1993 and standardized in 1995.
    "GBK",
    # Microsoft's GBK, from Windows 95 and NT 3.51; adds the euro sign at 0x80.
    "x-mswin-936",
    # Extension of GBK, dated 2000.
    "GB18030",
    # Traditional Chinese (zh_TW, zh_HK), dated 1984.
    "Big5",
)

#: Candidates the host interpreter can actually decode, resolved once.
CHINESE_CHARSETS: tuple[Charset, ...] = supported_charsets(CANDIDATE_NAMES)


def detect_chinese(
    path: str | os.PathLike[str],
    detection_pass: DetectionPass,
    logger: logging.Logger = _LOGGER,
) -> Charset | None:
    """Return the first Chinese charset that decodes all of *path*.

    There is no byte-order mark for these charsets, so nothing is reported
    in the metadata pass.
    """
    if detection_pass is not DetectionPass.CONTENT_SCAN:
        return None
    try:
        for charset in CHINESE_CHARSETS:
            if has_charset(path, charset):
                return charset
    except OSError:
        logger.warning("When reading file: %s", path, exc_info=True)
    return None
