"""Enumerations for filecharset."""

import enum


class DetectionPass(enum.Enum):
    """How much of a file a detector is allowed to look at."""

    #: Fixed-size prefix inspection only (byte-order marks).
    METADATA_ONLY = "metadata-only"
    #: Full trial decode of the file content.
    CONTENT_SCAN = "content-scan"


class DetectorKind(enum.Enum):
    """The detector variants, one per pipeline stage."""

    MODE_LINE = "mode-line"
    ASCII = "ascii"
    UTF16_BE = "utf-16be"
    UTF16_LE = "utf-16le"
    UTF8 = "utf-8"
    CHINESE = "chinese"


class DetectionStatus(enum.Enum):
    """Outcome of the composed default resolution."""

    DETECTED = "detected"
    #: Nothing matched; the single-byte fallback charset was assumed.
    DEFAULTED = "defaulted"
    UNDETERMINED = "undetermined"
    BINARY = "binary"
