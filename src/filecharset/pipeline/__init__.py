"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Callable

from filecharset.enums import DetectionPass, DetectionStatus, DetectorKind
from filecharset.registry import Charset

#: Signature shared by every detector: ``(path, detection_pass, logger)``.
DetectFunc = Callable[
    [str | os.PathLike[str], DetectionPass, logging.Logger], Charset | None
]


@dataclasses.dataclass(frozen=True, slots=True)
class Detector:
    """One stage of the pipeline.

    Detectors are stateless: the same instance may be called concurrently
    for different files.
    """

    kind: DetectorKind
    #: Charsets this detector can report, in the order it tries them.
    supported_charsets: tuple[Charset, ...]
    detect: DetectFunc


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionResult:
    """The composed outcome for a single file.

    ``charset`` is set for :attr:`DetectionStatus.DETECTED` and
    :attr:`DetectionStatus.DEFAULTED` and is ``None`` otherwise.
    """

    charset: Charset | None
    status: DetectionStatus

    def to_dict(self) -> dict[str, str | None]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'charset'`` and ``'status'`` keys.
        """
        return {
            "charset": self.charset.name if self.charset is not None else None,
            "status": self.status.value,
        }
