"""Internal shared utilities for filecharset."""

from __future__ import annotations

import logging
import os


def _validate_path(path: object) -> None:
    """Raise TypeError if *path* is not a str or path-like object."""
    if isinstance(path, bytes) or not isinstance(path, (str, os.PathLike)):
        msg = f"path must be a str or os.PathLike, not {type(path).__name__}"
        raise TypeError(msg)


def _resolve_logger(logger: logging.Logger | None) -> logging.Logger:
    """Return *logger*, or the package logger when it is ``None``."""
    if logger is None:
        return logging.getLogger("filecharset")
    return logger
