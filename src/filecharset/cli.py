"""Command-line interface for filecharset."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import filecharset
from filecharset.enums import DetectionStatus


def _describe(path: Path, args: argparse.Namespace) -> str:
    if args.no_default:
        charset = filecharset.charset_or_none(path, read_content=args.content)
        return charset.name if charset is not None else "undetermined"
    result = filecharset.detect(path, read_content=args.content)
    if result.status is DetectionStatus.DETECTED:
        return result.charset.name
    if result.status is DetectionStatus.DEFAULTED:
        return result.charset.name if args.minimal else f"{result.charset} (default)"
    return result.status.value


def main(argv: list[str] | None = None) -> None:
    """Run the ``filecharset`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the character encoding of source files."
    )
    parser.add_argument("files", nargs="+", help="Files to detect the charset of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the charset name"
    )
    parser.add_argument(
        "--content",
        action="store_true",
        help="Skip byte-order-mark sniffing and decode the content directly",
    )
    parser.add_argument(
        "--no-default",
        action="store_true",
        help="Report 'undetermined' instead of assuming ISO-8859-1",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection diagnostics"
    )
    parser.add_argument(
        "--version", action="version", version=f"filecharset {filecharset.__version__}"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    for filepath in args.files:
        path = Path(filepath)
        if not path.is_file():
            print(f"filecharset: {filepath}: not a readable file", file=sys.stderr)
            continue
        description = _describe(path, args)
        if args.minimal:
            print(description)
        else:
            print(f"{filepath}: {description}")


if __name__ == "__main__":
    main()
