#!/usr/bin/env python
"""Generate the supported charsets RST table from the registry."""

from __future__ import annotations

from filecharset.pipeline.orchestrator import DETECTORS
from filecharset.registry import REGISTRY


def main() -> None:
    """Print the supported charsets RST table to stdout."""
    detectable = {
        charset for detector in DETECTORS for charset in detector.supported_charsets
    }
    print("Supported Charsets")
    print("==================")
    print()
    print(f"filecharset can name **{len(REGISTRY)} charsets** in mode lines.")
    print(f"**{len(detectable)}** of them are also recognized from content alone.")
    print()
    print(".. list-table::")
    print("   :header-rows: 1")
    print("   :widths: 25 15 40 10 10")
    print()
    print("   * - Charset")
    print("     - Python codec")
    print("     - Aliases")
    print("     - Multi-byte")
    print("     - Detected")
    for charset in sorted(REGISTRY, key=lambda c: c.name.lower()):
        aliases = ", ".join(charset.aliases) if charset.aliases else "\u2014"
        mb = "Yes" if charset.is_multibyte else "No"
        detected = "Yes" if charset in detectable else "No"
        print(f"   * - {charset.name}")
        print(f"     - ``{charset.python_codec}``")
        print(f"     - {aliases}")
        print(f"     - {mb}")
        print(f"     - {detected}")
    print()


if __name__ == "__main__":
    main()
