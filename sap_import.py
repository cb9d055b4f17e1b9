"""
Thin wrapper around ``importers.sap_landscape_cli.main``.

This script lives at the project root to allow running the importer
directly via ``python sap_import.py --input SAPUILandscape.xml``.  By
delegating to the package implementation, fixes made in the canonical
CLI take effect regardless of whether you run this script or use
``python -m importers.sap_landscape_cli``.
"""
from __future__ import annotations

import sys


def main(argv=None) -> int:
    """Import and run the CLI implementation from the package."""
    from importers.sap_landscape_cli import main as cli_main

    return cli_main(argv)


if __name__ == "__main__":
    sys.exit(main())
