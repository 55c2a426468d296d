#!/usr/bin/env python
"""
SkyAtlas - offline astronomical object database builder

Rebuilds the SQLite object database from the HYG stellar catalog, the
Stellarium deep-sky catalog and SIMBAD star clusters.
"""

import sys

from skyatlas.builder.cli import main

__version__ = "1.0.0"

if __name__ == "__main__":
    try:
        sys.exit(main(sys.argv[1:]))
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)  # Standard exit code for SIGINT
