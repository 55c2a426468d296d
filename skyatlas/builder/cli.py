"""
Command-line entry point for building the object database.

Example:
    skyatlas-build --hyg data/hyg_v42.csv --catalog data/catalog.txt \\
        --names data/names.dat --output data/skyatlas.sqlite
"""

import argparse
import logging
import sys
from typing import List, Optional

from .pipeline import CatalogBuildPipeline
from ..config import (
    DEFAULT_DATABASE_PATH, DEFAULT_DSO_CATALOG_PATH, DEFAULT_HYG_CATALOG_PATH, DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL, DEFAULT_NAMES_PATH
)
from ..exceptions import CatalogBuildError, SourceUnavailableError, StoreError

log = logging.getLogger(__name__)


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Build the SkyAtlas object database from HYG, Stellarium and SIMBAD',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--hyg', default=DEFAULT_HYG_CATALOG_PATH, help='Path to the HYG stellar catalog (CSV)')
    parser.add_argument('--catalog', default=DEFAULT_DSO_CATALOG_PATH, help='Path to the Stellarium catalog.txt')
    parser.add_argument('--names', default=DEFAULT_NAMES_PATH, help='Path to the Stellarium names.dat')
    parser.add_argument('--output', default=DEFAULT_DATABASE_PATH,
                        help='Output SQLite database path (any existing file is replaced)')
    parser.add_argument('--skip-clusters', action='store_true', help='Do not query SIMBAD for star clusters')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, run the build and report statistics.

    Returns:
        Process exit status: 0 on success, 1 on a fatal error
    """
    args = create_argument_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else getattr(logging, DEFAULT_LOG_LEVEL),
        format=DEFAULT_LOG_FORMAT
    )

    config = {
        'hyg_file': args.hyg,
        'catalog_file': args.catalog,
        'names_file': args.names,
        'output_path': args.output,
        'query_clusters': not args.skip_clusters,
    }

    try:
        pipeline = CatalogBuildPipeline(config)
        pipeline.run()

        stats = pipeline.get_statistics()
        log.info("Build completed successfully!")
        log.info(f"Final statistics: {stats}")
        return 0

    except SourceUnavailableError as e:
        log.error(f"Input catalog unavailable: {e}")
        return 1
    except StoreError as e:
        log.error(f"Database error: {e}")
        return 1
    except CatalogBuildError as e:
        log.error(f"Build failed: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
