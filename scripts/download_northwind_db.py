#!/usr/bin/env python3
"""
Download a fresh copy of the Northwind tables used by the local table store.

Writes one <Table>.json per table into the configured db_directory
(default: northwindDB/).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from northwind.database.downloader import DEFAULT_TABLES, download_database
from northwind.utils.config_loader import load_northwind_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main() -> int:
    parser = argparse.ArgumentParser(description="Download Northwind tables into local JSON files")
    parser.add_argument("--config", type=Path, default=None, help="Path to northwind_config.yml (default: config/northwind_config.yml)")
    parser.add_argument("--output-dir", type=Path, default=None, help="Override the configured db_directory")
    parser.add_argument("--tables", nargs="+", default=list(DEFAULT_TABLES), help="Entity sets to download")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    load_dotenv()
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    cfg = load_northwind_config(args.config)
    directory = args.output_dir or cfg.data.resolve_directory()

    summary = asyncio.run(download_database(cfg.odata.service_url, directory, tables=args.tables))
    for table_name, count in summary.items():
        logger.info("%s: %s rows", table_name, count)
    logger.info("Northwind tables written to %s", directory)
    return 0


if __name__ == "__main__":
    sys.exit(main())
