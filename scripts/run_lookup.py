#!/usr/bin/env python3
"""
Look up Northwind records from the terminal.

  python scripts/run_lookup.py employee 3          # local tables
  python scripts/run_lookup.py order 10248         # OData service
  python scripts/run_lookup.py categories
  python scripts/run_lookup.py category 1
  python scripts/run_lookup.py product 11
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).parent.parent))

try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass  # run without .env if python-dotenv not installed

from northwind.dependencies import build_services
from northwind.error_handler import ErrorHandler
from northwind.integrations.contracts.northwind import to_dict

IMAGE_FIELDS = {"photo", "picture", "category_picture"}


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def _abbreviate(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            k: (f"<{len(v)} chars>" if k in IMAGE_FIELDS and isinstance(v, str) else _abbreviate(v))
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [_abbreviate(v) for v in value]
    return value


async def run(args) -> Any:
    async with build_services(config_path=args.config) as services:
        if args.command == "employee":
            return services.employees.get_employee(args.id)
        if args.command == "order":
            return await services.catalog.get_order(args.id)
        if args.command == "categories":
            return await services.catalog.get_categories()
        if args.command == "category":
            return await services.catalog.get_category(args.id)
        return await services.catalog.get_product(args.id)


def main() -> int:
    parser = argparse.ArgumentParser(description="Look up Northwind employees, orders, categories and products")
    parser.add_argument("--config", type=Path, default=None, help="Path to northwind_config.yml")
    parser.add_argument("--full", action="store_true", help="Print image fields in full")
    parser.add_argument("--verbose", "-v", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)
    for name in ("employee", "order", "category", "product"):
        sub.add_parser(name).add_argument("id")
    sub.add_parser("categories")
    args = parser.parse_args()

    setup_logging(args.verbose)

    try:
        result = asyncio.run(run(args))
    except Exception as exc:
        payload = ErrorHandler().handle_exception(exc, context={"command": args.command, "id": getattr(args, "id", None)})
        print(payload["message"], file=sys.stderr)
        return 1

    data = [to_dict(r) for r in result] if isinstance(result, list) else to_dict(result)
    if not args.full:
        data = _abbreviate(data)
    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
