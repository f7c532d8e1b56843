"""
Download Northwind tables from the OData service into the local table store format.

Each table is written to `<directory>/<Table>.json` as `{"<Table>": [row, ...]}`,
which is what TableStore reads.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TABLES = ("Employees", "Orders", "Customers")

_HEADERS = {"Accept": "application/json"}


async def download_table(
    client: httpx.AsyncClient,
    base_url: str,
    table_name: str,
    max_pages: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Fetch every row of an entity set, following `@odata.nextLink` paging."""
    base = httpx.URL(base_url.rstrip("/") + "/")
    url = base.join(table_name)
    rows: List[Dict[str, Any]] = []
    pages = 0

    while url is not None:
        response = await client.get(url, headers=_HEADERS)
        response.raise_for_status()
        body = response.json()
        rows.extend(body.get("value") or [])
        pages += 1

        next_link = body.get("@odata.nextLink")
        if not next_link or (max_pages is not None and pages >= max_pages):
            url = None
        else:
            url = base.join(next_link)
            logger.debug("%s: following next link %s", table_name, url)

    logger.info("Downloaded %s: %d rows in %d page(s)", table_name, len(rows), pages)
    return rows


def write_table(directory: Path, table_name: str, rows: List[Dict[str, Any]]) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{table_name}.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump({table_name: rows}, f, ensure_ascii=False, indent=2)
    return path


async def download_database(
    base_url: str,
    directory: Path,
    tables: Sequence[str] = DEFAULT_TABLES,
    client: Optional[httpx.AsyncClient] = None,
    timeout_seconds: float = 60.0,
) -> Dict[str, int]:
    """Download each table and return a {table: row count} summary."""
    owns_client = client is None
    http = client or httpx.AsyncClient(timeout=timeout_seconds)
    summary: Dict[str, int] = {}
    try:
        for table_name in tables:
            rows = await download_table(http, base_url, table_name)
            path = write_table(directory, table_name, rows)
            logger.info("Wrote %s", path)
            summary[table_name] = len(rows)
    finally:
        if owns_client:
            await http.aclose()
    return summary
