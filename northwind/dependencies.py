"""
Service wiring for the Northwind data layer.

Build the services once at startup and close them at shutdown:

    services = build_services()
    try:
        profile = services.employees.get_employee(3)
        order = await services.catalog.get_order(10248)
    finally:
        await services.aclose()
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import httpx

from northwind.database.table_store import TableStore
from northwind.integrations.clients.local.employee_directory import EmployeeDirectory
from northwind.integrations.clients.real_http.odata_catalog import NorthwindCatalogClient
from northwind.utils.config_loader import NorthwindConfig, load_northwind_config

logger = logging.getLogger(__name__)


@dataclass
class NorthwindServices:
    config: NorthwindConfig
    store: TableStore
    employees: EmployeeDirectory
    catalog: NorthwindCatalogClient

    async def aclose(self) -> None:
        await self.catalog.aclose()
        self.store.close()
        logger.info("Northwind services closed")

    async def __aenter__(self) -> "NorthwindServices":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def build_services(
    config: Optional[NorthwindConfig] = None,
    *,
    config_path: Optional[Path] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> NorthwindServices:
    cfg = config or load_northwind_config(config_path)

    store = TableStore(cfg.data.resolve_directory())
    employees = EmployeeDirectory(store, email_domain=cfg.data.email_domain)
    catalog = NorthwindCatalogClient(
        base_url=cfg.odata.service_url,
        order_email_domain=cfg.odata.order_email_domain,
        client=http_client,
        timeout_seconds=cfg.odata.timeout_seconds,
    )
    logger.info("Northwind services ready (tables in %s, OData at %s)", store.directory, catalog.base_url)
    return NorthwindServices(config=cfg, store=store, employees=employees, catalog=catalog)
