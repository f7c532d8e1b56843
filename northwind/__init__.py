"""
Northwind Traders data services.

This package wires together:
- database.table_store (local JSON tables + lookup indexes)
- integrations.clients.local (employee profiles from the local tables)
- integrations.clients.real_http (orders / categories / products from OData)
- utils.config_loader (YAML + environment configuration)
"""

from .dependencies import NorthwindServices, build_services

__all__ = ["NorthwindServices", "build_services"]
