"""
Real HTTP integration clients.

These clients communicate with the Northwind OData service, e.g.:
- Orders with their customer, employee and line items
- Categories and their products
- Products with their purchase history

Important:
- Must return data shaped according to northwind/integrations/contracts/*
"""

from .odata_catalog import NorthwindCatalogClient
from .odata_query import build_odata_url, eq

__all__ = ["NorthwindCatalogClient", "build_odata_url", "eq"]
