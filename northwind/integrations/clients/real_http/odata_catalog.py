"""
Northwind OData Catalogue HTTP Client.

Purpose:
- Reads orders, categories and products from the Northwind OData service
- Normalizes the nested OData JSON into flat contract records

Caching:
- Every resolved entity is memoized in-process by id (categories as one list)
- Entries never expire; there is no de-duplication of in-flight requests, so
  concurrent first calls for the same id each hit the service

Errors:
- Transport errors, non-2xx responses and malformed bodies propagate to the
  caller; nothing is cached for a failed call.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from northwind.integrations.clients.real_http.odata_query import build_odata_url, eq
from northwind.integrations.contracts.northwind import (
    CategoryDetail,
    CategorySummary,
    OrderSummary,
    ProductDetail,
)
from northwind.integrations.policy.response_wrappers import (
    collection_rows,
    normalize_category,
    normalize_category_summary,
    normalize_order,
    normalize_product,
)
from northwind.utils.memo_cache import COLLECTION_KEY, MemoCache

logger = logging.getLogger(__name__)

CATEGORY_FIELDS = ("CategoryID", "CategoryName", "Description", "Picture")
ORDER_DETAILS_LIMIT = 10

_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class NorthwindCatalogClient:
    def __init__(
        self,
        base_url: str,
        order_email_domain: str = "northwindtraders.com",
        client: Optional[httpx.AsyncClient] = None,
        timeout_seconds: float = 20.0,
    ) -> None:
        if not base_url:
            raise ValueError("Northwind OData service URL is not configured.")
        self.base_url = base_url.rstrip("/")
        self.order_email_domain = order_email_domain
        self.timeout_seconds = timeout_seconds
        self._client = client
        self._owns_client = client is None

        self.orders: MemoCache[OrderSummary] = MemoCache("orders")
        self.categories: MemoCache[List[CategorySummary]] = MemoCache("categories")
        self.category_details: MemoCache[CategoryDetail] = MemoCache("category")
        self.products: MemoCache[ProductDetail] = MemoCache("products")

    # --- HTTP -----------------------------------------------------------------

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout_seconds)
        return self._client

    async def _get_json(self, entity_set: str, key: Any = None, **options: Any) -> Any:
        url = build_odata_url(self.base_url, entity_set, key, **options)
        logger.debug("GET %s", url)
        response = await self._http().get(url, headers=_HEADERS)
        response.raise_for_status()
        return response.json()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "NorthwindCatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # --- Orders ---------------------------------------------------------------

    async def get_order(self, order_id: Any) -> OrderSummary:
        order_id = int(order_id)

        async def fetch() -> OrderSummary:
            order = await self._get_json("Orders", order_id, expand=("Customer", "Employee"))
            details = await self._get_json(
                "Order_Details",
                filter=eq("OrderID", order_id),
                top=ORDER_DETAILS_LIMIT,
                expand=("Product", "Product/Category", "Product/Supplier"),
            )
            return normalize_order(order, details, email_domain=self.order_email_domain)

        return await self.orders.get_or_fetch(order_id, fetch)

    # --- Categories -----------------------------------------------------------

    async def get_categories(self) -> List[CategorySummary]:
        async def fetch() -> List[CategorySummary]:
            raw = await self._get_json("Categories", select=CATEGORY_FIELDS)
            return [normalize_category_summary(row) for row in collection_rows(raw)]

        return await self.categories.get_or_fetch(COLLECTION_KEY, fetch)

    async def get_category(self, category_id: Any) -> CategoryDetail:
        category_id = int(category_id)

        async def fetch() -> CategoryDetail:
            category = await self._get_json("Categories", category_id, select=CATEGORY_FIELDS)
            products = await self._get_json(
                "Products",
                filter=eq("CategoryID", category_id),
                expand="Supplier",
            )
            return normalize_category(category, products)

        return await self.category_details.get_or_fetch(category_id, fetch)

    # --- Products -------------------------------------------------------------

    async def get_product(self, product_id: Any) -> ProductDetail:
        product_id = int(product_id)

        async def fetch() -> ProductDetail:
            product = await self._get_json("Products", product_id, expand=("Category", "Supplier"))
            order_details = await self._get_json(
                "Order_Details",
                filter=eq("ProductID", product_id),
                expand=("Order", "Order/Customer", "Order/Employee"),
            )
            return normalize_product(product, order_details)

        return await self.products.get_or_fetch(product_id, fetch)

    def cache_sizes(self) -> Dict[str, int]:
        return {
            "orders": len(self.orders),
            "categories": len(self.categories),
            "category": len(self.category_details),
            "products": len(self.products),
        }
