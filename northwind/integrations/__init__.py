"""
Integrations layer.
This package contains the code that talks to the two Northwind data sources:
- the local JSON tables (employee profiles)
- the Northwind OData service (orders, categories, products)

Key rule:
- UI collaborators call the clients under northwind.integrations.clients;
  they never read table files or call the OData service themselves.
- Both clients return records shaped by northwind.integrations.contracts.
"""

from .contracts.northwind import (
    IMAGE_PREAMBLE_LENGTH,
    CategoryDetail,
    CategoryProduct,
    CategorySummary,
    EmployeeOrder,
    EmployeeProfile,
    OrderLineItem,
    OrderSummary,
    ProductDetail,
    ProductOrder,
    strip_image_preamble,
    synthesize_email,
    to_dict,
)

__all__ = [
    "IMAGE_PREAMBLE_LENGTH",
    # employees
    "EmployeeOrder", "EmployeeProfile",
    # orders
    "OrderLineItem", "OrderSummary",
    # categories / products
    "CategoryDetail", "CategoryProduct", "CategorySummary",
    "ProductDetail", "ProductOrder",
    # helpers
    "strip_image_preamble", "synthesize_email", "to_dict",
]
