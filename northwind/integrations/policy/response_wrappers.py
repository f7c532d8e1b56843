"""
Normalizers that reshape raw Northwind OData JSON into flat contract records.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from northwind.integrations.contracts.northwind import (
    CategoryDetail,
    CategoryProduct,
    CategorySummary,
    OrderLineItem,
    OrderSummary,
    ProductDetail,
    ProductOrder,
    strip_image_preamble,
    synthesize_email,
)
from northwind.utils.collation import locale_sorted


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


def collection_rows(raw: Any) -> List[Dict[str, Any]]:
    """Rows of an OData collection response (`{"value": [...]}`)."""
    if not isinstance(raw, dict) or not isinstance(raw.get("value"), list):
        raise IntegrationResponseError("Expected an OData collection with a 'value' list.", payload=_as_payload(raw))
    return raw["value"]


def normalize_order(raw: Dict[str, Any], details_raw: Any, *, email_domain: str) -> OrderSummary:
    customer = _nested(raw, "Customer")
    employee = _nested(raw, "Employee")
    last_name = _required(employee, "LastName")

    return OrderSummary(
        order_id=_required(raw, "OrderID"),
        order_date=raw.get("OrderDate"),
        required_date=raw.get("RequiredDate"),
        customer_name=customer.get("CompanyName"),
        contact_name=customer.get("ContactName"),
        contact_title=customer.get("ContactTitle"),
        customer_address=customer.get("Address"),
        customer_city=customer.get("City"),
        customer_region=customer.get("Region") or "",
        customer_postal_code=customer.get("PostalCode"),
        customer_phone=customer.get("Phone"),
        customer_country=customer.get("Country"),
        employee_id=employee.get("EmployeeID"),
        employee_name=f"{employee.get('FirstName')} {last_name}",
        employee_email=synthesize_email(str(last_name).lower(), email_domain),
        employee_title=f"{employee.get('Title')}",
        details=[normalize_order_line(item) for item in collection_rows(details_raw)],
    )


def normalize_order_line(raw: Dict[str, Any]) -> OrderLineItem:
    product = _nested(raw, "Product")
    category = _nested(product, "Category")
    supplier = _nested(product, "Supplier")

    return OrderLineItem(
        product_id=raw.get("ProductID"),
        product_name=product.get("ProductName"),
        category_name=category.get("CategoryName"),
        category_picture=strip_image_preamble(_required(category, "Picture")),
        quantity=raw.get("Quantity"),
        unit_price=raw.get("UnitPrice"),
        discount=raw.get("Discount"),
        supplier_name=supplier.get("CompanyName"),
        supplier_country=supplier.get("Country"),
    )


def normalize_category_summary(raw: Dict[str, Any]) -> CategorySummary:
    return CategorySummary(
        category_id=_required(raw, "CategoryID"),
        display_name=raw.get("CategoryName"),
        description=raw.get("Description"),
        picture=strip_image_preamble(_required(raw, "Picture")),
    )


def normalize_category(raw: Dict[str, Any], products_raw: Any) -> CategoryDetail:
    summary = normalize_category_summary(raw)
    products = [normalize_category_product(p) for p in collection_rows(products_raw)]

    return CategoryDetail(
        category_id=summary.category_id,
        display_name=summary.display_name,
        description=summary.description,
        picture=summary.picture,
        products=locale_sorted(products, key=lambda p: p.product_name),
    )


def normalize_category_product(raw: Dict[str, Any]) -> CategoryProduct:
    supplier = _nested(raw, "Supplier")

    return CategoryProduct(
        product_id=_required(raw, "ProductID"),
        product_name=raw.get("ProductName") or "",
        quantity_per_unit=raw.get("QuantityPerUnit"),
        unit_price=raw.get("UnitPrice"),
        units_in_stock=raw.get("UnitsInStock"),
        units_on_order=raw.get("UnitsOnOrder"),
        reorder_level=raw.get("ReorderLevel"),
        supplier_name=supplier.get("CompanyName"),
        supplier_country=supplier.get("Country"),
        discontinued=raw.get("Discontinued"),
    )


def normalize_product(raw: Dict[str, Any], order_details_raw: Any) -> ProductDetail:
    category = _nested(raw, "Category")
    supplier = _nested(raw, "Supplier")

    return ProductDetail(
        product_id=_required(raw, "ProductID"),
        product_name=raw.get("ProductName"),
        category_id=raw.get("CategoryID"),
        category_name=category.get("CategoryName"),
        quantity_per_unit=raw.get("QuantityPerUnit"),
        unit_price=raw.get("UnitPrice"),
        units_in_stock=raw.get("UnitsInStock"),
        units_on_order=raw.get("UnitsOnOrder"),
        reorder_level=raw.get("ReorderLevel"),
        supplier_name=supplier.get("CompanyName"),
        supplier_country=supplier.get("Country"),
        discontinued=raw.get("Discontinued"),
        orders=[normalize_product_order(d) for d in collection_rows(order_details_raw)],
    )


def normalize_product_order(raw: Dict[str, Any]) -> ProductOrder:
    order = _nested(raw, "Order")
    customer = _nested(order, "Customer")
    employee = _nested(order, "Employee")

    address = (
        f"{customer.get('Address')}, {customer.get('City')} "
        f"{customer.get('Region') or ''}, {customer.get('Country')}"
    )
    return ProductOrder(
        order_id=raw.get("OrderID"),
        order_date=order.get("OrderDate"),
        customer_id=customer.get("CustomerID"),
        customer_name=customer.get("CompanyName"),
        customer_address=address,
        employee_id=order.get("EmployeeID"),
        employee_name=f"{employee.get('FirstName')} {employee.get('LastName')}",
        quantity=raw.get("Quantity"),
        unit_price=raw.get("UnitPrice"),
        discount=raw.get("Discount"),
    )


def _nested(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if not isinstance(value, dict):
        raise IntegrationResponseError(f"Missing expanded entity '{key}'.", payload=data)
    return value


def _required(data: Dict[str, Any], key: str) -> Any:
    value = data.get(key)
    if value is None:
        raise IntegrationResponseError(f"Missing required field '{key}'.", payload=data)
    return value


def _as_payload(raw: Any) -> Dict[str, Any]:
    return raw if isinstance(raw, dict) else {"body": raw}
