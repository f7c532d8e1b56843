from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

"""
Northwind domain record contracts.

Flat, UI-shaped projections of one source row joined with 1-2 related rows.
These contracts must be used by both:
- clients/local/employee_directory.py (local JSON tables)
- clients/real_http/odata_catalog.py (Northwind OData service)
"""

# Northwind image blobs carry a fixed-size OLE header ahead of the actual
# base64 image data. It is always 104 characters in this dataset.
IMAGE_PREAMBLE_LENGTH = 104


# ---------------------------------------------------------------------------
# Employees (local tables)
# ---------------------------------------------------------------------------

@dataclass
class EmployeeOrder:
    order_id: int
    order_date: Optional[str]
    customer_id: str
    customer_name: Optional[str]
    customer_contact: Optional[str]
    customer_phone: Optional[str]
    ship_name: Optional[str]
    ship_address: Optional[str]
    ship_city: Optional[str]
    ship_region: Optional[str]
    ship_postal_code: Optional[str]
    ship_country: Optional[str]


@dataclass
class EmployeeProfile:
    id: int
    display_name: str
    mail: str
    photo: str
    job_title: Optional[str]
    city: str
    orders: List[EmployeeOrder] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Orders (OData)
# ---------------------------------------------------------------------------

@dataclass
class OrderLineItem:
    product_id: Optional[int]
    product_name: Optional[str]
    category_name: Optional[str]
    category_picture: str
    quantity: Optional[int]
    unit_price: Optional[float]
    discount: Optional[float]
    supplier_name: Optional[str]
    supplier_country: Optional[str]


@dataclass
class OrderSummary:
    order_id: int
    order_date: Optional[str]
    required_date: Optional[str]
    customer_name: Optional[str]
    contact_name: Optional[str]
    contact_title: Optional[str]
    customer_address: Optional[str]
    customer_city: Optional[str]
    customer_region: str
    customer_postal_code: Optional[str]
    customer_phone: Optional[str]
    customer_country: Optional[str]
    employee_id: Optional[int]
    employee_name: str
    employee_email: str
    employee_title: str
    details: List[OrderLineItem] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Categories and products (OData)
# ---------------------------------------------------------------------------

@dataclass
class CategorySummary:
    category_id: int
    display_name: Optional[str]
    description: Optional[str]
    picture: str


@dataclass
class CategoryProduct:
    product_id: int
    product_name: str
    quantity_per_unit: Optional[str]
    unit_price: Optional[float]
    units_in_stock: Optional[int]
    units_on_order: Optional[int]
    reorder_level: Optional[int]
    supplier_name: Optional[str]
    supplier_country: Optional[str]
    discontinued: Optional[bool]


@dataclass
class CategoryDetail:
    category_id: int
    display_name: Optional[str]
    description: Optional[str]
    picture: str
    products: List[CategoryProduct] = field(default_factory=list)


@dataclass
class ProductOrder:
    order_id: Optional[int]
    order_date: Optional[str]
    customer_id: Optional[str]
    customer_name: Optional[str]
    customer_address: str
    employee_id: Optional[int]
    employee_name: str
    quantity: Optional[int]
    unit_price: Optional[float]
    discount: Optional[float]


@dataclass
class ProductDetail:
    product_id: int
    product_name: Optional[str]
    category_id: Optional[int]
    category_name: Optional[str]
    quantity_per_unit: Optional[str]
    unit_price: Optional[float]
    units_in_stock: Optional[int]
    units_on_order: Optional[int]
    reorder_level: Optional[int]
    supplier_name: Optional[str]
    supplier_country: Optional[str]
    discontinued: Optional[bool]
    orders: List[ProductOrder] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def strip_image_preamble(blob: str) -> str:
    """Drop the Northwind-specific header in front of an embedded image."""
    return blob[IMAGE_PREAMBLE_LENGTH:]


def synthesize_email(local_part: str, domain: str) -> str:
    return f"{local_part}@{domain}"


def to_dict(record: Any) -> Dict[str, Any]:
    """Plain dict view of a record (nested lists included) for JSON output."""
    return asdict(record)
