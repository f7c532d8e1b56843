"""
OData query URL helpers for the Northwind service.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union
from urllib.parse import quote

# Characters left literal inside query option values.
_SAFE = "$,/()'"

Names = Union[str, Sequence[str]]


def format_literal(value: Any) -> str:
    """OData literal: numbers as-is, booleans lowercase, strings single-quoted."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    text = str(value).replace("'", "''")
    return f"'{text}'"


def eq(field: str, value: Any) -> str:
    return f"{field} eq {format_literal(value)}"


def _join(names: Names) -> str:
    if isinstance(names, str):
        return names
    return ",".join(names)


def build_odata_url(
    base_url: str,
    entity_set: str,
    key: Any = None,
    *,
    filter: Optional[str] = None,
    expand: Optional[Names] = None,
    select: Optional[Names] = None,
    top: Optional[int] = None,
) -> str:
    """
    Build `<base>/<EntitySet>[(<key>)][?$filter=..&$top=..&$expand=..&$select=..]`.

    Example:
        build_odata_url(base, "Order_Details", filter=eq("OrderID", 42), top=10, expand="Product")
        -> <base>/Order_Details?$filter=OrderID%20eq%2042&$top=10&$expand=Product
    """
    path = entity_set if key is None else f"{entity_set}({format_literal(key)})"

    options = []
    if filter is not None:
        options.append(("$filter", filter))
    if top is not None:
        options.append(("$top", str(top)))
    if expand:
        options.append(("$expand", _join(expand)))
    if select:
        options.append(("$select", _join(select)))

    url = f"{base_url.rstrip('/')}/{path}"
    if not options:
        return url
    query = "&".join(f"{name}={quote(value, safe=_SAFE)}" for name, value in options)
    return f"{url}?{query}"
