from northwind.integrations.clients.real_http.odata_query import build_odata_url, eq, format_literal

BASE = "https://services.odata.org/V4/Northwind/Northwind.svc/"


def test_entity_by_key_with_expand():
    url = build_odata_url(BASE, "Orders", 10248, expand=("Customer", "Employee"))

    assert url == "https://services.odata.org/V4/Northwind/Northwind.svc/Orders(10248)?$expand=Customer,Employee"


def test_filter_top_expand_order_and_encoding():
    url = build_odata_url(
        BASE, "Order_Details",
        filter=eq("OrderID", 42), top=10, expand=["Product", "Product/Category"],
    )

    assert url.endswith("/Order_Details?$filter=OrderID%20eq%2042&$top=10&$expand=Product,Product/Category")


def test_select_and_plain_collection():
    assert build_odata_url(BASE, "Categories").endswith("/Categories")
    assert build_odata_url(BASE, "Categories", select="CategoryID,Picture").endswith(
        "/Categories?$select=CategoryID,Picture"
    )


def test_literals():
    assert format_literal(3) == "3"
    assert format_literal(True) == "true"
    assert format_literal("ALFKI") == "'ALFKI'"
    assert format_literal("O'Brien") == "'O''Brien'"
    assert eq("CustomerID", "ALFKI") == "CustomerID eq 'ALFKI'"


def test_string_key_is_quoted():
    assert build_odata_url(BASE, "Customers", "ALFKI").endswith("/Customers('ALFKI')")
