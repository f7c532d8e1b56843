"""Pytest fixtures for the Northwind table store and OData client tests."""

import json

import pytest

from northwind.database.table_store import TableStore

PREAMBLE = "P" * 104


def _write(directory, table_name, rows):
    path = directory / f"{table_name}.json"
    path.write_text(json.dumps({table_name: rows}), encoding="utf-8")
    return path


@pytest.fixture
def write_table(tmp_path):
    """Write `{"<table>": rows}` into the temporary northwindDB directory."""
    def _writer(table_name, rows):
        return _write(tmp_path, table_name, rows)
    return _writer


@pytest.fixture
def northwind_db(tmp_path):
    """A tiny Employees / Orders / Customers dataset."""
    _write(tmp_path, "Employees", [
        {
            "EmployeeID": 1, "FirstName": "Nancy", "LastName": "Davolio",
            "Title": "Sales Representative", "City": "Seattle", "Region": "WA",
            "Country": "USA", "Photo": PREAMBLE + "NANCYPHOTO",
        },
        {
            "EmployeeID": 5, "FirstName": "Steven", "LastName": "Buchanan",
            "Title": "Sales Manager", "City": "London", "Region": None,
            "Country": "UK", "Photo": PREAMBLE + "STEVENPHOTO",
        },
        {
            "EmployeeID": 9, "FirstName": "Anne", "LastName": "Dodsworth",
            "Title": "Sales Representative", "City": "London", "Region": None,
            "Country": "UK", "Photo": PREAMBLE,
        },
    ])
    _write(tmp_path, "Customers", [
        {"CustomerID": "ALFKI", "CompanyName": "Alfreds Futterkiste", "ContactName": "Maria Anders", "Phone": "030-0074321"},
        {"CustomerID": "VINET", "CompanyName": "Vins et alcools Chevalier", "ContactName": "Paul Henriot", "Phone": "26.47.15.10"},
    ])
    _write(tmp_path, "Orders", [
        {
            "OrderID": 10248, "EmployeeID": 5, "CustomerID": "VINET", "OrderDate": "1996-07-04T00:00:00Z",
            "ShipName": "Vins et alcools Chevalier", "ShipAddress": "59 rue de l'Abbaye", "ShipCity": "Reims",
            "ShipRegion": None, "ShipPostalCode": "51100", "ShipCountry": "France",
        },
        {
            "OrderID": 10249, "EmployeeID": 1, "CustomerID": "ALFKI", "OrderDate": "1996-07-05T00:00:00Z",
            "ShipName": "Alfreds Futterkiste", "ShipAddress": "Obere Str. 57", "ShipCity": "Berlin",
            "ShipRegion": None, "ShipPostalCode": "12209", "ShipCountry": "Germany",
        },
        {
            "OrderID": 10250, "EmployeeID": 5, "CustomerID": "ALFKI", "OrderDate": "1996-07-08T00:00:00Z",
            "ShipName": "Alfreds Futterkiste", "ShipAddress": "Obere Str. 57", "ShipCity": "Berlin",
            "ShipRegion": None, "ShipPostalCode": "12209", "ShipCountry": "Germany",
        },
    ])
    return tmp_path


@pytest.fixture
def store(northwind_db):
    store = TableStore(northwind_db)
    yield store
    store.close()
