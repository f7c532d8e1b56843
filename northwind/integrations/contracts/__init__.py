"""
Contracts (data models).

This folder defines the record shapes returned by the Northwind clients:
- employee profiles with their order history (local tables)
- orders, categories and products (OData service)

Both the local and the real HTTP clients build these records, so UI code
never depends on raw column names such as `EmployeeID` or `CompanyName`.
"""
