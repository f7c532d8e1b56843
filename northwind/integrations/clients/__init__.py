"""
Northwind data clients.

- local/: reads the JSON tables downloaded into the northwindDB directory
- real_http/: queries the Northwind OData service over HTTP

Wiring of both happens in northwind/dependencies.py only.
"""
