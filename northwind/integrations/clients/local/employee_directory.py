"""
Employee directory backed by the local Northwind tables.

Joins Employees, Orders and Customers into one EmployeeProfile:
- the employee row is resolved through the Employees primary-key index
- orders are filtered in memory by EmployeeID (table order, no sort)
- each order is joined to its customer through the Customers primary-key index
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from northwind.database.table_store import RecordNotFoundError, Row, Table, TableStore
from northwind.integrations.contracts.northwind import (
    EmployeeOrder,
    EmployeeProfile,
    strip_image_preamble,
    synthesize_email,
)

logger = logging.getLogger(__name__)


class EmployeeDirectory:
    def __init__(self, store: TableStore, email_domain: str) -> None:
        self.store = store
        self.email_domain = email_domain

    def _employees(self) -> Table:
        return self.store.get_table("Employees", "EmployeeID")

    def get_employee(self, employee_id: Any) -> EmployeeProfile:
        """Raises RecordNotFoundError when the id is not in the Employees table."""
        row = self._employees().item(employee_id)
        return self._build_profile(row)

    def find_employee(self, employee_id: Any) -> Optional[EmployeeProfile]:
        row = self._employees().find(employee_id)
        if row is None:
            logger.info("Employee %r not found", employee_id)
            return None
        return self._build_profile(row)

    def _build_profile(self, employee: Row) -> EmployeeProfile:
        profile = EmployeeProfile(
            id=employee["EmployeeID"],
            display_name=f"{employee['FirstName']} {employee['LastName']}",
            mail=synthesize_email(employee["FirstName"], self.email_domain),
            photo=strip_image_preamble(employee["Photo"]),
            job_title=employee.get("Title"),
            city=f"{employee.get('City')}, {employee.get('Region') or ''} {employee.get('Country')}",
        )
        profile.orders = self._orders_for(profile.id)
        return profile

    def _orders_for(self, employee_id: Any) -> List[EmployeeOrder]:
        orders = self.store.get_table("Orders", "OrderID")
        customers = self.store.get_table("Customers", "CustomerID")

        result: List[EmployeeOrder] = []
        for order in orders.rows:
            if order.get("EmployeeID") != employee_id:
                continue
            customer = customers.item(order["CustomerID"])
            result.append(
                EmployeeOrder(
                    order_id=order["OrderID"],
                    order_date=order.get("OrderDate"),
                    customer_id=order["CustomerID"],
                    customer_name=customer.get("CompanyName"),
                    customer_contact=customer.get("ContactName"),
                    customer_phone=customer.get("Phone"),
                    ship_name=order.get("ShipName"),
                    ship_address=order.get("ShipAddress"),
                    ship_city=order.get("ShipCity"),
                    ship_region=order.get("ShipRegion"),
                    ship_postal_code=order.get("ShipPostalCode"),
                    ship_country=order.get("ShipCountry"),
                )
            )
        logger.debug("Employee %r has %d orders", employee_id, len(result))
        return result


__all__ = ["EmployeeDirectory", "RecordNotFoundError"]
