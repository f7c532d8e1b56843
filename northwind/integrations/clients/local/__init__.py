"""
Local clients backed by the JSON table store.
"""

from .employee_directory import EmployeeDirectory

__all__ = ["EmployeeDirectory"]
