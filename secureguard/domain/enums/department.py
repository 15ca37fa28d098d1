"""Organisational departments (ABAC attribute)."""

from enum import Enum


class Department(str, Enum):
    """Department shared by subjects and resources."""

    IT = "IT"
    HR = "HR"
    FINANCE = "FINANCE"
    SALES = "SALES"
