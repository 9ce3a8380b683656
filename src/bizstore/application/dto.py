"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry display-ready data from the application handlers to the CLI
screens without exposing the model to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from bizstore.domain.model.company import Company


@dataclass(frozen=True)
class OpenedCompanyDTO:
    """Output: the company to work on, plus what to tell the operator."""

    company: Company
    notice: str | None = None


@dataclass(frozen=True)
class EmployeeLineDTO:
    name: str
    email: str
    phone: str
    salary: str  # formatted, e.g. "$91,000.50"


@dataclass(frozen=True)
class CustomerChoiceDTO:
    """Output: one entry of the numbered customer picker."""

    number: int  # 1-based, as shown to the operator
    name: str


@dataclass(frozen=True)
class SaleLineDTO:
    item: str
    price: str  # formatted to two decimals, e.g. "9.99"
    quantity: int
    total: str


@dataclass(frozen=True)
class CustomerDTO:
    """Output: a customer with its full order history."""

    name: str
    email: str
    phone: str
    sales: list[SaleLineDTO]
