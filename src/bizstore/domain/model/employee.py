"""Employee record."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Employee:
    name: str
    email: str
    phone: str
    salary: Decimal
