"""JSON-file-backed implementation of CompanyRepository.

One indented JSON document per company.  Field names and their order are
fixed so files stay diffable and readable by other tools:

    {"Name", "Employees": [{"Name", "Email", "Phone", "Salary"}],
     "Customers": [{"Name", "Email", "Phone",
                    "OrderHistory": [{"Item", "Quantity", "Cost"}]}]}

Amounts (``Salary``, ``Cost``) are written as decimal strings so every
digit survives; plain JSON numbers are accepted on read.  ``TotalCost`` is
derived and never written.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from bizstore.domain.exceptions import EntityNotFoundError, StorageError
from bizstore.domain.model.company import Company
from bizstore.domain.model.customer import Customer, Sale
from bizstore.domain.model.employee import Employee
from bizstore.domain.model.value_objects import amount_in_range, int_in_range
from bizstore.domain.repository.company_repository import CompanyRepository

logger = logging.getLogger(__name__)


class JsonCompanyRepository(CompanyRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CompanyRepository interface ------------------------------------------

    @property
    def name(self) -> str:
        return self._file_path.stem

    def load(self) -> Company | None:
        if not self._file_path.exists():
            raise EntityNotFoundError(f"No company data at {self._file_path}")
        try:
            raw = json.loads(
                self._file_path.read_text(encoding="utf-8"), parse_float=Decimal
            )
            if raw is None:
                return None
            return self._to_domain(raw)
        except (OSError, ValueError, KeyError, TypeError, AttributeError, ArithmeticError) as exc:
            raise StorageError(str(exc)) from exc

    def save(self, company: Company) -> None:
        # Direct overwrite: a failure part-way can leave a truncated file.
        try:
            self._file_path.write_text(
                json.dumps(self._to_raw(company), indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except (OSError, ValueError) as exc:
            raise StorageError(str(exc)) from exc
        logger.debug("Wrote %s", self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(company: Company) -> dict:
        return {
            "Name": company.name,
            "Employees": [
                {
                    "Name": e.name,
                    "Email": e.email,
                    "Phone": e.phone,
                    "Salary": str(e.salary),
                }
                for e in company.employees
            ],
            "Customers": [
                {
                    "Name": c.name,
                    "Email": c.email,
                    "Phone": c.phone,
                    "OrderHistory": [
                        {
                            "Item": s.item,
                            "Quantity": s.quantity,
                            "Cost": str(s.cost),
                        }
                        for s in c.order_history
                    ],
                }
                for c in company.customers
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Company:
        return Company(
            name=raw.get("Name") or "",
            employees=[
                Employee(
                    name=e.get("Name") or "",
                    email=e.get("Email") or "",
                    phone=e.get("Phone") or "",
                    salary=_amount(e.get("Salary", 0)),
                )
                for e in raw.get("Employees") or []
            ],
            customers=[
                Customer(
                    name=c.get("Name") or "",
                    email=c.get("Email") or "",
                    phone=c.get("Phone") or "",
                    order_history=[
                        Sale(
                            item=s.get("Item") or "",
                            quantity=_quantity(s.get("Quantity", 0)),
                            cost=_amount(s.get("Cost", 0)),
                        )
                        for s in c.get("OrderHistory") or []
                    ],
                )
                for c in raw.get("Customers") or []
            ],
        )


def _amount(value) -> Decimal:
    # Numbers arrive as Decimal (parse_float) or int; amounts we write are strings.
    amount = Decimal(str(value))
    if not amount_in_range(amount):
        raise ValueError(f"Amount out of range: {value!r}")
    return amount


def _quantity(value) -> int:
    number = Decimal(str(value))
    if not number.is_finite() or number != number.to_integral_value():
        raise ValueError(f"Quantity is not a whole number: {value!r}")
    quantity = int(number)
    if not int_in_range(quantity):
        raise ValueError(f"Quantity out of range: {value!r}")
    return quantity
