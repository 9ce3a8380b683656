"""Application service: Show Employees use case (query)."""

from __future__ import annotations

from bizstore.application.dto import EmployeeLineDTO
from bizstore.domain.model.company import Company
from bizstore.domain.model.value_objects import format_currency


class ShowEmployeesHandler:

    def __init__(self, company: Company, currency_symbol: str = "$") -> None:
        self._company = company
        self._currency_symbol = currency_symbol

    def handle(self) -> list[EmployeeLineDTO]:
        return [
            EmployeeLineDTO(
                name=employee.name,
                email=employee.email,
                phone=employee.phone,
                salary=format_currency(employee.salary, self._currency_symbol),
            )
            for employee in self._company.employees
        ]
