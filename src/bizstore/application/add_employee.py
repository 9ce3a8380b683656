"""Application service: Add Employee use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from bizstore.domain.model.company import Company
from bizstore.domain.model.employee import Employee

logger = logging.getLogger(__name__)


class AddEmployeeHandler:

    def __init__(self, company: Company) -> None:
        self._company = company

    def handle(self, name: str, email: str, phone: str, salary: Decimal) -> Employee:
        """Append a new employee.  Fields are stored exactly as given."""
        employee = Employee(name=name, email=email, phone=phone, salary=salary)
        self._company.hire(employee)
        logger.info("Added employee %r to %s", name, self._company.name)
        return employee
