"""Application service: Add Customer use case."""

from __future__ import annotations

import logging

from bizstore.domain.model.company import Company
from bizstore.domain.model.customer import Customer

logger = logging.getLogger(__name__)


class AddCustomerHandler:

    def __init__(self, company: Company) -> None:
        self._company = company

    def handle(self, name: str, email: str, phone: str) -> Customer:
        """Append a new customer with an empty order history."""
        customer = Customer(name=name, email=email, phone=phone)
        self._company.add_customer(customer)
        logger.info("Added customer %r to %s", name, self._company.name)
        return customer
