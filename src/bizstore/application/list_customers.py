"""Application service: List Customers use case (query).

Feeds the numbered picker shown before recording a sale or viewing a
customer.
"""

from __future__ import annotations

from bizstore.application.dto import CustomerChoiceDTO
from bizstore.domain.exceptions import EntityNotFoundError
from bizstore.domain.model.company import Company


class ListCustomersHandler:

    def __init__(self, company: Company) -> None:
        self._company = company

    def handle(self) -> list[CustomerChoiceDTO]:
        """Return customers numbered from 1.

        Raises EntityNotFoundError when there is nobody to choose from.
        """
        if not self._company.customers:
            raise EntityNotFoundError("No Customers.")
        return [
            CustomerChoiceDTO(number=i, name=customer.name)
            for i, customer in enumerate(self._company.customers, start=1)
        ]
