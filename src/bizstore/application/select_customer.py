"""Application service: Select Customer use case.

Turns the operator's 1-based answer into a 0-based index into
``Company.customers``.
"""

from __future__ import annotations

from bizstore.domain.model.company import Company
from bizstore.domain.model.value_objects import parse_int


class SelectCustomerHandler:

    def __init__(self, company: Company) -> None:
        self._company = company

    def handle(self, choice: str) -> int:
        """Resolve a picker answer to a customer index.

        Raises ParseFailure if the answer is not a whole number and
        ValidationError if it is out of range.
        """
        index = parse_int(choice) - 1
        self._company.customer_at(index)  # bounds check
        return index
