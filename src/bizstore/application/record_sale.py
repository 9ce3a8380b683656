"""Application service: Record Sale use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from bizstore.domain.model.company import Company
from bizstore.domain.model.customer import Sale

logger = logging.getLogger(__name__)


class RecordSaleHandler:

    def __init__(self, company: Company) -> None:
        self._company = company

    def handle(self, customer_index: int, item: str, quantity: int, cost: Decimal) -> Sale:
        """Append a sale to the order history of the customer at ``customer_index``."""
        customer = self._company.customer_at(customer_index)
        sale = Sale(item=item, quantity=quantity, cost=cost)
        customer.record_sale(sale)
        logger.info("Recorded sale of %d x %r for %r", quantity, item, customer.name)
        return sale
