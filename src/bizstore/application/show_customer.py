"""Application service: Show Customer use case (query)."""

from __future__ import annotations

from bizstore.application.dto import CustomerDTO, SaleLineDTO
from bizstore.domain.model.company import Company
from bizstore.domain.model.customer import Customer
from bizstore.domain.model.value_objects import format_fixed


class ShowCustomerHandler:

    def __init__(self, company: Company) -> None:
        self._company = company

    def handle(self, customer_index: int) -> CustomerDTO:
        return self._to_dto(self._company.customer_at(customer_index))

    @staticmethod
    def _to_dto(customer: Customer) -> CustomerDTO:
        return CustomerDTO(
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            sales=[
                SaleLineDTO(
                    item=sale.item,
                    price=format_fixed(sale.cost),
                    quantity=sale.quantity,
                    total=format_fixed(sale.total_cost),
                )
                for sale in customer.order_history
            ],
        )
