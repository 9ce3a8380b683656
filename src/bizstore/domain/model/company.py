"""Company aggregate, the root of everything persisted.

A Company owns its employees and customers (and, through them, every
sale).  It is loaded once, mutated in place for the whole session, and
written back as one unit.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bizstore.domain.exceptions import ValidationError
from bizstore.domain.model.customer import Customer
from bizstore.domain.model.employee import Employee


@dataclass
class Company:
    """Aggregate root for the record store.

    Nothing is validated on construction: the store accepts whatever the
    operator typed.  Both lists are append-only.
    """

    name: str
    employees: list[Employee] = field(default_factory=list)
    customers: list[Customer] = field(default_factory=list)

    def hire(self, employee: Employee) -> None:
        self.employees.append(employee)

    def add_customer(self, customer: Customer) -> None:
        self.customers.append(customer)

    def customer_at(self, index: int) -> Customer:
        """Return the customer at a 0-based position.

        Raises ValidationError for any index outside the list, including
        negative ones (no wrap-around).
        """
        if index < 0 or index >= len(self.customers):
            raise ValidationError("Invalid choice, try again.")
        return self.customers[index]
