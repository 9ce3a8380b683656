"""Customer record and the sales in its order history.

A Customer owns its order history exclusively; sales are only ever
appended, never edited or removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, localcontext


@dataclass
class Sale:
    """A single line in a customer's order history.

    ``cost`` is the unit price.  The line total is derived on every read
    and is never stored.
    """

    item: str
    quantity: int
    cost: Decimal

    @property
    def total_cost(self) -> Decimal:
        # Exact product: never rounded to the default 28-digit context.
        digits = len(self.cost.as_tuple().digits) + len(str(abs(self.quantity)))
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, digits)
            return self.cost * self.quantity


@dataclass
class Customer:
    name: str
    email: str
    phone: str
    order_history: list[Sale] = field(default_factory=list)

    def record_sale(self, sale: Sale) -> None:
        self.order_history.append(sale)
