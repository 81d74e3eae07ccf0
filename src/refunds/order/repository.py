"""Repository for the Order aggregate."""

from refunds.domain import refunds
from refunds.order.order import Order


@refunds.repository(part_of=Order)
class OrderRepository:
    def find_one_by_number(self, number: str) -> Order:
        """Find an Order by its business number.

        Raises ObjectNotFoundError when no order carries the number.
        """
        return self._dao.find_by(number=number)
