"""Repository for the RefundPayment aggregate."""

from refunds.domain import refunds
from refunds.refund_payment.refund_payment import RefundPayment


@refunds.repository(part_of=RefundPayment)
class RefundPaymentRepository:
    def find_by_order_number(self, order_number: str) -> list[RefundPayment]:
        return self._dao.query.filter(order_number=order_number).all().items
