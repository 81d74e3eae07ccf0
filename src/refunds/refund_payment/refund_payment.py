"""RefundPayment aggregate (CQRS) — money owed back to the customer.

One refund payment is generated per UnitsRefunded event. Staff complete it
once the amount has actually been paid out.

State Machine:
    NEW → COMPLETED
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from refunds.domain import refunds
from refunds.refund_payment.events import RefundPaymentCompleted, RefundPaymentGenerated


class RefundPaymentState(Enum):
    NEW = "New"
    COMPLETED = "Completed"


@refunds.aggregate
class RefundPayment:
    order_number = String(required=True, max_length=255)
    amount = Integer(required=True, min_value=0)
    currency_code = String(max_length=3, default="USD")
    state = String(
        choices=RefundPaymentState,
        default=RefundPaymentState.NEW.value,
    )
    created_at = DateTime()
    completed_at = DateTime()

    @classmethod
    def generate(cls, order_number, amount, currency_code):
        now = datetime.now(UTC)
        refund_payment = cls(
            order_number=order_number,
            amount=amount,
            currency_code=currency_code,
            created_at=now,
        )
        refund_payment.raise_(
            RefundPaymentGenerated(
                refund_payment_id=str(refund_payment.id),
                order_number=order_number,
                amount=amount,
                currency_code=currency_code,
                generated_at=now,
            )
        )
        return refund_payment

    def complete(self):
        if RefundPaymentState(self.state) != RefundPaymentState.NEW:
            raise ValidationError({"state": ["Only new refund payments can be completed"]})

        now = datetime.now(UTC)
        self.state = RefundPaymentState.COMPLETED.value
        self.completed_at = now

        self.raise_(
            RefundPaymentCompleted(
                refund_payment_id=str(self.id),
                order_number=self.order_number,
                completed_at=now,
            )
        )
