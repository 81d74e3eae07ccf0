"""Refund payment completion — command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from refunds.domain import refunds
from refunds.refund_payment.refund_payment import RefundPayment


@refunds.command(part_of="RefundPayment")
class CompleteRefundPayment:
    refund_payment_id = Identifier(required=True)


@refunds.command_handler(part_of=RefundPayment)
class CompleteRefundPaymentHandler:
    @handle(CompleteRefundPayment)
    def complete_refund_payment(self, command):
        repo = current_domain.repository_for(RefundPayment)
        refund_payment = repo.get(command.refund_payment_id)
        refund_payment.complete()
        repo.add(refund_payment)
