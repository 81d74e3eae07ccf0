"""Refunds bounded context — Order Refunds and Refund Payments.

Handles refunding order item units and shipments, tracks every refund issued
against an order, marks orders fully refunded, and creates the refund
payments that back-office staff complete once money is returned.
"""

import structlog
from protean.domain import Domain

refunds = Domain(name="refunds")

logger = structlog.get_logger(__name__)
