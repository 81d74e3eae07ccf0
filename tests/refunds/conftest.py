import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture
from refunds.publisher import reset_publisher


@pytest.fixture(scope="session")
def refunds_bed():
    from refunds.domain import refunds

    bed = DomainFixture(refunds)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(refunds_bed):
    with refunds_bed.domain_context():
        yield

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

    reset_publisher()


@pytest.fixture()
def make_order():
    """Build and persist an order numbered "000222" by default.

    Units 1..3 cost 1000 each, shipments 3 and 4 cost 250 each.
    """
    from refunds.order.order import Order

    def _make(number="000222", paid=True, units_data=None, shipments_data=None, currency_code="USD"):
        order = Order.create(
            number=number,
            units_data=units_data
            if units_data is not None
            else [
                {"unit_id": 1, "product_name": "Mug", "total": 1000},
                {"unit_id": 2, "product_name": "Mug", "total": 1000},
                {"unit_id": 3, "product_name": "T-Shirt", "total": 1000},
            ],
            shipments_data=shipments_data
            if shipments_data is not None
            else [
                {"shipment_id": 3, "method": "UPS", "total": 250},
                {"shipment_id": 4, "method": "DHL", "total": 250},
            ],
            currency_code=currency_code,
        )
        if paid:
            order.mark_paid()
        order._events.clear()
        current_domain.repository_for(Order).add(order)
        return order

    return _make
