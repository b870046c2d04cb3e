"""Integration tests for the order use cases."""

from datetime import date

import pytest

from optimus.application.cancel_order import CancelOrderHandler
from optimus.application.confirm_order import ConfirmOrderHandler
from optimus.application.create_order import CreateOrderHandler
from optimus.application.deliver_order import DeliverOrderHandler
from optimus.application.dto import OrderItemSpec
from optimus.application.local_state import LocalState
from optimus.application.show_order import ListOrdersHandler, ShowOrderHandler
from optimus.application.submit_order import SubmitOrderHandler
from optimus.domain.exceptions import (
    CurrencyMismatchError,
    DomainValidationError,
    EntityNotFoundError,
    InvalidStatusTransitionError,
    SupplierNotEligibleError,
)
from optimus.domain.model.order import OrderStatus
from optimus.domain.model.product import Product
from optimus.domain.model.supplier import Supplier
from optimus.domain.model.value_objects import Money
from tests.fakes import FakeEventPublisher

DELIVERY = date(2024, 11, 10)


def _setup() -> tuple[LocalState, FakeEventPublisher]:
    state = LocalState(
        products=[
            Product.create(id=1, name="Saumon Atlantique", price_in_cents=1599, stock=50),
            Product.create(id=2, name="Riz Basmati", price_in_cents=500, stock=100),
            Product.create(id=3, name="Maple Syrup", price_in_cents=900, stock=4, currency="CAD"),
        ],
        suppliers=[
            Supplier.create(id=1, name="Rungis Express").approve(),
            Supplier.create(id=2, name="Pomona"),
            Supplier.create(id=3, name="Old Supplier").approve().deactivate(),
        ],
    )
    return state, FakeEventPublisher()


def _create(state, publisher, specs=None, supplier_id=1, locale="fr-FR"):
    handler = CreateOrderHandler(state, publisher, locale=locale)
    return handler.handle(
        tenant_id=1,
        site_id=1,
        supplier_id=supplier_id,
        item_specs=specs or [OrderItemSpec(1, 3), OrderItemSpec(2, 2)],
        delivery_date=DELIVERY,
    )


class TestCreateOrder:

    def test_creates_draft_with_correct_total(self):
        state, publisher = _setup()
        dto = _create(state, publisher, locale="en-US")
        assert dto.status == "DRAFT"
        assert dto.total_in_cents == 5797
        assert dto.total == "€57.97"
        assert dto.supplier_name == "Rungis Express"
        assert dto.item_count == 2
        assert dto.delivery_date == "2024-11-10"

    def test_assigns_sequential_ids(self):
        state, publisher = _setup()
        assert _create(state, publisher).id == 1
        assert _create(state, publisher).id == 2

    def test_publishes_order_created(self):
        state, publisher = _setup()
        dto = _create(state, publisher)
        assert publisher.event_types == ["OrderCreated"]
        event = publisher.events[0]
        assert event.order_number == dto.order_number
        assert event.total_amount == 5797
        assert event.item_count == 2

    def test_snapshots_price(self):
        state, publisher = _setup()
        dto = _create(state, publisher)
        state.products.save(state.products.get(1).update_price(Money.create(9999)))

        order = state.orders.get(dto.id)
        assert order.items[0].unit_price.cents == 1599

    def test_unapproved_supplier_rejected(self):
        state, publisher = _setup()
        with pytest.raises(SupplierNotEligibleError, match="Pomona"):
            _create(state, publisher, supplier_id=2)
        assert len(state.orders) == 0

    def test_inactive_supplier_rejected(self):
        state, publisher = _setup()
        with pytest.raises(SupplierNotEligibleError):
            _create(state, publisher, supplier_id=3)

    def test_unknown_product_rejected(self):
        state, publisher = _setup()
        with pytest.raises(EntityNotFoundError, match="Product #42"):
            _create(state, publisher, specs=[OrderItemSpec(42, 1)])

    def test_no_items_rejected(self):
        state, publisher = _setup()
        handler = CreateOrderHandler(state, publisher)
        with pytest.raises(DomainValidationError, match="at least one item"):
            handler.handle(1, 1, 1, [], DELIVERY)

    def test_mixed_currencies_rejected(self):
        state, publisher = _setup()
        with pytest.raises(CurrencyMismatchError):
            _create(state, publisher, specs=[OrderItemSpec(1, 1), OrderItemSpec(3, 1)])


class TestOrderTransitions:

    def test_submit_then_confirm(self):
        state, publisher = _setup()
        order_id = _create(state, publisher).id

        assert SubmitOrderHandler(state).handle(order_id).status == "PENDING"
        dto = ConfirmOrderHandler(state, publisher).handle(order_id)

        assert dto.status == "CONFIRMED"
        assert state.orders.get(order_id).status == OrderStatus.CONFIRMED
        assert publisher.event_types == ["OrderCreated", "OrderConfirmed"]

    def test_confirm_twice_rejected(self):
        state, publisher = _setup()
        order_id = _create(state, publisher).id
        ConfirmOrderHandler(state, publisher).handle(order_id)

        with pytest.raises(InvalidStatusTransitionError):
            ConfirmOrderHandler(state, publisher).handle(order_id)

    def test_cancel(self):
        state, publisher = _setup()
        order_id = _create(state, publisher).id
        dto = CancelOrderHandler(state, publisher).handle(order_id)

        assert dto.status == "CANCELLED"
        assert publisher.event_types[-1] == "OrderCancelled"

    def test_unknown_order_rejected(self):
        state, publisher = _setup()
        with pytest.raises(EntityNotFoundError, match="Order #999 not found"):
            ConfirmOrderHandler(state, publisher).handle(999)


class TestDeliverOrder:

    def test_delivery_restocks_products(self):
        state, publisher = _setup()
        order_id = _create(state, publisher).id
        ConfirmOrderHandler(state, publisher).handle(order_id)

        dto = DeliverOrderHandler(state, publisher).handle(order_id)

        assert dto.status == "DELIVERED"
        assert state.products.get(1).stock.value == 53
        assert state.products.get(2).stock.value == 102
        assert publisher.event_types[-3:] == ["OrderDelivered", "StockUpdated", "StockUpdated"]

    def test_same_product_on_two_lines(self):
        state, publisher = _setup()
        order_id = _create(state, publisher, specs=[OrderItemSpec(1, 3), OrderItemSpec(1, 2)]).id
        ConfirmOrderHandler(state, publisher).handle(order_id)

        DeliverOrderHandler(state, publisher).handle(order_id)

        assert state.products.get(1).stock.value == 55

    def test_unconfirmed_order_not_delivered(self):
        state, publisher = _setup()
        order_id = _create(state, publisher).id

        with pytest.raises(InvalidStatusTransitionError, match="not confirmed"):
            DeliverOrderHandler(state, publisher).handle(order_id)
        assert state.products.get(1).stock.value == 50

    def test_cancel_after_delivery_rejected(self):
        state, publisher = _setup()
        order_id = _create(state, publisher).id
        ConfirmOrderHandler(state, publisher).handle(order_id)
        DeliverOrderHandler(state, publisher).handle(order_id)

        with pytest.raises(InvalidStatusTransitionError, match="Cannot cancel delivered order"):
            CancelOrderHandler(state, publisher).handle(order_id)


class TestOrderQueries:

    def test_show_order(self):
        state, publisher = _setup()
        order_id = _create(state, publisher).id
        dto = ShowOrderHandler(state, locale="en-US").handle(order_id)
        assert [item.product_name for item in dto.items] == ["Saumon Atlantique", "Riz Basmati"]
        assert dto.items[0].line_total == "€47.97"

    def test_list_orders_by_status(self):
        state, publisher = _setup()
        first = _create(state, publisher).id
        _create(state, publisher)
        ConfirmOrderHandler(state, publisher).handle(first)

        handler = ListOrdersHandler(state)
        assert len(handler.handle()) == 2
        assert [o.id for o in handler.handle(status=OrderStatus.CONFIRMED)] == [first]
