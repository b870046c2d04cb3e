"""Integration tests for the supplier use cases and the dashboard."""

from datetime import date

import pytest

from optimus.application.add_product import AddProductHandler
from optimus.application.create_order import CreateOrderHandler
from optimus.application.dashboard import DashboardHandler
from optimus.application.dto import OrderItemSpec
from optimus.application.local_state import LocalState
from optimus.application.manage_supplier import (
    ApproveSupplierHandler,
    DeactivateSupplierHandler,
    ListSuppliersHandler,
    ReactivateSupplierHandler,
)
from optimus.domain.exceptions import EntityNotFoundError
from optimus.domain.model.supplier import Supplier
from optimus.infrastructure.mock_data import build_demo_state
from tests.fakes import FakeEventPublisher


def _setup() -> LocalState:
    return LocalState(
        suppliers=[
            Supplier.create(id=1, name="Metro Cash & Carry").approve(),
            Supplier.create(id=2, name="Pomona"),
        ]
    )


class TestSupplierHandlers:

    def test_approve(self):
        state = _setup()
        dto = ApproveSupplierHandler(state).handle(2)
        assert dto.is_approved
        assert dto.can_receive_orders
        assert state.suppliers.get(2).is_approved

    def test_deactivate_and_reactivate(self):
        state = _setup()
        assert not DeactivateSupplierHandler(state).handle(1).can_receive_orders
        assert ReactivateSupplierHandler(state).handle(1).can_receive_orders

    def test_list_eligible_only(self):
        state = _setup()
        assert [s.name for s in ListSuppliersHandler(state).handle(eligible_only=True)] == [
            "Metro Cash & Carry"
        ]
        assert len(ListSuppliersHandler(state).handle()) == 2

    def test_unknown_supplier(self):
        with pytest.raises(EntityNotFoundError):
            ApproveSupplierHandler(_setup()).handle(99)


class TestDashboard:

    def test_demo_figures(self):
        dto = DashboardHandler(build_demo_state(), locale="en-US").handle()

        assert dto.product_count == 8
        assert dto.low_stock_count == 3
        assert {p.name for p in dto.low_stock_products} == {
            "Poulet Fermier Bio",
            "Farine T45",
            "Beurre Doux",
        }
        assert dto.active_orders == 3
        assert dto.pending_orders == 1
        assert dto.open_order_value == "€842.94"
        assert dto.open_order_totals == {"EUR": 84294}
        assert (dto.active_suppliers, dto.total_suppliers) == (4, 4)

    def test_empty_state(self):
        dto = DashboardHandler(LocalState(), locale="en-US").handle()
        assert dto.product_count == 0
        assert dto.open_order_value == "€0.00"
        assert dto.open_order_totals == {"EUR": 0}

    def test_configured_currency_does_not_convert_open_orders(self):
        dto = DashboardHandler(build_demo_state(), locale="en-US", currency="USD").handle()
        assert dto.open_order_value == "€842.94"
        assert dto.open_order_totals == {"EUR": 84294}

    def test_empty_state_uses_configured_currency(self):
        dto = DashboardHandler(LocalState(), locale="en-US", currency="USD").handle()
        assert dto.open_order_value == "$0.00"

    def test_open_orders_in_several_currencies(self):
        state = build_demo_state()
        publisher = FakeEventPublisher()
        product = AddProductHandler(state, publisher).handle(
            name="Sirop d'Érable", price="18.00", stock=5, currency="CAD"
        )
        CreateOrderHandler(state, publisher).handle(
            tenant_id=1,
            site_id=1,
            supplier_id=1,
            item_specs=[OrderItemSpec(product.id, 1)],
            delivery_date=date(2024, 12, 1),
        )

        dto = DashboardHandler(state, locale="en-US").handle()

        assert dto.active_orders == 4
        assert dto.open_order_totals == {"EUR": 84294, "CAD": 1800}
        eur, cad = dto.open_order_value.split(", ")
        assert eur == "€842.94"
        assert cad.endswith("18.00")
