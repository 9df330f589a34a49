"""Testler için ortak kayıt fabrikası."""

import pytest

from src.models.inventory import InventoryRecord


def _make_record(**overrides) -> InventoryRecord:
    fields = dict(
        item_id="ITEM001",
        name="Test Product",
        sku="SKU001",
        current_stock=100,
        min_stock=20,
        max_stock=200,
        reorder_point=50,
        reorder_qty=40,
        avg_daily_sales=1.0,
        unit_cost=10.0,
        supplier_id="SUP001",
        lead_time_days=None,
    )
    fields.update(overrides)
    return InventoryRecord(**fields)


@pytest.fixture
def make_record():
    return _make_record
