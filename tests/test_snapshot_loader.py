"""Snapshot loader unit testleri (DynamoDB mock'lanmış)."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from src.replenishment.po_consolidator import consolidate
from src.replenishment.snapshot_loader import (
    SnapshotError,
    load_inventory_records,
    load_supplier_lead_times,
    record_from_dict,
)


def _dynamodb_with(*pages) -> MagicMock:
    dynamodb = MagicMock()
    dynamodb.Table.return_value.scan.side_effect = list(pages)
    return dynamodb


class TestRecordFromDict:

    def test_snake_case_fields(self):
        record = record_from_dict({
            "item_id": "1", "name": "Flour", "sku": "FLR-001", "current_stock": 45,
            "min_stock": 50, "max_stock": 300, "reorder_point": 75, "reorder_qty": 100,
            "avg_daily_sales": 8.5, "unit_cost": 35.0, "supplier_id": "SUP1",
        })
        assert record.item_id == "1"
        assert record.current_stock == 45
        assert record.supplier_id == "SUP1"
        assert record.lead_time_days is None

    def test_camel_case_and_decimal_fields(self):
        record = record_from_dict({
            "id": Decimal("7"), "name": "Quinoa", "currentStock": Decimal("28"),
            "minStock": Decimal("30"), "maxStock": Decimal("120"), "reorderPoint": Decimal("45"),
            "reorderQty": Decimal("60"), "avgDailySales": Decimal("2.8"), "unitCost": Decimal("45"),
            "leadTimeDays": Decimal("10"),
        })
        assert record.item_id == "7"
        assert record.avg_daily_sales == pytest.approx(2.8)
        assert record.lead_time_days == 10
        assert record.supplier_id is None

    def test_missing_id_raises(self):
        with pytest.raises(SnapshotError):
            record_from_dict({"name": "No id"})

    def test_bad_value_raises(self):
        with pytest.raises(SnapshotError):
            record_from_dict({"id": "1", "current_stock": "many"})


class TestLoadInventory:

    def test_paginated_scan(self):
        dynamodb = _dynamodb_with(
            {"Items": [{"item_id": "1", "current_stock": Decimal("5")}], "LastEvaluatedKey": {"item_id": "1"}},
            {"Items": [{"item_id": "2", "current_stock": Decimal("9")}]},
        )
        records = load_inventory_records(dynamodb, "InventoryRecords")
        assert [r.item_id for r in records] == ["1", "2"]
        dynamodb.Table.assert_called_with("InventoryRecords")
        second_call = dynamodb.Table.return_value.scan.call_args_list[1]
        assert second_call.kwargs == {"ExclusiveStartKey": {"item_id": "1"}}

    def test_bad_rows_skipped(self):
        dynamodb = _dynamodb_with({"Items": [{"item_id": "1"}, {"name": "broken"}]})
        records = load_inventory_records(dynamodb)
        assert [r.item_id for r in records] == ["1"]

    def test_client_error_propagates(self):
        dynamodb = MagicMock()
        dynamodb.Table.return_value.scan.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "missing"}}, "Scan"
        )
        with pytest.raises(ClientError):
            load_inventory_records(dynamodb)


class TestLoadSupplierLeadTimes:

    def test_lead_times_with_default(self):
        dynamodb = _dynamodb_with({"Items": [
            {"supplier_id": "SUP1", "default_lead_time_days": Decimal("5")},
            {"id": Decimal("2"), "lead_time_days": Decimal("12")},
            {"supplier_id": "SUP3"},
            {"supplier_id": "SUP4", "default_lead_time_days": Decimal("0")},
            {"name": "no id"},
        ]})
        assert load_supplier_lead_times(dynamodb) == {"SUP1": 5, "2": 12, "SUP3": 7, "SUP4": 0}

    def test_zero_lead_time_kept(self):
        """Aynı gün teslim eden tedarikçi: 0 gün varsayılana çevrilmemeli."""
        dynamodb = _dynamodb_with({"Items": [{"supplier_id": "SUP001", "default_lead_time_days": Decimal("0")}]})
        lead_times = load_supplier_lead_times(dynamodb)
        assert lead_times == {"SUP001": 0}

        # 6 günlük stok, sipariş noktasının üstünde: 0 günlük tedarikte sipariş yok
        record = record_from_dict({
            "id": "1", "current_stock": 60, "min_stock": 20, "reorder_point": 50,
            "max_stock": 200, "reorder_qty": 40, "avg_daily_sales": 10, "supplier_id": "SUP001",
        })
        assert consolidate([record], lead_times, datetime(2026, 1, 10)) == []

    def test_inactive_suppliers_skipped(self):
        dynamodb = _dynamodb_with({"Items": [
            {"supplier_id": "SUP1", "default_lead_time_days": Decimal("5"), "is_active": True},
            {"supplier_id": "SUP2", "default_lead_time_days": Decimal("5"), "is_active": False},
            {"supplier_id": "SUP3", "default_lead_time_days": Decimal("5"), "isActive": False},
        ]})
        lead_times = load_supplier_lead_times(dynamodb)
        assert lead_times == {"SUP1": 5}

        record = record_from_dict({
            "id": "1", "current_stock": 5, "min_stock": 20, "reorder_point": 50,
            "max_stock": 200, "reorder_qty": 40, "avg_daily_sales": 1, "supplier_id": "SUP2",
        })
        [po] = consolidate([record], lead_times, datetime(2026, 1, 10))
        assert po.supplier_id == "unassigned"
