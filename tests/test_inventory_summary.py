"""Envanter özeti ve örnek katalog testleri."""

from datetime import datetime

import logging

import pytest

from src.models.inventory import ReorderUrgency
from src.replenishment import consolidate, generate_alerts, rank_reorders, stock_level_pct, summarize
from src.replenishment.sample_data import sample_lead_times, sample_records


class TestStockLevel:

    def test_percentage_of_max(self, make_record):
        assert stock_level_pct(make_record(current_stock=50, max_stock=200)) == pytest.approx(25.0)

    def test_capped_at_100(self, make_record):
        assert stock_level_pct(make_record(current_stock=500, max_stock=200)) == 100.0

    def test_zero_max_stock(self, make_record):
        assert stock_level_pct(make_record(max_stock=0)) == 0.0


class TestReorderQueue:

    def test_sorted_by_urgency(self, make_record):
        records = [
            make_record(item_id="planned", current_stock=45),
            make_record(item_id="urgent", current_stock=1),
            make_record(item_id="healthy", current_stock=150),
            make_record(item_id="soon", current_stock=6),
        ]
        queue = rank_reorders(records, {"SUP001": 7})
        assert [r.item_id for r, _ in queue] == ["urgent", "soon", "planned"]


class TestSummary:

    def test_empty(self):
        summary = summarize([])
        assert summary.total_items == 0
        assert summary.total_value == 0

    def test_sample_catalog(self):
        summary = summarize(sample_records(), sample_lead_times())
        assert summary.total_items == 8
        assert summary.out_of_stock_count == 1
        assert summary.low_stock_count == 3
        assert summary.healthy_count == 4
        assert summary.total_value == pytest.approx(20681.0)
        assert summary.reorder_count == 5
        assert summary.alert_count == 4

    def test_each_record_classified_once(self, make_record, caplog):
        """Bozuk eşik uyarısı özet başına tek kez loglanmalı."""
        record = make_record(current_stock=150, min_stock=80, reorder_point=50)
        with caplog.at_level(logging.WARNING, logger="src.replenishment"):
            summary = summarize([record], {"SUP001": 7})
        warnings = [r for r in caplog.records if "Hatalı eşik" in r.getMessage()]
        assert len(warnings) == 1
        assert summary.low_stock_count == 1
        assert summary.alert_count == 1
        assert summary.reorder_count == 0


class TestSampleCatalogPipeline:
    """Örnek katalog uçtan uca: uyarılar ve taslak siparişler."""

    def test_alerts_all_critical(self):
        alerts = generate_alerts(sample_records())
        assert [a.item_id for a in alerts] == ["1", "3", "5", "7"]

    def test_orders_sorted_most_urgent_first(self):
        orders = consolidate(sample_records(), sample_lead_times(), datetime(2026, 1, 10))
        assert [po.supplier_id for po in orders] == [
            "SUP-TROPICAL-OILS",
            "SUP-ASIAN-TEA",
            "SUP-ORGANIC-MILLS",
            "SUP-MEDITERRANEAN",
            "unassigned",
        ]
        assert orders[0].priority == ReorderUrgency.URGENT
        assert orders[2].priority == ReorderUrgency.SOON
