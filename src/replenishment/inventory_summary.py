"""Envanter özeti - Dashboard sayaçları ve sipariş kuyruğu."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from src.models.inventory import (
    InventoryRecord,
    InventorySummary,
    ReorderSuggestion,
    StockStatus,
)
from src.replenishment.alert_generator import build_alert
from src.replenishment.config import DEFAULT_CONFIG, ReplenishmentConfig
from src.replenishment.po_consolidator import suggest_all
from src.replenishment.reorder_advisor import advise, effective_lead_time
from src.replenishment.stock_classifier import classify, clamped_stock
from src.replenishment.stockout_projector import project


def stock_level_pct(record: InventoryRecord) -> float:
    """Stoğun tavan seviyeye oranı (%), 100 ile sınırlı."""
    if record.max_stock <= 0:
        return 0.0
    return min(clamped_stock(record) / record.max_stock * 100, 100.0)


def rank_reorders(
    records: Iterable[InventoryRecord],
    lead_time_by_supplier: Optional[Mapping[str, int]] = None,
    config: ReplenishmentConfig = DEFAULT_CONFIG,
) -> list[tuple[InventoryRecord, ReorderSuggestion]]:
    """Sipariş gereken ürünleri aciliyete göre sıralı döndürür."""
    queue = [
        (record, suggestion)
        for record, suggestion in suggest_all(records, lead_time_by_supplier, config)
        if suggestion.should_reorder
    ]
    queue.sort(key=lambda pair: pair[1].urgency.rank)
    return queue


def summarize(
    records: Iterable[InventoryRecord],
    lead_time_by_supplier: Optional[Mapping[str, int]] = None,
    config: ReplenishmentConfig = DEFAULT_CONFIG,
) -> InventorySummary:
    records = list(records)
    lead_time_by_supplier = lead_time_by_supplier or {}
    # Her kayıt bir kez sınıflandırılır; uyarı ve öneriler aynı sonuçtan türetilir
    statuses = [classify(r) for r in records]
    projections = [project(r) for r in records]

    alert_count = sum(
        1
        for r, s, p in zip(records, statuses, projections)
        if build_alert(r, s, p) is not None
    )
    reorder_count = sum(
        1
        for r, p in zip(records, projections)
        if advise(r, p, effective_lead_time(r, lead_time_by_supplier, config), config).should_reorder
    )

    status_counts = {status.value: 0 for status in StockStatus}
    for status in statuses:
        status_counts[status.value] += 1

    return InventorySummary(
        total_items=len(records),
        out_of_stock_count=status_counts[StockStatus.OUT_OF_STOCK.value],
        low_stock_count=(
            status_counts[StockStatus.CRITICAL.value] + status_counts[StockStatus.LOW.value]
        ),
        healthy_count=status_counts[StockStatus.HEALTHY.value],
        total_value=sum(clamped_stock(r) * r.unit_cost for r in records),
        reorder_count=reorder_count,
        alert_count=alert_count,
        status_counts=status_counts,
    )
