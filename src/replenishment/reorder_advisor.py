"""Reorder Advisor - Bir ürünün şimdi sipariş edilip edilmeyeceğine karar verir.

Sipariş tetikleyicileri (herhangi biri yeterli):
1. Kalan gün <= tedarik süresi (yeni sipariş gelmeden stok biter)
2. Mevcut stok <= sipariş noktası

Tetiklendiğinde miktar max(reorder_qty, max_stock - stok) olur; yani
minimum parti miktarının altına inilmez ama gerekirse tavana tamamlanır.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from src.models.inventory import (
    InventoryRecord,
    ReorderSuggestion,
    ReorderUrgency,
    StockoutProjection,
)
from src.replenishment.config import DEFAULT_CONFIG, ReplenishmentConfig
from src.replenishment.stock_classifier import clamped_stock

logger = logging.getLogger(__name__)

NO_REORDER = ReorderSuggestion(
    should_reorder=False,
    suggested_qty=0,
    urgency=ReorderUrgency.NONE,
    estimated_cost=0.0,
)


def effective_lead_time(
    record: InventoryRecord,
    lead_time_by_supplier: Optional[Mapping[str, int]] = None,
    config: ReplenishmentConfig = DEFAULT_CONFIG,
) -> int:
    """Tedarikçi süresi, yoksa kayıttaki süre, o da yoksa varsayılan süre."""
    if lead_time_by_supplier and record.supplier_id in lead_time_by_supplier:
        lead_time = lead_time_by_supplier[record.supplier_id]
        if lead_time is not None:
            return max(0, int(lead_time))
    if record.lead_time_days is not None:
        return max(0, record.lead_time_days)
    return config.default_lead_time_days


def urgency_for(
    projection: StockoutProjection, config: ReplenishmentConfig = DEFAULT_CONFIG
) -> ReorderUrgency:
    """Kalan gün sayısını aciliyet seviyesine çevirir."""
    if projection.is_unbounded:
        return ReorderUrgency.PLANNED
    if projection.days_remaining <= config.urgent_days:
        return ReorderUrgency.URGENT
    if projection.days_remaining <= config.soon_days:
        return ReorderUrgency.SOON
    return ReorderUrgency.PLANNED


def advise(
    record: InventoryRecord,
    projection: StockoutProjection,
    lead_time_days: int,
    config: ReplenishmentConfig = DEFAULT_CONFIG,
) -> ReorderSuggestion:
    stock = clamped_stock(record)

    runs_out_before_delivery = (
        not projection.is_unbounded and projection.days_remaining <= lead_time_days
    )
    at_reorder_point = stock <= record.reorder_point

    if not (runs_out_before_delivery or at_reorder_point):
        return NO_REORDER

    suggested_qty = max(0, record.reorder_qty, record.max_stock - stock)
    urgency = urgency_for(projection, config)

    logger.debug(
        "Sipariş önerisi: %s qty=%d urgency=%s (gün=%s, tedarik=%d, rop=%s)",
        record.item_id,
        suggested_qty,
        urgency.value,
        projection.days_remaining,
        lead_time_days,
        at_reorder_point,
    )

    return ReorderSuggestion(
        should_reorder=True,
        suggested_qty=suggested_qty,
        urgency=urgency,
        estimated_cost=suggested_qty * record.unit_cost,
    )
