"""Purchase Order Consolidator - Sipariş önerilerini tedarikçi bazında taslak siparişlere toplar.

Akış:
1. Her kayıt için tükenme tahmini ve sipariş önerisi
2. Sipariş gerektirmeyenleri ele
3. Tedarikçiye göre grupla (bilinmeyen tedarikçi -> "unassigned")
4. Satırlar girdi sırasını korur, toplam maliyet ve teslim tarihi hesaplanır
5. Siparişler en acil satırlarına göre sıralanır

Şu anki zaman parametre olarak gelir; modül saat okumaz.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Iterable, Mapping, Optional

from src.models.inventory import (
    DraftPurchaseOrder,
    InventoryRecord,
    PurchaseOrderLine,
    ReorderSuggestion,
)
from src.replenishment.config import DEFAULT_CONFIG, ReplenishmentConfig
from src.replenishment.reorder_advisor import advise, effective_lead_time
from src.replenishment.stockout_projector import project

logger = logging.getLogger(__name__)


def _supplier_key(
    record: InventoryRecord,
    lead_time_by_supplier: Mapping[str, int],
    config: ReplenishmentConfig,
) -> str:
    if record.supplier_id and record.supplier_id in lead_time_by_supplier:
        return record.supplier_id
    return config.unassigned_supplier_id


def suggest_all(
    records: Iterable[InventoryRecord],
    lead_time_by_supplier: Optional[Mapping[str, int]] = None,
    config: ReplenishmentConfig = DEFAULT_CONFIG,
) -> list[tuple[InventoryRecord, ReorderSuggestion]]:
    """Her kayıt için tahmin + öneri üretir, girdi sırasını korur."""
    lead_time_by_supplier = lead_time_by_supplier or {}
    results = []
    for record in records:
        lead_time = effective_lead_time(record, lead_time_by_supplier, config)
        suggestion = advise(record, project(record), lead_time, config)
        results.append((record, suggestion))
    return results


def consolidate(
    records: Iterable[InventoryRecord],
    lead_time_by_supplier: Mapping[str, int],
    now: datetime,
    config: ReplenishmentConfig = DEFAULT_CONFIG,
) -> list[DraftPurchaseOrder]:
    lead_time_by_supplier = lead_time_by_supplier or {}

    # dict ekleme sırası = tedarikçinin girdide ilk görülme sırası
    groups: dict[str, list[tuple[InventoryRecord, ReorderSuggestion]]] = {}
    for record, suggestion in suggest_all(records, lead_time_by_supplier, config):
        if not suggestion.should_reorder:
            continue
        key = _supplier_key(record, lead_time_by_supplier, config)
        if key == config.unassigned_supplier_id:
            logger.warning(
                "Tedarikçisi bilinmeyen ürün atanmamış siparişe eklendi: %s (supplier=%s)",
                record.item_id,
                record.supplier_id,
            )
        groups.setdefault(key, []).append((record, suggestion))

    orders: list[DraftPurchaseOrder] = []
    for supplier_id, entries in groups.items():
        lines = [
            PurchaseOrderLine(
                item_id=record.item_id,
                sku=record.sku,
                name=record.name,
                quantity=suggestion.suggested_qty,
                unit_cost=record.unit_cost,
                urgency=suggestion.urgency,
            )
            for record, suggestion in entries
        ]

        # Bilinen tedarikçide tüm satırlar aynı süreyi verir; atanmamışlarda en uzun süre
        lead_time = max(
            effective_lead_time(record, lead_time_by_supplier, config)
            for record, _ in entries
        )

        orders.append(
            DraftPurchaseOrder(
                supplier_id=supplier_id,
                lines=lines,
                estimated_total=sum(s.estimated_cost for _, s in entries),
                expected_delivery_date=now + timedelta(days=lead_time),
                lead_time_days=lead_time,
                notes=config.po_notes,
            )
        )

    orders.sort(key=lambda po: po.priority.rank)

    if orders:
        logger.info(
            "%d taslak satın alma siparişi oluşturuldu (%d satır)",
            len(orders),
            sum(len(po.lines) for po in orders),
        )
    return orders
