"""Alert Generator - Stok durumlarından önem sırasına göre uyarı listesi üretir.

- Her ürün için en fazla bir uyarı
- Tükenen ve kritik ürünler CRITICAL, sipariş noktası altı WARNING
- Çıktı şiddete göre kararlı (stable) sıralanır; eşitlerde girdi sırası korunur
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from src.models.inventory import (
    AlertKind,
    AlertSeverity,
    InventoryRecord,
    StockAlert,
    StockoutProjection,
    StockStatus,
)
from src.replenishment.stock_classifier import classify, clamped_stock
from src.replenishment.stockout_projector import project

logger = logging.getLogger(__name__)


def _days_text(projection: StockoutProjection) -> str:
    if projection.is_unbounded:
        return "No stockout projected at current sales velocity."
    return f"{projection.days_remaining} days until stockout."


def build_alert(
    record: InventoryRecord,
    status: Optional[StockStatus] = None,
    projection: Optional[StockoutProjection] = None,
) -> Optional[StockAlert]:
    """Tek bir kayıt için uyarı oluşturur; sağlıklı stokta None döner.

    Önceden hesaplanmış durum ve tahmin verilirse yeniden hesaplanmaz.
    """
    if status is None:
        status = classify(record)
    if projection is None:
        projection = project(record)
    stock = clamped_stock(record)

    if status == StockStatus.OUT_OF_STOCK:
        severity = AlertSeverity.CRITICAL
        kind = AlertKind.OUT_OF_STOCK
        message = f"{record.name} is out of stock! Immediate reorder required."
    elif status == StockStatus.CRITICAL:
        severity = AlertSeverity.CRITICAL
        kind = AlertKind.LOW_STOCK
        message = f"{record.name} is critically low ({stock} units). {_days_text(projection)}"
    elif status == StockStatus.LOW:
        severity = AlertSeverity.WARNING
        kind = AlertKind.BELOW_REORDER_POINT
        message = (
            f"{record.name} is below reorder point ({stock}/{record.reorder_point}). "
            "Consider reordering."
        )
    else:
        return None

    return StockAlert(
        item_id=record.item_id,
        severity=severity,
        kind=kind,
        message=message,
        sku=record.sku,
        item_name=record.name,
        current_stock=stock,
        days_remaining=projection.days_remaining,
    )


def generate_alerts(records: Iterable[InventoryRecord]) -> list[StockAlert]:
    alerts: list[StockAlert] = []
    for record in records:
        alert = build_alert(record)
        if alert is not None:
            alerts.append(alert)

    # sorted() kararlıdır
    alerts = sorted(alerts, key=lambda a: a.severity.rank)

    if alerts:
        logger.info(
            "%d stok uyarısı üretildi (%d kritik)",
            len(alerts),
            sum(1 for a in alerts if a.severity == AlertSeverity.CRITICAL),
        )
    return alerts
