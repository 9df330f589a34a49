"""Stock Classifier - Bir stok kaydını sağlık durumuna eşler.

- Stok 0 ise tükendi (out_of_stock)
- Minimum stok ve altı kritik, sipariş noktası ve altı düşük
- Bozuk eşik konfigürasyonu kritik sayılır; stok 0 ise yine tükendi döner
  (iki durum da CRITICAL şiddetli uyarı üretir)
"""

from __future__ import annotations

import logging

from src.models.inventory import InventoryRecord, StockStatus

logger = logging.getLogger(__name__)


def clamped_stock(record: InventoryRecord) -> int:
    """Negatif stoğu 0'a çeker."""
    return max(0, record.current_stock)


def has_inverted_thresholds(record: InventoryRecord) -> bool:
    """0 <= min <= reorder_point <= max ve min < max koşulunu kontrol eder."""
    return (
        record.min_stock < 0
        or record.min_stock > record.reorder_point
        or record.reorder_point > record.max_stock
        or record.min_stock >= record.max_stock
    )


def classify(record: InventoryRecord) -> StockStatus:
    stock = clamped_stock(record)
    if record.current_stock < 0:
        logger.warning("Negatif stok 0'a çekildi: %s = %d", record.item_id, record.current_stock)

    if stock == 0:
        return StockStatus.OUT_OF_STOCK

    if has_inverted_thresholds(record):
        logger.warning(
            "Hatalı eşik konfigürasyonu, kritik sayıldı: %s (min=%d, rop=%d, max=%d)",
            record.item_id,
            record.min_stock,
            record.reorder_point,
            record.max_stock,
        )
        return StockStatus.CRITICAL

    if stock <= record.min_stock:
        return StockStatus.CRITICAL
    if stock <= record.reorder_point:
        return StockStatus.LOW
    return StockStatus.HEALTHY
