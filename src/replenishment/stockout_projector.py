"""Stockout Projector - Stoğun kaç gün sonra biteceğini tahmin eder.

Doğrusal tükenme modeli: gün = floor(stok / günlük ortalama satış).
Sıfır, negatif veya sonlu olmayan (NaN, inf) satış hızı sınırsız sayılır.
"""

from __future__ import annotations

import logging
import math

from src.models.inventory import InventoryRecord, StockoutProjection
from src.replenishment.stock_classifier import clamped_stock

logger = logging.getLogger(__name__)


def project(record: InventoryRecord) -> StockoutProjection:
    velocity = record.avg_daily_sales
    if not math.isfinite(velocity):
        logger.warning("Geçersiz satış hızı sınırsız sayıldı: %s = %s", record.item_id, velocity)
        return StockoutProjection(days_remaining=None)
    if velocity <= 0:
        return StockoutProjection(days_remaining=None)
    # Çok küçük hızlarda bölüm taşar
    try:
        ratio = clamped_stock(record) / velocity
    except OverflowError:
        return StockoutProjection(days_remaining=None)
    if not math.isfinite(ratio):
        return StockoutProjection(days_remaining=None)
    return StockoutProjection(days_remaining=math.floor(ratio))
