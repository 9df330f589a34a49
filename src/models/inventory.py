"""Stok yenileme (replenishment) veri modelleri."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class StockStatus(str, Enum):
    OUT_OF_STOCK = "out_of_stock"
    CRITICAL = "critical"
    LOW = "low"
    HEALTHY = "healthy"

    @property
    def rank(self) -> int:
        """Şiddet sırası: 0 en acil durumdur."""
        return _STATUS_ORDER.index(self)


class ReorderUrgency(str, Enum):
    URGENT = "urgent"
    SOON = "soon"
    PLANNED = "planned"
    NONE = "none"

    @property
    def rank(self) -> int:
        return _URGENCY_ORDER.index(self)


class AlertSeverity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)


class AlertKind(str, Enum):
    OUT_OF_STOCK = "out_of_stock"
    LOW_STOCK = "low_stock"
    BELOW_REORDER_POINT = "below_reorder"


# Sıralama tanım sırasına değil bu tuple'lara dayanır
_STATUS_ORDER = (
    StockStatus.OUT_OF_STOCK,
    StockStatus.CRITICAL,
    StockStatus.LOW,
    StockStatus.HEALTHY,
)
_URGENCY_ORDER = (
    ReorderUrgency.URGENT,
    ReorderUrgency.SOON,
    ReorderUrgency.PLANNED,
    ReorderUrgency.NONE,
)
_SEVERITY_ORDER = (
    AlertSeverity.CRITICAL,
    AlertSeverity.WARNING,
    AlertSeverity.INFO,
)


@dataclass(frozen=True)
class InventoryRecord:
    item_id: str
    name: str
    sku: str
    current_stock: int
    min_stock: int
    max_stock: int
    reorder_point: int
    reorder_qty: int
    avg_daily_sales: float
    unit_cost: float
    supplier_id: Optional[str] = None
    lead_time_days: Optional[int] = None


@dataclass(frozen=True)
class StockoutProjection:
    # None: satış hızı sıfır, stok hiç bitmez
    days_remaining: Optional[int]

    @property
    def is_unbounded(self) -> bool:
        return self.days_remaining is None


@dataclass(frozen=True)
class ReorderSuggestion:
    should_reorder: bool
    suggested_qty: int
    urgency: ReorderUrgency
    estimated_cost: float


@dataclass(frozen=True)
class StockAlert:
    item_id: str
    severity: AlertSeverity
    kind: AlertKind
    message: str
    sku: str = ""
    item_name: str = ""
    current_stock: int = 0
    days_remaining: Optional[int] = None


@dataclass(frozen=True)
class PurchaseOrderLine:
    item_id: str
    sku: str
    name: str
    quantity: int
    unit_cost: float
    urgency: ReorderUrgency

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_cost


@dataclass
class DraftPurchaseOrder:
    supplier_id: str
    lines: list[PurchaseOrderLine]
    estimated_total: float
    expected_delivery_date: datetime
    lead_time_days: int
    status: str = "draft"
    notes: str = ""

    @property
    def priority(self) -> ReorderUrgency:
        """Siparişteki en acil satırın aciliyeti."""
        if not self.lines:
            return ReorderUrgency.NONE
        return min((line.urgency for line in self.lines), key=lambda u: u.rank)


@dataclass
class InventorySummary:
    total_items: int = 0
    out_of_stock_count: int = 0
    low_stock_count: int = 0
    healthy_count: int = 0
    total_value: float = 0.0
    reorder_count: int = 0
    alert_count: int = 0
    status_counts: dict[str, int] = field(default_factory=dict)
