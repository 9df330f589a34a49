"""Motor çıktılarını JSON uyumlu dict'lere çevirir."""

from __future__ import annotations

from dataclasses import asdict

from src.models.inventory import (
    DraftPurchaseOrder,
    InventorySummary,
    ReorderSuggestion,
    StockAlert,
    StockoutProjection,
)


def projection_to_dict(projection: StockoutProjection) -> dict:
    return {
        "days_remaining": projection.days_remaining,
        "unbounded": projection.is_unbounded,
    }


def suggestion_to_dict(suggestion: ReorderSuggestion) -> dict:
    return {
        "should_reorder": suggestion.should_reorder,
        "suggested_qty": suggestion.suggested_qty,
        "urgency": suggestion.urgency.value,
        "estimated_cost": round(suggestion.estimated_cost, 2),
    }


def alert_to_dict(alert: StockAlert) -> dict:
    return {
        "item_id": alert.item_id,
        "sku": alert.sku,
        "item_name": alert.item_name,
        "kind": alert.kind.value,
        "severity": alert.severity.value,
        "message": alert.message,
        "current_stock": alert.current_stock,
        "days_remaining": alert.days_remaining,
    }


def purchase_order_to_dict(po: DraftPurchaseOrder) -> dict:
    return {
        "supplier_id": po.supplier_id,
        "status": po.status,
        "priority": po.priority.value,
        "lead_time_days": po.lead_time_days,
        "expected_delivery_date": po.expected_delivery_date.date().isoformat(),
        "estimated_total": round(po.estimated_total, 2),
        "notes": po.notes,
        "lines": [
            {
                "item_id": line.item_id,
                "sku": line.sku,
                "name": line.name,
                "quantity": line.quantity,
                "unit_cost": line.unit_cost,
                "urgency": line.urgency.value,
                "line_total": round(line.line_total, 2),
            }
            for line in po.lines
        ],
    }


def summary_to_dict(summary: InventorySummary) -> dict:
    data = asdict(summary)
    data["total_value"] = round(summary.total_value, 2)
    return data
