"""
Stok Yenileme Motoru Demo Script'i.

Admin panelindeki örnek katalog üzerinde motoru çalıştırır: stok durumu,
uyarılar ve tedarikçi bazlı taslak satın alma siparişleri.

Kullanım:
    python demo.py
    python demo.py --json
"""

import json
import logging
import sys
from datetime import datetime

import env_loader

from src.replenishment import (
    ReplenishmentConfig,
    classify,
    consolidate,
    generate_alerts,
    project,
    rank_reorders,
    stock_level_pct,
    summarize,
)
from src.replenishment.sample_data import sample_lead_times, sample_records
from src.replenishment.serializers import (
    alert_to_dict,
    purchase_order_to_dict,
    summary_to_dict,
)

logging.basicConfig(level=env_loader.LOG_LEVEL, format=env_loader.LOG_FORMAT)
logger = logging.getLogger("demo")

SEVERITY_ICONS = {"critical": "🔴", "warning": "🟡", "info": "🔵"}


def print_stock_table(records):
    print("\n--- Stok Durumu ---")
    for r in records:
        days = project(r).days_remaining
        days_text = "∞" if days is None else f"{days}g"
        print(
            f"   {r.sku:<8} {r.name:<30} {r.current_stock:>4}/{r.max_stock:<4} "
            f"%{stock_level_pct(r):>5.1f}  {classify(r).value:<12} {days_text}"
        )


def print_alerts(alerts):
    print(f"\n--- Uyarılar ({len(alerts)}) ---")
    for a in alerts:
        print(f"   {SEVERITY_ICONS.get(a.severity.value, '•')} {a.message}")


def print_reorder_queue(queue):
    print(f"\n--- Sipariş Kuyruğu ({len(queue)}) ---")
    for record, suggestion in queue:
        print(
            f"   [{suggestion.urgency.value:<7}] {record.sku:<8} x{suggestion.suggested_qty:<4} "
            f"${suggestion.estimated_cost:,.2f}"
        )


def print_orders(orders):
    print(f"\n--- Taslak Satın Alma Siparişleri ({len(orders)}) ---")
    for po in orders:
        print(
            f"   {po.supplier_id:<20} öncelik={po.priority.value:<7} satır={len(po.lines)} "
            f"toplam=${po.estimated_total:,.2f} teslim={po.expected_delivery_date.date().isoformat()}"
        )


def main():
    config = ReplenishmentConfig.from_env()
    records = sample_records()
    lead_times = sample_lead_times()
    now = datetime.utcnow()

    alerts = generate_alerts(records)
    orders = consolidate(records, lead_times, now, config)
    summary = summarize(records, lead_times, config)

    if "--json" in sys.argv:
        print(json.dumps({
            "summary": summary_to_dict(summary),
            "alerts": [alert_to_dict(a) for a in alerts],
            "purchase_orders": [purchase_order_to_dict(po) for po in orders],
        }, indent=2, ensure_ascii=False))
        return

    print("=" * 60)
    print("  Stok Yenileme Motoru - Demo")
    print("=" * 60)
    print_stock_table(records)
    print_alerts(alerts)
    print_reorder_queue(rank_reorders(records, lead_times, config))
    print_orders(orders)

    print("\n--- Özet ---")
    print(f"   Toplam ürün: {summary.total_items}")
    print(f"   Tükenen: {summary.out_of_stock_count}  Düşük stok: {summary.low_stock_count}")
    print(f"   Envanter değeri: ${summary.total_value:,.2f}")
    logger.info("Demo tamamlandı")


if __name__ == "__main__":
    main()
