"""Demo için örnek envanter ve tedarikçi verileri (admin paneli katalogu)."""

from __future__ import annotations

from src.models.inventory import InventoryRecord


def sample_records() -> list[InventoryRecord]:
    return [
        InventoryRecord("1", "Organic Whole Wheat Flour", "FLR-001", current_stock=45, min_stock=50,
                        max_stock=300, reorder_point=75, reorder_qty=100, avg_daily_sales=8.5,
                        unit_cost=35.0, supplier_id="SUP-ORGANIC-MILLS"),
        InventoryRecord("2", "Premium Basmati Rice (25kg)", "RIC-002", current_stock=180, min_stock=50,
                        max_stock=400, reorder_point=100, reorder_qty=150, avg_daily_sales=5.2,
                        unit_cost=65.0, supplier_id="SUP-GOLDEN-HARVEST"),
        InventoryRecord("3", "Cold Pressed Coconut Oil", "OIL-003", current_stock=0, min_stock=30,
                        max_stock=200, reorder_point=50, reorder_qty=80, avg_daily_sales=3.8,
                        unit_cost=18.0, supplier_id="SUP-TROPICAL-OILS"),
        InventoryRecord("4", "Organic Honey (500g)", "HON-004", current_stock=75, min_stock=25,
                        max_stock=150, reorder_point=40, reorder_qty=50, avg_daily_sales=2.1,
                        unit_cost=12.0, supplier_id="SUP-NATURES-BEST"),
        InventoryRecord("5", "Green Tea Premium Pack", "TEA-005", current_stock=15, min_stock=20,
                        max_stock=100, reorder_point=30, reorder_qty=40, avg_daily_sales=4.2,
                        unit_cost=22.0, supplier_id="SUP-ASIAN-TEA"),
        InventoryRecord("6", "Extra Virgin Olive Oil", "OIL-006", current_stock=92, min_stock=40,
                        max_stock=250, reorder_point=60, reorder_qty=100, avg_daily_sales=6.3,
                        unit_cost=28.0, supplier_id="SUP-MEDITERRANEAN"),
        InventoryRecord("7", "Quinoa Organic (1kg)", "GRN-007", current_stock=28, min_stock=30,
                        max_stock=120, reorder_point=45, reorder_qty=60, avg_daily_sales=2.8,
                        unit_cost=45.0, supplier_id="SUP-ANDEAN"),
        InventoryRecord("8", "Almond Butter (340g)", "NUT-008", current_stock=156, min_stock=35,
                        max_stock=200, reorder_point=50, reorder_qty=75, avg_daily_sales=1.9,
                        unit_cost=15.0, supplier_id="SUP-NUTTY-DELIGHTS"),
    ]


def sample_lead_times() -> dict[str, int]:
    # SUP-ANDEAN bilerek yok: atanmamış sipariş kovasını gösterir
    return {
        "SUP-ORGANIC-MILLS": 5,
        "SUP-GOLDEN-HARVEST": 7,
        "SUP-TROPICAL-OILS": 10,
        "SUP-NATURES-BEST": 7,
        "SUP-ASIAN-TEA": 7,
        "SUP-MEDITERRANEAN": 14,
        "SUP-NUTTY-DELIGHTS": 6,
    }
