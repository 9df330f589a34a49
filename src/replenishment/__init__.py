from src.replenishment.alert_generator import generate_alerts
from src.replenishment.config import ReplenishmentConfig
from src.replenishment.inventory_summary import rank_reorders, stock_level_pct, summarize
from src.replenishment.po_consolidator import consolidate
from src.replenishment.reorder_advisor import advise, effective_lead_time
from src.replenishment.stock_classifier import classify
from src.replenishment.stockout_projector import project

__all__ = [
    "ReplenishmentConfig",
    "advise",
    "classify",
    "consolidate",
    "effective_lead_time",
    "generate_alerts",
    "project",
    "rank_reorders",
    "stock_level_pct",
    "summarize",
]
