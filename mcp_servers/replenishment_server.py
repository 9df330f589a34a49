"""
Replenishment MCP Server

Exposes the inventory replenishment engine as tools: stock classification,
stockout projection, reorder advice, stock alerts and draft purchase orders.
Snapshots come inline ("records") or from DynamoDB.
"""

import json
import logging
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
import env_loader

import boto3
from datetime import datetime
from typing import Dict, List, Optional
from mcp.server import Server
from mcp.types import Tool, TextContent

from src.replenishment import (
    ReplenishmentConfig,
    advise,
    classify,
    consolidate,
    effective_lead_time,
    generate_alerts,
    project,
    summarize,
)
from src.replenishment.serializers import (
    alert_to_dict,
    projection_to_dict,
    purchase_order_to_dict,
    suggestion_to_dict,
    summary_to_dict,
)
from src.replenishment.snapshot_loader import (
    load_inventory_records,
    load_supplier_lead_times,
    record_from_dict,
)

logging.basicConfig(level=env_loader.LOG_LEVEL, format=env_loader.LOG_FORMAT)
logger = logging.getLogger("replenishment_server")
logging.getLogger("mcp").setLevel(logging.WARNING)

app = Server("replenishment")

REGION = os.environ.get("AWS_DEFAULT_REGION", "us-west-2")
CONFIG = ReplenishmentConfig.from_env()

_dynamodb = None


def _get_dynamodb():
    global _dynamodb
    if _dynamodb is None:
        _dynamodb = boto3.resource("dynamodb", region_name=REGION)
    return _dynamodb


def _result(data):
    return [TextContent(type="text", text=json.dumps(data, indent=2, ensure_ascii=False))]


_SNAPSHOT_PROPS = {
    "records": {"type": "array", "items": {"type": "object"},
                "description": "Optional: inline inventory records; DynamoDB snapshot is used when omitted"},
    "lead_times": {"type": "object", "additionalProperties": {"type": "integer"},
                   "description": "Optional: supplier_id -> lead time days"},
}


@app.list_tools()
async def list_tools() -> List[Tool]:
    return [
        Tool(name="classify_stock", description="Classify stock health (out_of_stock, critical, low, healthy) per item",
             inputSchema={"type": "object", "properties": dict(_SNAPSHOT_PROPS)}),
        Tool(name="project_stockout", description="Project days until stockout from sales velocity per item",
             inputSchema={"type": "object", "properties": dict(_SNAPSHOT_PROPS)}),
        Tool(name="advise_reorder", description="Reorder decision, quantity and urgency per item",
             inputSchema={"type": "object", "properties": dict(_SNAPSHOT_PROPS)}),
        Tool(name="generate_alerts", description="Severity ranked stock alerts",
             inputSchema={"type": "object", "properties": dict(_SNAPSHOT_PROPS)}),
        Tool(name="consolidate_purchase_orders", description="Supplier grouped draft purchase orders, most urgent first",
             inputSchema={"type": "object", "properties": dict(_SNAPSHOT_PROPS)}),
        Tool(name="inventory_summary", description="Dashboard counters: totals, out of stock, low stock, inventory value",
             inputSchema={"type": "object", "properties": dict(_SNAPSHOT_PROPS)}),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> List[TextContent]:
    return _result(handle_tool(name, arguments or {}))


def handle_tool(name: str, arguments: dict, now: Optional[datetime] = None) -> Dict:
    handlers = {
        "classify_stock": lambda a: classify_stock(*_snapshot(a)),
        "project_stockout": lambda a: project_stockout(*_snapshot(a)),
        "advise_reorder": lambda a: advise_reorder(*_snapshot(a)),
        "generate_alerts": lambda a: list_alerts(*_snapshot(a)),
        "consolidate_purchase_orders": lambda a: consolidate_purchase_orders(*_snapshot(a), now=now),
        "inventory_summary": lambda a: inventory_summary(*_snapshot(a)),
    }
    handler = handlers.get(name)
    if not handler:
        raise ValueError(f"Unknown tool: {name}")
    try:
        return handler(arguments)
    except Exception as e:
        logger.error("Tool hatasi [%s]: %s", name, e)
        return {"success": False, "error": str(e)}


def _snapshot(arguments: dict) -> tuple:
    """Inline kayitlar verilmisse onlari, yoksa DynamoDB snapshot'ini kullanir."""
    if arguments.get("records") is not None:
        records = [record_from_dict(r) for r in arguments["records"]]
        lead_times = {str(k): int(v) for k, v in (arguments.get("lead_times") or {}).items()}
        return records, lead_times

    dynamodb = _get_dynamodb()
    records = load_inventory_records(dynamodb)
    lead_times = arguments.get("lead_times") or load_supplier_lead_times(dynamodb, config=CONFIG)
    return records, lead_times


# --- Implementation ---

def classify_stock(records, lead_times) -> Dict:
    data = [{"item_id": r.item_id, "sku": r.sku, "status": classify(r).value} for r in records]
    return {"success": True, "count": len(data), "data": data}


def project_stockout(records, lead_times) -> Dict:
    data = [{"item_id": r.item_id, "sku": r.sku, **projection_to_dict(project(r))} for r in records]
    return {"success": True, "count": len(data), "data": data}


def advise_reorder(records, lead_times) -> Dict:
    data = []
    for r in records:
        lead_time = effective_lead_time(r, lead_times, CONFIG)
        suggestion = advise(r, project(r), lead_time, CONFIG)
        data.append({"item_id": r.item_id, "sku": r.sku, "lead_time_days": lead_time,
                     **suggestion_to_dict(suggestion)})
    return {"success": True, "count": len(data), "data": data}


def list_alerts(records, lead_times) -> Dict:
    alerts = generate_alerts(records)
    return {"success": True, "count": len(alerts), "data": [alert_to_dict(a) for a in alerts]}


def consolidate_purchase_orders(records, lead_times, now: Optional[datetime] = None) -> Dict:
    # Saat host'a aittir; motor yalnizca parametre olarak alir
    now = now or datetime.utcnow()
    orders = consolidate(records, lead_times, now, CONFIG)
    return {
        "success": True,
        "count": len(orders),
        "estimated_total": round(sum(po.estimated_total for po in orders), 2),
        "data": [purchase_order_to_dict(po) for po in orders],
    }


def inventory_summary(records, lead_times) -> Dict:
    return {"success": True, "data": summary_to_dict(summarize(records, lead_times, CONFIG))}


if __name__ == "__main__":
    import asyncio
    from mcp.server.stdio import stdio_server

    async def run():
        async with stdio_server() as (read, write):
            await app.run(read, write, app.create_initialization_options())

    asyncio.run(run())
