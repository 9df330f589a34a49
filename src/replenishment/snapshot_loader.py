"""DynamoDB'den salt okunur envanter anlık görüntüsü (snapshot) yükler.

Motor bu modülü çağırmaz; MCP server ve scriptler gibi host katmanları
kayıtları buradan alıp saf fonksiyonlara verir.
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal
from typing import Any, Mapping, Optional

from botocore.exceptions import ClientError

from src.models.inventory import InventoryRecord
from src.replenishment.config import DEFAULT_CONFIG, ReplenishmentConfig

logger = logging.getLogger(__name__)

INVENTORY_TABLE = os.environ.get("INVENTORY_TABLE", "InventoryRecords")
SUPPLIERS_TABLE = os.environ.get("SUPPLIERS_TABLE", "Suppliers")


class SnapshotError(Exception):
    """Snapshot kaydı eksik veya bozuk."""
    pass


def _decimal_to_native(obj):
    if isinstance(obj, Decimal):
        return int(obj) if obj == int(obj) else float(obj)
    if isinstance(obj, dict):
        return {k: _decimal_to_native(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_decimal_to_native(i) for i in obj]
    return obj


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """snake_case ve camelCase alan adlarından ilk bulunanı döndürür."""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default


def record_from_dict(data: Mapping[str, Any]) -> InventoryRecord:
    """Düz bir mapping'den InventoryRecord oluşturur."""
    data = _decimal_to_native(dict(data))
    item_id = _pick(data, "item_id", "id", "product_id")
    if item_id is None:
        raise SnapshotError(f"Kayıtta id alanı yok: {sorted(data)}")

    supplier_id = _pick(data, "supplier_id", "supplierId")
    lead_time = _pick(data, "lead_time_days", "leadTimeDays")

    try:
        return InventoryRecord(
            item_id=str(item_id),
            name=str(_pick(data, "name", "product_name", default=item_id)),
            sku=str(_pick(data, "sku", default="")),
            current_stock=int(_pick(data, "current_stock", "currentStock", "stock_quantity", default=0)),
            min_stock=int(_pick(data, "min_stock", "minStock", default=0)),
            max_stock=int(_pick(data, "max_stock", "maxStock", default=0)),
            reorder_point=int(_pick(data, "reorder_point", "reorderPoint", default=0)),
            reorder_qty=int(_pick(data, "reorder_qty", "reorderQty", default=0)),
            avg_daily_sales=float(_pick(data, "avg_daily_sales", "avgDailySales", default=0.0)),
            unit_cost=float(_pick(data, "unit_cost", "unitCost", default=0.0)),
            supplier_id=str(supplier_id) if supplier_id is not None else None,
            lead_time_days=int(lead_time) if lead_time is not None else None,
        )
    except (TypeError, ValueError) as e:
        raise SnapshotError(f"Geçersiz alan değeri: {item_id}: {e}") from e


def _scan_all(table) -> list[dict]:
    """Sayfalı scan: LastEvaluatedKey bitene kadar okur."""
    items: list[dict] = []
    kwargs: dict = {}
    while True:
        resp = table.scan(**kwargs)
        items.extend(resp.get("Items", []))
        last_key = resp.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key


def load_inventory_records(dynamodb, table_name: Optional[str] = None) -> list[InventoryRecord]:
    """Envanter tablosundaki tüm kayıtları yükler; bozuk satırlar atlanır."""
    table = dynamodb.Table(table_name or INVENTORY_TABLE)
    try:
        items = _scan_all(table)
    except ClientError as e:
        logger.error("Envanter snapshot okuma hatası: %s", e)
        raise

    records: list[InventoryRecord] = []
    for item in items:
        try:
            records.append(record_from_dict(item))
        except SnapshotError as e:
            logger.warning("Envanter kaydı atlandı: %s", e)
    logger.info("%d envanter kaydı yüklendi", len(records))
    return records


def load_supplier_lead_times(
    dynamodb,
    table_name: Optional[str] = None,
    config: ReplenishmentConfig = DEFAULT_CONFIG,
) -> dict[str, int]:
    """Tedarikçi tablosundan {supplier_id: teslim süresi} haritası oluşturur."""
    table = dynamodb.Table(table_name or SUPPLIERS_TABLE)
    try:
        items = _scan_all(table)
    except ClientError as e:
        logger.error("Tedarikçi snapshot okuma hatası: %s", e)
        raise

    lead_times: dict[str, int] = {}
    for item in items:
        item = _decimal_to_native(item)
        supplier_id = _pick(item, "supplier_id", "id")
        if supplier_id is None:
            logger.warning("supplier_id olmayan tedarikçi kaydı atlandı")
            continue
        # Pasif tedarikçi haritaya girmez; ürünleri "unassigned" siparişe düşer
        if _pick(item, "is_active", "isActive", default=True) is False:
            logger.warning("Pasif tedarikçi atlandı: %s", supplier_id)
            continue
        lead_time = _pick(item, "default_lead_time_days", "lead_time_days")
        # 0 geçerli bir süredir; yalnız alan yoksa varsayılan kullanılır
        if lead_time is None:
            lead_times[str(supplier_id)] = config.default_lead_time_days
        else:
            lead_times[str(supplier_id)] = max(0, int(lead_time))
    logger.info("%d tedarikçi teslim süresi yüklendi", len(lead_times))
    return lead_times
