"""Stok yenileme motoru konfigürasyonu."""

from __future__ import annotations

import os
from dataclasses import dataclass

UNASSIGNED_SUPPLIER_ID = "unassigned"


@dataclass(frozen=True)
class ReplenishmentConfig:
    # Tedarikçide teslim süresi tanımlı değilse kullanılan süre (gün)
    default_lead_time_days: int = 7
    urgent_days: int = 3
    soon_days: int = 7
    unassigned_supplier_id: str = UNASSIGNED_SUPPLIER_ID
    po_notes: str = "Auto-generated PO for low stock items"

    def __post_init__(self) -> None:
        if self.default_lead_time_days < 0:
            raise ValueError("Varsayılan teslim süresi negatif olamaz")
        if self.urgent_days < 0 or self.soon_days < 0:
            raise ValueError("Aciliyet eşikleri negatif olamaz")
        if self.urgent_days > self.soon_days:
            raise ValueError(
                f"urgent_days ({self.urgent_days}) soon_days ({self.soon_days}) değerinden büyük olamaz"
            )

    @classmethod
    def from_env(cls) -> "ReplenishmentConfig":
        """Ortam değişkenlerinden konfigürasyon oluşturur (.env env_loader ile yüklenir)."""
        return cls(
            default_lead_time_days=int(os.environ.get("REPLENISHMENT_DEFAULT_LEAD_TIME_DAYS", 7)),
            urgent_days=int(os.environ.get("REPLENISHMENT_URGENT_DAYS", 3)),
            soon_days=int(os.environ.get("REPLENISHMENT_SOON_DAYS", 7)),
        )


DEFAULT_CONFIG = ReplenishmentConfig()
