"""Domain model for daily store reports."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class StoreReport:
    """Daily sales figures for one store. upt: units per transaction; ads: average dollar sale."""

    store_code: str
    date: datetime
    total_sales: float
    total_transactions: int
    total_items: int
    upt: float
    ads: float
    ccp_pct: float
    gp_pct: float
    record_id: Optional[str] = None
    modified_at: Optional[datetime] = None
