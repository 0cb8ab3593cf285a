from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .metrics import TickMetrics


@dataclass(slots=True)
class Snapshot:
    tick: int
    metrics: Optional[TickMetrics]
    field: "SnapshotField"
    bots: List[Dict[str, Any]]
    foods: List[Dict[str, Any]]


@dataclass(slots=True)
class SnapshotField:
    width: float
    height: float
    min_bot_count: int
    seed: Optional[int]
    config_version: str
