from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    population: int
    food: int
    eaten: int
    culled: int
    spawned: int
    average_energy: float
    average_loss: float
    tick_duration_ms: float = 0.0
