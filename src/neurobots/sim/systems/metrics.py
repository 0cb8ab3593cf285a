from __future__ import annotations

from typing import TYPE_CHECKING

from ..types.metrics import TickMetrics

if TYPE_CHECKING:
    from ..core.simulator import Simulator


def create_metrics(
    sim: Simulator,
    tick: int,
    eaten: int,
    culled: int,
    spawned: int,
    duration_ms: float,
) -> TickMetrics:
    bots = sim._bots
    population = len(bots)
    if population:
        average_energy = sum(bot.energy for bot in bots) / population
        average_loss = sum(bot.last_loss for bot in bots) / population
    else:
        average_energy = 0.0
        average_loss = 0.0
    return TickMetrics(
        tick=tick,
        population=population,
        food=len(sim._foods),
        eaten=eaten,
        culled=culled,
        spawned=spawned,
        average_energy=average_energy,
        average_loss=average_loss,
        tick_duration_ms=duration_ms,
    )
