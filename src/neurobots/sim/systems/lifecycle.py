from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pygame.math import Vector2

from ..core.bot import Bot
from ..core.food import Food

if TYPE_CHECKING:
    from ..core.simulator import Simulator

logger = logging.getLogger(__name__)


def create_bot(sim: Simulator) -> Bot:
    bot = Bot.from_config(sim._config.bot, sim._rng)
    bot.randomize_pos_rot(sim.field_size)
    return bot


def create_food(sim: Simulator) -> Food:
    width, height = sim.field_size
    config = sim._config.food
    margin = config.spawn_margin
    low = Vector2(width * margin, height * margin)
    high = Vector2(width * (1.0 - margin), height * (1.0 - margin))
    position = sim._rng.next_point(low, high)
    energy = sim._rng.next_range(*config.energy_range)
    return Food(position=position, size=config.size, energy=energy)


def cull_bots(sim: Simulator) -> int:
    field_size = sim.field_size
    survivors = []
    culled = 0
    for bot in sim._bots:
        if bot.in_boundary(field_size) and not bot.is_starving():
            survivors.append(bot)
            continue
        culled += 1
        logger.debug(
            "tick %d: culled bot at (%.1f, %.1f) with energy %.1f",
            sim.ticks,
            bot.position.x,
            bot.position.y,
            bot.energy,
        )
    sim._bots[:] = survivors
    return culled


def repopulate(sim: Simulator) -> int:
    spawned = 0
    while len(sim._bots) < sim.min_bot_count:
        sim.spawn_bot()
        spawned += 1
    return spawned
