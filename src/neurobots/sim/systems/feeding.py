from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..utils.math2d import distance

if TYPE_CHECKING:
    from ..core.simulator import Simulator

logger = logging.getLogger(__name__)


def feed_bots(sim: Simulator) -> int:
    """Let every bot eat the first food item within its body radius.

    Returns the number of food items eaten; they are removed from the field.
    """
    eaten = 0
    foods = sim._foods
    for bot in sim._bots:
        for index, food in enumerate(foods):
            if distance(bot.position, food.position) < bot.size:
                bot.eat(food)
                del foods[index]
                eaten += 1
                break
    return eaten


def respawn_food(sim: Simulator, count: int) -> None:
    for _ in range(count):
        sim.spawn_food()
    if count:
        logger.debug("tick %d: respawned %d food", sim.ticks, count)
