from __future__ import annotations

import dataclasses
import logging
from time import perf_counter
from typing import List, Optional, Tuple

from .bot import Bot
from .config import SimulationConfig
from .environment import PERCEPT_SLOTS
from .food import Food
from .rng import DeterministicRng
from ..systems import feeding, lifecycle, metrics as metrics_system, sensors
from ..types.metrics import TickMetrics
from ..types.renderable import render_payload
from ..types.snapshot import Snapshot, SnapshotField
from ..utils.math2d import Line

logger = logging.getLogger(__name__)


class Simulator:
    """Owns every bot and food item and advances them one tick at a time.

    Nothing else mutates the populations; readers such as a renderer should
    look at them (or at :meth:`snapshot`) only between calls to :meth:`cycle`.
    """

    def __init__(
        self,
        field_size: Optional[Tuple[float, float]] = None,
        min_bot_count: Optional[int] = None,
        config: Optional[SimulationConfig] = None,
        rng: Optional[DeterministicRng] = None,
    ):
        config = config if config is not None else SimulationConfig()
        overrides = {}
        if field_size is not None:
            overrides["field_size"] = (float(field_size[0]), float(field_size[1]))
        if min_bot_count is not None:
            overrides["min_bot_count"] = min_bot_count
        if overrides:
            config = dataclasses.replace(config, **overrides)

        width, height = config.field_size
        if width <= 0 or height <= 0:
            raise ValueError(f"field size must be positive, got {config.field_size}")
        if config.min_bot_count < 0:
            raise ValueError(f"min_bot_count must not be negative, got {config.min_bot_count}")
        if config.bot.units < PERCEPT_SLOTS:
            raise ValueError(f"bots need at least {PERCEPT_SLOTS} units to read the percept, got {config.bot.units}")

        self._config = config
        self._rng = rng if rng is not None else DeterministicRng(config.seed)
        self._boundaries: List[Line] = sensors.build_boundaries(config.field_size)
        self._bots: List[Bot] = []
        self._foods: List[Food] = []
        self._ticks = 0
        self._metrics: TickMetrics | None = None
        self._bootstrap()

    def _bootstrap(self) -> None:
        for _ in range(self._config.min_bot_count):
            self.spawn_bot()
        for _ in range(self._config.initial_food):
            self.spawn_food()
        logger.info(
            "simulator ready: field %gx%g, %d bots, %d food, seed %s",
            self._config.field_size[0],
            self._config.field_size[1],
            len(self._bots),
            len(self._foods),
            self._rng.seed,
        )

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def bots(self) -> List[Bot]:
        return self._bots

    @property
    def foods(self) -> List[Food]:
        return self._foods

    @property
    def field_size(self) -> Tuple[float, float]:
        return self._config.field_size

    @property
    def min_bot_count(self) -> int:
        return self._config.min_bot_count

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def boundaries(self) -> List[Line]:
        return self._boundaries

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def get_bots(self) -> List[Bot]:
        return self._bots

    def get_foods(self) -> List[Food]:
        return self._foods

    def get_field_size(self) -> Tuple[float, float]:
        return self.field_size

    def get_ticks(self) -> int:
        return self._ticks

    def spawn_bot(self) -> Bot:
        bot = lifecycle.create_bot(self)
        self._bots.append(bot)
        return bot

    def spawn_food(self) -> Food:
        food = lifecycle.create_food(self)
        self._foods.append(food)
        return food

    def cycle(self) -> TickMetrics:
        start = perf_counter()
        bot_config = self._config.bot

        eaten = feeding.feed_bots(self)
        feeding.respawn_food(self, eaten)

        for bot in self._bots:
            environment = sensors.sense(bot, self._boundaries, self._foods, bot_config.units)
            bot.process(environment)
            bot.metabolize(bot_config.energy_per_tick)

        culled = lifecycle.cull_bots(self)
        spawned = lifecycle.repopulate(self)

        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(self, self._ticks, eaten, culled, spawned, duration_ms)
        self._ticks += 1
        return self._metrics

    def fast_forward(self, cycles: int) -> None:
        for _ in range(cycles):
            self.cycle()

    def snapshot(self) -> Snapshot:
        width, height = self._config.field_size
        return Snapshot(
            tick=self._ticks,
            metrics=self._metrics,
            field=SnapshotField(
                width=width,
                height=height,
                min_bot_count=self._config.min_bot_count,
                seed=self._rng.seed,
                config_version=self._config.config_version,
            ),
            bots=[dict(render_payload(bot), energy=bot.energy, loss=bot.last_loss) for bot in self._bots],
            foods=[dict(render_payload(food), energy=food.energy) for food in self._foods],
        )
