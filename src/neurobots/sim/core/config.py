from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class BotConfig:
    layers: int = 4
    units: int = 4
    size: float = 10.0
    speed: float = 5.0
    view_radius_factor: float = 8.0
    fov: float = math.pi / 2.0
    turn_rate: float = math.pi / 15.0
    learning_rate: float = 1.0
    weight_range: tuple[float, float] = (-1.0, 1.0)
    initial_energy: float = 1000.0
    energy_per_tick: float = 1.0


@dataclass
class FoodConfig:
    size: float = 5.0
    energy_range: tuple[float, float] = (100.0, 300.0)
    # Fraction of the field kept clear on every side when food spawns.
    spawn_margin: float = 0.1


@dataclass
class SimulationConfig:
    field_size: tuple[float, float] = (800.0, 600.0)
    min_bot_count: int = 20
    initial_food: int = 40
    seed: Optional[int] = 42
    config_version: str = "v1"
    bot: BotConfig = field(default_factory=BotConfig)
    food: FoodConfig = field(default_factory=FoodConfig)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def load_config(raw: dict) -> SimulationConfig:
    def _pair(value: tuple[float, float] | list[float] | None, default: tuple[float, float]) -> tuple[float, float]:
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return (float(value[0]), float(value[1]))
        return default

    default_bot = BotConfig()
    bot_raw = raw.get("bot", {})
    bot = BotConfig(
        weight_range=_pair(bot_raw.get("weight_range"), default_bot.weight_range),
        **{k: v for k, v in bot_raw.items() if k != "weight_range"},
    )

    default_food = FoodConfig()
    food_raw = raw.get("food", {})
    food = FoodConfig(
        energy_range=_pair(food_raw.get("energy_range"), default_food.energy_range),
        **{k: v for k, v in food_raw.items() if k != "energy_range"},
    )

    sim_values = {k: v for k, v in raw.items() if k not in {"bot", "food", "field_size"}}
    field_size = _pair(raw.get("field_size"), SimulationConfig().field_size)
    return SimulationConfig(field_size=field_size, bot=bot, food=food, **sim_values)
