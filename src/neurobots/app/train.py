from __future__ import annotations

import argparse
import logging
from typing import Optional

from ..sim.core.neural_net import NeuralNet, TrainingSet
from ..sim.core.rng import DeterministicRng

logger = logging.getLogger(__name__)

# Two-input table: the first output fires when exactly one input is set.
DEFAULT_EXAMPLES = [
    ([0.0, 0.0, 0.0, 0.0], [0.0, 0.0, 0.0, 0.0]),
    ([0.0, 1.0, 0.0, 0.0], [1.0, 0.0, 0.0, 0.0]),
    ([1.0, 0.0, 0.0, 0.0], [1.0, 0.0, 0.0, 0.0]),
    ([1.0, 1.0, 0.0, 0.0], [0.0, 0.0, 0.0, 0.0]),
]


def default_training_set() -> TrainingSet:
    training_set = TrainingSet()
    for net_input, target in DEFAULT_EXAMPLES:
        training_set.add_set(net_input, target)
    return training_set


def run_training(
    cycles: int = 100,
    epochs_per_cycle: int = 1000,
    learning_rate: float = 2.0,
    decay: float = 0.98,
    target_error: float = 1e-6,
    layers: int = 4,
    units: int = 4,
    seed: Optional[int] = None,
    training_set: Optional[TrainingSet] = None,
) -> tuple[NeuralNet, float]:
    """Train a fresh network, shrinking the learning rate after every cycle.

    Stops early once the average error drops below ``target_error`` and
    returns the network with its last average error.
    """
    net = NeuralNet(layers, units, DeterministicRng(seed))
    net.randomize(-1.0, 1.0)
    training_set = training_set if training_set is not None else default_training_set()

    avg_error = 0.0
    for cycle in range(cycles):
        avg_error = net.train(training_set, learning_rate, epochs_per_cycle)
        logger.info(
            "runs: %06d | learning_rate: %.2f | avg_error: %.2e",
            cycle * epochs_per_cycle,
            learning_rate,
            avg_error,
        )
        learning_rate *= decay
        if avg_error < target_error:
            break
    return net, avg_error


def main() -> None:
    parser = argparse.ArgumentParser(description="Offline training of a neurobots network")
    parser.add_argument("--cycles", type=int, default=100)
    parser.add_argument("--epochs-per-cycle", type=int, default=1000)
    parser.add_argument("--learning-rate", type=float, default=2.0)
    parser.add_argument("--decay", type=float, default=0.98)
    parser.add_argument("--target-error", type=float, default=1e-6)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="INFO", help="Python logging level")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_training(
        cycles=args.cycles,
        epochs_per_cycle=args.epochs_per_cycle,
        learning_rate=args.learning_rate,
        decay=args.decay,
        target_error=args.target_error,
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
