from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .grid import DenseGrid2, DenseGrid3
from .rng import DeterministicRng

logger = logging.getLogger(__name__)


def _activation(values: np.ndarray) -> np.ndarray:
    # Same logistic curve, split so np.exp never sees a large positive argument.
    exp_neg = np.exp(-np.abs(values))
    return np.where(values >= 0.0, 1.0 / (1.0 + exp_neg), exp_neg / (1.0 + exp_neg))


def _activation_derivative(values: np.ndarray) -> np.ndarray:
    act = _activation(values)
    return act * (1.0 - act)


class TrainingSet:
    """Ordered (input, target) examples for offline training."""

    def __init__(self) -> None:
        self._sets: List[Tuple[List[float], List[float]]] = []

    def add_set(self, net_input: Sequence[float], target: Sequence[float]) -> None:
        self._sets.append((list(net_input), list(target)))

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[Tuple[List[float], List[float]]]:
        return iter(self._sets)


class NeuralNet:
    """Square fully connected feed-forward network.

    Every layer has ``units`` units. Layer 0 passes the raw input through;
    every later layer adds its bias and applies the sigmoid. Weights live in a
    ``layers x units x units`` grid indexed ``[layer, source, destination]``.
    """

    def __init__(self, layers: int, units: int, rng: Optional[DeterministicRng] = None):
        if layers < 2:
            raise ValueError(f"a network needs at least 2 layers, got {layers}")
        if units < 1:
            raise ValueError(f"a network needs at least 1 unit per layer, got {units}")
        self._layers = layers
        self._units = units
        self._rng = rng if rng is not None else DeterministicRng()
        self._weight = DenseGrid3(0.0, layers, units, units)
        self._bias = DenseGrid2(0.0, layers, units)
        self._unit_input = DenseGrid2(0.0, layers, units)
        self._unit_output = DenseGrid2(0.0, layers, units)

    @property
    def layers(self) -> int:
        return self._layers

    @property
    def units(self) -> int:
        return self._units

    def weight(self, layer: int, unit_src: int, unit_dest: int) -> float:
        return self._weight[layer, unit_src, unit_dest]

    def set_weight(self, layer: int, unit_src: int, unit_dest: int, value: float) -> None:
        self._weight[layer, unit_src, unit_dest] = value

    def bias(self, layer: int, unit: int) -> float:
        return self._bias[layer, unit]

    def set_bias(self, layer: int, unit: int, value: float) -> None:
        self._bias[layer, unit] = value

    def randomize(self, low: float, high: float) -> None:
        self.randomize_weights(low, high)
        self.randomize_bias(low, high)

    def randomize_weights(self, low: float, high: float) -> None:
        self._weight.assign(self._rng.next_array(low, high, self._weight.shape))

    def randomize_bias(self, low: float, high: float) -> None:
        self._bias.assign(self._rng.next_array(low, high, self._bias.shape))

    def _as_vector(self, values: Sequence[float], name: str) -> np.ndarray:
        if len(values) != self._units:
            raise ValueError(f"{name} has {len(values)} values, network expects {self._units}")
        return np.asarray(values, dtype=np.float64)

    def feed_forward(self, net_input: Sequence[float]) -> List[float]:
        net_input = self._as_vector(net_input, "input")
        unit_input = self._unit_input.array
        unit_output = self._unit_output.array
        weight = self._weight.array
        bias = self._bias.array

        unit_input[0] = net_input
        unit_output[0] = net_input
        for layer in range(1, self._layers):
            unit_input[layer] = unit_output[layer - 1] @ weight[layer - 1] + bias[layer]
            unit_output[layer] = _activation(unit_input[layer])
        return self._unit_output.row(self._layers - 1)

    def backpropagate(self, target: Sequence[float], learning_rate: float) -> float:
        """Apply one gradient step towards ``target`` and return the squared error.

        Uses the activations left by the preceding ``feed_forward`` call.
        The bias step is scaled by the bias' own current value rather than by
        a constant input of 1, and updates ``bias[layer]`` from the deltas of
        ``layer + 1``.
        """
        target = self._as_vector(target, "target")
        unit_input = self._unit_input.array
        unit_output = self._unit_output.array
        weight = self._weight.array
        bias = self._bias.array
        last_layer = self._layers - 1

        error = target - unit_output[last_layer]
        delta = np.zeros_like(unit_input)
        delta[last_layer] = _activation_derivative(unit_input[last_layer]) * error
        # Layer 0 deltas never feed an update.
        for layer in range(last_layer - 1, 0, -1):
            delta[layer] = _activation_derivative(unit_input[layer]) * (weight[layer] @ delta[layer + 1])

        for layer in range(last_layer):
            weight[layer] += learning_rate * np.outer(unit_output[layer], delta[layer + 1])
            bias[layer] += learning_rate * delta[layer + 1] * bias[layer]

        return 0.5 * float(error @ error)

    def train(self, training_set: TrainingSet, learning_rate: float, epochs: int) -> float:
        """Run ``epochs`` passes over ``training_set``; return the last pass' mean error."""
        if len(training_set) == 0:
            raise ValueError("training set is empty")
        if epochs < 1:
            raise ValueError(f"epochs must be at least 1, got {epochs}")
        avg_error = 0.0
        for _ in range(epochs):
            total_error = 0.0
            for net_input, target in training_set:
                self.feed_forward(net_input)
                total_error += self.backpropagate(target, learning_rate)
            avg_error = total_error / len(training_set)
        logger.debug("trained %d epochs on %d examples, avg error %.3e", epochs, len(training_set), avg_error)
        return avg_error
