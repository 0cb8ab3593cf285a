from __future__ import annotations

from neurobots.app.train import default_training_set, run_training
from neurobots.sim.core.neural_net import TrainingSet


def test_default_training_set_has_four_examples():
    training_set = default_training_set()
    assert len(training_set) == 4
    assert all(len(net_input) == 4 and len(target) == 4 for net_input, target in training_set)


def test_run_training_improves_error():
    _, first_error = run_training(cycles=1, epochs_per_cycle=1, seed=7)
    net, error = run_training(cycles=5, epochs_per_cycle=100, seed=7)
    assert error < first_error
    assert net.layers == 4 and net.units == 4


def test_run_training_stops_at_target_error():
    training_set = TrainingSet()
    training_set.add_set([0.0, 0.0], [0.5, 0.5])
    _, error = run_training(cycles=50, epochs_per_cycle=1, target_error=1.0, layers=2, units=2, training_set=training_set)
    assert error < 1.0
