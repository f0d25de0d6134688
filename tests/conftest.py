"""Shared fixtures for the bank queue tests."""

import numpy as np
import pytest

from bank_queue.config import SimulationConfig
from bank_queue.distributions import arrivals_at, deterministic_distribution
from bank_queue.system import BankSimulation


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def scripted_simulation():
    """
    Build a simulation whose arrivals happen at the given ticks and whose
    every service takes the same number of minutes.
    """
    def build(ticks, minutes, num_tellers=1, service_time=2):
        config = SimulationConfig(arrival_rate=1.0, num_tellers=num_tellers,
                                  minutes=minutes, seed=0)
        return BankSimulation(config,
                              arrival_distribution=arrivals_at(ticks),
                              service_distribution=deterministic_distribution(service_time))
    return build
