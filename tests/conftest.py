from __future__ import annotations

from collections import defaultdict

import pytest

from pong.constants import BOUND
from pong.simulation import Simulation


@pytest.fixture()
def sim() -> Simulation:
    return Simulation.create()


@pytest.fixture()
def open_field(sim: Simulation) -> Simulation:
    """Default arena with both paddles parked at the bottom, out of the ball's way."""
    for paddle in sim.paddles:
        paddle.position.y = -BOUND
    return sim


@pytest.fixture()
def no_keys() -> defaultdict:
    return defaultdict(bool)
