import random

import pytest

from meshgradient.engine.mesh_state import MeshState
from meshgradient.managers.config_manager import ConfigManager
from meshgradient.models.color import Color
from meshgradient.models.geometry import GridDimensions
from meshgradient.services.editor_service import EditorSession
from meshgradient.services.event_bus import EventBus


class FakeClock:
    """Manually advanced time source"""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def config_manager():
    config = ConfigManager()
    config.load()
    return config


@pytest.fixture
def color_manager(config_manager):
    return config_manager.color_manager


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def palette():
    return [
        Color.from_rgb(1.0, 0.0, 0.0),
        Color.from_rgb(0.0, 1.0, 0.0),
        Color.from_rgb(0.0, 0.0, 1.0),
    ]


@pytest.fixture
def mesh_3x3(palette, rng):
    return MeshState(GridDimensions(3, 3), palette, rng=rng)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def session(config_manager, event_bus, rng, clock):
    return EditorSession(
        config_manager.editor,
        config_manager.color_manager,
        event_bus,
        rng=rng,
        clock=clock,
    )
