import pytest

from clothsim.config import SimConfig
from clothsim.world import World


def flat_positions(n, spacing=1.0):
    return [(x * spacing, -y * spacing, 0.0) for y in range(n) for x in range(n)]


@pytest.fixture
def flat_world():
    """4x4 flat sheet at z=0, unit spacing, nothing pinned."""
    return World.from_positions(flat_positions(4), 4, SimConfig())
