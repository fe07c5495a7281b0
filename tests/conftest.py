"""Pytest fixture'lari - tum testler icin ortak yapilar."""

import pytest

from src.config import AppConfig
from src.stats.beta_model import BetaShape, Observation


@pytest.fixture
def sample_config():
    """Test icin minimal konfigürasyon."""
    return AppConfig(
        data={"heads": 7, "tails": 3},
        prior={"alpha": 2.0, "beta": 2.0},
        chart={"grid_size": 101, "domain_lo": 0.01, "domain_hi": 0.99},
        simulator={"seed": 42, "flips": 10, "p_heads": 0.7},
    )


@pytest.fixture
def observation():
    """7 yazi, 3 tura."""
    return Observation(7, 3)


@pytest.fixture
def prior():
    """Beta(2, 2) prior."""
    return BetaShape(2.0, 2.0)
