"""BetaShape ve Observation testleri - mean, mode, guc, update."""

import math

import pytest

from src.stats.beta_model import BetaShape, Observation


def test_observation_total():
    assert Observation(7, 3).total == 10
    assert Observation(0, 0).total == 0


def test_observation_negative_raises():
    with pytest.raises(ValueError):
        Observation(-1, 3)
    with pytest.raises(ValueError):
        Observation(2, -5)


@pytest.mark.parametrize("heads,tails", [(2.5, 1), (1, 0.5), (3.0, 2), ("3", 1)])
def test_observation_non_integer_raises(heads, tails):
    """Kesirli veya sayi olmayan gozlem ValueError, TypeError degil."""
    with pytest.raises(ValueError):
        Observation(heads, tails)


def test_observation_immutable():
    obs = Observation(1, 2)
    with pytest.raises(AttributeError):
        obs.heads = 5


@pytest.mark.parametrize("alpha,beta", [(0, 1), (1, 0), (-2, 3), (math.inf, 1)])
def test_shape_invalid_raises(alpha, beta):
    """Pozitif olmayan sekil parametresi reddedilir."""
    with pytest.raises(ValueError):
        BetaShape(alpha, beta)


def test_mean_calculation():
    """Beta(3, 7) -> mean = 0.3."""
    assert BetaShape(3.0, 7.0).mean == pytest.approx(0.3)


def test_mode_interior():
    """Beta(9, 5) -> mode = 8/12."""
    assert BetaShape(9.0, 5.0).mode == pytest.approx(8.0 / 12.0)


def test_mode_undefined_at_or_below_one():
    assert BetaShape(2.0, 1.0).mode is None
    assert BetaShape(0.5, 3.0).mode is None
    assert BetaShape(1.0, 1.0).mode is None


def test_strength():
    assert BetaShape(2.0, 3.5).strength == pytest.approx(5.5)


def test_updated_with_observation():
    posterior = BetaShape(2.0, 2.0).updated_with(Observation(7, 3))
    assert posterior == BetaShape(9.0, 5.0)


def test_updated_with_immutable():
    """updated_with() orijinal nesneyi degistirmemeli."""
    prior = BetaShape(3.0, 5.0)
    _ = prior.updated_with(Observation(4, 1))
    assert (prior.alpha, prior.beta) == (3.0, 5.0)
