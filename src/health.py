"""Sayisal cekirdek saglik kontrolu.

Bilinen kimlikleri (Gamma degerleri, ornek senaryo) hesaplar ve sonucu
HealthStatus olarak dondurur. Side effect yok.
"""

import logging
import math
from dataclasses import dataclass, field

from src.stats.beta_model import BetaShape, Observation
from src.stats.estimator import map_estimate, mle
from src.stats.special import beta_function, gamma

logger = logging.getLogger("mle_map")

_TOLERANCE = 1e-6


@dataclass
class HealthCheck:
    """Tek bir saglik kontrolu sonucu."""

    name: str
    healthy: bool
    message: str


@dataclass
class HealthStatus:
    """Tum kontrollerin durumu."""

    checks: list[HealthCheck] = field(default_factory=list)

    @property
    def all_healthy(self) -> bool:
        return all(c.healthy for c in self.checks)

    @property
    def warnings(self) -> list[HealthCheck]:
        return [c for c in self.checks if not c.healthy]


def _check(name: str, actual: float, expected: float) -> HealthCheck:
    ok = math.isclose(actual, expected, rel_tol=_TOLERANCE)
    return HealthCheck(
        name=name,
        healthy=ok,
        message=f"{name}: {actual:.8g} (beklenen {expected:.8g})",
    )


def run_self_checks() -> HealthStatus:
    """Cekirdegi bilinen degerlere karsi dogrula."""
    observation = Observation(7, 3)
    prior = BetaShape(2.0, 2.0)

    status = HealthStatus(checks=[
        _check("gamma_5", gamma(5), 24.0),
        _check("gamma_half", gamma(0.5), math.sqrt(math.pi)),
        _check("beta_2_3", beta_function(2.0, 3.0), 1.0 / 12.0),
        _check("mle", mle(observation), 0.7),
        _check("map", map_estimate(observation, prior), 8.0 / 12.0),
    ])
    for c in status.warnings:
        logger.warning("Self-check basarisiz: %s", c.message)
    return status
