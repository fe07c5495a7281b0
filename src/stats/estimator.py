"""MLE ve MAP nokta tahminleri, posterior parametre guncellemesi.

Kapali formlar: MLE = heads / n, MAP = Beta posterior modu.
Posterior'un bir parametresi <= 1 ise mod ic noktada degildir; bu durumda
posterior ortalamasi tek nokta ozeti olarak kullanilir.
"""

from dataclasses import dataclass

from src.stats.beta_model import BetaShape, Observation

# Veri yokken varsayilan (adil para)
UNINFORMATIVE_ESTIMATE = 0.5


def mle(observation: Observation) -> float:
    """Maximum likelihood tahmini: heads / (heads + tails), veri yoksa 0.5."""
    total = observation.total
    if total == 0:
        return UNINFORMATIVE_ESTIMATE
    return observation.heads / total


def posterior_shape(observation: Observation, prior: BetaShape) -> BetaShape:
    """Conjugate update: Beta(a + heads, b + tails)."""
    return prior.updated_with(observation)


def map_estimate(observation: Observation, prior: BetaShape) -> float:
    """Maximum a posteriori tahmini.

    Posterior A > 1 ve B > 1 ise mod (A - 1) / (A + B - 2), aksi halde
    posterior ortalamasi A / (A + B).
    """
    posterior = posterior_shape(observation, prior)
    mode = posterior.mode
    if mode is not None:
        return mode
    return posterior.mean


def data_strength(observation: Observation) -> int:
    """Verinin 'gucu': toplam atis sayisi."""
    return observation.total


def prior_strength(prior: BetaShape) -> float:
    """Prior'un 'gucu': alpha + beta pseudo-gozlem."""
    return prior.strength


@dataclass(frozen=True)
class EstimateSummary:
    """Bir (veri, prior) cifti icin tum nokta tahminleri."""

    mle: float
    map: float
    posterior: BetaShape
    posterior_mean: float
    data_strength: int
    prior_strength: float

    @property
    def data_share(self) -> float:
        """Toplam kanit kutlesinde verinin payi (0..1)."""
        return self.data_strength / (self.data_strength + self.prior_strength)

    @property
    def difference(self) -> float:
        """|MLE - MAP|: prior'un tahmini ne kadar cektigi."""
        return abs(self.mle - self.map)


def estimate_summary(observation: Observation, prior: BetaShape) -> EstimateSummary:
    """MLE, MAP, posterior ve guc degerlerini tek seferde hesapla."""
    posterior = posterior_shape(observation, prior)
    return EstimateSummary(
        mle=mle(observation),
        map=map_estimate(observation, prior),
        posterior=posterior,
        posterior_mean=posterior.mean,
        data_strength=data_strength(observation),
        prior_strength=prior_strength(prior),
    )
