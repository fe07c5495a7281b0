"""Stats modulu - Beta-Binomial sayisal cekirdek (MLE vs MAP)."""

from src.stats.beta_model import BetaShape, Observation
from src.stats.curves import SamplePoint, normalize, sample
from src.stats.distributions import beta_pdf, binomial_likelihood
from src.stats.estimator import estimate_summary, map_estimate, mle, posterior_shape
from src.stats.special import beta_function, gamma

__all__ = [
    "BetaShape",
    "Observation",
    "SamplePoint",
    "beta_function",
    "beta_pdf",
    "binomial_likelihood",
    "estimate_summary",
    "gamma",
    "map_estimate",
    "mle",
    "normalize",
    "posterior_shape",
    "sample",
]
