"""Dashboard veri katmani - grafik verileri ve donusturmeler.

Saf fonksiyonlar: girdiden egri ve tahminleri hesaplar, dict olarak dondurur.
Side effect yok, cache yok; her istekte yeniden hesaplanir.
"""

from pydantic import BaseModel, Field, model_validator

from src.config import MAX_GRID_SIZE, AppConfig
from src.stats.beta_model import BetaShape, Observation
from src.stats.curves import nearest_point, normalize, peak, sample, to_dicts
from src.stats.distributions import beta_pdf, binomial_likelihood
from src.stats.estimator import estimate_summary


class ChartInputs(BaseModel):
    """Grafik girdileri - sinir dogrulamasi burada yapilir."""

    heads: int = Field(default=7, ge=0)
    tails: int = Field(default=3, ge=0)
    prior_a: float = Field(default=2.0, gt=0)
    prior_b: float = Field(default=2.0, gt=0)
    grid_size: int = Field(default=200, ge=2, le=MAX_GRID_SIZE)
    domain_lo: float = Field(default=0.01, gt=0, lt=1)
    domain_hi: float = Field(default=0.99, gt=0, lt=1)

    @model_validator(mode="after")
    def _check_domain(self) -> "ChartInputs":
        if self.domain_lo >= self.domain_hi:
            raise ValueError("domain_lo, domain_hi'den kucuk olmali")
        return self

    @classmethod
    def from_config(cls, config: AppConfig, **overrides) -> "ChartInputs":
        """Config varsayilanlari + None olmayan override'lar."""
        values = {
            "heads": config.data.heads,
            "tails": config.data.tails,
            "prior_a": config.prior.alpha,
            "prior_b": config.prior.beta,
            "grid_size": config.chart.grid_size,
            "domain_lo": config.chart.domain_lo,
            "domain_hi": config.chart.domain_hi,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def observation(self) -> Observation:
        return Observation(self.heads, self.tails)

    @property
    def prior(self) -> BetaShape:
        return BetaShape(self.prior_a, self.prior_b)

    @property
    def domain(self) -> tuple[float, float]:
        return (self.domain_lo, self.domain_hi)


def format_probability(p: float) -> str:
    """0.7 -> '70.0%'."""
    return f"{p * 100:.1f}%"


def format_number(n: float) -> str:
    """0.6667 -> '0.67'."""
    return f"{n:.2f}"


def _marker(curve, x: float, label: str) -> dict | None:
    """Egri uzerinde x'e en yakin noktaya etiketli isaretci."""
    point = nearest_point(curve, x)
    if point is None:
        return None
    return {"x": x, "y": point.y, "label": label}


def _curves(inputs: ChartInputs) -> dict:
    """Prior, olabilirlik ve posterior egrileri (tepe 1.0'a normalize)."""
    observation = inputs.observation
    prior = inputs.prior
    posterior = prior.updated_with(observation)

    return {
        "prior": normalize(sample(
            lambda x: beta_pdf(x, prior.alpha, prior.beta),
            inputs.domain, inputs.grid_size,
        )),
        "likelihood": normalize(sample(
            lambda x: binomial_likelihood(x, observation.heads, observation.tails),
            inputs.domain, inputs.grid_size,
        )),
        "posterior": normalize(sample(
            lambda x: beta_pdf(x, posterior.alpha, posterior.beta),
            inputs.domain, inputs.grid_size,
        )),
    }


def get_estimate_data(inputs: ChartInputs) -> dict:
    """Tum tahminler ve uc normalize egri.

    Args:
        inputs: Dogrulanmis grafik girdileri

    Returns:
        Estimate dict: mle, map, posterior, gucler, formatli degerler, egriler
    """
    summary = estimate_summary(inputs.observation, inputs.prior)
    curves = _curves(inputs)

    return {
        "inputs": inputs.model_dump(),
        "mle": summary.mle,
        "map": summary.map,
        "posterior": {
            "alpha": summary.posterior.alpha,
            "beta": summary.posterior.beta,
            "mean": summary.posterior_mean,
        },
        "strength": {
            "data": summary.data_strength,
            "prior": summary.prior_strength,
            "data_share": round(summary.data_share, 4),
        },
        "difference": summary.difference,
        "formatted": {
            "mle": format_probability(summary.mle),
            "map": format_probability(summary.map),
            "difference": format_number(summary.difference),
        },
        "curves": {name: to_dicts(curve) for name, curve in curves.items()},
    }


def get_likelihood_chart_data(inputs: ChartInputs) -> dict:
    """Olabilirlik grafigi ve MLE isaretcisi.

    Veri yoksa (toplam 0) MLE isaretcisi None; duz olabilirlikte tepe yok.
    """
    observation = inputs.observation
    curve = normalize(sample(
        lambda x: binomial_likelihood(x, observation.heads, observation.tails),
        inputs.domain, inputs.grid_size,
    ))
    summary = estimate_summary(observation, inputs.prior)

    mle_marker = None
    if observation.total > 0:
        mle_marker = _marker(curve, summary.mle, "MLE")

    return {
        "curve": to_dicts(curve),
        "mle": summary.mle,
        "marker": mle_marker,
        "heads": observation.heads,
        "tails": observation.tails,
    }


def get_prior_posterior_chart_data(inputs: ChartInputs) -> dict:
    """Prior / olabilirlik / posterior grafigi ve isaretciler."""
    curves = _curves(inputs)
    summary = estimate_summary(inputs.observation, inputs.prior)

    markers = []
    prior_peak = peak(curves["prior"])
    if prior_peak is not None:
        markers.append({"x": prior_peak.x, "y": prior_peak.y, "label": "Prior"})
    if inputs.observation.total > 0:
        mle_marker = _marker(curves["likelihood"], summary.mle, "MLE")
        if mle_marker is not None:
            markers.append(mle_marker)
    map_marker = _marker(curves["posterior"], summary.map, "MAP")
    if map_marker is not None:
        markers.append(map_marker)

    return {
        "curves": {name: to_dicts(curve) for name, curve in curves.items()},
        "markers": markers,
        "posterior": {
            "alpha": summary.posterior.alpha,
            "beta": summary.posterior.beta,
        },
    }
