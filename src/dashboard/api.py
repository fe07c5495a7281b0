"""Dashboard REST API endpoint'leri.

FastAPI APIRouter ile 4 endpoint.
app.state uzerinden config varsayilanlarina erisir.
Veri hazirlamasi charts.py'ye delege edilir.
"""

import logging

from fastapi import APIRouter, HTTPException, Request

from src.config import AppConfig
from src.dashboard.charts import (
    ChartInputs,
    get_estimate_data,
    get_likelihood_chart_data,
    get_prior_posterior_chart_data,
)

logger = logging.getLogger("mle_map.dashboard")

router = APIRouter(prefix="/api", tags=["dashboard"])


def _safe_config(request: Request) -> AppConfig:
    """app.state.config'i guvenli sekilde al.

    Test ortaminda lifespan calismamis olabilir.
    """
    try:
        return request.app.state.config
    except AttributeError:
        return AppConfig()


def _build_inputs(
    request: Request,
    heads: int | None,
    tails: int | None,
    prior_a: float | None,
    prior_b: float | None,
    grid_size: int | None,
    domain_lo: float | None,
    domain_hi: float | None,
) -> ChartInputs:
    """Query parametrelerini dogrula; gecersizse 422."""
    try:
        return ChartInputs.from_config(
            _safe_config(request),
            heads=heads,
            tails=tails,
            prior_a=prior_a,
            prior_b=prior_b,
            grid_size=grid_size,
            domain_lo=domain_lo,
            domain_hi=domain_hi,
        )
    except ValueError as exc:
        logger.info("Gecersiz grafik parametresi: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/estimate")
async def api_estimate(
    request: Request,
    heads: int | None = None,
    tails: int | None = None,
    prior_a: float | None = None,
    prior_b: float | None = None,
    grid_size: int | None = None,
    domain_lo: float | None = None,
    domain_hi: float | None = None,
):
    """MLE, MAP, posterior ve uc normalize egri."""
    inputs = _build_inputs(
        request, heads, tails, prior_a, prior_b, grid_size, domain_lo, domain_hi
    )
    return get_estimate_data(inputs)


@router.get("/likelihood")
async def api_likelihood(
    request: Request,
    heads: int | None = None,
    tails: int | None = None,
    grid_size: int | None = None,
    domain_lo: float | None = None,
    domain_hi: float | None = None,
):
    """Olabilirlik grafigi + MLE isaretcisi."""
    inputs = _build_inputs(
        request, heads, tails, None, None, grid_size, domain_lo, domain_hi
    )
    return get_likelihood_chart_data(inputs)


@router.get("/prior-posterior")
async def api_prior_posterior(
    request: Request,
    heads: int | None = None,
    tails: int | None = None,
    prior_a: float | None = None,
    prior_b: float | None = None,
    grid_size: int | None = None,
    domain_lo: float | None = None,
    domain_hi: float | None = None,
):
    """Prior / posterior grafigi + isaretciler."""
    inputs = _build_inputs(
        request, heads, tails, prior_a, prior_b, grid_size, domain_lo, domain_hi
    )
    return get_prior_posterior_chart_data(inputs)


@router.get("/defaults")
async def api_defaults(request: Request):
    """Config'teki varsayilan girdiler."""
    return ChartInputs.from_config(_safe_config(request)).model_dump()
