"""Dashboard API endpoint testleri."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.config import MAX_GRID_SIZE, AppConfig
from src.dashboard.api import router as dashboard_router


def _create_test_app(config: AppConfig | None = None) -> FastAPI:
    """Test icin minimal FastAPI app olustur."""
    app = FastAPI()
    app.include_router(dashboard_router)
    if config is not None:
        app.state.config = config
    return app


# --- /api/estimate ---

def test_api_estimate_defaults_from_config(sample_config):
    """Parametre yoksa config varsayilanlari kullanilir."""
    client = TestClient(_create_test_app(sample_config))

    resp = client.get("/api/estimate")
    assert resp.status_code == 200

    data = resp.json()
    assert data["mle"] == pytest.approx(0.7)
    assert data["map"] == pytest.approx(8 / 12)
    assert data["posterior"]["alpha"] == 9.0
    assert len(data["curves"]["posterior"]) == 101


def test_api_estimate_without_app_config():
    """Lifespan calismamissa AppConfig varsayilanlari."""
    client = TestClient(_create_test_app())

    resp = client.get("/api/estimate")
    assert resp.status_code == 200
    assert len(resp.json()["curves"]["prior"]) == 200


def test_api_estimate_query_override(sample_config):
    client = TestClient(_create_test_app(sample_config))

    resp = client.get("/api/estimate?heads=1&tails=0&prior_a=1&prior_b=1&grid_size=20")
    assert resp.status_code == 200

    data = resp.json()
    assert data["posterior"] == {"alpha": 2.0, "beta": 1.0, "mean": pytest.approx(2 / 3)}
    assert data["map"] == pytest.approx(2 / 3)
    assert len(data["curves"]["likelihood"]) == 20


@pytest.mark.parametrize("query", [
    "heads=-1",
    "tails=-2",
    "prior_a=0",
    "prior_b=-3",
    "grid_size=1",
    "domain_lo=0.8&domain_hi=0.2",
])
def test_api_estimate_invalid_params_422(sample_config, query):
    client = TestClient(_create_test_app(sample_config))

    resp = client.get(f"/api/estimate?{query}")
    assert resp.status_code == 422


def test_api_estimate_non_numeric_422(sample_config):
    client = TestClient(_create_test_app(sample_config))
    assert client.get("/api/estimate?heads=abc").status_code == 422


# --- Grafik endpoint'leri ---

def test_api_likelihood(sample_config):
    client = TestClient(_create_test_app(sample_config))

    resp = client.get("/api/likelihood?heads=7&tails=3")
    assert resp.status_code == 200

    data = resp.json()
    assert data["marker"]["label"] == "MLE"
    assert len(data["curve"]) == 101


def test_api_prior_posterior(sample_config):
    client = TestClient(_create_test_app(sample_config))

    resp = client.get("/api/prior-posterior")
    assert resp.status_code == 200

    data = resp.json()
    assert set(data["curves"]) == {"prior", "likelihood", "posterior"}
    assert [m["label"] for m in data["markers"]] == ["Prior", "MLE", "MAP"]


def test_api_defaults(sample_config):
    client = TestClient(_create_test_app(sample_config))

    resp = client.get("/api/defaults")
    assert resp.status_code == 200

    data = resp.json()
    assert data["heads"] == 7
    assert data["grid_size"] == 101


def test_api_defaults_with_max_grid_config():
    """Config'in kabul ettigi en buyuk grid API'de de gecerli (500 veya 422 yok)."""
    config = AppConfig(chart={"grid_size": MAX_GRID_SIZE})
    client = TestClient(_create_test_app(config))

    resp = client.get("/api/defaults")
    assert resp.status_code == 200
    assert resp.json()["grid_size"] == MAX_GRID_SIZE

    resp = client.get("/api/likelihood?heads=1&tails=1")
    assert resp.status_code == 200
    assert len(resp.json()["curve"]) == MAX_GRID_SIZE
