"""MLE vs MAP - Ana giris noktasi.

FastAPI uygulamasi, lifespan ile konfigürasyonu yukler ve dashboard
router'ini baglar. Tek proses: uvicorn entrypoint.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.responses import RedirectResponse

from src.config import load_config
from src.dashboard import dashboard_router
from src.health import run_self_checks

# Loglama ayarlari
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger("mle_map")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Uygulama yasam dongusu: baslangic ve kapanma islemleri."""

    # --- Baslangic (Startup) ---
    config = load_config()
    app.state.config = config
    logger.info(
        "Konfigürasyon yuklendi: veri=%d/%d prior=Beta(%s, %s) grid=%d",
        config.data.heads,
        config.data.tails,
        config.prior.alpha,
        config.prior.beta,
        config.chart.grid_size,
    )

    status = run_self_checks()
    if not status.all_healthy:
        logger.critical("Sayisal cekirdek self-check basarisiz: %d kontrol", len(status.warnings))

    yield

    # --- Kapanma (Shutdown) ---
    logger.info("Uygulama kapaniyor")


app = FastAPI(
    title="MLE vs MAP",
    description="Yazi-tura verisiyle Maximum Likelihood ve Maximum A Posteriori tahmini",
    version=VERSION,
    lifespan=lifespan,
)

app.include_router(dashboard_router)


@app.get("/")
async def root_redirect():
    """Ana sayfa -> API dokumantasyonu."""
    return RedirectResponse(url="/docs")


@app.get("/health")
async def health_check(response: Response):
    """Sayisal cekirdek saglik kontrolu endpoint'i."""
    try:
        status = run_self_checks()
        return {
            "status": "ok" if status.all_healthy else "degraded",
            "version": VERSION,
            "checks": {c.name: c.healthy for c in status.checks},
        }
    except Exception as exc:
        response.status_code = 503
        return {"status": "error", "reason": str(exc), "version": VERSION}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host="0.0.0.0", port=8099, reload=False)
