"""Dashboard modulu - grafik verisi ve REST API."""

from src.dashboard.api import router as dashboard_router

__all__ = ["dashboard_router"]
