"""Typed konfigürasyon - Pydantic modelleri.

YAML dosyasindan yuklenen ayarlar AppConfig modeline dönüstürülür.
Varsayilanlar: 7 yazi / 3 tura, Beta(2, 2) prior, 200 noktalik grid.
"""

import logging
import os

import yaml
from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger("mle_map")

# Varsayilan config dosya yolu
_DEFAULT_CONFIG_PATH = "config.yml"
_FALLBACK_CONFIG_PATH = "config.yml.example"

# Grafik basina en fazla grid noktasi (config ve API siniri ayni)
MAX_GRID_SIZE = 10000


class DataConfig(BaseModel):
    heads: int = Field(default=7, ge=0)
    tails: int = Field(default=3, ge=0)


class PriorConfig(BaseModel):
    alpha: float = Field(default=2.0, gt=0)
    beta: float = Field(default=2.0, gt=0)


class ChartConfig(BaseModel):
    grid_size: int = Field(default=200, ge=2, le=MAX_GRID_SIZE)
    domain_lo: float = Field(default=0.01, gt=0, lt=1)
    domain_hi: float = Field(default=0.99, gt=0, lt=1)

    @model_validator(mode="after")
    def _check_domain(self) -> "ChartConfig":
        if self.domain_lo >= self.domain_hi:
            raise ValueError("domain_lo, domain_hi'den kucuk olmali")
        return self


class SimulatorConfig(BaseModel):
    seed: int | None = 42
    flips: int = Field(default=20, ge=0)
    p_heads: float = Field(default=0.7, ge=0, le=1)


class AppConfig(BaseModel):
    data: DataConfig = Field(default_factory=DataConfig)
    prior: PriorConfig = Field(default_factory=PriorConfig)
    chart: ChartConfig = Field(default_factory=ChartConfig)
    simulator: SimulatorConfig = Field(default_factory=SimulatorConfig)


def load_config(path: str | None = None) -> AppConfig:
    """Konfigürasyon dosyasini yukle ve AppConfig olarak dondur.

    Arama sirasi:
    1. Verilen path parametresi
    2. MLEMAP_CONFIG_PATH cevre degiskeni
    3. config.yml (calisma dizininde)
    4. config.yml.example (fallback)
    """
    if path is None:
        path = os.environ.get("MLEMAP_CONFIG_PATH", _DEFAULT_CONFIG_PATH)

    if not os.path.exists(path):
        logger.warning(
            "Config dosyasi bulunamadi: %s, fallback kullaniliyor: %s",
            path,
            _FALLBACK_CONFIG_PATH,
        )
        path = _FALLBACK_CONFIG_PATH

    if not os.path.exists(path):
        logger.warning("Fallback config de bulunamadi, default config kullaniliyor")
        config = AppConfig()
    else:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        config = AppConfig(**raw)
        logger.info("Config yuklendi: %s", path)

    return config
