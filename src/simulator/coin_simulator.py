"""Sahte yazi-tura uretici - demo ve test icin.

Deterministik: seed ile tekrarlanabilir sonuclar uretir.
Her atistan sonra MLE ve MAP yeniden hesaplanir (kalici durum yok).
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from src.stats.beta_model import BetaShape, Observation
from src.stats.estimator import map_estimate, mle

logger = logging.getLogger("mle_map.simulator")


def _check_probability(p_heads: float) -> None:
    if not 0.0 <= p_heads <= 1.0:
        raise ValueError(f"Yazi olasiligi [0, 1] araliginda olmali: {p_heads}")


class CoinSimulator:
    """Agirlikli para atisi simulatoru.

    Args:
        seed: Rastgelelik tohumu (tekrarlanabilirlik icin)
    """

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def flip(self, p_heads: float = 0.5) -> bool:
        """Tek atis: True yazi, False tura."""
        _check_probability(p_heads)
        return self._rng.random() < p_heads

    def flip_many(self, n: int, p_heads: float = 0.5) -> Observation:
        """n atis yap, toplam yazi/tura sayisini dondur."""
        if n < 0:
            raise ValueError(f"Atis sayisi negatif olamaz: {n}")
        _check_probability(p_heads)
        heads = sum(1 for _ in range(n) if self._rng.random() < p_heads)
        return Observation(heads, n - heads)

    def run(
        self,
        n: int,
        p_heads: float,
        prior: BetaShape,
        callback: Callable[[dict], None] | None = None,
    ) -> list[dict]:
        """n atisi tek tek yap, her adimda MLE ve MAP kaydet.

        Args:
            n: Atis sayisi
            p_heads: Gercek yazi olasiligi
            prior: Beta prior
            callback: Her adimdan sonra cagrilir (opsiyonel)

        Returns:
            Adim listesi: flip, outcome, heads, tails, mle, map
        """
        if n < 0:
            raise ValueError(f"Atis sayisi negatif olamaz: {n}")
        _check_probability(p_heads)

        heads = tails = 0
        steps = []
        for i in range(1, n + 1):
            is_heads = self.flip(p_heads)
            if is_heads:
                heads += 1
            else:
                tails += 1
            observation = Observation(heads, tails)
            step = {
                "flip": i,
                "outcome": "H" if is_heads else "T",
                "heads": heads,
                "tails": tails,
                "mle": mle(observation),
                "map": map_estimate(observation, prior),
            }
            steps.append(step)
            if callback is not None:
                callback(step)

        logger.info(
            "Simulasyon tamamlandi: %d atis, %d yazi, %d tura (p=%.2f)",
            n, heads, tails, p_heads,
        )
        return steps
