"""Beta-Binomial deger tipleri.

Observation: yazi/tura sayilari. BetaShape: prior veya posterior sekil
parametreleri (mean, mode, guc, conjugate update).
Tum nesneler immutable - guncelleme yeni nesne dondurur.
"""

from dataclasses import dataclass

from src.stats.distributions import check_counts
from src.stats.special import check_shape


@dataclass(frozen=True)
class Observation:
    """Gozlenen yazi-tura verisi.

    heads: yazi sayisi (tam sayi, >= 0)
    tails: tura sayisi (tam sayi, >= 0)
    """

    heads: int
    tails: int

    def __post_init__(self):
        check_counts(self.heads, self.tails)

    @property
    def total(self) -> int:
        """Toplam atis sayisi (0 olabilir)."""
        return self.heads + self.tails


@dataclass(frozen=True)
class BetaShape:
    """Beta dagilimi sekil parametreleri.

    alpha: prior + heads (yazi pseudo-sayisi)
    beta:  prior + tails (tura pseudo-sayisi)
    """

    alpha: float
    beta: float

    def __post_init__(self):
        check_shape(self.alpha, self.beta)

    @property
    def strength(self) -> float:
        """Toplam pseudo-gozlem kutlesi: alpha + beta."""
        return self.alpha + self.beta

    @property
    def mean(self) -> float:
        """Ortalama: E[p] = alpha / (alpha + beta)."""
        return self.alpha / (self.alpha + self.beta)

    @property
    def mode(self) -> float | None:
        """Ic mod (alpha-1)/(alpha+beta-2); sadece alpha > 1 ve beta > 1 iken."""
        if self.alpha > 1 and self.beta > 1:
            return (self.alpha - 1) / (self.alpha + self.beta - 2)
        return None

    def updated_with(self, observation: Observation) -> "BetaShape":
        """Toplu conjugate update: (alpha + heads, beta + tails)."""
        return BetaShape(self.alpha + observation.heads, self.beta + observation.tails)
