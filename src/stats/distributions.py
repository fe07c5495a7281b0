"""Yogunluk ve olabilirlik fonksiyonlari - Beta PDF ve Binom olabilirligi.

Normalizasyon icin special.py kullanilir. Birim aralik disindaki x degerleri
hata degil: beta_pdf 0 doner, binomial_likelihood 0^0 = 1 kuralini uygular.
"""

import math
import sys

from src.stats.special import LOG_SPACE_THRESHOLD, beta_function, check_shape, log_beta_function

# exp() bu degerin ustunde OverflowError atar
_MAX_LOG_FLOAT = math.log(sys.float_info.max)


def beta_pdf(x: float, a: float, b: float) -> float:
    """Beta(a, b) olasilik yogunlugu.

    x <= 0 veya x >= 1 icin 0 doner (a < 1 veya b < 1 iken uc noktalarda
    0^negatif tekilligi olusmasin diye uclar da haric). Uclara cok yakin x'te
    yogunluk float araligini asarsa math.inf doner.

    Raises:
        ValueError: a <= 0 veya b <= 0 ise
    """
    check_shape(a, b)
    if x <= 0 or x >= 1:
        return 0.0

    # a < 1 veya b < 1: x^(a-1) tasabilir; buyuk a + b: Gamma tasar
    if a < 1 or b < 1 or a + b > LOG_SPACE_THRESHOLD:
        log_density = (
            (a - 1) * math.log(x)
            + (b - 1) * math.log1p(-x)
            - log_beta_function(a, b)
        )
        if log_density > _MAX_LOG_FLOAT:
            return math.inf
        return math.exp(log_density)

    return x ** (a - 1) * (1 - x) ** (b - 1) / beta_function(a, b)


def binomial_coefficient(n: int, k: int) -> float:
    """C(n, k) carpimsal formul ile: prod((n - i) / (i + 1)), i in [0, k).

    Faktoriyel kullanilmaz; simetri ile k = min(k, n - k) alinir.
    Cok buyuk n icin math.inf donebilir.
    """
    if k < 0 or k > n:
        return 0.0
    k = min(k, n - k)
    result = 1.0
    for i in range(k):
        result = result * (n - i) / (i + 1)
    return result


def _log_binomial_coefficient(n: int, k: int) -> float:
    """ln C(n, k), ayni carpimsal formulun log-uzayi toplami."""
    k = min(k, n - k)
    total = 0.0
    for i in range(k):
        total += math.log((n - i) / (i + 1))
    return total


def check_counts(heads: int, tails: int) -> None:
    """Yazi/tura sayilarini dogrula.

    Raises:
        ValueError: sayilar tam sayi degilse veya negatifse
    """
    if not (isinstance(heads, int) and isinstance(tails, int)):
        raise ValueError(f"Gozlem sayilari tam sayi olmali: heads={heads!r} tails={tails!r}")
    if heads < 0 or tails < 0:
        raise ValueError(f"Gozlem sayilari negatif olamaz: heads={heads} tails={tails}")


def binomial_likelihood(x: float, heads: int, tails: int) -> float:
    """Binom olabilirligi C(n, heads) * x^heads * (1 - x)^tails.

    n = heads + tails = 0 ise tum x icin 1 (veri yok -> duz olabilirlik).
    x = 0 ve x = 1 uclarinda 0^0 = 1 kurali gecerli. [0, 1] disi x icin 0.

    Raises:
        ValueError: heads veya tails negatif ya da tam sayi degilse
    """
    check_counts(heads, tails)
    n = heads + tails
    if n == 0:
        return 1.0
    if x < 0 or x > 1:
        return 0.0

    # Uclar: sadece ussu sifir olan taraf kalir
    if x == 0:
        return 1.0 if heads == 0 else 0.0
    if x == 1:
        return 1.0 if tails == 0 else 0.0

    coeff = binomial_coefficient(n, heads)
    value = coeff * x ** heads * (1 - x) ** tails
    if math.isfinite(value) and value > 0:
        return value

    # Katsayi tastiysa veya kuvvetler sifira indiyse log-uzayi
    log_value = (
        _log_binomial_coefficient(n, heads)
        + heads * math.log(x)
        + tails * math.log1p(-x)
    )
    return math.exp(log_value)
