"""Ozel fonksiyonlar - Gamma ve Beta fonksiyonlari.

Tek bir gamma degerlendiricisi: kucuk tam sayi ve yarim tam sayilar icin
kesin hizli yol, diger tum argumanlar icin Lanczos serisi (z < 0.5 icin
yansima formulu). Harici bagimliligi yok (sadece stdlib math).
"""

import logging
import math

logger = logging.getLogger("mle_map.stats")

# Lanczos katsayilari (g=7, n=9)
_LANCZOS_G = 7.0
_LANCZOS_COEFFS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

_SQRT_2PI = math.sqrt(2.0 * math.pi)
_HALF_LOG_2PI = 0.5 * math.log(2.0 * math.pi)

# Bu degerin ustunde Gamma(z) float araligini asar (Gamma(171.62) ~ 1.8e308)
_GAMMA_OVERFLOW_Z = 171.6

# Hizli yol siniri: Gamma(n) = (n-1)!, Gamma(k + 1/2) = sqrt(pi) * prod(i + 1/2)
_EXACT_MAX = 20

# a + b bu esigi asarsa Beta fonksiyonu log-uzayinda hesaplanir
LOG_SPACE_THRESHOLD = 150.0


def _check_pole(z: float) -> None:
    """Gamma'nin tanimsiz oldugu noktalari reddet (0, negatif tam sayilar, NaN)."""
    if math.isnan(z) or z == -math.inf:
        raise ValueError(f"gamma tanimsiz: z={z}")
    if z <= 0 and z == math.floor(z):
        raise ValueError(f"gamma tanimsiz: z={z} sifir veya negatif tam sayi")


def _exact_gamma(z: float) -> float | None:
    """Kucuk tam sayi / yarim tam sayi icin kesin deger, aksi halde None."""
    if z == math.floor(z) and 1 <= z <= _EXACT_MAX:
        return float(math.factorial(int(z) - 1))

    twice = 2.0 * z
    if twice == math.floor(twice) and 0.5 <= z <= _EXACT_MAX + 0.5:
        # Gamma(1/2) = sqrt(pi), Gamma(x + 1) = x * Gamma(x)
        value = math.sqrt(math.pi)
        x = 0.5
        while x < z:
            value *= x
            x += 1.0
        return value

    return None


def _lanczos_sum(z: float) -> float:
    """Lanczos serisi A_g(z); z burada (arguman - 1)."""
    x = _LANCZOS_COEFFS[0]
    for i in range(1, len(_LANCZOS_COEFFS)):
        x += _LANCZOS_COEFFS[i] / (z + i)
    return x


def gamma(z: float) -> float:
    """Gamma fonksiyonu Gamma(z).

    0 < z < 200 araliginda en az 6 anlamli basamak dogruluk. Float araligini
    asan argumanlar icin math.inf doner.

    Raises:
        ValueError: z sifir veya negatif tam sayi ise
    """
    z = float(z)
    _check_pole(z)
    if z > _GAMMA_OVERFLOW_Z:
        return math.inf

    exact = _exact_gamma(z)
    if exact is not None:
        return exact

    if z < 0.5:
        # Yansima: Gamma(z) * Gamma(1 - z) = pi / sin(pi * z)
        return math.pi / (math.sin(math.pi * z) * gamma(1.0 - z))

    z -= 1.0
    x = _lanczos_sum(z)
    t = z + _LANCZOS_G + 0.5
    # t^(z+0.5) ikiye bolunur, ara carpim tasmasin
    half_power = t ** (0.5 * (z + 0.5))
    return _SQRT_2PI * half_power * math.exp(-t) * half_power * x


def log_gamma(z: float) -> float:
    """ln Gamma(z), z > 0 icin. Gamma'yi hic olusturmaz, tasma olmaz.

    Raises:
        ValueError: z <= 0 ise
    """
    z = float(z)
    if not z > 0:
        raise ValueError(f"log_gamma sadece z > 0 icin tanimli: z={z}")
    if z == math.inf:
        return math.inf

    exact = _exact_gamma(z)
    if exact is not None:
        return math.log(exact)

    if z < 0.5:
        return math.log(math.pi / math.sin(math.pi * z)) - log_gamma(1.0 - z)

    z -= 1.0
    x = _lanczos_sum(z)
    t = z + _LANCZOS_G + 0.5
    return _HALF_LOG_2PI + (z + 0.5) * math.log(t) - t + math.log(x)


def check_shape(a: float, b: float) -> None:
    """Beta sekil parametrelerini dogrula.

    Raises:
        ValueError: a veya b pozitif sonlu bir sayi degilse
    """
    for name, value in (("a", a), ("b", b)):
        if not (math.isfinite(value) and value > 0):
            raise ValueError(f"Beta sekil parametresi pozitif olmali: {name}={value}")


def log_beta_function(a: float, b: float) -> float:
    """ln B(a, b) = lnGamma(a) + lnGamma(b) - lnGamma(a + b)."""
    check_shape(a, b)
    return log_gamma(a) + log_gamma(b) - log_gamma(a + b)


def beta_function(a: float, b: float) -> float:
    """Beta fonksiyonu B(a, b) = Gamma(a) * Gamma(b) / Gamma(a + b).

    a + b > LOG_SPACE_THRESHOLD ise log-uzayinda hesaplanir; dogrudan
    Gamma degerlendirmesi bu bolgede tasar. Sonuc cok buyuk a, b icin
    0.0'a inebilir ama asla tasmaz.

    Raises:
        ValueError: a <= 0 veya b <= 0 ise
    """
    check_shape(a, b)

    if a + b > LOG_SPACE_THRESHOLD:
        logger.debug("beta_function log-uzayinda: a=%s b=%s", a, b)
        return math.exp(log_beta_function(a, b))

    return gamma(a) * gamma(b) / gamma(a + b)
