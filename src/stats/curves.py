"""Egri ornekleyici - cizim icin (x, y) dizileri.

Saf fonksiyonlar: ayni girdi her zaman ayni diziyi uretir, girdi listeleri
degistirilmez.
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

# Varsayilan cizim araligi: 0 ve 1'deki yogunluk tekilliklerinden uzak
DEFAULT_DOMAIN = (0.01, 0.99)
DEFAULT_POINTS = 200


@dataclass(frozen=True)
class SamplePoint:
    x: float
    y: float


def grid(lo: float, hi: float, n: int) -> list[float]:
    """lo ve hi dahil n adet esit aralikli nokta.

    Raises:
        ValueError: n < 2 veya lo >= hi ise
    """
    if n < 2:
        raise ValueError(f"En az 2 nokta gerekli: n={n}")
    if not lo < hi:
        raise ValueError(f"Gecersiz aralik: [{lo}, {hi}]")
    step = (hi - lo) / (n - 1)
    points = [lo + i * step for i in range(n - 1)]
    points.append(hi)
    return points


def sample(
    fn: Callable[[float], float],
    domain: tuple[float, float] = DEFAULT_DOMAIN,
    n: int = DEFAULT_POINTS,
) -> list[SamplePoint]:
    """fn'i domain uzerinde n noktada degerlendir.

    Sonlu olmayan, negatif veya hata veren noktalar atlanir; bir
    degerlendirici uc durumu cizime sizmaz.
    """
    lo, hi = domain
    curve = []
    for x in grid(lo, hi, n):
        try:
            y = fn(x)
        except (ValueError, ZeroDivisionError, OverflowError):
            continue
        if math.isfinite(y) and y >= 0:
            curve.append(SamplePoint(x, y))
    return curve


def normalize(curve: Sequence[SamplePoint]) -> list[SamplePoint]:
    """Tum y'leri maksimuma bol, tepe 1.0 olsun.

    Maksimum 0 ise (veya egri bossa) egri degistirilmeden doner.
    """
    if not curve:
        return list(curve)
    max_y = max(p.y for p in curve)
    if max_y == 0:
        return list(curve)
    return [SamplePoint(p.x, p.y / max_y) for p in curve]


def peak(curve: Sequence[SamplePoint]) -> SamplePoint | None:
    """En yuksek y'ye sahip nokta (esitlikte ilki)."""
    if not curve:
        return None
    return max(curve, key=lambda p: p.y)


def nearest_point(curve: Sequence[SamplePoint], x: float) -> SamplePoint | None:
    """x'e en yakin grid noktasi - MLE/MAP isaretcisi icin."""
    if not curve:
        return None
    return min(curve, key=lambda p: abs(p.x - x))


def trapezoid_area(curve: Sequence[SamplePoint]) -> float:
    """Yamuk kurali ile egri altindaki alan."""
    area = 0.0
    for left, right in zip(curve, curve[1:]):
        area += 0.5 * (left.y + right.y) * (right.x - left.x)
    return area


def to_dicts(curve: Sequence[SamplePoint]) -> list[dict]:
    """JSON icin [{"x": .., "y": ..}, ...]."""
    return [{"x": p.x, "y": p.y} for p in curve]
