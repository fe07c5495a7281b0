"""Simulator CLI entrypoint.

Kullanim:
    python -m src.simulator
    python -m src.simulator --flips 50 --p 0.3 --prior-a 5 --prior-b 5 --seed 1
"""

import argparse
import logging

from src.config import load_config
from src.simulator.coin_simulator import CoinSimulator
from src.stats.beta_model import BetaShape, Observation
from src.stats.estimator import estimate_summary

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger("mle_map.simulator")


def print_step(step: dict) -> None:
    """Her atistan sonra terminale ilerleme yazdir."""
    print(
        f"  Atis {step['flip']:3d} | {step['outcome']} | "
        f"{step['heads']:3d}Y {step['tails']:3d}T | "
        f"MLE {step['mle']:.3f} | MAP {step['map']:.3f}"
    )


def run_simulation(
    config_path: str | None,
    flips: int | None,
    p_heads: float | None,
    prior_a: float | None,
    prior_b: float | None,
    seed: int | None,
) -> dict:
    """Config + CLI override'lari ile simulasyonu calistir."""
    config = load_config(config_path)
    flips = config.simulator.flips if flips is None else flips
    p_heads = config.simulator.p_heads if p_heads is None else p_heads
    seed = config.simulator.seed if seed is None else seed
    prior = BetaShape(
        config.prior.alpha if prior_a is None else prior_a,
        config.prior.beta if prior_b is None else prior_b,
    )

    print("\n=== MLE vs MAP - Para Atisi Simulasyonu ===\n")
    print(f"Gercek p: {p_heads}  Prior: Beta({prior.alpha}, {prior.beta})  Seed: {seed}\n")

    sim = CoinSimulator(seed=seed)
    steps = sim.run(flips, p_heads, prior, callback=print_step)

    last = steps[-1] if steps else {"heads": 0, "tails": 0}
    summary = estimate_summary(Observation(last["heads"], last["tails"]), prior)

    print("\n--- Sonuc ---")
    print(f"MLE: {summary.mle:.4f}")
    print(f"MAP: {summary.map:.4f}")
    print(f"Posterior: Beta({summary.posterior.alpha}, {summary.posterior.beta})")
    print(f"Veri payi: {summary.data_share:.1%}\n")
    return {"steps": steps, "summary": summary}


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    parser = argparse.ArgumentParser(description="MLE vs MAP - Para Atisi Simulatoru")
    parser.add_argument("--flips", type=int, default=None, help="Atis sayisi")
    parser.add_argument("--p", type=float, default=None, dest="p_heads", help="Gercek yazi olasiligi")
    parser.add_argument("--prior-a", type=float, default=None, help="Beta prior alpha")
    parser.add_argument("--prior-b", type=float, default=None, help="Beta prior beta")
    parser.add_argument("--seed", type=int, default=None, help="Rastgelelik tohumu")
    parser.add_argument("--config", default=None, help="Config dosya yolu")
    args = parser.parse_args(argv)

    try:
        run_simulation(
            args.config, args.flips, args.p_heads, args.prior_a, args.prior_b, args.seed
        )
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
