"""Simulator modulu - seed'li para atisi ve CLI."""

from src.simulator.coin_simulator import CoinSimulator

__all__ = ["CoinSimulator"]
