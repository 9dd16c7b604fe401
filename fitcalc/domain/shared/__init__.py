"""Helpers shared across domain modules."""

from .rounding import round_energy, round_half_up

__all__ = ["round_half_up", "round_energy"]
