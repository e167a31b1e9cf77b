"""Demo — внешние потребители ядра (симуляция снаряда)."""

from .projectile import (
    Environment,
    Projectile,
    ProjectileConfig,
    plot_trajectory,
    simulate,
    tick,
)

__all__ = [
    "Environment",
    "Projectile",
    "ProjectileConfig",
    "plot_trajectory",
    "simulate",
    "tick",
]
