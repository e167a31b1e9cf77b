"""Projectile — демонстрационный потребитель Tuple Algebra.

Снаряд (точка + скорость) движется в окружении (гравитация + ветер):
    position' = position + velocity
    velocity' = velocity + gravity + wind

Все сложения через Tuple.add; для Point + Vector и Vector + Vector алгебра
никогда не поднимает InvalidOperation, поэтому любая ошибка здесь означает
некорректно построенный снаряд или окружение.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Final

from src.core.domain.canvas import Canvas
from src.core.errors import InvalidPoint
from src.core.math.tuples import RED, Tuple, point, vector
from src.utils.log import get_logger

logger = get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Защита от бесконечной симуляции (например, при ветре, уносящем вверх)
MAX_TICKS_DEFAULT: Final[int] = 10_000


# =============================================================================
# STATE
# =============================================================================


@dataclass(frozen=True)
class Projectile:
    """Состояние снаряда."""

    position: Tuple  # point
    velocity: Tuple  # vector


@dataclass(frozen=True)
class Environment:
    """Постоянное поле сил."""

    gravity: Tuple  # vector
    wind: Tuple  # vector


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ProjectileConfig:
    """Конфигурация сценария.

    Default: старт на единицу выше начала координат, скорость нормализована
    до 1 unit/tick и умножена на speed; гравитация -0.1, ветер -0.01.
    """

    start: tuple[float, float, float] = (0.0, 1.0, 0.0)
    direction: tuple[float, float, float] = (1.0, 1.0, 0.0)
    speed: float = 1.0
    gravity: tuple[float, float, float] = (0.0, -0.1, 0.0)
    wind: tuple[float, float, float] = (-0.01, 0.0, 0.0)
    max_ticks: int = MAX_TICKS_DEFAULT

    def build(self) -> tuple[Projectile, Environment]:
        """Построение начального снаряда и окружения.

        Raises:
            DivisionByZero: Если direction нулевой вектор
        """
        proj = Projectile(
            position=point(*self.start),
            velocity=vector(*self.direction).normalize() * self.speed,
        )
        env = Environment(gravity=vector(*self.gravity), wind=vector(*self.wind))
        return proj, env


# =============================================================================
# SIMULATION
# =============================================================================


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Снаряд после одной единицы времени.

    Raises:
        InvalidOperation: Если position/velocity/gravity/wind построены неверно
    """
    position = proj.position.add(proj.velocity)
    velocity = proj.velocity.add(env.gravity).add(env.wind)
    return Projectile(position=position, velocity=velocity)


def simulate(
    env: Environment,
    proj: Projectile,
    max_ticks: int = MAX_TICKS_DEFAULT,
) -> Iterator[Projectile]:
    """Все состояния после каждого tick, пока снаряд выше земли.

    Останавливается после состояния с position.y <= 0 или после max_ticks.
    Начальное состояние не выдаётся.
    """
    ticks = 0
    while proj.position.y > 0 and ticks < max_ticks:
        proj = tick(env, proj)
        ticks += 1
        logger.debug("tick %d: position %r", ticks, proj.position)
        yield proj

    if proj.position.y > 0:
        logger.warning("Projectile still airborne after %d ticks", max_ticks)


def plot_trajectory(
    positions: Iterable[Tuple],
    width: int,
    height: int,
    color: Tuple = RED,
) -> Canvas:
    """Траектория на canvas: y canvas растёт вниз, точки вне границ пропускаются.

    Raises:
        InvalidSize: Если width <= 0 или height <= 0
    """
    canvas = Canvas(width, height)
    skipped = 0

    for position in positions:
        x = round(position.x)
        y = height - 1 - round(position.y)
        try:
            canvas.write_pixel(x, y, color)
        except InvalidPoint:
            skipped += 1

    if skipped:
        logger.debug("Skipped %d positions outside the %dx%d canvas", skipped, width, height)

    return canvas
