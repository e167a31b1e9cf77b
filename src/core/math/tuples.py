"""
Tuple — 4-компонентный примитив для точек, векторов и цветов

Immutable Pydantic модель (x, y, z, w). Вид tuple определяется компонентой w:
- w == 1.0 → Point (положение)
- w == 0.0 → Vector (направление/смещение) или Color (r, g, b в x, y, z)

Цвет переиспользует представление вектора: отдельного дискриминанта нет,
поэтому вызывающий код не должен полагаться на проверку вида для цветов.

ПРАВИЛА ДОПУСТИМОСТИ (проверяются ДО вычисления результата):
1. Point + Point → InvalidOperation
2. Vector - Point → InvalidOperation
3. dot/cross/magnitude/normalize только для Vector → NotAVector
4. Деление на 0 → DivisionByZero
5. hadamard: без проверки вида (смешивание цветов)

Вид результата Add/Sub получается из покомпонентной арифметики над w:
    P + V = P,  V + V = V,  P - P = V,  P - V = P,  V - V = V

Равенство приближённое: покомпонентно abs(a - b) < EPSILON.
"""

import math
from enum import Enum

from pydantic import BaseModel, Field

from src.core.errors import DivisionByZero, InvalidOperation, NotAVector
from src.core.math.numerical_safeguards import EPSILON, is_equal

# =============================================================================
# ENUMS
# =============================================================================


class TupleKind(str, Enum):
    """Вид tuple, вычисляемый по компоненте w"""

    POINT = "point"
    VECTOR = "vector"
    OTHER = "other"


# =============================================================================
# TUPLE MODEL
# =============================================================================


class Tuple(BaseModel):
    """
    Модель 4-компонентного tuple.

    Immutable модель (frozen=True): каждая операция возвращает новый экземпляр.
    Модель не хешируемая, так как равенство определено с толерантностью.
    """

    x: float = Field(..., description="Компонента x (red для цвета)")
    y: float = Field(..., description="Компонента y (green для цвета)")
    z: float = Field(..., description="Компонента z (blue для цвета)")
    w: float = Field(..., description="Дискриминант: 1.0 point, 0.0 vector/color")

    model_config = {"frozen": True}  # Immutable

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Вид tuple
    # -------------------------------------------------------------------------

    def is_point(self) -> bool:
        """True если w == 1.0"""
        return self.w == 1.0

    def is_vector(self) -> bool:
        """True если w == 0.0 (цвета тоже проходят эту проверку)"""
        return self.w == 0.0

    @property
    def kind(self) -> TupleKind:
        """Вид tuple по компоненте w"""
        if self.is_point():
            return TupleKind.POINT
        if self.is_vector():
            return TupleKind.VECTOR
        return TupleKind.OTHER

    # Алиасы каналов цвета
    @property
    def red(self) -> float:
        return self.x

    @property
    def green(self) -> float:
        return self.y

    @property
    def blue(self) -> float:
        return self.z

    # -------------------------------------------------------------------------
    # Равенство
    # -------------------------------------------------------------------------

    def is_equal(self, other: "Tuple", eps: float = EPSILON) -> bool:
        """
        Приближённое покомпонентное равенство.

        Args:
            other: Второй tuple
            eps: Абсолютная толерантность (default: EPSILON)

        Returns:
            True если все четыре разницы строго меньше eps
        """
        return (
            is_equal(self.x, other.x, eps)
            and is_equal(self.y, other.y, eps)
            and is_equal(self.z, other.z, eps)
            and is_equal(self.w, other.w, eps)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.is_equal(other)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Tuple") -> "Tuple":
        """
        Покомпонентная сумма (включая w).

        Raises:
            InvalidOperation: Если оба tuple точки
        """
        if self.is_point() and other.is_point():
            raise InvalidOperation(f"can't add two points: {self!r} + {other!r}")

        return Tuple(
            x=self.x + other.x,
            y=self.y + other.y,
            z=self.z + other.z,
            w=self.w + other.w,
        )

    def sub(self, other: "Tuple") -> "Tuple":
        """
        Покомпонентная разность (включая w).

        Raises:
            InvalidOperation: Если из вектора вычитается точка
        """
        if self.is_vector() and other.is_point():
            raise InvalidOperation(
                f"can't subtract a point from a vector: {self!r} - {other!r}"
            )

        return Tuple(
            x=self.x - other.x,
            y=self.y - other.y,
            z=self.z - other.z,
            w=self.w - other.w,
        )

    def negate(self) -> "Tuple":
        """Покомпонентное отрицание (включая w)"""
        return Tuple(x=-self.x, y=-self.y, z=-self.z, w=-self.w)

    def mul(self, scalar: float) -> "Tuple":
        """Умножение на скаляр (включая w)"""
        return Tuple(
            x=self.x * scalar,
            y=self.y * scalar,
            z=self.z * scalar,
            w=self.w * scalar,
        )

    def div(self, scalar: float) -> "Tuple":
        """
        Деление на скаляр (включая w).

        Raises:
            DivisionByZero: Если scalar == 0
        """
        if scalar == 0:
            raise DivisionByZero(f"can't divide {self!r} by zero")

        return Tuple(
            x=self.x / scalar,
            y=self.y / scalar,
            z=self.z / scalar,
            w=self.w / scalar,
        )

    # -------------------------------------------------------------------------
    # Векторные операции
    # -------------------------------------------------------------------------

    def _require_vector(self, *others: "Tuple") -> None:
        for t in (self, *others):
            if not t.is_vector():
                raise NotAVector(f"expected a vector (w=0), got {t!r}")

    def magnitude(self) -> float:
        """
        Длина вектора: sqrt(x² + y² + z² + w²).

        Raises:
            NotAVector: Если tuple не вектор
        """
        self._require_vector()
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalize(self) -> "Tuple":
        """
        Единичный вектор того же направления.

        Raises:
            NotAVector: Если tuple не вектор
            DivisionByZero: Если вектор нулевой
        """
        return self.div(self.magnitude())

    def dot(self, other: "Tuple") -> float:
        """
        Скалярное произведение: Σ покомпонентных произведений (включая w).

        Raises:
            NotAVector: Если любой из tuple не вектор
        """
        self._require_vector(other)
        return (
            self.x * other.x
            + self.y * other.y
            + self.z * other.z
            + self.w * other.w
        )

    def cross(self, other: "Tuple") -> "Tuple":
        """
        Векторное произведение по (x, y, z); w результата = 0.

        Не коммутативно: a.cross(b) == -(b.cross(a)).

        Raises:
            NotAVector: Если любой из tuple не вектор
        """
        self._require_vector(other)
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def hadamard(self, other: "Tuple") -> "Tuple":
        """
        Покомпонентное произведение (x, y, z); w результата = 0.

        Проверка вида намеренно отсутствует: цвета строятся через
        векторный конструктор, и для смешивания (свет × поверхность)
        передаются произвольные tuple.
        """
        return color(self.x * other.x, self.y * other.y, self.z * other.z)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> "Tuple":
        return self.negate()

    def __mul__(self, scalar: float) -> "Tuple":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.mul(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Tuple":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.div(scalar)

    def __repr__(self) -> str:
        return f"Tuple(x={self.x}, y={self.y}, z={self.z}, w={self.w})"


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def point(x: float, y: float, z: float) -> Tuple:
    """Точка: w = 1.0"""
    return Tuple(x=x, y=y, z=z, w=1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Вектор: w = 0.0"""
    return Tuple(x=x, y=y, z=z, w=0.0)


def color(r: float, g: float, b: float) -> Tuple:
    """Цвет: представление вектора, (r, g, b) в (x, y, z)"""
    return Tuple(x=r, y=g, z=b, w=0.0)


# =============================================================================
# ИМЕНОВАННЫЕ ЦВЕТА
# =============================================================================

BLACK = color(0.0, 0.0, 0.0)
WHITE = color(1.0, 1.0, 1.0)
RED = color(1.0, 0.0, 0.0)
GREEN = color(0.0, 1.0, 0.0)
BLUE = color(0.0, 0.0, 1.0)
