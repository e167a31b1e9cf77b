"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость операций над tuple и каналами цвета:
- Epsilon-сравнения float с фиксированной толерантностью
- Округление half away from zero (детерминированное, без banker's rounding)
- Clamp значений в диапазон
- Валидация параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float сравнения всегда учитывают EPSILON (накопленный дрейф после normalize)
2. Все функции чистые: никакой глобальной изменяемой конфигурации
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для покомпонентного сравнения tuple
EPSILON: Final[float] = 1e-5


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_equal(a: float, b: float, eps: float = EPSILON) -> bool:
    """
    Приближённое равенство двух float.

    Алгоритм:
        abs(a - b) < eps   (строгое неравенство)

    Args:
        a: Первое значение
        b: Второе значение
        eps: Абсолютная толерантность (default: EPSILON)

    Returns:
        True если разница строго меньше eps

    Examples:
        >>> is_equal(1.0, 1.0 + 1e-6)
        True
        >>> is_equal(1.0, 1.0 + 1e-5)
        False
        >>> is_equal(0.26726, 1 / math.sqrt(14))
        True
    """
    return abs(a - b) < eps


# =============================================================================
# ОКРУГЛЕНИЕ И CLAMP
# =============================================================================


def round_half_away(value: float) -> int:
    """
    Округление до ближайшего целого, половины от нуля.

    Встроенный round() использует banker's rounding (2.5 → 2), что даёт
    несимметричную квантизацию каналов. Здесь 2.5 → 3, -2.5 → -3.

    Examples:
        >>> round_half_away(127.5)
        128
        >>> round_half_away(-0.5)
        -1
        >>> round_half_away(204.00000000000003)
        204
    """
    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1, 0, 10)
        0
        >>> clamp(15, 0, 10)
        10
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def clamp_channel(value: float, max_color: int) -> int:
    """
    Кодирование канала цвета единичной шкалы в целое [0, max_color].

    Алгоритм:
        round_half_away(clamp(value * max_color, 0, max_color))

    Clamp выполняется до округления: переполнение value * max_color до ±inf
    даёт границу диапазона, NaN кодируется как 0.

    Используется только на границе сериализации (PPM), не внутри алгебры.

    Args:
        value: Значение канала (обычно 0.0..1.0, но допускается любое)
        max_color: Максимальное значение канала (например, 255)

    Returns:
        Целое значение канала

    Examples:
        >>> clamp_channel(0.5, 255)
        128
        >>> clamp_channel(1.5, 255)
        255
        >>> clamp_channel(-1.5, 255)
        0
        >>> clamp_channel(1e308, 255)
        255
        >>> clamp_channel(float("nan"), 255)
        0
    """
    scaled = value * max_color
    if math.isnan(scaled):
        return 0

    return round_half_away(clamp(scaled, 0, max_color))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid number (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
