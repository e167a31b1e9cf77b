"""
Errors — таксономия ошибок ядра

Все ошибки ядра наследуются от RayTracerError и дополнительно от
соответствующего встроенного исключения, чтобы вызывающий код мог
ловить их как по типу ядра, так и по стандартной категории.

Ядро никогда не завершает процесс: ошибка всегда поднимается к прямому
вызывающему. Политику (fatal или нет) выбирает внешний потребитель (CLI).
"""


class RayTracerError(Exception):
    """Базовая ошибка ядра."""


class InvalidSize(RayTracerError, ValueError):
    """Canvas создаётся с неположительной шириной или высотой."""


class InvalidPoint(RayTracerError, IndexError):
    """Координата пикселя вне границ canvas."""


class InvalidOperation(RayTracerError, ArithmeticError):
    """
    Геометрически неопределённая операция над tuple.

    - Сложение двух точек
    - Вычитание точки из вектора
    """


class NotAVector(RayTracerError, TypeError):
    """Dot/Cross/Magnitude/Normalize вызваны не для вектора."""


class DivisionByZero(RayTracerError, ZeroDivisionError):
    """Деление tuple на скаляр 0 (или нормализация нулевого вектора)."""
