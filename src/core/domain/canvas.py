"""
Canvas — прямоугольная сетка пикселей

Canvas фиксированного размера (width × height), каждый пиксель хранит цвет (Tuple).
При создании все пиксели чёрные. Размер никогда не меняется; изменения только
через write_pixel и fill.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. width > 0, height > 0
2. len(pixels) == width * height всегда
3. Координата (x, y) валидна iff 0 <= x < width и 0 <= y < height
4. Отображение (x, y) → индекс хранения только через pixel_index

Синхронизации нет: конкурентные записи требуют внешней блокировки.

Импорт canvas ↔ ppm циклический: src.core.io.ppm импортирует Canvas, поэтому
Canvas.to_ppm загружает кодировщик локально, при первом вызове.
"""

from collections.abc import Iterator

from src.core.errors import InvalidPoint, InvalidSize
from src.core.math.tuples import BLACK, Tuple
from src.utils.log import get_logger

logger = get_logger(__name__)


# =============================================================================
# STORAGE INDEX
# =============================================================================


def pixel_index(x: int, y: int, width: int, height: int) -> int:
    """
    Линейный индекс хранения для координаты (x, y).

    Row-major: строки сверху вниз, внутри строки слева направо
    (порядок пикселей в теле PPM).

    Args:
        x: Колонка (0 <= x < width)
        y: Строка (0 <= y < height)
        width: Ширина canvas
        height: Высота canvas

    Returns:
        y * width + x

    Raises:
        InvalidPoint: Если (x, y) вне границ
    """
    if x < 0 or x >= width or y < 0 or y >= height:
        raise InvalidPoint(f"point ({x}, {y}) is outside a {width}x{height} canvas")

    return y * width + x


# =============================================================================
# CANVAS
# =============================================================================


class Canvas:
    """
    Сетка цветов width × height.

    Пример:
        >>> canvas = Canvas(10, 2)
        >>> canvas.write_pixel(2, 1, RED)
        >>> canvas.pixel(2, 1) == RED
        True
    """

    def __init__(self, width: int, height: int):
        """
        Создание canvas, все пиксели чёрные.

        Args:
            width: Ширина (> 0)
            height: Высота (> 0)

        Raises:
            InvalidSize: Если width <= 0 или height <= 0
        """
        if width <= 0 or height <= 0:
            raise InvalidSize(f"invalid canvas size {width}x{height}")

        self._width = width
        self._height = height
        self._pixels: list[Tuple] = [BLACK] * (width * height)

        logger.debug("Created %dx%d canvas", width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def size(self) -> int:
        """Количество пикселей: width * height"""
        return self._width * self._height

    def fill(self, color: Tuple) -> None:
        """Перезаписать все пиксели цветом color"""
        self._pixels = [color] * self.size()

    def pixel(self, x: int, y: int) -> Tuple:
        """
        Цвет пикселя (x, y).

        Raises:
            InvalidPoint: Если (x, y) вне границ
        """
        return self._pixels[pixel_index(x, y, self._width, self._height)]

    def write_pixel(self, x: int, y: int, color: Tuple) -> None:
        """
        Записать цвет в пиксель (x, y). Меняет ровно один слот.

        Raises:
            InvalidPoint: Если (x, y) вне границ
        """
        self._pixels[pixel_index(x, y, self._width, self._height)] = color

    def pixels(self) -> Iterator[Tuple]:
        """Итератор по пикселям в порядке хранения"""
        return iter(self._pixels)

    def to_ppm(self, identifier: str = "P3", max_color: int = 255) -> str:
        """
        Сериализация в PPM текст.

        См. src.core.io.ppm.encode_ppm.

        Raises:
            ValueError: Если identifier пустой или содержит пробельные символы,
                либо max_color <= 0 (валидация PPMConfig, вне RayTracerError)
        """
        # src.core.io.ppm импортирует Canvas на уровне модуля
        from src.core.io.ppm import PPMConfig, encode_ppm

        return encode_ppm(self, PPMConfig(identifier=identifier, max_color=max_color))

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
