"""
PPM Encoder — сериализация Canvas в текстовый Portable Pixmap

Формат (пробелы значимы только на границах строк):

    <identifier>\\n
    <width> <height>\\n
    <max_color>\\n
    <целые через пробел, перенос по 70 колонкам, один завершающий \\n>

Тело: для каждого пикселя в порядке хранения canvas: каналы x, y, z
(red, green, blue) через clamp_channel. Компонента w не выводится.

Упаковка строк: перед добавлением значения, если текущая строка не пуста и
len(line) + len(value) + 1 > line_width, строка завершается и значение
начинает новую строку; иначе добавляется через один пробел.

Кодирование: чистая функция содержимого canvas (только чтение).
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from src.core.domain.canvas import Canvas
from src.core.math.numerical_safeguards import clamp_channel, validate_positive
from src.utils.log import get_logger

logger = get_logger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PPMConfig:
    """Конфигурация PPM кодирования.

    identifier: magic number заголовка (P3 для ASCII pixmap)
    max_color: максимальное значение канала
    line_width: максимальная длина строки тела
    """

    identifier: str = "P3"
    max_color: int = 255
    line_width: int = 70

    def __post_init__(self) -> None:
        if not self.identifier or any(ch.isspace() for ch in self.identifier):
            raise ValueError(
                f"identifier must be non-empty without whitespace, got {self.identifier!r}"
            )
        validate_positive(self.max_color, "max_color")
        validate_positive(self.line_width, "line_width")


# =============================================================================
# ENCODER
# =============================================================================


def channel_values(canvas: Canvas, max_color: int) -> Iterator[str]:
    """
    Значения каналов тела PPM в порядке вывода.

    Yields:
        Десятичные строки: x, y, z каждого пикселя в порядке хранения
    """
    for pixel in canvas.pixels():
        yield str(clamp_channel(pixel.x, max_color))
        yield str(clamp_channel(pixel.y, max_color))
        yield str(clamp_channel(pixel.z, max_color))


def pack_lines(values: Iterable[str], line_width: int = 70) -> list[str]:
    """
    Упаковка значений в строки не длиннее line_width.

    Args:
        values: Значения в порядке вывода
        line_width: Максимальная длина строки (default: 70)

    Returns:
        Список строк без завершающих \\n

    Examples:
        >>> pack_lines(["255"] * 18)[0] == " ".join(["255"] * 17)
        True
    """
    lines: list[str] = []
    line = ""

    for value in values:
        if not line:
            line = value
        elif len(line) + len(value) + 1 > line_width:
            lines.append(line)
            line = value
        else:
            line = f"{line} {value}"

    if line:
        lines.append(line)

    return lines


def encode_ppm(canvas: Canvas, config: PPMConfig | None = None) -> str:
    """
    Сериализация canvas в PPM текст.

    Args:
        canvas: Canvas для кодирования
        config: Конфигурация (опционально, используется default: P3, 255, 70)

    Returns:
        PPM текст, завершающийся ровно одним \\n

    Examples:
        >>> encode_ppm(Canvas(1, 1))
        'P3\\n1 1\\n255\\n0 0 0\\n'
    """
    config = config or PPMConfig()

    header = [
        config.identifier,
        f"{canvas.width} {canvas.height}",
        str(config.max_color),
    ]
    body = pack_lines(channel_values(canvas, config.max_color), config.line_width)

    logger.debug(
        "Encoded %dx%d canvas as %s: %d body lines",
        canvas.width,
        canvas.height,
        config.identifier,
        len(body),
    )

    return "\n".join(header + body) + "\n"
