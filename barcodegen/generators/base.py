"""Общие элементы генераторов: цвет, серии модулей, проверка параметров."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from barcodegen.errors import GenerateError

logger = logging.getLogger(__name__)

__all__ = ["Color", "runs", "check_dimensions", "check_modules"]


@dataclass(frozen=True)
class Color:
    """
    Цвет RGBA, каналы 0..255.

    Example:
        >>> Color.from_sequence([255, 0, 0, 128]).to_hex()
        '#FF0000'
    """

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"Color channel {name} must be 0..255, got {value!r}")

    @classmethod
    def black(cls) -> "Color":
        return cls(0, 0, 0, 255)

    @classmethod
    def white(cls) -> "Color":
        return cls(255, 255, 255, 255)

    @classmethod
    def from_sequence(cls, rgba: Sequence[int]) -> "Color":
        """Из списка [r, g, b] или [r, g, b, a] (формат конфигурации)."""
        if len(rgba) not in (3, 4):
            raise ValueError(f"Expected 3 or 4 color channels, got {len(rgba)}")
        return cls(*(int(c) for c in rgba))

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    @property
    def opacity(self) -> float:
        return self.alpha / 255

    def to_hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


def runs(modules: Sequence[int]) -> Iterator[Tuple[int, int]]:
    """Серии штрихов: пары (начальный модуль, длина) для подряд идущих единиц."""
    start = None
    for i, m in enumerate(modules):
        if m and start is None:
            start = i
        elif not m and start is not None:
            yield start, i - start
            start = None
    if start is not None:
        yield start, len(modules) - start


def check_dimensions(height: int, xdim: int) -> None:
    if height <= 0 or xdim <= 0:
        raise GenerateError(
            "Height and xdim must be positive",
            context={"height": height, "xdim": xdim},
        )


def check_modules(modules: Sequence[int]) -> List[int]:
    """Проверить, что последовательность модулей непуста и двоична."""
    result = list(modules)
    if not result:
        raise GenerateError("Encoded barcode is empty")
    if any(m not in (0, 1) for m in result):
        logger.error("Non-binary module values passed to generator")
        raise GenerateError("Modules must be 0 or 1")
    return result
