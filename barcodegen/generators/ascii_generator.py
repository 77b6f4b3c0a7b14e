"""Текстовое представление штрихкода: ' ' — пробел, '#' — штрих."""

from __future__ import annotations

from typing import Sequence

from barcodegen.generators.base import check_dimensions, check_modules

__all__ = ["ASCIIGenerator", "ASCII_CHARS"]

ASCII_CHARS = (" ", "#")


class ASCIIGenerator:
    """
    Args:
        height: Число строк.
        xdim: Ширина модуля в символах.

    Example:
        >>> ASCIIGenerator(height=2).generate([1, 0, 1])
        '# #\\n# #'
    """

    def __init__(self, height: int = 10, xdim: int = 1) -> None:
        check_dimensions(height, xdim)
        self.height = height
        self.xdim = xdim

    def generate(self, modules: Sequence[int]) -> str:
        row = "".join(ASCII_CHARS[m] * self.xdim for m in check_modules(modules))
        return "\n".join([row] * self.height)
