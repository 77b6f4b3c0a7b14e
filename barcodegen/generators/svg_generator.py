"""
SVG-представление штрихкода.

Фон — один прямоугольник на всю площадь, далее по одному прямоугольнику
на каждую серию подряд идущих штрихов.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from barcodegen.generators.base import Color, check_dimensions, check_modules, runs

__all__ = ["SVGGenerator", "SVG_NAMESPACE"]

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class SVGGenerator:
    """
    Args:
        height: Высота в пикселях.
        xdim: Ширина модуля в пикселях.
        foreground: Цвет штрихов (по умолчанию чёрный).
        background: Цвет фона (по умолчанию белый).
        xmlns: Добавить атрибут xmlns (нужен для самостоятельного .svg файла).
    """

    def __init__(
        self,
        height: int = 80,
        xdim: int = 1,
        foreground: Optional[Color] = None,
        background: Optional[Color] = None,
        xmlns: bool = False,
    ) -> None:
        check_dimensions(height, xdim)
        self.height = height
        self.xdim = xdim
        self.foreground = foreground or Color.black()
        self.background = background or Color.white()
        self.xmlns = xmlns

    def _rect(self, x: int, width: int, color: Color) -> str:
        return (
            f'<rect x="{x}" y="0" width="{width}" height="{self.height}" '
            f'fill="{color.to_hex()}" fill-opacity="{color.opacity:.2f}"/>'
        )

    def generate(self, modules: Sequence[int]) -> str:
        checked = check_modules(modules)
        width = len(checked) * self.xdim
        ns = f' xmlns="{SVG_NAMESPACE}"' if self.xmlns else ""

        parts: List[str] = [
            f'<svg version="1.1"{ns} viewBox="0 0 {width} {self.height}">',
            self._rect(0, width, self.background),
        ]
        for start, length in runs(checked):
            parts.append(self._rect(start * self.xdim, length * self.xdim, self.foreground))
        parts.append("</svg>")
        return "".join(parts)
