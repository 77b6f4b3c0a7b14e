"""
barcodegen.generators

Генераторы принимают только последовательность модулей (результат
``Barcode.encode()``) и ничего не знают о символиках.

Public API:
    - ASCIIGenerator: текст (' ' / '#')
    - JSONGenerator: {"height":H,"xdim":X,"encoding":[...]}
    - SVGGenerator: SVG-документ
    - ImageGenerator: Pillow Image / PNG, GIF, JPEG, WEBP
    - Color: цвет RGBA

Зависимости:
    Pillow (только ImageGenerator)
"""

from barcodegen.generators.ascii_generator import ASCIIGenerator
from barcodegen.generators.base import Color
from barcodegen.generators.image_generator import ImageGenerator
from barcodegen.generators.json_generator import JSONGenerator
from barcodegen.generators.svg_generator import SVGGenerator

__all__ = [
    "ASCIIGenerator",
    "JSONGenerator",
    "SVGGenerator",
    "ImageGenerator",
    "Color",
]
