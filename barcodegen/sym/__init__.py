"""
barcodegen.sym

Кодировщики линейных символик. Каждый класс проверяет данные в
конструкторе и выдаёт последовательность модулей (1 — штрих, 0 — пробел).

Public API:
    - Barcode: общий контракт (new / encode / encode_in_place / encoded_length)
    - EAN13, Bookland, JAN, UPCA, EAN8: семейство EAN/UPC
    - EAN2, EAN5, ean_supplement: дополнительные символы EAN
    - Code39, Code93, Code11 (USD8), Codabar: символики с фиксированными таблицами
    - ToF, ITF, STF: 2 of 5
    - Code128, CharacterSet, Unit, tokenize: Code 128

Примеры:
    >>> from barcodegen.sym import EAN13, Code128
    >>> EAN13("750103131130").encode()[:3]
    [1, 0, 1]
    >>> len(Code128("ÀHELLO").encode())
    90
"""

from barcodegen.sym.base import Barcode, BarcodeData
from barcodegen.sym.codabar import Codabar
from barcodegen.sym.code11 import USD8, Code11
from barcodegen.sym.code39 import Code39
from barcodegen.sym.code93 import Code93
from barcodegen.sym.code128 import CharacterSet, Code128, Unit, tokenize
from barcodegen.sym.ean import EAN8, EAN13, JAN, UPCA, Bookland
from barcodegen.sym.ean_supp import EAN2, EAN5, ean_supplement
from barcodegen.sym.two_of_five import ITF, STF, ToF

__all__ = [
    "Barcode",
    "BarcodeData",
    "EAN13",
    "Bookland",
    "JAN",
    "UPCA",
    "EAN8",
    "EAN2",
    "EAN5",
    "ean_supplement",
    "Code39",
    "Code93",
    "Code11",
    "USD8",
    "Codabar",
    "ToF",
    "ITF",
    "STF",
    "Code128",
    "CharacterSet",
    "Unit",
    "tokenize",
]
