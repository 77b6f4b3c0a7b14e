"""
Codabar (NW-7).

Контрольного символа нет. Ширина символа 9..11 модулей, между символами
один пробел, после последнего символа пробела нет. Буквы A-D — стартовые
и стоповые символы; их положение в данных не проверяется.
"""

from __future__ import annotations

from typing import Dict, Iterator

from barcodegen.model.enums import Symbology
from barcodegen.sym.base import Barcode, bits

__all__ = ["Codabar", "CODABAR_CHARS"]

CODABAR_PATTERNS: Dict[str, str] = {
    "0": "101010011",
    "1": "101011001",
    "2": "101001011",
    "3": "110010101",
    "4": "101101001",
    "5": "110101001",
    "6": "100101011",
    "7": "100101101",
    "8": "100110101",
    "9": "110100101",
    "-": "101001101",
    "$": "101100101",
    ":": "1101011011",
    "/": "1101101011",
    ".": "1101101101",
    "+": "10110011001",
    "A": "1011001001",
    "B": "1010010011",
    "C": "1001001011",
    "D": "1010011001",
}

CODABAR_CHARS = frozenset(CODABAR_PATTERNS)
GAP = "0"


class Codabar(Barcode):
    symbology = Symbology.CODABAR
    CHARS = CODABAR_CHARS

    def encoded_length(self) -> int:
        widths = sum(len(CODABAR_PATTERNS[ch]) for ch in self._data)
        return widths + len(GAP) * (len(self._data) - 1)

    def _modules(self) -> Iterator[int]:
        for i, ch in enumerate(self._data):
            if i:
                yield from bits(GAP)
            yield from bits(CODABAR_PATTERNS[ch])
