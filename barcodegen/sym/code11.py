"""
Code 11 (USD-8).

Контрольный символ C добавляется всегда, K — только при длине данных
больше 10. Оба считаются взвешенной суммой по модулю 11; K охватывает
данные вместе с C.
"""

from __future__ import annotations

from typing import Dict, Iterator, List

from barcodegen.model.enums import Symbology
from barcodegen.sym.base import Barcode, bits
from barcodegen.sym.checksums import weighted_modulo

__all__ = ["Code11", "USD8", "CODE11_CHARS"]

CODE11_PATTERNS: Dict[str, str] = {
    "0": "101011",
    "1": "1101011",
    "2": "1001011",
    "3": "1100101",
    "4": "1011011",
    "5": "1101101",
    "6": "1001101",
    "7": "1010011",
    "8": "1101001",
    "9": "110101",
    "-": "101101",
}

# Значение символа для контрольной суммы: цифры 0-9, '-' = 10
CODE11_VALUES: Dict[str, int] = {ch: i for i, ch in enumerate("0123456789-")}
CODE11_CHARS = frozenset(CODE11_PATTERNS)

GUARD = "1011001"
GAP = "0"

C_THRESHOLD = 10
K_THRESHOLD = 9
MODULUS = 11
K_MIN_LENGTH = 11


def _char_for(value: int) -> str:
    return "0123456789-"[value]


class Code11(Barcode):
    symbology = Symbology.CODE11
    CHARS = CODE11_CHARS

    def checksum_chars(self) -> List[str]:
        values = [CODE11_VALUES[ch] for ch in self._data]
        c = weighted_modulo(values, C_THRESHOLD, MODULUS)
        checks = [_char_for(c)]
        if len(self._data) >= K_MIN_LENGTH:
            k = weighted_modulo(values + [c], K_THRESHOLD, MODULUS)
            checks.append(_char_for(k))
        return checks

    def _symbols(self) -> List[str]:
        return list(self._data) + self.checksum_chars()

    def encoded_length(self) -> int:
        body = sum(len(CODE11_PATTERNS[ch]) + len(GAP) for ch in self._symbols())
        return 2 * len(GUARD) + len(GAP) + body

    def _modules(self) -> Iterator[int]:
        yield from bits(GUARD)
        yield from bits(GAP)
        for ch in self._symbols():
            yield from bits(CODE11_PATTERNS[ch])
            yield from bits(GAP)
        yield from bits(GUARD)


USD8 = Code11
