"""
EAN-13, UPC-A, Bookland, JAN и EAN-8.

Все символики семейства принимают данные без контрольной цифры или с ней;
переданная контрольная цифра обязана совпасть с вычисленной, иначе
``ChecksumError``. Значения с контрольной цифрой и без неё равны и
кодируются одинаково.

Bookland (префикс 978/979) и JAN (префикс 45/49) кодируются как EAN-13;
префикс не проверяется.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Iterator, List, Tuple

from barcodegen.errors import ChecksumError
from barcodegen.model.enums import Symbology
from barcodegen.sym.base import DIGITS, Barcode, BarcodeData, bits
from barcodegen.sym.checksums import modulo_10

logger = logging.getLogger(__name__)

__all__ = [
    "EAN13",
    "UPCA",
    "Bookland",
    "JAN",
    "EAN8",
    "LEFT_A",
    "LEFT_B",
    "RIGHT",
    "PARITY",
]

LEFT_GUARD = "101"
MIDDLE_GUARD = "01010"
RIGHT_GUARD = "101"

# Нечётная чётность (набор A)
LEFT_A: Tuple[str, ...] = (
    "0001101",
    "0011001",
    "0010011",
    "0111101",
    "0100011",
    "0110001",
    "0101111",
    "0111011",
    "0110111",
    "0001011",
)

# Чётная чётность (набор B)
LEFT_B: Tuple[str, ...] = (
    "0100111",
    "0110011",
    "0011011",
    "0100001",
    "0011101",
    "0111001",
    "0000101",
    "0010001",
    "0001001",
    "0010111",
)

RIGHT: Tuple[str, ...] = (
    "1110010",
    "1100110",
    "1101100",
    "1000010",
    "1011100",
    "1001110",
    "1010000",
    "1000100",
    "1001000",
    "1110100",
)

# Строка по первой цифре EAN-13: 0 -> набор A, 1 -> набор B для цифр 2..6
PARITY: Tuple[Tuple[int, ...], ...] = (
    (0, 0, 0, 0, 0),
    (0, 1, 0, 1, 1),
    (0, 1, 1, 0, 1),
    (0, 1, 1, 1, 0),
    (1, 0, 0, 1, 1),
    (1, 1, 0, 0, 1),
    (1, 1, 1, 0, 0),
    (1, 0, 1, 0, 1),
    (1, 0, 1, 1, 0),
    (1, 1, 0, 1, 0),
)


def left_pattern(digit: int, parity: int) -> str:
    return LEFT_B[digit] if parity else LEFT_A[digit]


class _CheckDigitBarcode(Barcode):
    """Числовая символика с необязательной завершающей контрольной цифрой."""

    CHARS = DIGITS
    PAYLOAD_LENGTH: ClassVar[int]
    EVEN_START: ClassVar[bool]

    def __init__(self, data: BarcodeData) -> None:
        super().__init__(data)
        payload = self._data[: self.PAYLOAD_LENGTH]
        check = modulo_10([int(d) for d in payload], self.EVEN_START)
        if len(self._data) > self.PAYLOAD_LENGTH:
            actual = int(self._data[-1])
            if actual != check:
                logger.debug(
                    "%s: checksum mismatch for %r (expected %d)",
                    type(self).__name__,
                    self._data,
                    check,
                )
                raise ChecksumError(
                    expected=check,
                    actual=actual,
                    symbology=type(self).__name__,
                )
        self._data = payload
        self._check = check

    @property
    def check_digit(self) -> int:
        return self._check

    @property
    def digits(self) -> List[int]:
        """Цифры данных вместе с контрольной."""
        return [int(d) for d in self._data] + [self._check]


class EAN13(_CheckDigitBarcode):
    """
    EAN-13: 12 цифр (или 13 с контрольной), 95 модулей.

    Example:
        >>> EAN13("750103131130").check_digit
        9
    """

    symbology = Symbology.EAN13
    SIZE = (12, 13)
    PAYLOAD_LENGTH = 12
    EVEN_START = True

    def encoded_length(self) -> int:
        return 95

    def _ean13_digits(self) -> List[int]:
        return self.digits

    def _modules(self) -> Iterator[int]:
        digits = self._ean13_digits()
        parity = PARITY[digits[0]]

        yield from bits(LEFT_GUARD)
        yield from bits(LEFT_A[digits[1]])
        for digit, p in zip(digits[2:7], parity):
            yield from bits(left_pattern(digit, p))
        yield from bits(MIDDLE_GUARD)
        for digit in digits[7:]:
            yield from bits(RIGHT[digit])
        yield from bits(RIGHT_GUARD)


class Bookland(EAN13):
    """EAN-13 с префиксом 978/979 (ISBN)."""

    symbology = Symbology.BOOKLAND


class JAN(EAN13):
    """EAN-13 с японским префиксом 45/49."""

    symbology = Symbology.JAN


class UPCA(EAN13):
    """UPC-A: 11 цифр (или 12 с контрольной); кодируется как EAN-13 с ведущим 0."""

    symbology = Symbology.UPCA
    SIZE = (11, 12)
    PAYLOAD_LENGTH = 11
    EVEN_START = False

    def _ean13_digits(self) -> List[int]:
        return [0] + self.digits


class EAN8(_CheckDigitBarcode):
    """EAN-8: 7 цифр (или 8 с контрольной), 67 модулей."""

    symbology = Symbology.EAN8
    SIZE = (7, 8)
    PAYLOAD_LENGTH = 7
    EVEN_START = False

    def encoded_length(self) -> int:
        return 67

    def _modules(self) -> Iterator[int]:
        digits = self.digits

        yield from bits(LEFT_GUARD)
        for digit in digits[:4]:
            yield from bits(LEFT_A[digit])
        yield from bits(MIDDLE_GUARD)
        for digit in digits[4:]:
            yield from bits(RIGHT[digit])
        yield from bits(RIGHT_GUARD)
