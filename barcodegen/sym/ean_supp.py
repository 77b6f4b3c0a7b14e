"""Дополнительные символы EAN-2 и EAN-5 (цена, номер выпуска)."""

from __future__ import annotations

from abc import abstractmethod
from typing import Iterator, Sequence, Tuple, Union

from barcodegen.errors import LengthError
from barcodegen.model.enums import Symbology
from barcodegen.sym.base import DIGITS, Barcode, BarcodeData, bits, validate
from barcodegen.sym.checksums import ean5_parity_index
from barcodegen.sym.ean import left_pattern

__all__ = ["EAN2", "EAN5", "ean_supplement"]

GUARD = "1011"
SEPARATOR = "01"

EAN2_PARITY: Tuple[Tuple[int, ...], ...] = (
    (0, 0),
    (0, 1),
    (1, 0),
    (1, 1),
)

EAN5_PARITY: Tuple[Tuple[int, ...], ...] = (
    (1, 1, 0, 0, 0),
    (1, 0, 1, 0, 0),
    (1, 0, 0, 1, 0),
    (1, 0, 0, 0, 1),
    (0, 1, 1, 0, 0),
    (0, 0, 1, 1, 0),
    (0, 0, 0, 1, 1),
    (0, 1, 0, 1, 0),
    (0, 1, 0, 0, 1),
    (0, 0, 1, 0, 1),
)


class _Supplement(Barcode):
    CHARS = DIGITS

    @abstractmethod
    def _parity(self, digits: Sequence[int]) -> Tuple[int, ...]:
        """Строка чётности: 0 для набора A, 1 для набора B."""

    def encoded_length(self) -> int:
        n = len(self._data)
        return len(GUARD) + 7 * n + len(SEPARATOR) * (n - 1)

    def _modules(self) -> Iterator[int]:
        digits = [int(d) for d in self._data]
        yield from bits(GUARD)
        for i, (digit, parity) in enumerate(zip(digits, self._parity(digits))):
            if i:
                yield from bits(SEPARATOR)
            yield from bits(left_pattern(digit, parity))


class EAN2(_Supplement):
    symbology = Symbology.EAN2
    SIZE = (2, 2)

    def _parity(self, digits: Sequence[int]) -> Tuple[int, ...]:
        return EAN2_PARITY[(10 * digits[0] + digits[1]) % 4]


class EAN5(_Supplement):
    symbology = Symbology.EAN5
    SIZE = (5, 5)

    def _parity(self, digits: Sequence[int]) -> Tuple[int, ...]:
        return EAN5_PARITY[ean5_parity_index(digits)]


def ean_supplement(data: BarcodeData) -> Union[EAN2, EAN5]:
    """
    Выбрать EAN-2 или EAN-5 по длине данных.

    Raises:
        LengthError: длина не 2 и не 5.
        CharacterError: в данных не только цифры.
    """
    text = validate(data, (2, 5), DIGITS, "EANSupplement")
    if len(text) == 2:
        return EAN2(text)
    if len(text) == 5:
        return EAN5(text)
    raise LengthError(
        f"Expected 2 or 5 digits, got {len(text)}", symbology="EANSupplement"
    )
