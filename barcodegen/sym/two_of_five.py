"""
2 of 5: чередующийся (ITF) и стандартный (STF) варианты.

ITF кодирует цифры парами: первая цифра пары задаёт ширины штрихов,
вторая — ширины пробелов. При нечётном числе цифр добавляется контрольная
цифра по модулю 10. STF кодирует каждую цифру отдельно, пробелы всегда
узкие.

Example:
    >>> ToF.interleaved("1234567").digits
    [1, 2, 3, 4, 5, 6, 7, 0]
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from barcodegen.model.enums import Symbology
from barcodegen.sym.base import DIGITS, Barcode, BarcodeData, bits
from barcodegen.sym.checksums import modulo_10

__all__ = ["ToF", "ITF", "STF", "WIDTHS"]

WIDTHS: Tuple[str, ...] = (
    "NNWWN",
    "WNNNW",
    "NWNNW",
    "WWNNN",
    "NNWNW",
    "WNWNN",
    "NWWNN",
    "NNNWW",
    "WNNWN",
    "NWNWN",
)

ITF_START = "1010"
ITF_STOP = "1101"
STF_START = "11011010"
STF_STOP = "11010110"

WIDE = 3
# Ширина символа ITF: 2 широких + 3 узких элемента
ITF_DIGIT_WIDTH = 2 * WIDE + 3
STF_WIDE = "1110"
STF_NARROW = "10"
STF_DIGIT_WIDTH = 2 * len(STF_WIDE) + 3 * len(STF_NARROW)


class ToF(Barcode):
    """Общая часть вариантов 2 of 5."""

    CHARS = DIGITS

    @classmethod
    def interleaved(cls, data: BarcodeData) -> "ITF":
        return ITF(data)

    @classmethod
    def standard(cls, data: BarcodeData) -> "STF":
        return STF(data)

    @property
    def digits(self) -> List[int]:
        return [int(d) for d in self._data]


class ITF(ToF):
    symbology = Symbology.ITF

    def __init__(self, data: BarcodeData) -> None:
        super().__init__(data)
        if len(self._data) % 2:
            check = modulo_10([int(d) for d in self._data], even_start=False)
            self._data = f"{self._data}{check}"

    def encoded_length(self) -> int:
        return len(ITF_START) + len(self._data) * ITF_DIGIT_WIDTH + len(ITF_STOP)

    @staticmethod
    def _interleave(bars: int, spaces: int) -> Iterator[int]:
        for b, s in zip(WIDTHS[bars], WIDTHS[spaces]):
            yield from [1] * (WIDE if b == "W" else 1)
            yield from [0] * (WIDE if s == "W" else 1)

    def _modules(self) -> Iterator[int]:
        digits = self.digits
        yield from bits(ITF_START)
        for i in range(0, len(digits), 2):
            yield from self._interleave(digits[i], digits[i + 1])
        yield from bits(ITF_STOP)


class STF(ToF):
    symbology = Symbology.STF

    def encoded_length(self) -> int:
        return len(STF_START) + len(self._data) * STF_DIGIT_WIDTH + len(STF_STOP)

    def _modules(self) -> Iterator[int]:
        yield from bits(STF_START)
        for digit in self.digits:
            for w in WIDTHS[digit]:
                yield from bits(STF_WIDE if w == "W" else STF_NARROW)
        yield from bits(STF_STOP)
