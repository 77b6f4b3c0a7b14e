"""Code 39 (3 of 9) с необязательным контрольным символом по модулю 43."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Tuple

from barcodegen.model.enums import Symbology
from barcodegen.sym.base import Barcode, BarcodeData, bits
from barcodegen.sym.checksums import modulo_43

__all__ = ["Code39", "CODE39_CHARS"]

# Порядок символов задаёт их значение для контрольной суммы
CODE39_TABLE: Tuple[Tuple[str, str], ...] = (
    ("0", "101001101101"),
    ("1", "110100101011"),
    ("2", "101100101011"),
    ("3", "110110010101"),
    ("4", "101001101011"),
    ("5", "110100110101"),
    ("6", "101100110101"),
    ("7", "101001011011"),
    ("8", "110100101101"),
    ("9", "101100101101"),
    ("A", "110101001011"),
    ("B", "101101001011"),
    ("C", "110110100101"),
    ("D", "101011001011"),
    ("E", "110101100101"),
    ("F", "101101100101"),
    ("G", "101010011011"),
    ("H", "110101001101"),
    ("I", "101101001101"),
    ("J", "101011001101"),
    ("K", "110101010011"),
    ("L", "101101010011"),
    ("M", "110110101001"),
    ("N", "101011010011"),
    ("O", "110101101001"),
    ("P", "101101101001"),
    ("Q", "101010110011"),
    ("R", "110101011001"),
    ("S", "101101011001"),
    ("T", "101011011001"),
    ("U", "110010101011"),
    ("V", "100110101011"),
    ("W", "110011010101"),
    ("X", "100101101011"),
    ("Y", "110010110101"),
    ("Z", "100110110101"),
    ("-", "100101011011"),
    (".", "110010101101"),
    (" ", "100110101101"),
    ("$", "100100100101"),
    ("/", "100100101001"),
    ("+", "100101001001"),
    ("%", "101001001001"),
)

CODE39_INDEX: Dict[str, int] = {ch: i for i, (ch, _) in enumerate(CODE39_TABLE)}
CODE39_CHARS = frozenset(CODE39_INDEX)

GUARD = "100101101101"  # '*'
CHAR_WIDTH = 12
GAP = "0"


class Code39(Barcode):
    """
    Code 39.

    Args:
        data: 1..256 символов из алфавита A-Z, 0-9, ``-.$/+%`` и пробел.
        checksum: Добавить контрольный символ (сумма индексов mod 43).
    """

    symbology = Symbology.CODE39
    CHARS = CODE39_CHARS

    def __init__(self, data: BarcodeData, checksum: bool = False) -> None:
        super().__init__(data)
        self._checksum = bool(checksum)

    @classmethod
    def with_checksum(cls, data: BarcodeData) -> "Code39":
        return cls(data, checksum=True)

    @property
    def checksum(self) -> bool:
        return self._checksum

    def checksum_char(self) -> str:
        value = modulo_43([CODE39_INDEX[ch] for ch in self._data])
        return CODE39_TABLE[value][0]

    def _symbols(self) -> List[str]:
        chars = list(self._data)
        if self._checksum:
            chars.append(self.checksum_char())
        return chars

    def encoded_length(self) -> int:
        n = len(self._data) + (1 if self._checksum else 0)
        return 2 * len(GUARD) + len(GAP) + n * (CHAR_WIDTH + len(GAP))

    def _modules(self) -> Iterator[int]:
        yield from bits(GUARD)
        yield from bits(GAP)
        for ch in self._symbols():
            yield from bits(CODE39_TABLE[CODE39_INDEX[ch]][1])
            yield from bits(GAP)
        yield from bits(GUARD)

    def _key(self) -> Tuple[Any, ...]:
        return (self._data, self._checksum)

    def __repr__(self) -> str:
        return f"Code39({self._data!r}, checksum={self._checksum})"
