"""
Code 93.

Два контрольных символа (C и K) добавляются всегда. Символы ``( ) [ ]``
обозначают четыре служебных символа полного ASCII ($), (%), (/), (+).
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from barcodegen.model.enums import Symbology
from barcodegen.sym.base import Barcode, bits
from barcodegen.sym.checksums import weighted_modulo

__all__ = ["Code93", "CODE93_CHARS"]

CODE93_TABLE: Tuple[Tuple[str, str], ...] = (
    ("0", "100010100"),
    ("1", "101001000"),
    ("2", "101000100"),
    ("3", "101000010"),
    ("4", "100101000"),
    ("5", "100100100"),
    ("6", "100100010"),
    ("7", "101010000"),
    ("8", "100010010"),
    ("9", "100001010"),
    ("A", "110101000"),
    ("B", "110100100"),
    ("C", "110100010"),
    ("D", "110010100"),
    ("E", "110010010"),
    ("F", "110001010"),
    ("G", "101101000"),
    ("H", "101100100"),
    ("I", "101100010"),
    ("J", "100110100"),
    ("K", "100011010"),
    ("L", "101011000"),
    ("M", "101001100"),
    ("N", "101000110"),
    ("O", "100101100"),
    ("P", "100010110"),
    ("Q", "110110100"),
    ("R", "110110010"),
    ("S", "110101100"),
    ("T", "110100110"),
    ("U", "110010110"),
    ("V", "110011010"),
    ("W", "101101100"),
    ("X", "101100110"),
    ("Y", "100110110"),
    ("Z", "100111010"),
    ("-", "100101110"),
    (".", "111010100"),
    (" ", "111010010"),
    ("$", "111001010"),
    ("/", "101101110"),
    ("+", "101110110"),
    ("%", "110101110"),
    ("(", "100100110"),
    (")", "111011010"),
    ("[", "111010110"),
    ("]", "100110010"),
)

CODE93_INDEX: Dict[str, int] = {ch: i for i, (ch, _) in enumerate(CODE93_TABLE)}
CODE93_CHARS = frozenset(CODE93_INDEX)

GUARD = "101011110"
TERMINATOR = "1"
CHAR_WIDTH = 9

C_THRESHOLD = 20
K_THRESHOLD = 15
MODULUS = 47


class Code93(Barcode):
    symbology = Symbology.CODE93
    CHARS = CODE93_CHARS

    def check_indices(self) -> Tuple[int, int]:
        """Значения контрольных символов (C, K)."""
        indices = [CODE93_INDEX[ch] for ch in self._data]
        c = weighted_modulo(indices, C_THRESHOLD, MODULUS)
        k = weighted_modulo(indices + [c], K_THRESHOLD, MODULUS)
        return c, k

    def _indices(self) -> List[int]:
        return [CODE93_INDEX[ch] for ch in self._data] + list(self.check_indices())

    def encoded_length(self) -> int:
        return 2 * len(GUARD) + (len(self._data) + 2) * CHAR_WIDTH + len(TERMINATOR)

    def _modules(self) -> Iterator[int]:
        yield from bits(GUARD)
        for idx in self._indices():
            yield from bits(CODE93_TABLE[idx][1])
        yield from bits(GUARD)
        yield from bits(TERMINATOR)
