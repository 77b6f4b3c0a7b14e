"""
Code 128.

Набор символов задаётся явно специальными символами Unicode во входных
данных. Первый символ обязан выбрать стартовый набор:

    À (U+00C0) — набор A
    Ɓ (U+0181) — набор B
    Ć (U+0106) — набор C

Те же символы в середине данных переключают набор. Служебные функции:

    Ź (U+0179) — FNC1
    ź (U+017A) — FNC2
    Ż (U+017B) — FNC3
    ż (U+017C) — FNC4
    Ž (U+017D) — SHIFT (следующий символ берётся из другого набора A/B)

Example:
    >>> Code128("ÀHE@$AĆ123456").encoded_length()
    134
    >>> [u.index for u in tokenize("ĆŹ42")]
    [105, 102, 42]
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, NamedTuple, Optional, Tuple

from barcodegen.errors import CharacterError
from barcodegen.model.enums import Symbology
from barcodegen.sym.base import DIGITS, Barcode, BarcodeData, bits, validate
from barcodegen.sym.checksums import modulo_103

logger = logging.getLogger(__name__)

__all__ = [
    "Code128",
    "CharacterSet",
    "Unit",
    "tokenize",
    "SWITCH_A",
    "SWITCH_B",
    "SWITCH_C",
    "FNC1",
    "FNC2",
    "FNC3",
    "FNC4",
    "SHIFT",
]

SWITCH_A = "À"
SWITCH_B = "Ɓ"
SWITCH_C = "Ć"
FNC1 = "Ź"
FNC2 = "ź"
FNC3 = "Ż"
FNC4 = "ż"
SHIFT = "Ž"


class CharacterSet(str, Enum):
    A = "A"
    B = "B"
    C = "C"

    def other(self) -> "CharacterSet":
        """Набор, в который переводит SHIFT (только для A и B)."""
        if self is CharacterSet.A:
            return CharacterSet.B
        if self is CharacterSet.B:
            return CharacterSet.A
        raise ValueError("SHIFT is not defined for character set C")


class Unit(NamedTuple):
    """Кодовое слово: набор, в котором оно прочитано, и его значение 0..105."""

    charset: CharacterSet
    index: int


SWITCHES: Dict[str, CharacterSet] = {
    SWITCH_A: CharacterSet.A,
    SWITCH_B: CharacterSet.B,
    SWITCH_C: CharacterSet.C,
}

START: Dict[CharacterSet, int] = {
    CharacterSet.A: 103,
    CharacterSet.B: 104,
    CharacterSet.C: 105,
}


def _build_set_a() -> Dict[str, int]:
    table = {chr(c): c - 32 for c in range(32, 96)}
    table.update({chr(c): c + 64 for c in range(0, 32)})
    table.update(
        {FNC3: 96, FNC2: 97, SHIFT: 98, SWITCH_C: 99, SWITCH_B: 100, FNC4: 101, FNC1: 102}
    )
    return table


def _build_set_b() -> Dict[str, int]:
    table = {chr(c): c - 32 for c in range(32, 128)}
    table.update(
        {FNC3: 96, FNC2: 97, SHIFT: 98, SWITCH_C: 99, FNC4: 100, SWITCH_A: 101, FNC1: 102}
    )
    return table


# Пары цифр набора C обрабатываются отдельно
SET_C_SPECIALS: Dict[str, int] = {SWITCH_B: 100, SWITCH_A: 101, FNC1: 102}

TABLES: Dict[CharacterSet, Dict[str, int]] = {
    CharacterSet.A: _build_set_a(),
    CharacterSet.B: _build_set_b(),
    CharacterSet.C: SET_C_SPECIALS,
}

CODE128_CHARS: FrozenSet[str] = frozenset(
    set(TABLES[CharacterSet.A]) | set(TABLES[CharacterSet.B]) | set(SWITCHES)
)

PATTERNS: Tuple[str, ...] = (
    "11011001100", "11001101100", "11001100110", "10010011000", "10010001100",
    "10001001100", "10011001000", "10011000100", "10001100100", "11001001000",
    "11001000100", "11000100100", "10110011100", "10011011100", "10011001110",
    "10111001100", "10011101100", "10011100110", "11001110010", "11001011100",
    "11001001110", "11011100100", "11001110100", "11101101110", "11101001100",
    "11100101100", "11100100110", "11101100100", "11100110100", "11100110010",
    "11011011000", "11011000110", "11000110110", "10100011000", "10001011000",
    "10001000110", "10110001000", "10001101000", "10001100010", "11010001000",
    "11000101000", "11000100010", "10110111000", "10110001110", "10001101110",
    "10111011000", "10111000110", "10001110110", "11101110110", "11010001110",
    "11000101110", "11011101000", "11011100010", "11011101110", "11101011000",
    "11101000110", "11100010110", "11101101000", "11101100010", "11100011010",
    "11101111010", "11001000010", "11110001010", "10100110000", "10100001100",
    "10010110000", "10010000110", "10000101100", "10000100110", "10110010000",
    "10110000100", "10011010000", "10011000010", "10000110100", "10000110010",
    "11000010010", "11001010000", "11110111010", "11000010100", "10001111010",
    "10100111100", "10010111100", "10010011110", "10111100100", "10011110100",
    "10011110010", "11110100100", "11110010100", "11110010010", "11011011110",
    "11011110110", "11110110110", "10101111000", "10100011110", "10001011110",
    "10111101000", "10111100010", "11110101000", "11110100010", "10111011110",
    "10111101110", "11101011110", "11110101110", "11010000100", "11010010000",
    "11010011100",
)  # fmt: skip

# Стоп-символ вместе с завершающим штрихом в 2 модуля
STOP = "1100011101011"
UNIT_WIDTH = 11


def _reject(message: str, position: int) -> CharacterError:
    return CharacterError(message, symbology="Code128", context={"position": position})


def tokenize(data: str) -> List[Unit]:
    """
    Разобрать данные в последовательность кодовых слов (без контрольного).

    Автомат: текущий набор плюс ожидающая пары цифра набора C плюс флаг
    SHIFT. Переключение на уже активный набор, непарная цифра перед
    переключением или в конце данных, SHIFT в конце данных — ошибки.

    Raises:
        CharacterError: при любом недопустимом переходе.
    """
    if not data or data[0] not in SWITCHES:
        raise _reject("Data must start with a character-set switch", 0)

    current = SWITCHES[data[0]]
    units = [Unit(current, START[current])]
    carry: Optional[str] = None
    shifted = False

    for pos in range(1, len(data)):
        ch = data[pos]

        if ch in SWITCHES:
            if carry is not None:
                raise _reject("Unpaired digit before character-set switch", pos)
            if shifted:
                raise _reject("SHIFT cannot precede a character-set switch", pos)
            value = TABLES[current].get(ch)
            if value is None:
                raise _reject(f"Already in character set {current.value}", pos)
            units.append(Unit(current, value))
            current = SWITCHES[ch]
            continue

        if current is CharacterSet.C:
            if ch in DIGITS:
                if carry is None:
                    carry = ch
                else:
                    units.append(Unit(current, int(carry + ch)))
                    carry = None
                continue
            if carry is not None:
                raise _reject("Unpaired digit in character set C", pos)
            value = TABLES[current].get(ch)
            if value is None:
                raise _reject(f"Character {ch!r} not in character set C", pos)
            units.append(Unit(current, value))
            continue

        if ch == SHIFT:
            if shifted:
                raise _reject("Consecutive SHIFT characters", pos)
            units.append(Unit(current, TABLES[current][SHIFT]))
            shifted = True
            continue

        charset = current.other() if shifted else current
        value = TABLES[charset].get(ch)
        if value is None:
            raise _reject(f"Character {ch!r} not in character set {charset.value}", pos)
        units.append(Unit(charset, value))
        shifted = False

    if carry is not None:
        raise _reject("Unpaired trailing digit in character set C", len(data) - 1)
    if shifted:
        raise _reject("SHIFT at end of data", len(data) - 1)
    return units


class Code128(Barcode):
    """
    Code 128 с явным выбором наборов символов.

    Длина 1..256 символов, считая символы переключения.
    """

    symbology = Symbology.CODE128

    def __init__(self, data: BarcodeData) -> None:
        super().__init__(data)
        try:
            self._units = tokenize(self._data)
        except CharacterError as e:
            logger.debug("Code128 rejected %r: %s", self._data, e)
            raise

    @classmethod
    def validate(cls, data: BarcodeData) -> str:
        return validate(data, cls.SIZE, CODE128_CHARS, cls.__name__)

    @property
    def units(self) -> List[Unit]:
        return list(self._units)

    def checksum_index(self) -> int:
        return modulo_103([u.index for u in self._units])

    def encoded_length(self) -> int:
        return (len(self._units) + 1) * UNIT_WIDTH + len(STOP)

    def _modules(self) -> Iterator[int]:
        for unit in self._units:
            yield from bits(PATTERNS[unit.index])
        yield from bits(PATTERNS[self.checksum_index()])
        yield from bits(STOP)
