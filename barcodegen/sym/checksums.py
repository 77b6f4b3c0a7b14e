"""
Библиотека контрольных сумм.

Чистые функции над последовательностями целых (цифры или индексы символов
в таблице символики). Ни одна функция не знает о битовых шаблонах.

Example:
    >>> modulo_10([7, 5, 0, 1, 0, 3, 1, 3, 1, 1, 3, 0], even_start=True)
    9
    >>> weighted_modulo([1, 2, 3, 4], threshold=20, modulus=47)
    20
"""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "weight",
    "modulo_10",
    "modulo_43",
    "weighted_modulo",
    "modulo_103",
    "ean5_parity_index",
]


def weight(index: int, length: int, threshold: int) -> int:
    """
    Вес позиции, отсчитываемой справа.

    Крайний правый элемент получает вес 1, веса растут к левому краю и
    циклически сбрасываются после ``threshold``. Нулевой вес заменяется на
    ``threshold``.
    """
    if threshold <= 0:
        raise ValueError(f"threshold must be positive, got {threshold}")
    w = (length - index) % threshold
    return w if w else threshold


def modulo_10(digits: Sequence[int], even_start: bool) -> int:
    """
    Контрольная цифра семейства EAN/UPC.

    Args:
        digits: Цифры данных без контрольной цифры.
        even_start: True — умножать на 3 цифры с нечётными индексами (EAN-13);
            False — цифры с чётными индексами (UPC-A, EAN-8, ITF).
    """
    evens = sum(digits[::2])
    odds = sum(digits[1::2])
    if even_start:
        odds *= 3
    else:
        evens *= 3
    return (10 - (evens + odds) % 10) % 10


def modulo_43(indices: Sequence[int]) -> int:
    return sum(indices) % 43


def weighted_modulo(indices: Sequence[int], threshold: int, modulus: int) -> int:
    """
    Взвешенная сумма по модулю (Code11, Code93).

    Code11: пороги 10 (C) и 9 (K), модуль 11.
    Code93: пороги 20 (C) и 15 (K), модуль 47.
    """
    length = len(indices)
    total = sum(idx * weight(i, length, threshold) for i, idx in enumerate(indices))
    return total % modulus


def modulo_103(indices: Sequence[int]) -> int:
    """
    Контрольный символ Code128.

    ``indices[0]`` — стартовый символ с весом 1; далее вес равен позиции
    слева (первый символ данных тоже получает вес 1).
    """
    return sum(idx * max(i, 1) for i, idx in enumerate(indices)) % 103


def ean5_parity_index(digits: Sequence[int]) -> int:
    """Строка таблицы чётности EAN-5: (3 * чётные + 9 * нечётные) mod 10."""
    return (3 * sum(digits[::2]) + 9 * sum(digits[1::2])) % 10
