"""
Общий контракт символик и каркас валидации.

Каждая символика — подкласс ``Barcode``, объявляющий диапазон длины
(``SIZE``, включительно), алфавит (``CHARS``) и реализующий
``encoded_length()`` и ``_modules()``. Все ошибки данных поднимаются из
конструктора; после успешного создания ``encode()`` не падает.

Example:
    >>> bc = EAN8("5512345")
    >>> bits = bc.encode()
    >>> len(bits) == bc.encoded_length() == 67
    True
    >>> buf = bytearray(66)
    >>> bc.encode_in_place(buf) is None
    True
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import (
    Any,
    ClassVar,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    MutableSequence,
    Optional,
    Tuple,
    Union,
)

from barcodegen.errors import CharacterError, LengthError
from barcodegen.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = ["Barcode", "BarcodeData", "DIGITS", "bits", "validate"]

BarcodeData = Union[str, bytes]

DIGITS: FrozenSet[str] = frozenset("0123456789")


def bits(pattern: str) -> Iterator[int]:
    """Развернуть текстовый шаблон вида "1011" в последовательность модулей."""
    for ch in pattern:
        yield 1 if ch == "1" else 0


def validate(
    data: BarcodeData,
    size: Tuple[int, int],
    chars: Optional[FrozenSet[str]],
    symbology: Optional[str] = None,
) -> str:
    """
    Проверить длину, затем алфавит. Первая ошибка прерывает проверку.

    Args:
        data: Входные данные (str или UTF-8 bytes).
        size: Допустимый диапазон длины (min, max), включительно.
        chars: Допустимые символы; None — проверку алфавита делает вызывающий.
        symbology: Имя символики для сообщений об ошибках.

    Returns:
        Проверенная строка.

    Raises:
        TypeError: данные не str/bytes.
        CharacterError: недекодируемые bytes или символ вне алфавита.
        LengthError: длина вне диапазона.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise CharacterError(
                "Barcode data is not valid UTF-8",
                symbology=symbology,
                context={"position": e.start},
            ) from e
    elif isinstance(data, str):
        text = data
    else:
        raise TypeError(f"Barcode data must be str or bytes, got {type(data)!r}")

    lo, hi = size
    if not lo <= len(text) <= hi:
        raise LengthError(
            f"Expected {lo}..{hi} characters, got {len(text)}"
            if lo != hi
            else f"Expected {lo} characters, got {len(text)}",
            symbology=symbology,
        )

    if chars is not None:
        for pos, ch in enumerate(text):
            if ch not in chars:
                raise CharacterError(
                    f"Unexpected character {ch!r}",
                    symbology=symbology,
                    context={"position": pos},
                )
    return text


class Barcode(ABC):
    """
    Базовый класс символики.

    Attributes:
        symbology: Член ``Symbology`` для данного класса.
        SIZE: Допустимая длина входа (min, max), включительно.
        CHARS: Алфавит символики.
    """

    symbology: ClassVar[Symbology]
    SIZE: ClassVar[Tuple[int, int]] = (1, 256)
    CHARS: ClassVar[Optional[FrozenSet[str]]] = None

    __slots__ = ("_data",)

    def __init__(self, data: BarcodeData) -> None:
        try:
            self._data = self.validate(data)
        except (CharacterError, LengthError) as e:
            logger.debug("%s rejected %r: %s", type(self).__name__, data, e)
            raise
        logger.debug("%s created for %r", type(self).__name__, self._data)

    @classmethod
    def new(cls, data: BarcodeData, *args: Any, **kwargs: Any) -> "Barcode":
        """Alias of the constructor."""
        return cls(data, *args, **kwargs)

    @classmethod
    def validate(cls, data: BarcodeData) -> str:
        return validate(data, cls.SIZE, cls.CHARS, cls.__name__)

    @property
    def data(self) -> str:
        return self._data

    @abstractmethod
    def encoded_length(self) -> int:
        """Точное число модулей, вычисленное до кодирования."""

    @abstractmethod
    def _modules(self) -> Iterable[int]:
        """Модули символа слева направо."""

    def encode_in_place(self, buffer: MutableSequence[int]) -> Optional[int]:
        """
        Записать модули в буфер вызывающего.

        Returns:
            Число записанных модулей, либо None (буфер не тронут), если он
            короче ``encoded_length()``.
        """
        length = self.encoded_length()
        if len(buffer) < length:
            logger.debug(
                "%s: buffer too short (%d < %d)",
                type(self).__name__,
                len(buffer),
                length,
            )
            return None
        written = 0
        for written, module in enumerate(self._modules(), start=1):
            buffer[written - 1] = module
        return written

    def encode(self) -> List[int]:
        out = [0] * self.encoded_length()
        self.encode_in_place(out)
        logger.debug("%s encoded into %d modules", type(self).__name__, len(out))
        return out

    def _key(self) -> Tuple[Any, ...]:
        return (self._data,)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
