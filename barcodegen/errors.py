"""
Централизованные исключения кодировщиков штрихкодов.

Закрытый набор из четырёх видов ошибок, общий для всех символик и
генераторов. Каждый вид доступен и как член ``ErrorKind``, и как
отдельный класс исключения, поэтому вызывающий код может ловить как
``BarcodeError`` целиком, так и конкретную ошибку.

Example:
    >>> from barcodegen.errors import BarcodeError, ErrorKind
    >>> try:
    ...     EAN13("12345")
    ... except BarcodeError as e:
    ...     logger.warning(f"Barcode rejected: {e}")
    ...     assert e.kind is ErrorKind.LENGTH

Иерархия:
    BarcodeError (базовое)
    ├── CharacterError  — символ вне алфавита символики
    ├── LengthError     — длина данных вне допустимого диапазона
    ├── ChecksumError   — переданная контрольная цифра не совпадает
    └── GenerateError   — ошибка генератора (рендеринг, кодирование изображения)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

__all__: list[str] = [
    "ErrorKind",
    "BarcodeError",
    "CharacterError",
    "LengthError",
    "ChecksumError",
    "GenerateError",
]


class ErrorKind(str, Enum):
    """Вид ошибки (closed set)."""

    CHARACTER = "character"
    LENGTH = "length"
    CHECKSUM = "checksum"
    GENERATE = "generate"

    @property
    def default_message(self) -> str:
        messages = {
            ErrorKind.CHARACTER: "Barcode data is invalid",
            ErrorKind.LENGTH: "Barcode data length is invalid",
            ErrorKind.CHECKSUM: "Invalid checksum",
            ErrorKind.GENERATE: "Could not generate barcode data",
        }
        return messages[self]


# ==============================================================================
# BASE EXCEPTION
# ==============================================================================


class BarcodeError(Exception):
    """
    Базовое исключение для всех ошибок кодирования и генерации.

    Attributes:
        message: Человекочитаемое сообщение об ошибке
        kind: Вид ошибки (ErrorKind)
        symbology: Имя символики, вызвавшей ошибку (опционально)
        context: Дополнительный контекст для отладки (опционально)

    Example:
        >>> raise BarcodeError(
        ...     "Unexpected character 'x'",
        ...     symbology="EAN13",
        ...     context={"position": 4},
        ... )
    """

    kind: ErrorKind = ErrorKind.GENERATE

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        symbology: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        message = message or self.kind.default_message
        super().__init__(message)
        self.message = message
        self.symbology = symbology
        self.context = context or {}

    def __str__(self) -> str:
        """
        Строковое представление исключения.

        Example:
            >>> str(LengthError("Expected 12 or 13 digits", symbology="EAN13"))
            'LengthError: Expected 12 or 13 digits [symbology=EAN13]'
        """
        parts = [self.__class__.__name__, ": ", self.message]

        if self.symbology:
            parts.append(f" [symbology={self.symbology}]")

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"symbology={self.symbology!r}, "
            f"context={self.context!r})"
        )


# ==============================================================================
# KINDS
# ==============================================================================


class CharacterError(BarcodeError):
    """
    Символ вне алфавита символики.

    Raises когда:
    - Входные данные содержат недопустимый символ
    - Недопустимый переход автомата Code128 (нет начального набора,
      непарная цифра в наборе C, переключение на текущий набор)
    """

    kind = ErrorKind.CHARACTER


class LengthError(BarcodeError):
    """Длина входных данных вне допустимого диапазона символики."""

    kind = ErrorKind.LENGTH


class ChecksumError(BarcodeError):
    """
    Переданная вызывающим кодом контрольная цифра не совпадает с вычисленной.

    Attributes:
        expected: Вычисленная контрольная цифра
        actual: Переданная контрольная цифра
    """

    kind = ErrorKind.CHECKSUM

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
        symbology: Optional[str] = None,
    ) -> None:
        context: Dict[str, Any] = {}
        if expected is not None:
            context["expected"] = expected
        if actual is not None:
            context["actual"] = actual
        super().__init__(message, symbology=symbology, context=context)
        self.expected = expected
        self.actual = actual


class GenerateError(BarcodeError):
    """Ошибка генератора: рендеринг или кодирование изображения не удалось."""

    kind = ErrorKind.GENERATE
