"""
Перечисления пакета barcodegen.

Symbology     — поддерживаемые линейные символики
Rotation      — поворот растрового изображения
ImageFormat   — формат кодирования растрового изображения
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final, Literal, Optional

_logger: Final[logging.Logger] = logging.getLogger(__name__)


class Symbology(str, Enum):
    """Линейные символики, которые умеет кодировать пакет."""

    EAN13 = "ean13"
    UPCA = "upca"
    BOOKLAND = "bookland"
    JAN = "jan"
    EAN8 = "ean8"
    EAN2 = "ean2"
    EAN5 = "ean5"
    CODE39 = "code39"
    CODE93 = "code93"
    CODE11 = "code11"
    CODABAR = "codabar"
    CODE128 = "code128"
    ITF = "itf"
    STF = "stf"

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            self.EAN13: "EAN-13",
            self.UPCA: "UPC-A",
            self.BOOKLAND: "Bookland (ISBN)",
            self.JAN: "JAN (Японский EAN-13)",
            self.EAN8: "EAN-8",
            self.EAN2: "Дополнение EAN-2",
            self.EAN5: "Дополнение EAN-5",
            self.CODE39: "Code 39",
            self.CODE93: "Code 93",
            self.CODE11: "Code 11",
            self.CODABAR: "Codabar",
            self.CODE128: "Code 128",
            self.ITF: "Чередующийся 2 из 5",
            self.STF: "Стандартный 2 из 5",
        }
        names_en = {
            self.EAN13: "EAN-13",
            self.UPCA: "UPC-A",
            self.BOOKLAND: "Bookland (ISBN)",
            self.JAN: "JAN",
            self.EAN8: "EAN-8",
            self.EAN2: "EAN-2 supplement",
            self.EAN5: "EAN-5 supplement",
            self.CODE39: "Code 39",
            self.CODE93: "Code 93",
            self.CODE11: "Code 11",
            self.CODABAR: "Codabar",
            self.CODE128: "Code 128",
            self.ITF: "Interleaved 2 of 5",
            self.STF: "Standard 2 of 5",
        }
        return (
            names_ru.get(self, self.value)
            if lang == "ru"
            else names_en.get(self, self.value)
        )


class Rotation(int, Enum):
    NONE = 0
    CLOCKWISE_90 = 90
    HALF = 180
    CLOCKWISE_270 = 270

    @classmethod
    def from_degrees(cls, degrees: int) -> "Rotation":
        """
        Нормализовать угол поворота.

        Raises:
            ValueError: если угол не кратен 90 градусам.
        """
        normalized = degrees % 360
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Rotation must be a multiple of 90 degrees, got {degrees}")


class ImageFormat(str, Enum):
    PNG = "PNG"
    GIF = "GIF"
    JPEG = "JPEG"
    WEBP = "WEBP"

    @property
    def supports_alpha(self) -> bool:
        return self in {ImageFormat.PNG, ImageFormat.WEBP}

    @classmethod
    def parse(cls, value: Optional[str]) -> "ImageFormat":
        if value is None:
            return DEFAULT_IMAGE_FORMAT
        key = value.strip().upper()
        if key == "JPG":
            key = "JPEG"
        try:
            return cls(key)
        except ValueError:
            _logger.debug("Unknown image format requested: %r", value)
            raise


DEFAULT_ROTATION: Final[Rotation] = Rotation.NONE
DEFAULT_IMAGE_FORMAT: Final[ImageFormat] = ImageFormat.PNG

__all__ = [
    "Symbology",
    "Rotation",
    "ImageFormat",
    "DEFAULT_ROTATION",
    "DEFAULT_IMAGE_FORMAT",
]
