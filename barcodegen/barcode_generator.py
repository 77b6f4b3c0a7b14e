from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Set, Type, TypedDict

from PIL import Image

import barcodegen
from barcodegen.errors import BarcodeError, GenerateError
from barcodegen.generators import (
    ASCIIGenerator,
    Color,
    ImageGenerator,
    JSONGenerator,
    SVGGenerator,
)
from barcodegen.model.enums import Symbology
from barcodegen.sym import (
    EAN2,
    EAN5,
    EAN8,
    EAN13,
    ITF,
    JAN,
    STF,
    UPCA,
    Barcode,
    Bookland,
    Codabar,
    Code11,
    Code39,
    Code93,
    Code128,
)

logger = logging.getLogger(__name__)

__all__ = [
    "BarcodeGenerator",
    "BarcodeOptions",
]

PLACEHOLDER_WIDTH = 400
PLACEHOLDER_HEIGHT = 120


class BarcodeOptions(TypedDict, total=False):
    """
    Типобезопасные опции штрихкода.

    Все поля опциональны (total=False). Не заданные параметры рендеринга
    берутся из конфигурации пакета (``barcodegen.get_config()``), для
    ASCII и JSON — из умолчаний генератора.

    Example:
        >>> options: BarcodeOptions = {
        ...     "checksum": True,
        ...     "height": 40,
        ...     "xdim": 2,
        ... }
        >>> gen = BarcodeGenerator(Symbology.CODE39, "TEST", options)
    """

    checksum: bool  # Контрольный символ Code39
    height: int  # Высота (строки для ASCII, пиксели для SVG/изображения)
    xdim: int  # Ширина модуля
    rotation: int  # Поворот растрового изображения: 0, 90, 180, 270
    foreground: List[int]  # Цвет штрихов [r, g, b, a]
    background: List[int]  # Цвет фона [r, g, b, a]
    image_format: str  # PNG, GIF, JPEG, WEBP
    svg_xmlns: bool  # Атрибут xmlns в SVG


class BarcodeGenerator:
    """
    Universal API for 1D barcode encoding and rendering.

    Args:
        symbology: Enum specifying barcode format (EAN, UPC, Code39, etc.)
        data: Payload string (or UTF-8 bytes)
        options: Optional extra options (see BarcodeOptions)
    """

    _barcode_classes: Dict[Symbology, Type[Barcode]] = {
        Symbology.EAN13: EAN13,
        Symbology.UPCA: UPCA,
        Symbology.BOOKLAND: Bookland,
        Symbology.JAN: JAN,
        Symbology.EAN8: EAN8,
        Symbology.EAN2: EAN2,
        Symbology.EAN5: EAN5,
        Symbology.CODE39: Code39,
        Symbology.CODE93: Code93,
        Symbology.CODE11: Code11,
        Symbology.CODABAR: Codabar,
        Symbology.CODE128: Code128,
        Symbology.ITF: ITF,
        Symbology.STF: STF,
    }

    def __init__(
        self,
        symbology: Symbology,
        data: str | bytes,
        options: Optional[BarcodeOptions] = None,
    ) -> None:
        if not isinstance(symbology, Symbology):
            raise TypeError(f"symbology must be Symbology enum, got {type(symbology)!r}")
        self.symbology = symbology
        self.data = data
        self.options: Dict[str, Any] = dict(options) if options else {}

    def validate(self) -> None:
        """
        Validate data against the symbology rules.
        Проверяет входные данные, строя объект символики.
        Raises:
            BarcodeError: CharacterError, LengthError или ChecksumError.
        """
        self.build()

    def build(self) -> Barcode:
        """Построить символику из текущих `data` и `options` (без кэша)."""
        cls = self._barcode_classes[self.symbology]
        try:
            if cls is Code39:
                return Code39(self.data, checksum=bool(self.options.get("checksum", False)))
            return cls(self.data)
        except BarcodeError as e:
            logger.debug(
                "Validation failed for [%s]: %s", self.symbology.localized_name("en"), e
            )
            raise

    def encode(self) -> List[int]:
        return self.build().encode()

    def _option(self, key: str) -> Any:
        if key in self.options:
            return self.options[key]
        return barcodegen.get_config()[key]

    def _colors(self) -> tuple[Color, Color]:
        try:
            return (
                Color.from_sequence(self._option("foreground")),
                Color.from_sequence(self._option("background")),
            )
        except (TypeError, ValueError) as e:
            raise GenerateError(f"Invalid color option: {e}") from e

    def render_ascii(self) -> str:
        gen = ASCIIGenerator(
            height=self.options.get("height", 10), xdim=self.options.get("xdim", 1)
        )
        return gen.generate(self.encode())

    def render_json(self) -> str:
        gen = JSONGenerator(
            height=self.options.get("height", 10), xdim=self.options.get("xdim", 1)
        )
        return gen.generate(self.encode())

    def render_svg(self) -> str:
        foreground, background = self._colors()
        gen = SVGGenerator(
            height=self._option("height"),
            xdim=self._option("xdim"),
            foreground=foreground,
            background=background,
            xmlns=bool(self._option("svg_xmlns")),
        )
        return gen.generate(self.encode())

    def _image_generator(self, image_format: Optional[str] = None) -> ImageGenerator:
        foreground, background = self._colors()
        return ImageGenerator(
            height=self._option("height"),
            xdim=self._option("xdim"),
            rotation=self._option("rotation"),
            foreground=foreground,
            background=background,
            image_format=image_format or self._option("image_format"),
        )

    def render_image(self, strict: bool = True) -> Image.Image:
        """
        Рендеринг изображения штрихкода с опциональным строгим контролем ошибок.

        Args:
            strict: Если True, ошибки данных и рендеринга пробрасываются.
                   Если False, возвращается белое placeholder изображение
                   (в том числе при данных не того типа)
                   и в лог пишется предупреждение.

        Returns:
            PIL Image объект (RGBA, либо RGB для placeholder).

        Raises:
            BarcodeError: Если strict=True и кодирование или рендеринг не удались.
            TypeError: Если strict=True и данные не str/bytes.
        """
        logger.debug(
            "Rendering image for barcode [%s] data=%r",
            self.symbology.localized_name("en"),
            self.data,
        )
        try:
            return self._image_generator().generate_image(self.encode())
        except (BarcodeError, TypeError) as e:
            if strict:
                raise
            logger.warning(
                f"Barcode image generation failed: {self.symbology.localized_name('en')} ({e}); "
                f"returning placeholder"
            )
            return Image.new("RGB", (PLACEHOLDER_WIDTH, PLACEHOLDER_HEIGHT), "white")

    def render_bytes(self, image_format: Optional[str] = None) -> bytes:
        return self._image_generator(image_format).generate(self.encode())

    @classmethod
    def supported_types(cls) -> Set[Symbology]:
        return set(cls._barcode_classes.keys())

    @classmethod
    def barcode_class_map(cls) -> Dict[Symbology, Type[Barcode]]:
        return dict(cls._barcode_classes)
