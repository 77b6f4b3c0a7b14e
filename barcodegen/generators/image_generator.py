"""
Растровый генератор на Pillow.

Строит RGBA-изображение ``len(modules) * xdim`` x ``height`` пикселей,
при необходимости поворачивает его по часовой стрелке и кодирует в
PNG/GIF/JPEG/WEBP. Форматы без альфа-канала получают RGB-изображение.
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Dict, Optional, Sequence, Union

from PIL import Image, ImageDraw

from barcodegen.errors import GenerateError
from barcodegen.generators.base import Color, check_dimensions, check_modules, runs
from barcodegen.model.enums import (
    DEFAULT_IMAGE_FORMAT,
    DEFAULT_ROTATION,
    ImageFormat,
    Rotation,
)

logger = logging.getLogger(__name__)

__all__ = ["ImageGenerator"]

# Поворот по часовой стрелке через transpose (без интерполяции)
_TRANSPOSE: Dict[Rotation, Image.Transpose] = {
    Rotation.CLOCKWISE_90: Image.Transpose.ROTATE_270,
    Rotation.HALF: Image.Transpose.ROTATE_180,
    Rotation.CLOCKWISE_270: Image.Transpose.ROTATE_90,
}


class ImageGenerator:
    """
    Args:
        height: Высота в пикселях (до поворота).
        xdim: Ширина модуля в пикселях.
        rotation: Поворот по часовой стрелке: 0, 90, 180 или 270.
        foreground: Цвет штрихов.
        background: Цвет фона.
        image_format: Формат для ``generate()``.

    Example:
        >>> gen = ImageGenerator(height=30, xdim=2, rotation=90)
        >>> gen.generate_image([1, 0, 1]).size
        (30, 6)
    """

    def __init__(
        self,
        height: int = 80,
        xdim: int = 1,
        rotation: Union[Rotation, int] = DEFAULT_ROTATION,
        foreground: Optional[Color] = None,
        background: Optional[Color] = None,
        image_format: Union[ImageFormat, str] = DEFAULT_IMAGE_FORMAT,
    ) -> None:
        check_dimensions(height, xdim)
        try:
            self.rotation = (
                rotation
                if isinstance(rotation, Rotation)
                else Rotation.from_degrees(int(rotation))
            )
            self.image_format = (
                image_format
                if isinstance(image_format, ImageFormat)
                else ImageFormat.parse(image_format)
            )
        except ValueError as e:
            raise GenerateError(str(e)) from e
        self.height = height
        self.xdim = xdim
        self.foreground = foreground or Color.black()
        self.background = background or Color.white()

    def generate_image(self, modules: Sequence[int]) -> Image.Image:
        checked = check_modules(modules)
        width = len(checked) * self.xdim

        img = Image.new("RGBA", (width, self.height), self.background.rgba)
        draw = ImageDraw.Draw(img)
        for start, length in runs(checked):
            x0 = start * self.xdim
            x1 = (start + length) * self.xdim - 1
            draw.rectangle([x0, 0, x1, self.height - 1], fill=self.foreground.rgba)

        transpose = _TRANSPOSE.get(self.rotation)
        if transpose is not None:
            img = img.transpose(transpose)
        return img

    def generate(self, modules: Sequence[int]) -> bytes:
        """
        Закодировать изображение в ``image_format``.

        Raises:
            GenerateError: пустые данные или сбой кодировщика Pillow.
        """
        img = self.generate_image(modules)
        if not self.image_format.supports_alpha:
            img = img.convert("RGB")

        buf = BytesIO()
        try:
            img.save(buf, format=self.image_format.value)
        except (OSError, ValueError, KeyError) as e:
            logger.error("Image encoding failed (%s): %s", self.image_format.value, e)
            raise GenerateError(
                f"Could not encode image as {self.image_format.value}",
                context={"reason": str(e)},
            ) from e
        return buf.getvalue()
