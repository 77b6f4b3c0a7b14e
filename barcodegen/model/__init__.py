"""Перечисления и константы, общие для кодировщиков и генераторов."""

from barcodegen.model.enums import (
    DEFAULT_IMAGE_FORMAT,
    DEFAULT_ROTATION,
    ImageFormat,
    Rotation,
    Symbology,
)

__all__ = [
    "Symbology",
    "Rotation",
    "ImageFormat",
    "DEFAULT_ROTATION",
    "DEFAULT_IMAGE_FORMAT",
]
