import pytest

from barcodegen.model.enums import (
    DEFAULT_IMAGE_FORMAT,
    DEFAULT_ROTATION,
    ImageFormat,
    Rotation,
    Symbology,
)


def test_symbology_values_are_lowercase_names() -> None:
    for sym in Symbology:
        assert sym.value == sym.name.lower()
    assert Symbology("code128") is Symbology.CODE128


def test_symbology_localization() -> None:
    assert Symbology.ITF.localized_name("ru").startswith("Чередующийся")
    assert Symbology.ITF.localized_name("en") == "Interleaved 2 of 5"
    assert Symbology.EAN2.localized_name("en") == "EAN-2 supplement"
    for sym in Symbology:
        assert sym.localized_name("ru")
        assert sym.localized_name("en")


@pytest.mark.parametrize(
    "degrees,expected",
    [
        (0, Rotation.NONE),
        (90, Rotation.CLOCKWISE_90),
        (180, Rotation.HALF),
        (270, Rotation.CLOCKWISE_270),
        (360, Rotation.NONE),
        (-90, Rotation.CLOCKWISE_270),
    ],
)
def test_rotation_from_degrees(degrees: int, expected: Rotation) -> None:
    assert Rotation.from_degrees(degrees) is expected


@pytest.mark.parametrize("degrees", [45, 1, 91])
def test_rotation_invalid(degrees: int) -> None:
    with pytest.raises(ValueError):
        Rotation.from_degrees(degrees)


def test_image_format_parse() -> None:
    assert ImageFormat.parse(None) is DEFAULT_IMAGE_FORMAT
    assert ImageFormat.parse("png") is ImageFormat.PNG
    assert ImageFormat.parse(" jpg ") is ImageFormat.JPEG
    assert ImageFormat.parse("WebP") is ImageFormat.WEBP
    with pytest.raises(ValueError):
        ImageFormat.parse("bmp")


def test_image_format_props() -> None:
    assert ImageFormat.PNG.supports_alpha
    assert ImageFormat.WEBP.supports_alpha
    assert not ImageFormat.JPEG.supports_alpha
    assert not ImageFormat.GIF.supports_alpha


def test_defaults() -> None:
    assert DEFAULT_ROTATION is Rotation.NONE
    assert DEFAULT_IMAGE_FORMAT is ImageFormat.PNG
