"""Сверка EAN/UPC с эталонной реализацией python-barcode."""

from typing import Type

import pytest

from barcodegen.sym import EAN8, EAN13, UPCA, Barcode

barcode = pytest.importorskip("barcode")


def collapse(bc: Barcode) -> str:
    return "".join(str(b) for b in bc.encode())


@pytest.mark.parametrize(
    "name,cls,data",
    [
        ("ean13", EAN13, "750103131130"),
        ("ean13", EAN13, "400638133393"),
        ("ean13", EAN13, "978345612345"),
        ("ean8", EAN8, "5512345"),
        ("ean8", EAN8, "9834651"),
        ("upca", UPCA, "72527273070"),
        ("upca", UPCA, "03600029145"),
    ],
)
def test_matches_python_barcode(name: str, cls: Type[Barcode], data: str) -> None:
    reference = barcode.get_barcode_class(name)(data).build()[0]
    assert collapse(cls(data)) == reference
