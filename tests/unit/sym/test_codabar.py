from typing import List

import pytest

from barcodegen.errors import CharacterError, LengthError
from barcodegen.sym.codabar import Codabar


class TestCodabar:
    def test_invalid_length(self) -> None:
        with pytest.raises(LengthError):
            Codabar(b"")

    def test_invalid_character(self) -> None:
        with pytest.raises(CharacterError):
            Codabar(b"A12345G")

    def test_encode_a1234b(self) -> None:
        bits = Codabar(b"A1234B").encode()
        expected: List[int] = (
            [1, 0, 1, 1, 0, 0, 1, 0, 0, 1]  # A
            + [0]
            + [1, 0, 1, 0, 1, 1, 0, 0, 1]  # 1
            + [0]
            + [1, 0, 1, 0, 0, 1, 0, 1, 1]  # 2
            + [0]
            + [1, 1, 0, 0, 1, 0, 1, 0, 1]  # 3
            + [0]
            + [1, 0, 1, 1, 0, 1, 0, 0, 1]  # 4
            + [0]
            + [1, 0, 1, 0, 0, 1, 0, 0, 1, 1]  # B
        )
        assert bits == expected
        assert len(bits) == 61

    def test_encode_a40156b(self) -> None:
        bits = "".join(str(b) for b in Codabar(b"A40156B").encode())
        assert bits == "10110010010101101001010101001101010110010110101001010010101101010010011"

    def test_no_trailing_gap(self) -> None:
        assert Codabar("A98B").encode()[-1] == 1

    @pytest.mark.parametrize("ch,width", [(":", 10), ("+", 11), ("0", 9)])
    def test_variable_width(self, ch: str, width: int) -> None:
        assert Codabar(ch).encoded_length() == width
