from typing import List

import pytest

from barcodegen.errors import CharacterError, LengthError
from barcodegen.sym.code39 import Code39


def collapse(bits: List[int]) -> str:
    return "".join(str(b) for b in bits)


class TestCode39:
    def test_new(self) -> None:
        assert Code39("12345").data == "12345"

    def test_invalid_character(self) -> None:
        with pytest.raises(CharacterError):
            Code39("1212s")

    @pytest.mark.parametrize("data", ["", "A" * 257])
    def test_invalid_length(self, data: str) -> None:
        with pytest.raises(LengthError):
            Code39(data)

    def test_max_length(self) -> None:
        assert Code39("A" * 256).encoded_length() == 12 + 1 + 256 * 13 + 12

    @pytest.mark.parametrize(
        "data,expected",
        [
            (
                "1234",
                "10010110110101101001010110101100101011011011001010101010011010110100101101101",
            ),
            (
                "983RD512",
                "100101101101010110010110101101001011010110110010101011010101100101010110010110110100110101011010010101101011001010110100101101101",
            ),
            (
                "TEST8052",
                "100101101101010101101100101101011001010101101011001010101101100101101001011010101001101101011010011010101011001010110100101101101",
            ),
        ],
    )
    def test_encode(self, data: str, expected: str) -> None:
        assert collapse(Code39(data).encode()) == expected

    @pytest.mark.parametrize(
        "data,expected",
        [
            (
                "1234",
                "100101101101011010010101101011001010110110110010101010100110101101101010010110100101101101",
            ),
            (
                "983RD512",
                "1001011011010101100101101011010010110101101100101010110101011001010101100101101101001101010110100101011010110010101101011011010010100101101101",
            ),
        ],
    )
    def test_encode_with_checksum(self, data: str, expected: str) -> None:
        assert collapse(Code39.with_checksum(data).encode()) == expected

    def test_checksum_char(self) -> None:
        assert Code39("1234").checksum_char() == "A"

    def test_checksum_flag_in_equality(self) -> None:
        assert Code39("1234") != Code39("1234", checksum=True)
        assert Code39("1234", checksum=True) == Code39.with_checksum("1234")
        assert Code39.new("1234", checksum=True).checksum is True
