from typing import List

import pytest

from barcodegen.errors import CharacterError, LengthError
from barcodegen.model.enums import Symbology
from barcodegen.sym.two_of_five import ITF, STF, ToF


def collapse(bits: List[int]) -> str:
    return "".join(str(b) for b in bits)


class TestInterleaved:
    def test_even_length_kept(self) -> None:
        assert ToF.interleaved("12345679").digits == [1, 2, 3, 4, 5, 6, 7, 9]

    def test_odd_length_gets_check_digit(self) -> None:
        itf = ToF.interleaved("1234567")
        assert itf.digits == [1, 2, 3, 4, 5, 6, 7, 0]
        assert len(itf.digits) % 2 == 0

    def test_encode(self) -> None:
        assert collapse(ToF.interleaved("1234567").encode()) == (
            "10101110100010101110001110111010001010001110100011100010101010100011100011101101"
        )

    def test_encode_five_digits(self) -> None:
        assert collapse(ITF("12345").encode()) == (
            "10101110100010101110001110111010001010001110101110100010001101"
        )

    def test_invalid_character(self) -> None:
        with pytest.raises(CharacterError):
            ToF.interleaved("1234a")

    def test_invalid_length(self) -> None:
        with pytest.raises(LengthError):
            ToF.interleaved("")

    def test_symbology(self) -> None:
        assert ToF.interleaved("12").symbology is Symbology.ITF


class TestStandard:
    def test_no_check_digit(self) -> None:
        assert ToF.standard("1234567").digits == [1, 2, 3, 4, 5, 6, 7]

    def test_encode(self) -> None:
        assert collapse(ToF.standard("1234567").encode()) == (
            "110110101110101010111010111010101110111011101010101010111010111011101011101010101110111010101010101110111011010110"
        )

    def test_variants_not_equal(self) -> None:
        assert ToF.standard("12") != ToF.interleaved("12")
        assert isinstance(ToF.standard("12"), STF)
