from typing import List

import pytest

from barcodegen.errors import CharacterError, LengthError
from barcodegen.sym.code128 import CharacterSet, Code128, Unit, tokenize


def collapse(bits: List[int]) -> str:
    return "".join(str(b) for b in bits)


class TestTokenizer:
    def test_start_unit(self) -> None:
        assert tokenize("ÀA")[0] == Unit(CharacterSet.A, 103)
        assert tokenize("ƁA")[0] == Unit(CharacterSet.B, 104)
        assert tokenize("Ć12")[0] == Unit(CharacterSet.C, 105)

    def test_set_c_pairs_digits(self) -> None:
        assert tokenize("Ć123456") == [
            Unit(CharacterSet.C, 105),
            Unit(CharacterSet.C, 12),
            Unit(CharacterSet.C, 34),
            Unit(CharacterSet.C, 56),
        ]

    def test_switch_emitted_in_previous_set(self) -> None:
        units = tokenize("ÀXYĆ2199")
        assert units[3] == Unit(CharacterSet.A, 99)
        assert units[4:] == [Unit(CharacterSet.C, 21), Unit(CharacterSet.C, 99)]

    def test_control_characters_in_set_a(self) -> None:
        assert tokenize("À\x00\x1f")[1:] == [
            Unit(CharacterSet.A, 64),
            Unit(CharacterSet.A, 95),
        ]

    def test_lowercase_in_set_b(self) -> None:
        assert tokenize("Ɓa")[1] == Unit(CharacterSet.B, 65)

    def test_function_characters(self) -> None:
        assert [u.index for u in tokenize("ÀŹźŻż")[1:]] == [102, 97, 96, 101]
        assert [u.index for u in tokenize("ƁŹźŻż")[1:]] == [102, 97, 96, 100]
        assert tokenize("ĆŹ")[1] == Unit(CharacterSet.C, 102)

    def test_shift_applies_to_one_character(self) -> None:
        units = tokenize("ÀAŽaB")
        assert units[1:] == [
            Unit(CharacterSet.A, 33),
            Unit(CharacterSet.A, 98),
            Unit(CharacterSet.B, 65),
            Unit(CharacterSet.A, 34),
        ]

    @pytest.mark.parametrize(
        "data",
        [
            "HELLO",  # нет стартового набора
            "",
            "ÀHELLOĆ12352",  # непарная цифра в конце
            "Ć123À",  # непарная цифра перед переключением
            "ÀABÀ",  # переключение на текущий набор
            "Ć12Ć34",
            "ÀAŽ",  # SHIFT в конце
            "ÀŽŽa",
            "ÀŽĆ12",
            "Àa",  # строчная буква вне набора A
            "ĆA",
            "ĆŽ",
        ],
    )
    def test_invalid_sequences(self, data: str) -> None:
        with pytest.raises(CharacterError):
            tokenize(data)


class TestCode128:
    def test_new(self) -> None:
        assert Code128("À !! Ć0201").data == "À !! Ć0201"
        assert Code128('À!!  " ').encoded_length() > 0

    def test_invalid_length(self) -> None:
        with pytest.raises(LengthError):
            Code128("")

    def test_too_long(self) -> None:
        with pytest.raises(LengthError):
            Code128("À" + "A" * 256)

    @pytest.mark.parametrize("data", ["À☺ ", "ÀHELLOĆ12352", "HELLO"])
    def test_invalid_data(self, data: str) -> None:
        with pytest.raises(CharacterError):
            Code128(data)

    @pytest.mark.parametrize(
        "data,expected",
        [
            (
                "ÀHELLO",
                "110100001001100010100010001101000100011011101000110111010001110110110100010001100011101011",
            ),
            (
                "ÀXYĆ2199",
                "110100001001110001011011101101000101110111101101110010010111011110100111011001100011101011",
            ),
            (
                "ƁxyZÀ199!*1",
                "1101001000011110010010110110111101110110001011101011110100111001101110010110011100101100110011011001100100010010011100110100101111001100011101011",
            ),
            (
                "ÀB\u0006",
                "110100001001000101100010110000100100110100001100011101011",
            ),
            (
                "ĆŹ4218402050À0",
                "110100111001111010111010110111000110011100101100010100011001001110110001011101110101111010011101100101011110001100011101011",
            ),
        ],
    )
    def test_encode(self, data: str, expected: str) -> None:
        assert collapse(Code128(data).encode()) == expected

    def test_longhand_escapes(self) -> None:
        assert Code128("ÀXYĆ2199") == Code128("ÀXYĆ2199")

    def test_utf8_bytes(self) -> None:
        assert Code128("ÀHELLO".encode("utf-8")) == Code128("ÀHELLO")

    def test_invalid_utf8_bytes(self) -> None:
        with pytest.raises(CharacterError):
            Code128(b"\xc3HELLO")

    def test_checksum_index(self) -> None:
        assert Code128("ÀHELLO").checksum_index() == 39
        assert Code128("ÀXYĆ2199").checksum_index() == 16

    def test_encoded_length(self) -> None:
        assert Code128("ÀHE@$AĆ123456").encoded_length() == 134
