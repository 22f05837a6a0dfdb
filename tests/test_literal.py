import pytest

from covibe.literal import (
    BoolLit,
    ByteLit,
    ByteStrLit,
    CharLit,
    FloatLit,
    FloatSuffix,
    IntBase,
    IntLit,
    IntSuffix,
    StrInterpolation,
    StrKind,
    StrLit,
    StrLiteralPart,
)

SPAN = (3, 9)


def test_int_literal_defaults_to_no_suffix():
    lit = IntLit("0xFF", IntBase.HEXADECIMAL, SPAN)
    assert lit.suffix is None
    assert lit.raw == "0xFF"
    assert lit.base is IntBase.HEXADECIMAL


def test_int_base_lookup_by_radix():
    assert IntBase(16) is IntBase.HEXADECIMAL
    assert IntBase(2) is IntBase.BINARY
    assert IntBase(10) is IntBase.DECIMAL


def test_int_base_radix_parses_raw_digits():
    lit = IntLit("777", IntBase.OCTAL, SPAN)
    assert int(lit.raw, lit.base.value) == int("0o777", 0)


def test_suffix_lookup_by_spelling():
    assert IntSuffix("u64") is IntSuffix.U64
    assert IntSuffix("isize") is IntSuffix.ISIZE
    assert FloatSuffix("f32") is FloatSuffix.F32


def test_float_literal_keeps_suffix():
    lit = FloatLit("2.5e-3", SPAN, FloatSuffix.F64)
    assert lit.suffix is FloatSuffix.F64
    assert lit.raw == "2.5e-3"


def test_unknown_suffix_rejected():
    with pytest.raises(ValueError):
        IntSuffix("i7")


@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_byte_literal_out_of_range(value):
    with pytest.raises(ValueError):
        ByteLit(value, SPAN)


@pytest.mark.parametrize("value", [0, 65, 255])
def test_byte_literal_in_range(value):
    assert ByteLit(value, SPAN).value == value


@pytest.mark.parametrize("value", ["", "ab", "\ud800"])
def test_char_literal_rejects_invalid(value):
    with pytest.raises(ValueError):
        CharLit(value, SPAN)


def test_char_literal_accepts_single_character():
    assert CharLit("\n", SPAN).value == "\n"
    assert CharLit("é", SPAN).value == "é"


def test_byte_string_normalised_to_bytes():
    lit = ByteStrLit(bytearray(b"hello"), SPAN)
    assert lit.value == b"hello"
    assert isinstance(lit.value, bytes)


def test_format_string_parts_in_order():
    marker = object()
    text = StrLiteralPart("x = ", (2, 6))
    interp = StrInterpolation(marker, (6, 9), format_spec=">4")
    lit = StrLit(StrKind.FORMAT, "x = {x}", SPAN, [text, interp])
    assert lit.parts == [text, interp]
    assert lit.parts[1].expr is marker
    assert lit.parts[1].format_spec == ">4"


def test_string_parts_not_shared_between_literals():
    first = StrLit(StrKind.NORMAL, "a", SPAN)
    second = StrLit(StrKind.NORMAL, "b", SPAN)
    first.parts.append(StrLiteralPart("a", SPAN))
    assert second.parts == []


@pytest.mark.parametrize(
    "lit",
    [
        IntLit("1", IntBase.DECIMAL, SPAN),
        FloatLit("1.0", SPAN),
        StrLit(StrKind.RAW, "r", SPAN),
        CharLit("c", SPAN),
        BoolLit(True, SPAN),
        ByteLit(1, SPAN),
        ByteStrLit(b"x", SPAN),
    ],
)
def test_every_literal_carries_its_span(lit):
    assert lit.span == SPAN


def test_literals_compare_structurally():
    assert BoolLit(True, SPAN) == BoolLit(True, SPAN)
    assert BoolLit(True, SPAN) != BoolLit(False, SPAN)