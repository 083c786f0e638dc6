import pytest

from util.color import normalize_color, parse_color_str, parse_hex_color_str


@pytest.mark.parametrize("s", ["#FF8000", "0xff8000", "ff8000", " #ff8000 "])
def test_hex_forms(s):
    assert parse_hex_color_str(s) == pytest.approx((1.0, 128 / 255, 0.0, 1.0))


def test_hex_with_alpha_and_errors():
    assert parse_hex_color_str("#00000080")[3] == pytest.approx(128 / 255)
    with pytest.raises(ValueError):
        parse_hex_color_str("#abc")
    with pytest.raises(ValueError):
        parse_hex_color_str("#GGHHII")


def test_named_colors_case_insensitive():
    assert parse_color_str("Red") == (1.0, 0.0, 0.0, 1.0)
    assert parse_color_str("clear") == (0.0, 0.0, 0.0, 0.0)


def test_sequences_in_unit_and_byte_ranges():
    assert normalize_color((0.0, 0.5, 1.0)) == (0.0, 0.5, 1.0, 1.0)
    assert normalize_color([255, 0, 0, 51]) == pytest.approx((1.0, 0.0, 0.0, 0.2))
    with pytest.raises(ValueError):
        normalize_color((1, 2))
    with pytest.raises(ValueError):
        normalize_color(("a", "b", "c"))


def test_unsupported_type():
    with pytest.raises(ValueError):
        normalize_color(object())
