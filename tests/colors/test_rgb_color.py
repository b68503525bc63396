import pytest

from prismatic.channels import F32, U8, U16
from prismatic.colors import (
    RGBA,
    LinRGB48Color,
    LinRGBColor,
    LinearSpace,
    RGBAColor,
    RGBColor,
    SRGB24Color,
    SRGB48Color,
    SRGBAColor,
    SRGBColor,
    SRGBSpace,
    rgb_class,
)
from prismatic.errors import ColorParseError


def test_clamping():
    assert SRGBAColor(2.0, -10.0, float("-inf"), float("inf")).tuple() == (1.0, 0.0, 0.0, 1.0)
    assert SRGB24Color(300, -5, 128).tuple() == (255, 0, 128)


def test_iteration():
    c1 = SRGBAColor(0.25, 0.5, 1.0, 0.9)
    assert list(c1) == [0.25, 0.5, 1.0, F32(0.9)]
    assert len(c1) == 4

    c2 = LinRGB48Color(255, 8, 240)
    it = iter(c2)
    assert next(it) == 255
    assert next(it) == 8
    assert next(it) == 240
    with pytest.raises(StopIteration):
        next(it)
    assert list(c2) == list(c2) == [255, 8, 240]
    assert len(c2) == 3


def test_properties():
    color = SRGBAColor(0.25, 0.5, 1.0, 0.75)
    assert (color.r, color.g, color.b, color.a) == (0.25, 0.5, 1.0, 0.75)
    assert color.has_alpha
    assert not SRGBColor(0.25, 0.5, 1.0).has_alpha


def test_immutable():
    color = SRGB24Color(1, 2, 3)
    with pytest.raises(AttributeError):
        color.r = 4
    with pytest.raises(AttributeError):
        color._channels = (U8(0),) * 3


def test_specialization_is_cached():
    assert RGBColor[U8, SRGBSpace] is SRGB24Color
    assert RGBAColor[F32, SRGBSpace] is SRGBAColor
    assert rgb_class(U16) is SRGB48Color
    assert rgb_class(F32, LinearSpace) is LinRGBColor
    assert rgb_class(U8, alpha=True) is RGBA
    assert SRGB24Color.channel is U8
    assert SRGB24Color.space is SRGBSpace
    assert SRGB24Color.generic is RGBColor


def test_specialization_errors():
    with pytest.raises(TypeError):
        RGBColor(1, 2, 3)
    with pytest.raises(TypeError):
        RGBColor[int, SRGBSpace]
    with pytest.raises(TypeError):
        RGBColor[U8, U8]
    with pytest.raises(TypeError):
        RGBColor[U8]
    with pytest.raises(TypeError):
        SRGB24Color[U8, SRGBSpace]
    with pytest.raises(TypeError):
        SRGBSpace()


def test_equality():
    assert SRGB24Color(1, 2, 3) == SRGB24Color(1, 2, 3)
    assert SRGB24Color(1, 2, 3) != SRGB24Color(1, 2, 4)
    assert SRGBColor(1.0, 0.0, 0.0) != LinRGBColor(1.0, 0.0, 0.0)
    assert SRGB24Color(255, 0, 0) != SRGBColor(1.0, 0.0, 0.0)
    assert len({SRGB24Color(1, 2, 3), SRGB24Color(1, 2, 3)}) == 1


def test_repr():
    assert repr(SRGB24Color(1, 2, 3)) == "RGBColor[U8, SRGBSpace](r=1, g=2, b=3)"


def test_conv():
    color = SRGB24Color(128, 255, 55)
    floats = color.conv(F32)
    assert type(floats) is SRGBColor
    assert floats.r == pytest.approx(128 / 255)
    assert floats.g == 1.0
    assert floats.conv(U8) == color
    assert color.conv(U16).tuple() == (128 * 257, 65535, 55 * 257)


def test_channel_values_are_rescaled():
    assert SRGB24Color(F32(1.0), U16(0), 7).tuple() == (255, 0, 7)


def test_alpha():
    color = SRGBColor(0.5, 0.25, 0.75)
    opaque = color.with_alpha()
    assert type(opaque) is SRGBAColor
    assert opaque.a == 1.0
    assert opaque.without_alpha() == color
    assert color.with_alpha(0.5).a == 0.5
    assert opaque.with_alpha(0.25).tuple() == (0.5, 0.25, 0.75, 0.25)
    assert RGBA(1, 2, 3).a == 255


def test_std_decode_encode():
    srgb = SRGB24Color(128, 255, 55)
    linear = srgb.conv(F32).std_decode()
    assert type(linear) is LinRGBColor
    assert linear.g == 1.0
    assert linear.r < srgb.conv(F32).r
    assert linear.std_encode().conv(U8) == srgb


def test_std_decode_keeps_alpha():
    color = SRGBAColor(0.5, 0.5, 0.5, 0.25).std_decode()
    assert color.space is LinearSpace
    assert color.a == 0.25
    assert color.r == pytest.approx(0.21404114, rel=1e-6)


def test_std_decode_wrong_space():
    with pytest.raises(TypeError):
        LinRGBColor(0.5, 0.5, 0.5).std_decode()
    with pytest.raises(TypeError):
        SRGBColor(0.5, 0.5, 0.5).std_encode()


def test_hex_round_trip():
    for value in range(0, 0xFFFFFF + 1, 30000):
        hex_str = f"{value:06X}"
        color = SRGB24Color.from_hex(hex_str)
        assert format(color, "X") == hex_str
        assert color.to_hex(upper=False) == hex_str.lower()


def test_from_hex():
    assert SRGB24Color.from_hex("#80FF37") == SRGB24Color(128, 255, 55)
    assert SRGB24Color.from_hex("f80") == SRGB24Color(255, 136, 0)
    assert SRGBColor.from_hex("#FF0000").tuple() == (1.0, 0.0, 0.0)
    assert RGBA.from_hex("#FF000080").a == 128
    assert RGBA.from_hex("#FF0000").a == 255


def test_from_hex_errors():
    with pytest.raises(ColorParseError):
        SRGB24Color.from_hex("#FF000080")
    with pytest.raises(ValueError):
        SRGB24Color.from_hex("#GG0000")
    with pytest.raises(TypeError):
        RGBColor.from_hex("#FF0000")


def test_str_and_format():
    color = SRGB24Color(255, 128, 0)
    assert str(color) == "#FF8000"
    assert f"{color}" == "#FF8000"
    assert f"{color:x}" == "ff8000"
    assert str(RGBA(255, 128, 0, 64)) == "#FF800040"
    assert str(SRGBColor(1.0, 0.0, 0.0)) == "#FF0000"
    with pytest.raises(ValueError):
        format(color, "q")
