import pytest

from prismatic.conversions import hsv_to_unit_rgb, unit_rgb_to_hsv
from prismatic.conversions.hsv import sector_components
from prismatic.errors import HueSectorError, PrismaticError

# (r, g, b) -> (h, s, v)
samples = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 1.0, 1.0): (180.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (0.5, 0.25, 0.25): (0.0, 0.5, 0.5),
    (0.2, 0.4, 0.6): (210.0, 2 / 3, 0.6),
}


@pytest.mark.parametrize("rgb,hsv", samples.items())
def test_unit_rgb_to_hsv(rgb, hsv):
    assert unit_rgb_to_hsv(*rgb) == pytest.approx(hsv, abs=1e-9)


@pytest.mark.parametrize("rgb,hsv", samples.items())
def test_hsv_to_unit_rgb(rgb, hsv):
    assert hsv_to_unit_rgb(*hsv) == pytest.approx(rgb, abs=1e-9)


def test_full_turn_is_red():
    assert hsv_to_unit_rgb(360.0, 1.0, 1.0) == pytest.approx((1.0, 0.0, 0.0))


def test_hue_is_below_full_turn():
    h, _, _ = unit_rgb_to_hsv(1.0, 0.0, 1e-17)
    assert 0.0 <= h < 360.0


def test_sector_components():
    assert sector_components(0.5, 1.0, 0.5) == (1.0, 0.5, 0.0)
    assert sector_components(1.5, 1.0, 0.5) == (0.5, 1.0, 0.0)
    assert sector_components(3.0, 1.0, 0.0) == (0.0, 0.0, 1.0)
    assert sector_components(6.0, 1.0, 0.0) == (1.0, 0.0, 0.0)


@pytest.mark.parametrize("position", [7.0, -0.5, float("nan"), float("inf")])
def test_sector_out_of_range(position):
    with pytest.raises(HueSectorError) as err:
        sector_components(position, 1.0, 0.5)
    assert isinstance(err.value, AssertionError)
    assert isinstance(err.value, PrismaticError)
    assert "Invalid hue value" in str(err.value)


def test_unwrapped_hue_is_fatal():
    with pytest.raises(HueSectorError):
        hsv_to_unit_rgb(450.0, 1.0, 1.0)
