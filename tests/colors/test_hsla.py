import pytest

from colorvalues.channels import Red, Green, Blue, Hue, Saturation, Lightness, Alpha
from colorvalues.colors import RGBA, HSLA
from colorvalues.exceptions import ColorParseError, InvalidValueRangeError
from colorvalues.utils import round_half_up
from samples import samples_rgb_hsl, samples_hsla_notations, invalid_notations


def hsla(h, s, l, a=1.0):
    return HSLA(Hue(h), Saturation(s), Lightness(l), Alpha(a))


def test_alpha_defaults_to_opaque():
    assert HSLA(Hue(1), Saturation(2), Lightness(3)).equals(hsla(1, 2, 3))


def test_rendering():
    assert str(hsla(350, 100, 50)) == "hsl(350, 100%, 50%)"
    assert str(hsla(350, 100, 50, 0.8)) == "hsla(350, 100%, 50%, 0.8)"
    assert hsla(0, 0, 0).to_string() == "hsl(0, 0%, 0%)"


def test_parsing():
    for notation, (h, s, l, a) in samples_hsla_notations.items():
        assert HSLA.of(notation).equals(hsla(h, s, l, a)), notation
        assert HSLA.from_string(notation).equals(hsla(h, s, l, a))


def test_parsing_failure():
    for notation in invalid_notations + ["#ff0033", "rgb(255, 0, 51)"]:
        with pytest.raises(ColorParseError) as info:
            HSLA.of(notation)
        assert info.value.color == notation


def test_out_of_range_notation():
    with pytest.raises(ColorParseError) as info:
        HSLA.of("hsl(360, 100%, 50%)")
    assert isinstance(info.value.__cause__, InvalidValueRangeError)


def test_string_round_trip():
    for h in range(0, 360, 37):
        for s in (0, 33, 100):
            for l in (0, 50, 99):
                color = hsla(h, s, l)
                assert HSLA.of(str(color)).equals(color)
                translucent = hsla(h, s, l, 0.25)
                assert HSLA.of(str(translucent)).equals(translucent)


def test_to_rgba_matches_formula():
    rgba = HSLA.of("hsl(350, 100%, 50%)").to_rgba()

    # l = 0.5, s = 1: q = l + s - l * s, p = 2 * l - q
    lightness, saturation, hue = 0.5, 1.0, 350 / 360
    q = lightness + saturation - lightness * saturation
    p = 2 * lightness - q
    # red: t = hue + 1/3 wraps to below 1/2 -> q
    # green: t = hue is above 2/3 -> p
    # blue: t = hue - 1/3 falls in [1/2, 2/3)
    t = hue - 1 / 3
    expected_blue = round_half_up((p + (q - p) * (2 / 3 - t) * 6) * 255)

    assert rgba.red.to_int() == round_half_up(q * 255) == 255
    assert rgba.green.to_int() == round_half_up(p * 255) == 0
    assert rgba.blue.to_int() == expected_blue
    assert 42 <= expected_blue <= 43
    assert rgba.alpha.at_maximum()


def test_to_rgba_samples():
    for (r, g, b), (h, s, l) in samples_rgb_hsl.items():
        rgba = hsla(h, s, l, 0.3).to_rgba()
        assert abs(rgba.red.to_int() - r) <= 1, (h, s, l)
        assert abs(rgba.green.to_int() - g) <= 1, (h, s, l)
        assert abs(rgba.blue.to_int() - b) <= 1, (h, s, l)
        assert rgba.alpha.to_float() == 0.3


def test_achromatic_to_rgba():
    for l in range(101):
        rgba = hsla(200, 0, l).to_rgba()
        v = round_half_up(l / 100 * 255)
        assert rgba.equals(RGBA(Red(v), Green(v), Blue(v)))


def test_to_cmyka_goes_through_rgba():
    color = hsla(350, 100, 50, 0.8)
    assert color.to_cmyka().equals(color.to_rgba().to_cmyka())
    assert color.to_hsla() is color
    assert color.to_rgba() is color.to_rgba()


def test_adjustments_touch_one_channel():
    color = hsla(350, 50, 50, 0.5)

    assert color.rotate_by(20).equals(hsla(10, 50, 50, 0.5))
    assert color.rotate_by(-360).equals(color)
    assert color.add_saturation(Saturation(60)).equals(hsla(350, 100, 50, 0.5))
    assert color.subtract_saturation(Saturation(10)).equals(hsla(350, 40, 50, 0.5))
    assert color.add_lightness(Lightness(10)).equals(hsla(350, 50, 60, 0.5))
    assert color.subtract_lightness(Lightness(60)).equals(hsla(350, 50, 0, 0.5))
    assert color.add_alpha(Alpha(0.25)).equals(hsla(350, 50, 50, 0.75))
    assert color.subtract_alpha(Alpha(0.5)).equals(hsla(350, 50, 50, 0.0))

    assert color.equals(hsla(350, 50, 50, 0.5))


def test_equality():
    assert hsla(1, 2, 3) == hsla(1, 2, 3)
    assert hsla(1, 2, 3) != hsla(2, 2, 3)
    assert hash(hsla(1, 2, 3, 0.5)) == hash(hsla(1, 2, 3, 0.5))


def test_equals_rejects_other_spaces():
    with pytest.raises(TypeError):
        hsla(0, 0, 100).equals(hsla(0, 0, 100).to_rgba())
