from colorvalues.channels import Red, Green, Blue, Alpha
from colorvalues.colors import RGBA
from samples import samples_rgb_hsl, samples_rgb_cmyk


def rgba(r, g, b, a=1.0):
    return RGBA(Red(r), Green(g), Blue(b), Alpha(a))


def test_round_trip_rgb_to_hsl_to_rgb():
    for (r, g, b) in samples_rgb_hsl:
        color = rgba(r, g, b, 0.6)
        back = color.to_hsla().to_rgba()

        assert abs(back.red.to_int() - r) <= 1
        assert abs(back.green.to_int() - g) <= 1
        assert abs(back.blue.to_int() - b) <= 1
        assert back.alpha == color.alpha


def test_round_trip_rgb_to_hsl_to_rgb_on_grid():
    # integer hue/percent channels bound the drift at 5 per channel
    worst = 0
    for r in range(0, 256, 15):
        for g in range(0, 256, 17):
            for b in range(0, 256, 23):
                back = rgba(r, g, b).to_hsla().to_rgba()
                worst = max(
                    worst,
                    abs(back.red.to_int() - r),
                    abs(back.green.to_int() - g),
                    abs(back.blue.to_int() - b),
                )
    assert worst <= 5


def test_round_trip_rgb_to_cmyk_to_rgb():
    for (r, g, b) in samples_rgb_cmyk:
        color = rgba(r, g, b)
        back = color.to_cmyka().to_rgba()

        assert abs(back.red.to_int() - r) <= 1
        assert abs(back.green.to_int() - g) <= 1
        assert abs(back.blue.to_int() - b) <= 1


def test_round_trip_greys_are_exact():
    # achromatic colors only lose precision on lightness
    for v in range(0, 256, 5):
        back = rgba(v, v, v).to_hsla().to_rgba()
        assert back.red.to_int() == back.green.to_int() == back.blue.to_int()
        assert abs(back.red.to_int() - v) <= 1


def test_hsla_and_cmyka_meet_through_rgba():
    for (r, g, b) in samples_rgb_hsl:
        color = rgba(r, g, b)
        assert color.to_hsla().to_cmyka().equals(color.to_hsla().to_rgba().to_cmyka())
        assert color.to_cmyka().to_hsla().equals(color.to_cmyka().to_rgba().to_hsla())
