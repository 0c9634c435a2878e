"""Basic colorvalues usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

import numpy as np

from colorvalues import (
    RGBA,
    HSLA,
    CMYKA,
    Red,
    Alpha,
    Lightness,
    parse_color,
    np_convert,
    ColorParseError,
)


def demonstrate_colors() -> None:
    # Parse, convert and render.
    accent = RGBA.of("#ff8040")
    print("RGBA:", accent)
    print("RGBA -> HSLA:", accent.to_hsla())
    print("RGBA -> CMYKA:", accent.to_cmyka())

    hsla = HSLA.of("hsla(350, 100%, 50%, 0.8)")
    print("HSLA -> RGBA:", hsla.to_rgba())
    print("CMYKA -> RGBA:", CMYKA.of("device-cmyk(0%, 100%, 80%, 0%)").to_rgba())


def demonstrate_adjustments() -> None:
    # Every adjustment returns a new color.
    base = RGBA.of("rgb(200, 100, 50)")
    print("More red:", base.add_red(Red(100)))
    print("Translucent:", base.subtract_alpha(Alpha(0.4)))

    hsla = base.to_hsla()
    print("Complementary:", hsla.rotate_by(180))
    print("Lighter:", hsla.add_lightness(Lightness(20)))


def demonstrate_parsing() -> None:
    for notation in ("f03", "rgb(100%, 0%, 20%)", "hsl(120, 50%, 25%)", "not-a-colour"):
        try:
            print(f"{notation!r} ->", repr(parse_color(notation)))
        except ColorParseError as e:
            print(f"{notation!r} -> error: {e}")


def demonstrate_batches() -> None:
    rgb = np.array([[255, 0, 51], [0, 0, 0], [51, 102, 153]])
    print("Batch RGB -> HSL:\n", np_convert(rgb, "rgb", "hsl"))
    print("Batch RGB -> CMYKA:\n", np_convert(rgb, "rgb", "cmyka"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    demonstrate_colors()
    demonstrate_adjustments()
    demonstrate_parsing()
    demonstrate_batches()
