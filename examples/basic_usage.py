"""Basic chromaramp usage.

Run directly with:
    python examples/basic_usage.py
"""
import tempfile

from chromaramp import (
    ColorRGB,
    GenerationConfig,
    InterpolationMode,
    PaletteGenerator,
    PalettePicker,
    hex_to_rgb,
    rgb_to_hsv,
)


def demonstrate_conversions() -> None:
    brand = ColorRGB.from_hex("#4a90e2")
    print("RGB:", brand.value)
    print("HSV (deg, %, %):", tuple(round(c, 2) for c in rgb_to_hsv(*brand.value)))
    print("Malformed hex falls back to black:", hex_to_rgb("#12345"))


def demonstrate_generator() -> None:
    generator = PaletteGenerator()

    # Slider-style configuration: 0-300, divided by 100
    for power in (100, 200, 300):
        config = GenerationConfig.from_curve_power(power)
        print(f"power {power}:", generator.make_gradient((74, 144, 226), 4, config))

    symmetric = GenerationConfig(value_exponent=2.0, interpolation=InterpolationMode.SYMMETRIC)
    palette = generator.generate((74, 144, 226), 4, symmetric)
    print("symmetric values:", palette.values)
    print("as array:\n", palette.to_array())


def demonstrate_picker() -> None:
    picker = PalettePicker()
    print("initial:", picker.copy_all())

    # Click the third swatch, raise the curve, regenerate
    picker.select_swatch(2)
    picker.set_curve_power(250)
    picker.generate()
    print("after select:", picker.copy_all())

    with tempfile.TemporaryDirectory() as directory:
        path = picker.export_css(directory)
        with open(path, encoding="utf-8") as f:
            print(f.read())


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_generator()
    demonstrate_picker()
