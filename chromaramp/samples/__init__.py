from .colors import (
    samples_rgb_hsv,
    samples_hsv_rgb,
    samples_hex_rgb,
    invalid_hex,
    BRAND_PALETTE_AXES,
    BRAND_RGB,
    BRAND_HEX,
)
