# Reference conversions: int RGB -> (hue degrees, saturation %, value %)
samples_rgb_hsv = {
    (255, 0, 0): (0.0, 100.0, 100.0),
    (0, 255, 0): (120.0, 100.0, 100.0),
    (0, 0, 255): (240.0, 100.0, 100.0),
    (255, 255, 0): (60.0, 100.0, 100.0),
    (0, 255, 255): (180.0, 100.0, 100.0),
    (255, 0, 255): (300.0, 100.0, 100.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 50.19607843137255),
    (255, 128, 0): (30.11764705882353, 100.0, 100.0),
    (74, 144, 226): (212.36842105263156, 67.2566371681416, 88.62745098039215),
    (51, 102, 153): (210.0, 66.66666666666667, 60.0),
}

# (hue, saturation %, value %) -> int RGB
samples_hsv_rgb = {
    (0.0, 100.0, 100.0): (255, 0, 0),
    (120.0, 100.0, 100.0): (0, 255, 0),
    (240.0, 100.0, 100.0): (0, 0, 255),
    (60.0, 100.0, 100.0): (255, 255, 0),
    (0.0, 0.0, 50.0): (128, 128, 128),
    (210.0, 50.0, 100.0): (128, 191, 255),
    (300.0, 100.0, 100.0): (255, 0, 255),
}

samples_hex_rgb = {
    "#4a90e2": (74, 144, 226),
    "4A90E2": (74, 144, 226),
    "#FFFFFF": (255, 255, 255),
    "#000000": (0, 0, 0),
    "#0a0B0c": (10, 11, 12),
}

invalid_hex = [
    "",
    "#",
    "#fff",
    "#12345",
    "#1234567",
    "##123456",
    "#12345g",
    "12 34 56",
    "#123456\n",
    "rgb(1,2,3)",
]

# Anchor #4a90e2 at index 4 with curve power 200, legacy right-side weighting
BRAND_PALETTE_AXES = {
    "saturations": (8, 23, 38, 53, 67, 75, 83, 91, 98),
    "values": (95, 95, 94, 92, 89, 52, 34, 25, 20),
}

BRAND_RGB = (74, 144, 226)
BRAND_HEX = "#4a90e2"
