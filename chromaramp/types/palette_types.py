from typing import Final

# Fixed ramp geometry
PALETTE_SIZE: Final = 9
LAST_INDEX: Final = PALETTE_SIZE - 1

# Saturation axis endpoints (percent)
LEFT_X: Final = 8
RIGHT_X: Final = 98

# Value axis endpoints (percent)
LEFT_Y: Final = 95
RIGHT_Y: Final = 20

# User-facing curve power slider
CURVE_POWER_MIN: Final = 0
CURVE_POWER_MAX: Final = 300
CURVE_POWER_SCALE: Final = 100
