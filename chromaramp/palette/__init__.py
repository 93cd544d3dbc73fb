from .config import GenerationConfig, InterpolationMode, DEFAULT_CONFIG, curve_power_to_exponent
from .axes import calculate_increments, linear_axis, weighted_axis, reset_axis
from .generator import Palette, PaletteGenerator, EdgeAnchorWarning, validate_anchor
from .export import join_hex, to_css_variables, write_css, CSS_FILENAME
from .picker import PalettePicker

__all__ = [
    "GenerationConfig", "InterpolationMode", "DEFAULT_CONFIG", "curve_power_to_exponent",
    "calculate_increments", "linear_axis", "weighted_axis", "reset_axis",
    "Palette", "PaletteGenerator", "EdgeAnchorWarning", "validate_anchor",
    "join_hex", "to_css_variables", "write_css", "CSS_FILENAME",
    "PalettePicker",
]
