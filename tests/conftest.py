import pytest

from chromaramp.palette import PaletteGenerator, GenerationConfig


@pytest.fixture
def generator():
    return PaletteGenerator()


@pytest.fixture
def brand_config():
    """Curve power slider at 200 -> exponent 2.0."""
    return GenerationConfig.from_curve_power(200)
