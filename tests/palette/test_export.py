import os

import pytest

from chromaramp.palette import PaletteGenerator, join_hex, to_css_variables, write_css, CSS_FILENAME
from chromaramp.samples import BRAND_RGB

CODES = ["#f0f4fa", "#c9dcf5", "#a0c4f0", "#78acea", "#4b91e3", "#2c6fbe", "#1e5292", "#163d6c", "#012433"]

EXPECTED_CSS = """:root {
  --color-1: #f0f4fa;
  --color-2: #c9dcf5;
  --color-3: #a0c4f0;
  --color-4: #78acea;
  --color-5: #4b91e3;
  --color-6: #2c6fbe;
  --color-7: #1e5292;
  --color-8: #163d6c;
  --color-9: #012433;
}"""


def test_join_hex():
    assert join_hex(CODES) == ", ".join(CODES)
    assert join_hex(CODES[:2]) == "#f0f4fa, #c9dcf5"
    assert join_hex(CODES[:2], separator="\n") == "#f0f4fa\n#c9dcf5"


def test_to_css_variables():
    assert to_css_variables(CODES) == EXPECTED_CSS


def test_to_css_variables_prefix():
    assert to_css_variables(CODES[:1], prefix="brand") == ":root {\n  --brand-1: #f0f4fa;\n}"


def test_rejects_non_hex_entries():
    with pytest.raises(ValueError):
        to_css_variables(["#fff"])
    with pytest.raises(ValueError):
        join_hex(["4a90e2"])


def test_accepts_palette_objects():
    palette = PaletteGenerator().generate(BRAND_RGB, 4)
    assert join_hex(palette) == ", ".join(palette.hex_codes)
    assert to_css_variables(palette).count("--color-") == 9


def test_write_css(tmp_path):
    path = write_css(CODES, tmp_path)

    assert os.path.basename(path) == CSS_FILENAME == "color-palette.css"
    with open(path, encoding="utf-8") as f:
        assert f.read() == EXPECTED_CSS


def test_write_css_custom_filename(tmp_path):
    path = write_css(CODES, str(tmp_path), filename="brand.css")
    assert path == os.path.join(str(tmp_path), "brand.css")
    assert os.path.exists(path)
