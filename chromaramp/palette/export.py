"""Text and file outputs consumed by "copy all" and CSS export."""
from __future__ import annotations

import logging
import os
from typing import Iterable, List

from ..conversions import is_hex_color
from ..types.color_types import HexColor

logger = logging.getLogger(__name__)

CSS_FILENAME = "color-palette.css"
COPY_SEPARATOR = ", "


def _hex_list(palette: Iterable[HexColor]) -> List[HexColor]:
    codes = list(palette)
    for code in codes:
        if not (isinstance(code, str) and code.startswith("#") and is_hex_color(code)):
            raise ValueError(f"Not a #rrggbb color: {code!r}")
    return codes


def join_hex(palette: Iterable[HexColor], separator: str = COPY_SEPARATOR) -> str:
    return separator.join(_hex_list(palette))


def to_css_variables(palette: Iterable[HexColor], prefix: str = "color") -> str:
    """
    Render the palette as CSS custom properties on ``:root``, numbered from 1.

    >>> print(to_css_variables(["#ffffff", "#000000"]))
    :root {
      --color-1: #ffffff;
      --color-2: #000000;
    }
    """
    lines = [f"  --{prefix}-{i}: {code};" for i, code in enumerate(_hex_list(palette), start=1)]
    return ":root {\n" + "\n".join(lines) + "\n}"


def write_css(
    palette: Iterable[HexColor],
    directory: str | os.PathLike = ".",
    filename: str = CSS_FILENAME,
) -> str:
    """Write to_css_variables output to ``directory/filename``; returns the path."""
    path = os.path.join(os.fspath(directory), filename)
    css = to_css_variables(palette)
    with open(path, "w", encoding="utf-8") as f:
        f.write(css)
    logger.debug("wrote %d bytes of palette CSS to %s", len(css), path)
    return path
