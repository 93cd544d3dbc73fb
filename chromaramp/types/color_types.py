from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
RGBTuple = Tuple[int, int, int]
HSVTuple = Tuple[float, float, float]
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[Scalar, ScalarVector]
HexColor = str
ColorSpace = Literal["rgb", "hsv"]
HUE_SPACES = {"hsv"}


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    if isinstance(element, (int, float)):
        return np.array([element], dtype=float)
    return np.array(element, dtype=float)

