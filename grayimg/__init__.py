"""Imagenes en gris de 8 bits: tipo GrayImage, operaciones y codec PGM."""
from grayimg.gray_image import ContractError, GrayImage
from grayimg.ops import (binary_background, binary_fill_holes, is_binary,
                         threshold, translate)
from grayimg.utils import PgmError

__version__ = "0.1.0"

__all__ = [
    "ContractError", "GrayImage", "PgmError",
    "binary_background", "binary_fill_holes", "is_binary",
    "threshold", "translate",
]
