import sys
from pathlib import Path

import pytest

# permitir correr las pruebas sin instalar el paquete
sys.path.insert(0, str(Path(__file__).parent.parent))

from grayimg.gray_image import GrayImage


@pytest.fixture
def im1():
    """3x3 binaria: xox / xox / xxx"""
    return GrayImage(3, 3, "xoxxoxxxx")


@pytest.fixture
def gray45():
    """4x5 con todos los valores distintos, sirve para ver a donde va cada pixel."""
    img = GrayImage(4, 5)
    for y in range(4):
        for x in range(5):
            img[y, x] = 10*y + x + 1
    return img
