"""
Operaciones sobre GrayImage. Ninguna modifica la imagen de entrada.

  is_binary          | True si todos los pixeles son 0 o 255 (vacia -> False)
  threshold          | 0 si p < t, 255 si no
  translate          | mueve cada punto (y,x) a (y+dy, x+dx), lo que entra es negro
  binary_fill_holes  | rellena de blanco los huecos negros que no tocan el borde
  binary_background  | blanco solo donde el negro esta conectado con el borde

Conectividad 4: vecinos arriba, abajo, izquierda y derecha.
"""
from collections import deque

from grayimg.gray_image import ContractError, GrayImage

BLACK = 0
WHITE = 255


def _blank_like(image):
    if image.is_empty():
        return GrayImage()
    return GrayImage(image.height, image.width)


def is_binary(image):
    # una imagen vacia no es binaria
    if image.is_empty():
        return False
    for y in range(image.height):
        for x in range(image.width):
            p = image[y, x]
            if p != BLACK and p != WHITE:
                return False
    return True


def threshold(image, thr):
    """Pixeles menores que thr pasan a 0, el resto a 255."""
    out = _blank_like(image)
    for y in range(image.height):
        for x in range(image.width):
            out[y, x] = BLACK if image[y, x] < thr else WHITE
    return out


def translate(image, dy, dx):
    """
    Mueve cada punto (y, x) a (y+dy, x+dx) en una imagen nueva del mismo
    tamaño. Los puntos que vienen de afuera quedan negros.
    """
    if dy == 0 and dx == 0:
        return image.copy()
    h, w = image.height, image.width
    out = _blank_like(image)
    if abs(dx) >= w or abs(dy) >= h:
        return out
    for y in range(max(0, -dy), min(h, h - dy)):
        for x in range(max(0, -dx), min(w, w - dx)):
            out[y + dy, x + dx] = image[y, x]
    return out


def _border_background(image):
    """
    BFS desde todos los pixeles negros del borde.
    Devuelve un bytearray plano con 1 donde el negro llega al borde.
    """
    h, w = image.height, image.width
    seen = bytearray(h*w)
    queue = deque()
    for y in range(h):
        for x in range(w):
            if (y == 0 or y == h-1 or x == 0 or x == w-1) and image[y, x] == BLACK:
                seen[y*w + x] = 1
                queue.append((y, x))

    while queue:
        y, x = queue.popleft()
        for ny, nx in ((y-1, x), (y+1, x), (y, x-1), (y, x+1)):
            if not (0 <= ny < h and 0 <= nx < w):
                continue
            if seen[ny*w + nx] or image[ny, nx] != BLACK:
                continue
            seen[ny*w + nx] = 1
            queue.append((ny, nx))
    return seen


def _require_binary(image, name):
    if not image.is_empty() and not is_binary(image):
        raise ContractError(f"{name} solo acepta imagenes binarias")


def binary_fill_holes(image):
    """
    Fondo negro, objetos blancos. Un hueco es una componente negra que no
    toca el borde; en la salida todos los huecos quedan blancos.
    """
    _require_binary(image, "binary_fill_holes")
    out = image.copy()
    seen = _border_background(image)
    w = image.width
    for y in range(image.height):
        for x in range(w):
            if image[y, x] == BLACK and not seen[y*w + x]:
                out[y, x] = WHITE
    return out


def binary_background(image):
    """dst(y,x) = 255 sii src(y,x) = 0 y hay un camino de ceros hasta el borde."""
    _require_binary(image, "binary_background")
    out = _blank_like(image)
    seen = _border_background(image)
    w = image.width
    for y in range(image.height):
        for x in range(w):
            if seen[y*w + x]:
                out[y, x] = WHITE
    return out
