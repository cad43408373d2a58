"""
Utilidades simples para leer y escribir imágenes en gris de 8 bits.

- RAW: solo datos, sin encabezado, una fila tras otra.
- PGM: formato P5 con encabezado "P5 ancho alto 255" y luego datos.

Funciones:
  read_raw_u8     | lee un RAW y lo devuelve como matriz [fila][columna]
  write_raw_u8    | escribe una matriz en un RAW
  read_pgm_bytes  | lee un PGM P5 y devuelve (ancho, alto, bytearray)
  write_pgm_bytes | escribe un buffer plano como PGM P5
  read_pgm_u8     | lee un PGM P5 como matriz [fila][columna]
  write_pgm_u8    | guarda una matriz o un GrayImage en PGM

Los errores de formato se reportan con PgmError. Los errores del sistema
de archivos salen como OSError, igual que open().
"""

MAXVAL = 255
_WHITESPACE = b" \t\r\n\v\f"


class PgmError(ValueError):
    """Archivo PGM mal formado o no soportado."""


def read_raw_u8(path, w, h):
    """RAW sin encabezado de w*h bytes -> matriz [fila][columna]."""
    with open(path, "rb") as f:
        buf = f.read()
    if len(buf) != w*h:
        raise ValueError(f"el RAW tiene {len(buf)} bytes, se esperaban {w}x{h}")
    return [list(buf[r*w:(r+1)*w]) for r in range(h)]


def write_raw_u8(path, img):
    """Escribe una imagen 2D (lista de listas) en formato RAW de 8 bits."""
    with open(path, "wb") as f:
        f.write(_flatten(img))


def _flatten(img):
    buf = bytearray()
    for fila in img:
        buf.extend(fila)
    return buf


def _next_token(data, pos):
    """Devuelve (token, posicion) saltando espacios y comentarios '#'."""
    n = len(data)
    while pos < n:
        c = data[pos:pos+1]
        if c in _WHITESPACE:
            pos += 1
        elif c == b"#":
            while pos < n and data[pos:pos+1] not in b"\r\n":
                pos += 1
        else:
            break
    start = pos
    while pos < n and data[pos:pos+1] not in _WHITESPACE and data[pos:pos+1] != b"#":
        pos += 1
    return data[start:pos], pos


def _parse_int(token, name):
    try:
        return int(token)
    except ValueError:
        raise PgmError(f"{name} invalido: {token!r}") from None


def read_pgm_bytes(path):
    """
    Lee un PGM binario (P5) con max 255.
    Retorna (w, h, buf) con buf de largo exacto w*h.
    """
    with open(path, "rb") as f:
        data = f.read()

    magic, pos = _next_token(data, 0)
    if magic != b"P5":
        raise PgmError(f"magic no reconocido: {magic.decode('latin-1')!r}")

    token, pos = _next_token(data, pos)
    w = _parse_int(token, "ancho")
    if w <= 0:
        raise PgmError(f"ancho invalido: {w}")

    token, pos = _next_token(data, pos)
    h = _parse_int(token, "alto")
    if h <= 0:
        raise PgmError(f"alto invalido: {h}")

    token, pos = _next_token(data, pos)
    maxval = _parse_int(token, "max")
    if maxval != MAXVAL:
        raise PgmError(f"solo se soporta max 255, vino {maxval}")

    # un solo espacio separa el encabezado de los datos
    pos += 1
    body = data[pos:pos + w*h]
    if len(body) != w*h:
        raise PgmError(f"datos incompletos: se esperaban {w*h} bytes, hay {len(body)}")
    return w, h, bytearray(body)


def write_pgm_bytes(path, w, h, buf):
    """Escribe un buffer plano de w*h bytes como PGM binario (P5)."""
    if len(buf) != w*h:
        raise PgmError("el buffer no coincide con w*h")
    header = f"P5\n{w} {h}\n{MAXVAL}\n".encode("ascii")
    with open(path, "wb") as f:
        f.write(header + bytes(buf))


def read_pgm_u8(path):
    """Lee un PGM binario (P5) y lo devuelve como lista de listas."""
    w, h, buf = read_pgm_bytes(path)
    data = list(buf)
    return [data[r*w:(r+1)*w] for r in range(h)]


def write_pgm_u8(path, img):
    """
    Guarda una imagen en PGM binario (P5). Sirve para visualizar rápido.
    img puede ser una matriz [fila][columna] o un GrayImage.
    """
    # import local: gray_image importa este modulo
    from grayimg.gray_image import GrayImage

    if isinstance(img, GrayImage):
        write_pgm_bytes(path, img.width, img.height, img.tobytes())
        return
    h = len(img)
    w = len(img[0])
    write_pgm_bytes(path, w, h, _flatten(img))
