"""
Imagen en gris de 8 bits, un byte por pixel, fila tras fila.

  0   negro
  255 blanco
  lo demás son grises

Coordenadas (y, x): y crece hacia abajo, x hacia la derecha, (0, 0) es la
esquina superior izquierda. Acceder fuera de [0,alto) x [0,ancho) es un
error de contrato (ContractError), no un error recuperable.
"""
import sys

from grayimg.utils import PgmError, read_pgm_bytes, write_pgm_bytes


class ContractError(AssertionError):
    """Precondicion violada: coordenadas, dimensiones o datos invalidos."""


def _require(cond, msg):
    if not cond:
        raise ContractError(msg)


class GrayImage:
    """
    GrayImage()            imagen vacia 0x0
    GrayImage(h, w)        imagen negra de h x w
    GrayImage(h, w, data)  imagen binaria desde un string plano, 'o' = 0 y
                           cualquier otro caracter = 255
    """

    def __init__(self, height=0, width=0, data=None):
        if height == 0 and width == 0 and data is None:
            self._height = 0
            self._width = 0
            self._data = bytearray()
            return
        _require(height > 0 and width > 0, f"dimensiones invalidas {height}x{width}")
        self._height = height
        self._width = width
        if data is None:
            self._data = bytearray(height*width)
        else:
            _require(len(data) == height*width,
                     f"data tiene {len(data)} caracteres, se esperaban {height*width}")
            self._data = bytearray(0 if ch == "o" else 255 for ch in data)

    @classmethod
    def from_bytes(cls, height, width, buf):
        """Crea la imagen copiando un buffer plano de height*width bytes."""
        _require(len(buf) == height*width, "el buffer no coincide con height*width")
        img = cls(height, width)
        img._data[:] = buf
        return img

    @classmethod
    def from_rows(cls, rows):
        """Crea la imagen desde una matriz [fila][columna]."""
        buf = bytearray()
        for fila in rows:
            _require(len(fila) == len(rows[0]), "filas de distinto largo")
            buf.extend(fila)
        return cls.from_bytes(len(rows), len(rows[0]) if rows else 0, buf)

    @property
    def height(self):
        return self._height

    @property
    def width(self):
        return self._width

    def get_height(self):
        return self._height

    def get_width(self):
        return self._width

    def is_empty(self):
        return self._height == 0 or self._width == 0

    def _offset(self, key):
        y, x = key
        _require(0 <= y < self._height, f"y fuera de rango: {y}")
        _require(0 <= x < self._width, f"x fuera de rango: {x}")
        return y*self._width + x

    def __getitem__(self, key):
        return self._data[self._offset(key)]

    def __setitem__(self, key, value):
        _require(0 <= value <= 255, f"valor fuera de 0..255: {value}")
        self._data[self._offset(key)] = value

    def fill(self, value):
        _require(0 <= value <= 255, f"valor fuera de 0..255: {value}")
        self._data[:] = bytes([value])*len(self._data)

    def resize(self, height, width):
        """Cambia el tamaño. El contenido se pierde, todo queda en negro."""
        _require(height > 0 and width > 0, f"dimensiones invalidas {height}x{width}")
        self._height = height
        self._width = width
        self._data = bytearray(height*width)

    def copy(self):
        img = GrayImage()
        img._height = self._height
        img._width = self._width
        img._data = bytearray(self._data)
        return img

    def tobytes(self):
        return bytes(self._data)

    def rows(self):
        """Devuelve la imagen como lista de listas [fila][columna]."""
        w = self._width
        return [list(self._data[r*w:(r+1)*w]) for r in range(self._height)]

    def __eq__(self, other):
        if not isinstance(other, GrayImage):
            return NotImplemented
        return (self._height == other._height
                and self._width == other._width
                and self._data == other._data)

    def __repr__(self):
        return f"GrayImage({self._height}x{self._width})"

    def to_string(self):
        """'x' para 255, 'o' para 0 y '?' para grises. Una linea por fila."""
        lineas = []
        w = self._width
        for r in range(self._height):
            fila = self._data[r*w:(r+1)*w]
            lineas.append("".join("x" if p == 255 else "o" if p == 0 else "?" for p in fila))
        return "\n".join(lineas)

    def print(self, file=None):
        # util para depurar algoritmos sobre imagenes binarias
        out = file if file is not None else sys.stdout
        for linea in self.to_string().splitlines():
            print(linea, file=out)

    def load_from_pgm(self, path):
        """
        Carga un PGM binario con max 255.
        Retorna 0 si salio bien y -1 si no; el motivo va a stderr.
        Si falla, la imagen queda como estaba.
        """
        try:
            w, h, buf = read_pgm_bytes(path)
        except OSError as e:
            print(f"no se pudo abrir para leer: {path} ({e.strerror})", file=sys.stderr)
            return -1
        except PgmError as e:
            print(f"error leyendo {path}: {e}", file=sys.stderr)
            return -1
        self.resize(h, w)
        self._data[:] = buf
        return 0

    def save_to_pgm(self, path):
        """Guarda como PGM binario con max 255. Retorna 0 o -1."""
        if self.is_empty():
            print(f"imagen vacia, no se escribe {path}", file=sys.stderr)
            return -1
        try:
            write_pgm_bytes(path, self._width, self._height, self._data)
        except OSError as e:
            print(f"no se pudo escribir: {path} ({e.strerror})", file=sys.stderr)
            return -1
        return 0

    def translate_inplace(self, dy, dx):
        """
        Mueve cada punto (y, x) a (y+dy, x+dx) sin buffer auxiliar.
        Lo que entra desde afuera de la imagen queda negro.

        Se trabaja sobre el indice plano: move = dy*ancho + dx y la fuente de
        cada destino d es d - move. Si move < 0 los datos van hacia indices
        menores y se recorre de adelante hacia atras; si no, de atras hacia
        adelante, asi nunca se pisa una fuente antes de leerla (como memmove).
        La fila de la fuente tiene que ser exactamente la fila destino - dy;
        si no, el dx la hizo saltar de fila y el destino va en negro.
        """
        if dy == 0 and dx == 0:
            return
        w = self._width
        n = len(self._data)
        data = self._data
        move = dy*w + dx
        if move < 0:
            indices = range(n)
        else:
            indices = range(n - 1, -1, -1)
        for dest in indices:
            source = dest - move
            if source < 0 or source >= n or source // w != dest // w - dy:
                data[dest] = 0
            else:
                data[dest] = data[source]
