"""
Genera imágenes de prueba en gris de 8 bits y las guarda en PGM (o RAW).

Patrones disponibles:
  - grad     gradiente horizontal de 0 a 255
  - checker  damero blanco y negro
  - rings    anillos cuadrados blancos y negros, sirve para probar huecos

Ejemplos:
  python3 -m grayimg.img2pgm --w 32 --h 32 --pattern grad --out vectors/patterns/grad_32x32.pgm
  python3 -m grayimg.img2pgm --w 16 --h 16 --pattern rings --cell 2 --out rings.pgm
"""
import argparse

from grayimg.gray_image import GrayImage
from grayimg.utils import write_pgm_u8, write_raw_u8


def _pattern(w, h, pixel):
    """GrayImage de h x w con pixel(y, x) en cada posicion."""
    img = GrayImage(h, w)
    for y in range(h):
        for x in range(w):
            img[y, x] = pixel(y, x)
    return img


def gen_grad(w, h):
    """Gradiente horizontal de 0 a 255, igual en todas las filas."""
    ultimo = max(1, w-1)
    return _pattern(w, h, lambda y, x: 255*x // ultimo)


def gen_checker(w, h, sz=8):
    """Damero con celdas de sz x sz, la de arriba a la izquierda blanca."""
    return _pattern(w, h, lambda y, x: 0 if (x//sz + y//sz) % 2 else 255)


def gen_rings(w, h, sz=1):
    """Anillos cuadrados concentricos de ancho sz, el de afuera negro."""
    def pixel(y, x):
        d = min(x, y, w-1-x, h-1-y)
        return 255 if (d//sz) % 2 == 1 else 0
    return _pattern(w, h, pixel)


PATTERNS = {
    "grad": lambda w, h, sz: gen_grad(w, h),
    "checker": gen_checker,
    "rings": gen_rings,
}


def main(argv=None):
    ap = argparse.ArgumentParser(description="Genera una imagen de prueba en gris de 8 bits.")
    ap.add_argument("--w", type=int, required=True, help="ancho de la imagen")
    ap.add_argument("--h", type=int, required=True, help="alto de la imagen")
    ap.add_argument("--pattern", choices=sorted(PATTERNS), default="grad", help="tipo de patrón")
    ap.add_argument("--cell", type=int, default=8, help="tamaño de celda para checker y rings")
    ap.add_argument("--raw", action="store_true", help="guardar RAW sin encabezado en vez de PGM")
    ap.add_argument("--out", required=True, help="ruta de salida")
    args = ap.parse_args(argv)

    if args.w <= 0 or args.h <= 0 or args.cell <= 0:
        ap.error("ancho, alto y celda tienen que ser positivos")

    img = PATTERNS[args.pattern](args.w, args.h, args.cell)
    if args.raw:
        write_raw_u8(args.out, img.rows())
    else:
        write_pgm_u8(args.out, img)
    print(f"listo {args.out}")


if __name__ == "__main__":
    main()
