"""
Modelo de referencia: aplica una operación a un PGM y guarda el resultado.

Operaciones:
  threshold          --t T
  translate          --dy DY --dx DX   (copia)
  translate-inplace  --dy DY --dx DX   (sin buffer auxiliar)
  fill-holes         solo imagenes binarias
  background         solo imagenes binarias
  is-binary          no escribe nada, imprime "binary" o "not binary"

Ejemplo:
  python3 -m grayimg.transform_ref --in vectors/patterns/rings.pgm \
    --op fill-holes --out vectors/golden/rings_filled.pgm
"""
import argparse
import sys

from grayimg.gray_image import ContractError, GrayImage
from grayimg.ops import (binary_background, binary_fill_holes, is_binary,
                         threshold, translate)

OPS = ["threshold", "translate", "translate-inplace", "fill-holes", "background", "is-binary"]


def apply_op(img, op, t=128, dy=0, dx=0):
    """Devuelve la imagen resultado de aplicar op a img."""
    if op == "threshold":
        return threshold(img, t)
    if op == "translate":
        return translate(img, dy, dx)
    if op == "translate-inplace":
        out = img.copy()
        out.translate_inplace(dy, dx)
        return out
    if op == "fill-holes":
        return binary_fill_holes(img)
    if op == "background":
        return binary_background(img)
    raise ValueError(f"operacion desconocida: {op}")


def main(argv=None):
    ap = argparse.ArgumentParser(description="Operaciones de referencia sobre PGM en gris 8-bit.")
    ap.add_argument("--in", required=True, help="PGM de entrada")
    ap.add_argument("--op", choices=OPS, required=True, help="operacion a aplicar")
    ap.add_argument("--t", type=int, default=128, help="umbral para threshold")
    ap.add_argument("--dy", type=int, default=0, help="desplazamiento vertical")
    ap.add_argument("--dx", type=int, default=0, help="desplazamiento horizontal")
    ap.add_argument("--out", help="PGM de salida")
    args = ap.parse_args(argv)

    img = GrayImage()
    if img.load_from_pgm(args.__dict__["in"]) != 0:
        return 1

    if args.op == "is-binary":
        print("binary" if is_binary(img) else "not binary")
        return 0

    if not args.out:
        ap.error("--out es obligatorio para esta operacion")

    try:
        out = apply_op(img, args.op, t=args.t, dy=args.dy, dx=args.dx)
    except ContractError as e:
        print(f"error en {args.op}: {e}", file=sys.stderr)
        return 1

    if out.save_to_pgm(args.out) != 0:
        return 1
    print(f"listo {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
