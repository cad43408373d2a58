#!/usr/bin/env python3
"""
Muestra los pixeles donde A y B difieren y la diferencia.
Uso:
  python3 scripts/diff_pixels.py --a golden.pgm --b salida.pgm
"""

import argparse
import os
import sys

# agregar la carpeta raiz del repo al path para poder importar grayimg
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from grayimg.gray_image import GrayImage


def diff_pixels(A, B):
    """Lista de (y, x, a, b, b-a) para cada pixel distinto entre dos GrayImage."""
    diffs = []
    for y in range(A.height):
        for x in range(A.width):
            va = A[y, x]
            vb = B[y, x]
            if va != vb:
                diffs.append((y, x, va, vb, vb - va))
    return diffs


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--a", required=True, help="imagen A PGM (golden)")
    ap.add_argument("--b", required=True, help="imagen B PGM (salida)")
    args = ap.parse_args(argv)

    A = GrayImage()
    B = GrayImage()
    if A.load_from_pgm(args.a) != 0 or B.load_from_pgm(args.b) != 0:
        return 1
    if (A.height, A.width) != (B.height, B.width):
        print("las imagenes tienen tamaños distintos", file=sys.stderr)
        return 1

    diffs = diff_pixels(A, B)
    print(f"total pixeles distintos: {len(diffs)}")
    for y, x, va, vb, d in diffs:
        print(f"(y={y}, x={x}) golden={va:02x} out={vb:02x} diff={d}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
