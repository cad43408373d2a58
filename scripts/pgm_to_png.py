#!/usr/bin/env python3
"""
Convierte un PGM P5 a PNG para verlo facil.
Uso:
  python3 scripts/pgm_to_png.py salida.pgm salida.png [--scale 8]
"""

import argparse
import os
import sys

from PIL import Image

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from grayimg.utils import read_pgm_bytes


def pgm_to_pil(path, scale=1):
    w, h, buf = read_pgm_bytes(path)
    img = Image.frombytes("L", (w, h), bytes(buf))
    if scale > 1:
        # NEAREST para que los pixeles se vean como bloques
        img = img.resize((w*scale, h*scale), Image.NEAREST)
    return img


def main():
    ap = argparse.ArgumentParser(description="PGM P5 a PNG.")
    ap.add_argument("inp")
    ap.add_argument("out")
    ap.add_argument("--scale", type=int, default=1, help="agrandar cada pixel N veces")
    args = ap.parse_args()

    pgm_to_pil(args.inp, args.scale).save(args.out)
    print(f"listo {args.out}")

if __name__ == "__main__":
    main()
