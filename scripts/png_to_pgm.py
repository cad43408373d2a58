#!/usr/bin/env python3
"""
Convierte un PNG (o cualquier formato que abra Pillow) a PGM P5 en gris.
Uso:
  python3 scripts/png_to_pgm.py input.png output.pgm [--size 64x64] [--threshold 128]
"""

import argparse
import os
import sys

from PIL import Image

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from grayimg.gray_image import GrayImage
from grayimg.ops import threshold


def parse_size(text):
    w, h = text.lower().split("x")
    return int(w), int(h)


def png_to_gray(path, size=None):
    """Abre la imagen con Pillow, la pasa a gris y la devuelve como GrayImage."""
    img = Image.open(path).convert("L")
    if size is not None:
        img = img.resize(size)
    return GrayImage.from_bytes(img.height, img.width, img.tobytes())


def main():
    ap = argparse.ArgumentParser(description="PNG a PGM P5 en gris 8-bit.")
    ap.add_argument("inp")
    ap.add_argument("out")
    ap.add_argument("--size", type=parse_size, default=None, help="WxH, por ejemplo 64x64")
    ap.add_argument("--threshold", type=int, default=None, help="binarizar con este umbral")
    args = ap.parse_args()

    gray = png_to_gray(args.inp, args.size)
    if args.threshold is not None:
        gray = threshold(gray, args.threshold)
    if gray.save_to_pgm(args.out) != 0:
        sys.exit(1)
    print(f"listo {args.out} ({gray.width}x{gray.height})")

if __name__ == "__main__":
    main()
