"""
Compara dos imágenes PGM de 8 bits con el mismo tamaño y reporta:
- porcentaje de píxeles iguales
- diferencia máxima en LSB

Ejemplo:
  python3 pc/compare.py --a vectors/golden/rings_filled.pgm \
    --b results/rings_filled.pgm
"""
import argparse, os, sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from grayimg.gray_image import GrayImage

def stats(a, b):
    """(porcentaje de pixeles iguales, diferencia maxima) entre dos GrayImage."""
    difs = [abs(pa - pb) for pa, pb in zip(a.tobytes(), b.tobytes())]
    iguales = difs.count(0)
    return 100.0*iguales/len(difs), max(difs)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Comparador simple de imágenes PGM 8-bit.")
    ap.add_argument("--a", required=True, help="imagen A PGM")
    ap.add_argument("--b", required=True, help="imagen B PGM")
    args = ap.parse_args(argv)

    A = GrayImage(); B = GrayImage()
    # load_from_pgm ya deja el motivo en stderr
    if A.load_from_pgm(args.a) != 0 or B.load_from_pgm(args.b) != 0:
        return 1

    if (A.height, A.width) != (B.height, B.width):
        print(f"tamaños distintos  A {A.width}x{A.height}  B {B.width}x{B.height}")
        return 1

    pct, dmax = stats(A, B)
    print(f"iguales {pct:.2f}%")
    print(f"dif_max {dmax} LSB")
    print("OK" if dmax == 0 else "hay diferencias")
    return 0 if dmax == 0 else 2

if __name__ == "__main__":
    sys.exit(main())
