#!/usr/bin/env python3
"""
Corre todas las pruebas que tenemos del lado de PC.
Valida:
 - tipo GrayImage y codec PGM (pytest)
 - operaciones threshold, translate, huecos y fondo (pytest)
 - herramientas de linea de comando de punta a punta
"""

import os
import subprocess
import sys
import tempfile

PY = sys.executable
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

def run(cmd):
    print(">>", " ".join(cmd))
    subprocess.check_call(cmd, cwd=ROOT)

def main():
    print("== Pruebas unitarias (pytest) ==")
    run([PY, "-m", "pytest", "-q", "tests"])

    with tempfile.TemporaryDirectory() as tmp:
        rings = os.path.join(tmp, "rings.pgm")
        filled = os.path.join(tmp, "filled.pgm")
        moved = os.path.join(tmp, "moved.pgm")
        moved_ip = os.path.join(tmp, "moved_ip.pgm")

        print("== Generar patron ==")
        run([PY, "-m", "grayimg.img2pgm", "--w", "16", "--h", "16",
             "--pattern", "rings", "--cell", "2", "--out", rings])

        print("== Rellenar huecos ==")
        run([PY, "-m", "grayimg.transform_ref", "--in", rings, "--op", "fill-holes", "--out", filled])

        print("== translate copia vs translate en sitio ==")
        for op, out in (("translate", moved), ("translate-inplace", moved_ip)):
            run([PY, "-m", "grayimg.transform_ref", "--in", rings, "--op", op,
                 "--dy", "3", "--dx", "-5", "--out", out])
        run([PY, "pc/compare.py", "--a", moved, "--b", moved_ip])

    print("== Suite de verificacion completada sin errores ==")

if __name__ == "__main__":
    main()
