"""Command that prints a short demonstration of matrix operations."""

from __future__ import annotations

import argparse
import struct
import sys

from squaremat.matrix import SquareMat


def _single(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def main(argv: list[str] | None = None) -> int:
    """Print a demonstration of matrix construction and arithmetic."""
    parser = argparse.ArgumentParser(
        prog="squaremat", description="Demonstrate square matrix operations."
    )
    parser.parse_args(argv)

    out = sys.stdout

    m = SquareMat(4)
    m.fill(6)
    out.write(f"{m}\n")

    out.write(f"{SquareMat.identity(3)}\n")
    out.write(f"{SquareMat.diagonal(2, 5)}\n")

    a = SquareMat(3)
    b = SquareMat(3)
    a.fill(12)
    a[2][2] = 1.0
    b.fill(-3)
    b[0][0] = _single(0.5)
    b[2][1] = _single(12.0)
    b[1][0] = _single(-3.3)
    b[2][2] = _single(5.5)
    b[2][0] = 0.0

    out.write(f"a:\n{a}b:\n{b}")
    out.write("\n")

    out.write(f"3*a:\n{3 * a}")
    out.write(f"b%2:\n{b % 2}")
    out.write(f"a*b\n{a * b}")
    out.write("\n")

    out.write(f"det(-b):\n{(-b).det():g}")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())