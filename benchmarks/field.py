"""
Benchmark the reference arithmetic: field ops, group ops, full catalog run.

Run from repo root, against the pure-Python sources:

  PYTHONPATH=src python benchmarks/field.py

or after `pip install .` to time the cythonized build.
"""

from __future__ import annotations

import os
import sys
import tempfile
import time

_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_SRC = os.path.join(_REPO_ROOT, "src")
if _SRC not in sys.path:
    sys.path.append(_SRC)

import ueccfixtures.curves.ec25519 as ec
import ueccfixtures.curves.gf25519 as gf
from ueccfixtures import CASES, generate

A = gf.from_int(0x1234567890ABCDEF << 120)
B = gf.from_int(gf.P_INT - 0xFEDCBA)
SCALAR = bytes.fromhex(
    "83369beddca777585167520fb54a7fb059102bf4e0a46dd5fb1c633d83db77a2"
)


def _time_it(fn, *args, n: int = 200):
    # Warmup
    for _ in range(min(n, 10)):
        fn(*args)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args)
    return (time.perf_counter() - start) / n


def _compiled(module) -> bool:
    return not module.__file__.endswith(".py")


def main() -> None:
    print("Benchmark: ueccfixtures reference arithmetic")
    print(f"  gf25519 compiled: {_compiled(gf)}  ec25519 compiled: {_compiled(ec)}")
    print()

    print("field")
    for name, fn, args in (
        ("add", gf.add, (A, B)),
        ("sub", gf.sub, (A, B)),
        ("squeeze", gf.squeeze, (gf.sub(A, B),)),
        ("mult", gf.mult, (A, B)),
        ("square", gf.square, (A,)),
        ("mult_int", gf.mult_int, (0xFFFFFFFF, A)),
    ):
        t = _time_it(fn, *args, n=2000)
        print(f"  {name:<12} {t*1e6:8.2f} us")
    t = _time_it(gf.recip, A, n=20)
    print(f"  {'recip':<12} {t*1e3:8.2f} ms")
    print()

    print("group")
    base = ec.BASE_LEGACY
    for name, fn, args in (
        ("double", ec.point_double, (base,)),
        ("add", ec.point_add, (base, base)),
    ):
        t = _time_it(fn, *args, n=500)
        print(f"  {name:<12} {t*1e6:8.2f} us")
    t = _time_it(ec.scalarmult, SCALAR, base, n=3)
    print(f"  {'scalarmult':<12} {t*1e3:8.2f} ms")
    t = _time_it(ec.load_packed_legacy, SCALAR, n=10)
    print(f"  {'load_packed':<12} {t*1e3:8.2f} ms")
    print()

    with tempfile.TemporaryDirectory() as tmp, open(os.devnull, "w") as devnull:
        start = time.perf_counter()
        created = generate(os.path.join(tmp, "cases"), progress=devnull)
        elapsed = time.perf_counter() - start
    print(f"catalog: {len(created)}/{len(CASES)} fixtures in {elapsed:.2f} s")


if __name__ == "__main__":
    main()
