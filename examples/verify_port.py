"""
Compare a fixture directory against the reference catalog.

This is what a port's own test suite does with the fixtures: decode each file
by its layout and compare it with the expected value. Here the expected value
comes from the reference engine itself, so a directory written by an older
build (or by hand) can be checked for drift.

Run from repo root: PYTHONPATH=src python examples/verify_port.py [cases]
"""

import os
import sys

if getattr(sys, "frozen", False) is False:
    _root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    _src = os.path.join(_root, "src")
    if _src not in sys.path:
        sys.path.insert(0, _src)

from ueccfixtures import CASES, LEGACY, decode_field_element, decode_work_point
from ueccfixtures.serde import FIELD_ELEMENT_SIZE, WORK_POINT_SIZE

directory = sys.argv[1] if len(sys.argv) > 1 else "cases"

missing = []
mismatched = []
for case in CASES:
    path = os.path.join(directory, case.name)
    if not os.path.exists(path):
        missing.append(case.name)
        continue
    with open(path, "rb") as f:
        data = f.read()
    if data != case.run(LEGACY):
        mismatched.append(case.name)
        # decoded words make a mismatch readable
        if len(data) == FIELD_ELEMENT_SIZE:
            print(case.name, "=", [hex(w) for w in decode_field_element(data)])
        elif len(data) == WORK_POINT_SIZE:
            print(case.name, "X =", [hex(w) for w in decode_work_point(data).X])

print(f"{len(CASES) - len(missing)} fixtures checked in {directory}")
print("missing:   ", " ".join(missing) or "-")
print("mismatched:", " ".join(mismatched) or "-")
sys.exit(1 if mismatched else 0)
