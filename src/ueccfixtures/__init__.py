"""
Conformance fixtures for libuecc-style Curve25519 arithmetic.

Runs a reference engine over a fixed catalog of named field and group
operations and stores each result as a byte-exact file, so that ports of the
arithmetic can be checked bit for bit. Pure Python; the arithmetic modules
are cythonized when built.
"""

from .__about__ import __version__
from .catalog import CASES, CHECKS, TEST_KEYS, Case, Check, case_names
from .errors import FixtureError, FixtureWriteError, KeyDecodeError
from .generate import generate, main, run_checks
from .oracle import LEGACY, Libuecc, Oracle
from .serde import (
    decode_field_element,
    decode_packed,
    decode_work_point,
    encode_field_element,
    encode_packed,
    encode_work_point,
)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Oracle
    "LEGACY",
    "Libuecc",
    "Oracle",
    # Catalog
    "CASES",
    "CHECKS",
    "TEST_KEYS",
    "Case",
    "Check",
    "case_names",
    # Serde
    "decode_field_element",
    "decode_packed",
    "decode_work_point",
    "encode_field_element",
    "encode_packed",
    "encode_work_point",
    # Driver
    "generate",
    "main",
    "run_checks",
    # Errors
    "FixtureError",
    "FixtureWriteError",
    "KeyDecodeError",
)
