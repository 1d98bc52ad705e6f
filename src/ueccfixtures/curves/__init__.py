"""Reference arithmetic: GF(2^255 - 19), Ed25519 work points, scalars mod q."""

from . import ec25519, gf25519, scalar25519
from .ec25519 import BASE_ED25519, BASE_LEGACY, IDENTITY, WorkPoint
from .gf25519 import MINUSP, ONE, ZERO, FieldElement

__all__: tuple[str, ...] = (
    "BASE_ED25519",
    "BASE_LEGACY",
    "FieldElement",
    "IDENTITY",
    "MINUSP",
    "ONE",
    "WorkPoint",
    "ZERO",
    "ec25519",
    "gf25519",
    "scalar25519",
)
