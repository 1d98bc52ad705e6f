"""
The arithmetic engine as seen by the fixture catalog.

`Oracle` is the contract a catalog case may rely on; `Libuecc` binds it to
the reference arithmetic in `ueccfixtures.curves` with libuecc's legacy point
format, and `LEGACY` is the shared instance the generator uses by default.
"""

from __future__ import annotations

from typing import Optional, Protocol

from .curves import ec25519, gf25519
from .curves.ec25519 import WorkPoint
from .curves.gf25519 import FieldElement


class Oracle(Protocol):
    zero: FieldElement
    one: FieldElement
    minusp: FieldElement
    identity: WorkPoint
    base: WorkPoint

    def add(self, a: FieldElement, b: FieldElement) -> FieldElement: ...

    def sub(self, a: FieldElement, b: FieldElement) -> FieldElement: ...

    def mult(self, a: FieldElement, b: FieldElement) -> FieldElement: ...

    def mult_int(self, k: int, a: FieldElement) -> FieldElement: ...

    def square(self, a: FieldElement) -> FieldElement: ...

    def squeeze(self, a: FieldElement) -> FieldElement: ...

    def freeze(self, a: FieldElement) -> FieldElement: ...

    def parity(self, a: FieldElement) -> int: ...

    def select(self, a: FieldElement, b: FieldElement, flag: int) -> FieldElement: ...

    def check_equal(self, a: FieldElement, b: FieldElement) -> int: ...

    def load_packed(self, key: bytes) -> Optional[WorkPoint]: ...

    def store_packed(self, point: WorkPoint) -> bytes: ...

    def scalarmult_bits(self, scalar: bytes, point: WorkPoint, bits: int) -> WorkPoint: ...

    def ecc_25519_add(self, p: WorkPoint, q: WorkPoint) -> WorkPoint: ...

    def ecc_25519_double(self, p: WorkPoint) -> WorkPoint: ...


class Libuecc:
    """Reference engine, legacy packing and the legacy generator as `base`."""

    zero = gf25519.ZERO
    one = gf25519.ONE
    minusp = gf25519.MINUSP
    identity = ec25519.IDENTITY
    base = ec25519.BASE_LEGACY

    add = staticmethod(gf25519.add)
    sub = staticmethod(gf25519.sub)
    mult = staticmethod(gf25519.mult)
    mult_int = staticmethod(gf25519.mult_int)
    square = staticmethod(gf25519.square)
    squeeze = staticmethod(gf25519.squeeze)
    freeze = staticmethod(gf25519.freeze)
    parity = staticmethod(gf25519.parity)
    select = staticmethod(gf25519.select)
    check_equal = staticmethod(gf25519.check_equal)

    load_packed = staticmethod(ec25519.load_packed_legacy)
    store_packed = staticmethod(ec25519.store_packed_legacy)
    scalarmult_bits = staticmethod(ec25519.scalarmult_bits)
    ecc_25519_add = staticmethod(ec25519.point_add)
    ecc_25519_double = staticmethod(ec25519.point_double)

    def __repr__(self) -> str:
        return "Libuecc(legacy)"


LEGACY: Oracle = Libuecc()

__all__: tuple[str, ...] = ("LEGACY", "Libuecc", "Oracle")
