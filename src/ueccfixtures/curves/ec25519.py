"""
Group operations on the Ed25519 curve in extended coordinates (X, Y, Z, T),
plus packing for both libuecc point formats.

Work points always hold Ed25519 coordinates. The legacy curve

    486664 x^2 + y^2 = 1 + 486660 x^2 y^2

shares y with Ed25519 and scales x by a constant; the legacy format packs x
with the parity of y, the Ed25519 format packs y with the parity of x.
"""

from __future__ import annotations

from collections import namedtuple
from typing import Optional, Tuple

from .gf25519 import (
    ONE,
    ZERO,
    FieldElement,
    add,
    field_element,
    freeze,
    from_bytes,
    is_zero,
    mult,
    mult_int,
    parity,
    recip,
    select,
    sqrt,
    square,
    squeeze,
    sub,
)

WorkPoint = namedtuple("WorkPoint", ["X", "Y", "Z", "T"])

# Multiply a legacy x by this to get the Ed25519 x
_LEGACY_TO_ED25519: FieldElement = from_bytes(
    bytes.fromhex(
        "e781ba0055fb91337de582b42e2c5e3a81b003fc23f7842d44f95f9f0b12d970"
    )
)
# Multiply an Ed25519 x by this to get the legacy x
_ED25519_TO_LEGACY: FieldElement = from_bytes(
    bytes.fromhex(
        "e96842dbaf04b440a1d543f2f9383128011705679b8161f8a95b3e6a20674b24"
    )
)
# Legacy curve constant a, kept in a single word as the engine does
_LEGACY_A: FieldElement = field_element([486664] + [0] * 31)

IDENTITY = WorkPoint(ZERO, ONE, ONE, ZERO)

# Ed25519 generator: y = 4/5, x even
BASE_ED25519 = WorkPoint(
    from_bytes(
        bytes.fromhex(
            "1ad5258f602d56c9b2a7259560c72c695cdcd6fd31e2a4c0fe536ecdd3366921"
        )
    ),
    from_bytes(
        bytes.fromhex(
            "5866666666666666666666666666666666666666666666666666666666666666"
        )
    ),
    ONE,
    from_bytes(
        bytes.fromhex(
            "a3ddb7a5b38ade6df5525177809ff0207de3ab648e4eea6665768bd70f5f8767"
        )
    ),
)

# libuecc's legacy generator (x = 9/v on the legacy curve) lands on the very
# same work point words once mapped to Ed25519 coordinates
BASE_LEGACY = WorkPoint(BASE_ED25519.X, BASE_ED25519.Y, BASE_ED25519.Z, BASE_ED25519.T)


def work_point(x: FieldElement, y: FieldElement, z: FieldElement, t: FieldElement) -> WorkPoint:
    """Build a work point, checking every coordinate has 32 words."""
    return WorkPoint(field_element(x), field_element(y), field_element(z), field_element(t))


def point_select(p: WorkPoint, q: WorkPoint, flag: int) -> WorkPoint:
    """p when flag == 0, q when flag == 1, coordinate-wise and branch-free."""
    return WorkPoint(
        select(p.X, q.X, flag),
        select(p.Y, q.Y, flag),
        select(p.Z, q.Z, flag),
        select(p.T, q.T, flag),
    )


def point_double(p: WorkPoint) -> WorkPoint:
    """2 * p (dbl-2008-hwcd, a = -1)."""
    A = square(p.X)
    B = square(p.Y)
    C = mult_int(2, square(p.Z))
    D = sub(ZERO, A)
    E = sub(sub(square(add(p.X, p.Y)), A), B)
    G = add(D, B)
    F = sub(G, C)
    H = sub(D, B)
    return WorkPoint(mult(E, F), mult(G, H), mult(F, G), mult(E, H))


def point_add(p: WorkPoint, q: WorkPoint) -> WorkPoint:
    """
    p + q (add-2008-hwcd-3, a = -1).

    Every product is scaled by 60833 so that 2d becomes the small integer
    -121665 and only mult_int is needed for the curve constant.
    """
    A = mult(sub(q.Y, q.X), mult_int(60833, sub(p.Y, p.X)))
    B = mult(add(q.Y, q.X), mult_int(60833, add(p.Y, p.X)))
    C = mult(p.T, mult_int(121665, q.T))
    D = mult(p.Z, mult_int(2 * 60833, q.Z))
    E = sub(B, A)
    F = add(D, C)
    G = sub(D, C)
    H = add(B, A)
    return WorkPoint(mult(E, F), mult(G, H), mult(F, G), mult(E, H))


def point_negate(p: WorkPoint) -> WorkPoint:
    """-p. X and T must be squeezed."""
    return WorkPoint(sub(ZERO, p.X), p.Y, p.Z, sub(ZERO, p.T))


def point_sub(p: WorkPoint, q: WorkPoint) -> WorkPoint:
    return point_add(p, point_negate(q))


def point_is_identity(p: WorkPoint) -> bool:
    return is_zero(squeeze(p.X)) and is_zero(squeeze(sub(p.Y, p.Z)))


def scalarmult_bits(n: bytes, p: WorkPoint, bits: int) -> WorkPoint:
    """
    n * p using only the low `bits` bits of the little-endian scalar n.

    bits is clamped to 256 and must not depend on secret data.
    """
    if len(n) != 32:
        raise ValueError("scalar must be 32 bytes")
    if bits > 256:
        bits = 256
    cur = IDENTITY
    for pos in range(bits - 1, -1, -1):
        b = (n[pos >> 3] >> (pos & 7)) & 1
        q2 = point_double(cur)
        cur = point_select(q2, point_add(q2, p), b)
    return cur


def scalarmult(n: bytes, p: WorkPoint) -> WorkPoint:
    return scalarmult_bits(n, p, 256)


def _check_legacy_xy(x: FieldElement, y: FieldElement) -> bool:
    """Whether (x, y) satisfies the legacy curve equation."""
    x2 = square(x)
    y2 = square(y)
    lhs = add(mult_int(486664, x2), y2)
    rhs = add(ONE, mult(mult_int(486660, x2), y2))
    return is_zero(squeeze(sub(lhs, rhs)))


def load_xy_legacy(x: bytes, y: bytes) -> Optional[WorkPoint]:
    """Work point from legacy affine coordinates; None if not on the curve."""
    x_legacy = from_bytes(x)
    Y = from_bytes(y)
    if not _check_legacy_xy(x_legacy, Y):
        return None
    X = mult(x_legacy, _LEGACY_TO_ED25519)
    return WorkPoint(X, Y, ONE, mult(X, Y))


def load_xy_ed25519(x: bytes, y: bytes) -> Optional[WorkPoint]:
    """Work point from Ed25519 affine coordinates; None if not on the curve."""
    X = squeeze(from_bytes(x))
    Y = from_bytes(y)
    if not _check_legacy_xy(mult(X, _ED25519_TO_LEGACY), Y):
        return None
    return WorkPoint(X, Y, ONE, mult(X, Y))


def _affine(p: WorkPoint) -> Tuple[FieldElement, FieldElement]:
    z = recip(p.Z)
    return (mult(z, p.X), mult(z, p.Y))


def _low_bytes(a: FieldElement) -> bytes:
    return bytes(w & 0xFF for w in a)


def store_xy_legacy(p: WorkPoint) -> Tuple[bytes, bytes]:
    """Legacy affine (x, y), fully reduced, 32 bytes each."""
    x, y = _affine(p)
    return (_low_bytes(freeze(mult(x, _ED25519_TO_LEGACY))), _low_bytes(freeze(y)))


def store_xy_ed25519(p: WorkPoint) -> Tuple[bytes, bytes]:
    """Ed25519 affine (x, y), fully reduced, 32 bytes each."""
    x, y = _affine(p)
    return (_low_bytes(freeze(x)), _low_bytes(freeze(y)))


def load_packed_legacy(data: bytes) -> Optional[WorkPoint]:
    """
    Unpack a legacy encoding: x in bits 0..254, parity of y in bit 255.

    Returns None when no y exists for x.
    """
    xb = list(from_bytes(data))
    xb[31] &= 0x7F
    x_legacy = tuple(xb)

    x2 = square(x_legacy)
    y2 = mult(sub(ONE, mult_int(486664, x2)), recip(sub(ONE, mult_int(486660, x2))))
    Y, ok = sqrt(y2)
    if not ok:
        return None

    # sub from zero needs no squeeze when the subtrahend is squeezed
    Y = select(Y, sub(ZERO, Y), (data[31] >> 7) ^ parity(Y))
    X = mult(x_legacy, _LEGACY_TO_ED25519)
    return WorkPoint(X, Y, ONE, mult(X, Y))


def load_packed_ed25519(data: bytes) -> Optional[WorkPoint]:
    """
    Unpack an Ed25519 encoding: y in bits 0..254, parity of x in bit 255.

    Returns None when no x exists for y.
    """
    y = list(from_bytes(data))
    y[31] &= 0x7F
    Y = tuple(y)

    y2 = square(Y)
    x2 = mult(sub(ONE, y2), recip(sub(_LEGACY_A, mult_int(486660, y2))))
    x_legacy, ok = sqrt(x2)
    if not ok:
        return None

    X = mult(x_legacy, _LEGACY_TO_ED25519)
    X = select(X, sub(ZERO, X), (data[31] >> 7) ^ parity(X))
    return WorkPoint(X, Y, ONE, mult(X, Y))


def store_packed_legacy(p: WorkPoint) -> bytes:
    x, y = store_xy_legacy(p)
    out = bytearray(x)
    out[31] |= (y[0] << 7) & 0xFF
    return bytes(out)


def store_packed_ed25519(p: WorkPoint) -> bytes:
    x, y = store_xy_ed25519(p)
    out = bytearray(y)
    out[31] |= (x[0] << 7) & 0xFF
    return bytes(out)


__all__: tuple[str, ...] = (
    "BASE_ED25519",
    "BASE_LEGACY",
    "IDENTITY",
    "WorkPoint",
    "load_packed_ed25519",
    "load_packed_legacy",
    "load_xy_ed25519",
    "load_xy_legacy",
    "point_add",
    "point_double",
    "point_is_identity",
    "point_negate",
    "point_select",
    "point_sub",
    "scalarmult",
    "scalarmult_bits",
    "store_packed_ed25519",
    "store_packed_legacy",
    "store_xy_ed25519",
    "store_xy_legacy",
    "work_point",
)
