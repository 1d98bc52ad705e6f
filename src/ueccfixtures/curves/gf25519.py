"""
Arithmetic in GF(2^255 - 19) on libuecc's unpacked representation.

A field element is a tuple of 32 words; word i carries weight 2^(8*i). Words
are unsigned 32-bit and every intermediate wraps modulo 2^32 exactly like
the C engine, so outputs are bit-identical to it, including the unreduced
ones. Pure Python; cythonized at build time.
"""

from __future__ import annotations

from typing import Iterable, Tuple

FieldElement = Tuple[int, ...]

_MASK32 = 0xFFFFFFFF

# Field prime p = 2^255 - 19
P_INT = 0x7FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFED


def field_element(words: Iterable[int]) -> FieldElement:
    """Build a field element from exactly 32 words, each reduced mod 2^32."""
    fe = tuple(w & _MASK32 for w in words)
    if len(fe) != 32:
        raise ValueError("field element must have 32 words")
    return fe


def from_bytes(data: bytes) -> FieldElement:
    """Unpack 32 little-endian bytes, one byte per word."""
    if len(data) != 32:
        raise ValueError("packed field element must be 32 bytes")
    return tuple(data)


def to_int(a: FieldElement) -> int:
    """Integer value of the word sequence (not reduced mod p)."""
    n = 0
    for j in range(31, -1, -1):
        n = (n << 8) + a[j]
    return n


def from_int(n: int) -> FieldElement:
    """Canonical representation of n mod p."""
    return from_bytes((n % P_INT).to_bytes(32, "little"))


ZERO: FieldElement = field_element([0] * 32)
ONE: FieldElement = field_element([1] + [0] * 31)
# 2^256 - p: adding it subtracts p modulo 2^256
MINUSP: FieldElement = field_element([19] + [0] * 30 + [128])
P: FieldElement = field_element([0xED] + [0xFF] * 30 + [0x7F])
MINUS1: FieldElement = field_element([0xEC] + [0xFF] * 30 + [0x7F])

# sqrt(-1) mod p
_RHO_S: FieldElement = from_bytes(
    bytes.fromhex(
        "b0a00e4a271beec478e42fad0618432fa7d7fb3d99004d2b0bdfc14f8024832b"
    )
)


def add(a: FieldElement, b: FieldElement) -> FieldElement:
    """a + b with carries; the top word keeps its overflow."""
    out = []
    u = 0
    for j in range(31):
        u = (u + a[j] + b[j]) & _MASK32
        out.append(u & 0xFF)
        u >>= 8
    out.append((u + a[31] + b[31]) & _MASK32)
    return tuple(out)


def sub(a: FieldElement, b: FieldElement) -> FieldElement:
    """a - b + 2p. b must be squeezed."""
    out = []
    u = 218
    for j in range(31):
        u = (u + a[j] + 0xFF00 - b[j]) & _MASK32
        out.append(u & 0xFF)
        u >>= 8
    out.append((u + a[31] - b[31]) & _MASK32)
    return tuple(out)


def _fold(out: list) -> FieldElement:
    # out[0..30] are bytes, out[31] holds everything above bit 248
    u = out[31]
    out[31] = u & 127
    u = (19 * (u >> 7)) & _MASK32
    for j in range(31):
        u = (u + out[j]) & _MASK32
        out[j] = u & 0xFF
        u >>= 8
    out[31] = (u + out[31]) & _MASK32
    return tuple(out)


def squeeze(a: FieldElement) -> FieldElement:
    """
    Carry and fold bits 255 and up back in as multiples of 19.

    The result is below 2p but not always below p.
    """
    out = []
    u = 0
    for j in range(31):
        u = (u + a[j]) & _MASK32
        out.append(u & 0xFF)
        u >>= 8
    out.append((u + a[31]) & _MASK32)
    return _fold(out)


def freeze(a: FieldElement) -> FieldElement:
    """
    Subtract p once when a squeezed value is >= p.

    Only the low byte of each word is meaningful afterwards.
    """
    out = add(a, MINUSP)
    negative = (0 - ((out[31] >> 7) & 1)) & _MASK32
    return tuple(out[j] ^ (negative & (a[j] ^ out[j])) for j in range(32))


def parity(a: FieldElement) -> int:
    """Lowest bit of the fully reduced value. a must be squeezed."""
    b = add(a, MINUSP)
    return (a[0] ^ (b[31] >> 7) ^ 1) & 1


def mult(a: FieldElement, b: FieldElement) -> FieldElement:
    """a * b, squeezed."""
    out = []
    for i in range(32):
        u = 0
        for j in range(i + 1):
            u += a[j] * b[i - j]
        for j in range(i + 1, 32):
            u += 38 * a[j] * b[i + 32 - j]
        out.append(u & _MASK32)
    return squeeze(out)


def mult_int(n: int, a: FieldElement) -> FieldElement:
    """n * a for an unsigned 32-bit n, squeezed."""
    if not 0 <= n <= _MASK32:
        raise ValueError("multiplier must be an unsigned 32-bit integer")
    out = []
    u = 0
    for j in range(31):
        u = (u + n * a[j]) & _MASK32
        out.append(u & 0xFF)
        u >>= 8
    out.append((u + n * a[31]) & _MASK32)
    return _fold(out)


def square(a: FieldElement) -> FieldElement:
    """a * a, squeezed. Same words as mult(a, a) with half the products."""
    out = []
    for i in range(32):
        u = 0
        j = 0
        while j < i - j:
            u += a[j] * a[i - j]
            j += 1
        j = i + 1
        while j < i + 32 - j:
            u += 38 * a[j] * a[i + 32 - j]
            j += 1
        u *= 2
        if (i & 1) == 0:
            h = i >> 1
            u += a[h] * a[h]
            u += 38 * a[h + 16] * a[h + 16]
        out.append(u & _MASK32)
    return squeeze(out)


def check_equal(a: FieldElement, b: FieldElement) -> int:
    """1 if the two word sequences are identical, else 0. No reduction."""
    differentbits = 0
    for i in range(32):
        d = a[i] ^ b[i]
        differentbits |= d & 0xFFFF
        differentbits |= d >> 16
    return 1 & (((differentbits - 1) & _MASK32) >> 16)


def is_zero(a: FieldElement) -> bool:
    """True for the two squeezed representations of zero (0 and p)."""
    return bool(check_equal(a, ZERO) | check_equal(a, P))


def select(a: FieldElement, b: FieldElement, flag: int) -> FieldElement:
    """a when flag == 0, b when flag == 1, without branching on flag."""
    bminus1 = (flag - 1) & _MASK32
    return tuple(b[j] ^ (bminus1 & (a[j] ^ b[j])) for j in range(32))


def _square_times(a: FieldElement, n: int) -> FieldElement:
    for _ in range(n):
        a = square(a)
    return a


def _pow_2_250_1(a: FieldElement) -> tuple:
    """Shared addition chain: returns (a^2, a^11, a^(2^250 - 1))."""
    a2 = square(a)
    t0 = _square_times(a2, 2)
    a9 = mult(t0, a)
    a11 = mult(a9, a2)
    t0 = square(a11)
    a2_5_0 = mult(t0, a9)
    a2_10_0 = mult(_square_times(a2_5_0, 5), a2_5_0)
    a2_20_0 = mult(_square_times(a2_10_0, 10), a2_10_0)
    a2_40_0 = mult(_square_times(a2_20_0, 20), a2_20_0)
    a2_50_0 = mult(_square_times(a2_40_0, 10), a2_10_0)
    a2_100_0 = mult(_square_times(a2_50_0, 50), a2_50_0)
    a2_200_0 = mult(_square_times(a2_100_0, 100), a2_100_0)
    a2_250_0 = mult(_square_times(a2_200_0, 50), a2_50_0)
    return (a2, a11, a2_250_0)


def recip(a: FieldElement) -> FieldElement:
    """a^(p - 2), the multiplicative inverse (0 maps to 0)."""
    _, a11, t = _pow_2_250_1(a)
    return mult(_square_times(t, 5), a11)


def sqrt(a: FieldElement) -> tuple:
    """
    Square root of a. Returns (root, ok); ok is False when a is not a square.

    The candidate is a^((p + 3) / 8); it is multiplied by sqrt(-1) when
    a^((p - 1) / 4) is -1.
    """
    a2, _, t = _pow_2_250_1(a)
    t0 = _square_times(t, 2)
    a2_252_1 = mult(t0, a2)
    t0 = mult(square(t0), a2)
    t1 = mult(t0, a)
    root = select(a2_252_1, mult(a2_252_1, _RHO_S), check_equal(t1, MINUS1))
    return (root, bool(check_equal(square(root), a)))


__all__: tuple[str, ...] = (
    "FieldElement",
    "MINUS1",
    "MINUSP",
    "ONE",
    "P",
    "P_INT",
    "ZERO",
    "add",
    "check_equal",
    "field_element",
    "freeze",
    "from_bytes",
    "from_int",
    "is_zero",
    "mult",
    "mult_int",
    "parity",
    "recip",
    "select",
    "sqrt",
    "square",
    "squeeze",
    "sub",
    "to_int",
)
