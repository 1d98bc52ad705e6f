"""
Scalars modulo the group order q = 2^252 + 27742317777372353535851937790883648493.

All values are 32-byte little-endian strings. Outputs here are always the
canonical residue in [0, q); libuecc's own gf add/sub may leave a value that
is congruent but not fully reduced, so compare those mod q. None of these
feed a fixture.
"""

from __future__ import annotations

# Group order q (order of both generators)
Q = 0x1000000000000000000000000000000014DEF9DEA2F79CD65812631A5CF5D3ED


def _to_int(data: bytes) -> int:
    if len(data) != 32:
        raise ValueError("scalar must be 32 bytes")
    return int.from_bytes(data, "little")


def _to_bytes(n: int) -> bytes:
    return (n % Q).to_bytes(32, "little")


def gf_reduce(a: bytes) -> bytes:
    """a mod q."""
    return _to_bytes(_to_int(a))


def gf_is_zero(a: bytes) -> bool:
    """True iff a is a multiple of q."""
    return _to_int(a) % Q == 0


def gf_add(a: bytes, b: bytes) -> bytes:
    return _to_bytes(_to_int(a) + _to_int(b))


def gf_sub(a: bytes, b: bytes) -> bytes:
    return _to_bytes(_to_int(a) - _to_int(b))


def gf_mult(a: bytes, b: bytes) -> bytes:
    return _to_bytes(_to_int(a) * _to_int(b))


def gf_recip(a: bytes) -> bytes:
    """a^(q - 2) mod q; zero maps to zero."""
    return _to_bytes(pow(_to_int(a), Q - 2, Q))


def sanitize_secret(a: bytes) -> bytes:
    """
    Clamp a secret key: clear the three low bits and bit 255, set bit 254.

    See Bernstein, "Curve25519: new Diffie-Hellman speed records".
    """
    if len(a) != 32:
        raise ValueError("secret must be 32 bytes")
    out = bytearray(a)
    out[0] &= 0xF8
    out[31] &= 0x7F
    out[31] |= 0x40
    return bytes(out)


__all__: tuple[str, ...] = (
    "Q",
    "gf_add",
    "gf_is_zero",
    "gf_mult",
    "gf_recip",
    "gf_reduce",
    "gf_sub",
    "sanitize_secret",
)
