"""
Fixture byte layouts. Fixed width, little-endian words, no framing: the file
name alone identifies what a fixture holds.

    field element  32 words x 4 bytes            128 bytes
    work point     X || Y || Z || T              512 bytes
    packed         32 bytes as produced          32 bytes
"""

from __future__ import annotations

from ..curves.ec25519 import WorkPoint
from ..curves.gf25519 import FieldElement

FIELD_ELEMENT_SIZE = 128
WORK_POINT_SIZE = 4 * FIELD_ELEMENT_SIZE
PACKED_SIZE = 32


def encode_field_element(fe: FieldElement) -> bytes:
    """
    Encode 32 words as 128 bytes.

    Args:
        fe: 32 words, unsigned 32-bit or signed 32-bit (written two's complement).

    Returns:
        128 bytes, word 0 first, each word little-endian.
    """
    if len(fe) != 32:
        raise ValueError("field element must have 32 words")
    buf = bytearray()
    for w in fe:
        if not -0x80000000 <= w <= 0xFFFFFFFF:
            raise ValueError(f"word {w:#x} does not fit in 32 bits")
        buf.extend((w & 0xFFFFFFFF).to_bytes(4, "little"))
    return bytes(buf)


def encode_work_point(p: WorkPoint) -> bytes:
    """Encode X, Y, Z, T in that order (512 bytes)."""
    return b"".join(encode_field_element(c) for c in (p.X, p.Y, p.Z, p.T))


def encode_packed(data: bytes) -> bytes:
    """Packed scalars and points are written verbatim (32 bytes)."""
    if len(data) != PACKED_SIZE:
        raise ValueError("packed encoding must be 32 bytes")
    return bytes(data)


def decode_field_element(data: bytes) -> FieldElement:
    """Inverse of encode_field_element; words come back unsigned."""
    if len(data) != FIELD_ELEMENT_SIZE:
        raise ValueError(f"field element fixture must be {FIELD_ELEMENT_SIZE} bytes")
    return tuple(int.from_bytes(data[i : i + 4], "little") for i in range(0, 128, 4))


def decode_work_point(data: bytes) -> WorkPoint:
    if len(data) != WORK_POINT_SIZE:
        raise ValueError(f"work point fixture must be {WORK_POINT_SIZE} bytes")
    return WorkPoint(
        *(
            decode_field_element(data[i : i + FIELD_ELEMENT_SIZE])
            for i in range(0, WORK_POINT_SIZE, FIELD_ELEMENT_SIZE)
        )
    )


def decode_packed(data: bytes) -> bytes:
    if len(data) != PACKED_SIZE:
        raise ValueError(f"packed fixture must be {PACKED_SIZE} bytes")
    return bytes(data)


__all__: tuple[str, ...] = (
    "FIELD_ELEMENT_SIZE",
    "PACKED_SIZE",
    "WORK_POINT_SIZE",
    "decode_field_element",
    "decode_packed",
    "decode_work_point",
    "encode_field_element",
    "encode_packed",
    "encode_work_point",
)
