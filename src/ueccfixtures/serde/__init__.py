"""Serialization / deserialization (serde): fixture byte layouts."""

from .fixture_codec import (
    FIELD_ELEMENT_SIZE,
    PACKED_SIZE,
    WORK_POINT_SIZE,
    decode_field_element,
    decode_packed,
    decode_work_point,
    encode_field_element,
    encode_packed,
    encode_work_point,
)

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
