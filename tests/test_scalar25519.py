from __future__ import annotations

import pytest

from ueccfixtures.curves import scalar25519 as sc

Q = sc.Q

REDUCE_VECTORS = [
    (
        "b7f1ee9373416a49835747455ec4d287bcccc5a4bf8c38156483d46b35ce4dbd",
        "88d65e9551ff9f804d9aa344cd073ea2bbccc5a4bf8c38156483d46b35ce4d0d",
    ),
    (
        "f45151f5253c62de69c95935f083b5649876fdb661412d4f32065a7b018bf68b",
        "8cb2a20d5323cf1db7e29c1dfbb4bdbd9776fdb661412d4f32065a7b018bf60b",
    ),
    (
        "77f04111cf23a2831ad5ce51903577bff91b281780e445264368d1c78fab157f",
        "fc248986166e211b3e8b09dd79605e2df91b281780e445264368d1c78fab150f",
    ),
    (
        "82ce01315f33fac08cf774a8feb1054d933a94dc8aea9f96724ca553557b39a5",
        "4087678f575442502dd7c84a4cef4f7c923a94dc8aea9f96724ca553557b3905",
    ),
]


def _s(n: int) -> bytes:
    return n.to_bytes(32, "little")


def _n(b: bytes) -> int:
    return int.from_bytes(b, "little")


def test_order() -> None:
    assert Q == 2**252 + 27742317777372353535851937790883648493


@pytest.mark.parametrize("inp,out", REDUCE_VECTORS)
def test_gf_reduce(inp: str, out: str) -> None:
    assert sc.gf_reduce(bytes.fromhex(inp)).hex() == out


def test_gf_reduce_of_order_is_zero() -> None:
    assert sc.gf_reduce(_s(Q)) == bytes(32)
    assert sc.gf_is_zero(_s(Q))
    assert sc.gf_is_zero(bytes(32))
    assert not sc.gf_is_zero(_s(1))


def test_add_sub() -> None:
    assert sc.gf_add(_s(Q - 1), _s(2)) == _s(1)
    assert sc.gf_sub(_s(1), _s(2)) == _s(Q - 1)
    a, b = _s(0x1234 << 200), _s(Q - 77)
    assert sc.gf_sub(sc.gf_add(a, b), b) == sc.gf_reduce(a)


def test_outputs_are_canonical() -> None:
    top = _s(2**256 - 1)
    for out in (
        sc.gf_add(top, top),
        sc.gf_sub(bytes(32), top),
        sc.gf_mult(top, top),
    ):
        assert _n(out) < Q
    assert _n(sc.gf_add(top, bytes(32))) == (2**256 - 1) % Q


def test_mult_and_recip() -> None:
    assert sc.gf_mult(_s(Q - 1), _s(Q - 1)) == _s(1)
    a = _s(0xC0FFEE << 123)
    assert sc.gf_mult(a, sc.gf_recip(a)) == _s(1)
    assert sc.gf_recip(bytes(32)) == bytes(32)


def test_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        sc.gf_reduce(bytes(31))
    with pytest.raises(ValueError):
        sc.gf_add(bytes(32), bytes(33))
    with pytest.raises(ValueError):
        sc.sanitize_secret(bytes(16))


def test_sanitize_secret() -> None:
    out = sc.sanitize_secret(b"\xff" * 32)
    assert out[0] == 0xF8
    assert out[31] == 0x7F
    assert out[1:31] == b"\xff" * 30
    out = sc.sanitize_secret(bytes(32))
    assert _n(out) == 1 << 254
