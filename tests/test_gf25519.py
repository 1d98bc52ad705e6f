"""Field arithmetic on the unpacked representation, word for word."""

from __future__ import annotations

import pytest

from ueccfixtures.curves import gf25519 as gf

P = gf.P_INT

TWO_P = (0xDA,) + (0xFF,) * 31
P_MINUS_1 = (0xEC,) + (0xFF,) * 30 + (0x7F,)


def _value(a) -> int:
    return gf.to_int(a) % P


def test_constants() -> None:
    assert gf.ZERO == (0,) * 32
    assert gf.ONE == (1,) + (0,) * 31
    assert gf.to_int(gf.MINUSP) == 2**256 - P
    assert gf.to_int(gf.P) == P
    assert gf.MINUS1 == P_MINUS_1


def test_field_element_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        gf.field_element([0] * 31)
    with pytest.raises(ValueError):
        gf.from_bytes(bytes(33))


def test_field_element_wraps_words() -> None:
    assert gf.field_element([-1] + [0] * 31)[0] == 0xFFFFFFFF


def test_add_words() -> None:
    assert gf.add(gf.ZERO, gf.ZERO) == gf.ZERO
    assert gf.add(gf.ZERO, gf.ONE) == gf.ONE
    assert gf.add(gf.ONE, gf.ONE) == (2,) + (0,) * 31
    assert gf.add(gf.ONE, gf.MINUSP) == (20,) + (0,) * 30 + (128,)


def test_add_keeps_top_overflow() -> None:
    out = gf.add(gf.MINUSP, gf.MINUSP)
    assert out == (38,) + (0,) * 30 + (256,)


def test_sub_adds_two_p() -> None:
    assert gf.sub(gf.ZERO, gf.ZERO) == TWO_P
    assert gf.sub(gf.ONE, gf.ONE) == TWO_P
    assert gf.sub(gf.ZERO, gf.ONE) == (0xD9,) + (0xFF,) * 31
    assert gf.sub(gf.ONE, gf.ZERO) == (0xDB,) + (0xFF,) * 31
    assert gf.sub(gf.ZERO, gf.MINUSP) == (0xC7,) + (0xFF,) * 30 + (0x7F,)


def test_squeeze() -> None:
    assert gf.squeeze(gf.ZERO) == gf.ZERO
    assert gf.squeeze(gf.ONE) == gf.ONE
    assert gf.squeeze(gf.sub(gf.ZERO, gf.ONE)) == P_MINUS_1
    # 2^255 + 19 folds to 38
    assert gf.squeeze(gf.MINUSP) == (38,) + (0,) * 31


def test_squeeze_propagates_carries() -> None:
    a = gf.field_element([0x1FF] * 32)
    out = gf.squeeze(a)
    assert all(w <= 0xFF for w in out[:31])
    assert _value(out) == _value(a)


def test_freeze() -> None:
    assert gf.freeze(gf.ZERO) == gf.ZERO
    assert gf.freeze(gf.ONE) == gf.ONE
    # the top word keeps the 2^256 carry; only low bytes are meaningful
    assert gf.freeze(gf.sub(gf.ZERO, gf.ONE)) == (0xEC,) + (0xFF,) * 30 + (0x17F,)


def test_freeze_collapses_p() -> None:
    frozen = gf.freeze(gf.P)
    assert [w & 0xFF for w in frozen] == [0] * 32


def test_freeze_collapses_minusp_plus_p() -> None:
    # 2^256: all low bytes zero, the top word keeps 256
    frozen = gf.freeze(gf.add(gf.MINUSP, gf.P))
    assert [w & 0xFF for w in frozen] == [0] * 32


@pytest.mark.parametrize("x", [gf.ZERO, gf.ONE, gf.MINUSP])
def test_additive_identity(x) -> None:
    assert gf.freeze(gf.add(gf.ZERO, x)) == gf.freeze(x)
    frozen = gf.freeze(gf.squeeze(gf.sub(x, gf.ZERO)))
    assert gf.to_int(tuple(w & 0xFF for w in frozen)) == _value(x)


def test_freeze_of_minusp_is_38() -> None:
    frozen = gf.freeze(gf.squeeze(gf.MINUSP))
    assert frozen == (38,) + (0,) * 31


def test_parity() -> None:
    assert gf.parity(gf.squeeze(gf.ZERO)) == 0
    assert gf.parity(gf.squeeze(gf.ONE)) == 1
    assert gf.parity(gf.squeeze(gf.MINUSP)) == 0
    assert gf.parity(gf.squeeze(gf.sub(gf.ZERO, gf.ONE))) == 0
    assert gf.parity(gf.freeze(gf.ONE)) == 1
    assert gf.parity(gf.freeze(gf.ZERO)) == 0


def test_mult() -> None:
    assert gf.mult(gf.ZERO, gf.ONE) == gf.ZERO
    assert gf.mult(gf.ONE, gf.ONE) == gf.ONE
    # 38^2 = 1444 = 0x05a4
    assert gf.mult(gf.MINUSP, gf.MINUSP) == (0xA4, 0x05) + (0,) * 30


def test_mult_matches_integers() -> None:
    a = gf.from_int(0x1234567890ABCDEF << 100)
    b = gf.from_int(P - 12345)
    assert _value(gf.mult(a, b)) == _value(a) * _value(b) % P


def test_square_matches_mult() -> None:
    a = gf.sub(gf.from_int(987654321 << 200), gf.ONE)
    assert gf.square(a) == gf.mult(a, a)
    assert gf.square(gf.MINUSP) == gf.mult(gf.MINUSP, gf.MINUSP)


def test_mult_int() -> None:
    assert gf.mult_int(0, gf.ONE) == gf.ZERO
    assert gf.mult_int(1, gf.ONE) == gf.ONE
    assert gf.mult_int(0xFFFFFFFF, gf.ZERO) == gf.ZERO
    assert gf.mult_int(0xFFFFFFFF, gf.ONE) == (0xFF,) * 4 + (0,) * 28


def test_mult_int_rejects_out_of_range() -> None:
    with pytest.raises(ValueError):
        gf.mult_int(-1, gf.ONE)
    with pytest.raises(ValueError):
        gf.mult_int(2**32, gf.ONE)


def test_check_equal_is_word_wise() -> None:
    assert gf.check_equal(gf.ZERO, gf.ZERO) == 1
    assert gf.check_equal(gf.ZERO, gf.ONE) == 0
    assert gf.check_equal(gf.ONE, gf.ONE) == 1
    assert gf.check_equal(gf.ZERO, gf.MINUSP) == 0
    # same residue, different words
    assert gf.check_equal(gf.ZERO, gf.P) == 0
    high = gf.field_element([0x10000] + [0] * 31)
    assert gf.check_equal(high, gf.ZERO) == 0


def test_is_zero() -> None:
    assert gf.is_zero(gf.ZERO)
    assert not gf.is_zero(gf.ONE)
    assert gf.is_zero(gf.P)
    assert not gf.is_zero(gf.MINUSP)


@pytest.mark.parametrize("a,b", [(gf.ZERO, gf.ONE), (gf.ONE, gf.MINUSP), (gf.P, gf.MINUS1)])
def test_select(a, b) -> None:
    assert gf.select(a, b, 0) == a
    assert gf.select(a, b, 1) == b


def test_recip() -> None:
    for n in (1, 2, 38, P - 1, 0xDEADBEEF << 128):
        a = gf.from_int(n)
        assert _value(gf.mult(a, gf.recip(a))) == 1
    assert _value(gf.recip(gf.ZERO)) == 0


def test_sqrt() -> None:
    # large residues only: a squeezed square of a tiny residue may come out as r + p
    for n in (P - 1, P - 4, (2**126 + 12345) ** 2):
        root, ok = gf.sqrt(gf.from_int(n))
        assert ok
        assert _value(root) ** 2 % P == n % P


def test_sqrt_of_non_square() -> None:
    # 2 is not a square since p = 5 mod 8
    _, ok = gf.sqrt(gf.from_int(2))
    assert not ok


def test_from_int_round_trip() -> None:
    n = 0x0123456789ABCDEF0123456789ABCDEF
    assert gf.to_int(gf.from_int(n)) == n
    assert gf.from_int(P) == gf.ZERO
