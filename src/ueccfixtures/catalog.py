"""
The fixture catalog: every named case, what it computes, and how it is encoded.

Cases are data. Each `Case` pairs a fixture name with a closure over oracle
operations and the codec function for its result; each `Check` is a value
printed during generation and never persisted. Operand labels in names are
`0` (zero), `1` (one) and `minusp`.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Any, Callable

from .errors import KeyDecodeError
from .oracle import Oracle
from .serde import encode_field_element, encode_packed, encode_work_point

MAX32 = 0xFFFFFFFF

# Test keys: valid legacy point encodings, also used as 256-bit scalars
TEST_KEYS: tuple[bytes, ...] = (
    bytes.fromhex("83369beddca777585167520fb54a7fb059102bf4e0a46dd5fb1c633d83db77a2"),
    bytes.fromhex("b4dbdb0c05dd28204534fa27c5afca4dcda5397d833e3064f7a7281b249dc7c7"),
    bytes.fromhex("346a11a8bd8fcedfcde2e19c996b6e4497d0dafc3f5af7096c915bd0f9fe4fe9"),
    bytes.fromhex("3bac2ada2fbfa1ea75b2cb214490d5d718f1bbe5b226184488c07cf1a551e8d9"),
)


@dataclass(frozen=True)
class Case:
    name: str
    compute: Callable[[Oracle], Any]
    encode: Callable[[Any], bytes]

    def run(self, oracle: Oracle) -> bytes:
        """Compute this case against `oracle` and return the fixture bytes."""
        return self.encode(self.compute(oracle))


@dataclass(frozen=True)
class Check:
    name: str
    evaluate: Callable[[Oracle], int]


def _operand(label: str) -> Callable[[Oracle], Any]:
    attr = {"0": "zero", "1": "one", "minusp": "minusp"}[label]
    return lambda o: getattr(o, attr)


def _fe(name: str, compute: Callable[[Oracle], Any]) -> Case:
    return Case(name, compute, encode_field_element)


def _constants() -> list[Case]:
    return [
        _fe("one", lambda o: o.one),
        _fe("zero", lambda o: o.zero),
        _fe("minusp", lambda o: o.minusp),
    ]


def _binary(op: str) -> list[Case]:
    """op_{a}_{b} for a in {0,1}, b in {0,1,minusp}."""
    cases = []
    for a, b in list(product("01", "01")) + [("0", "minusp"), ("1", "minusp")]:
        x, y = _operand(a), _operand(b)
        cases.append(
            _fe(f"{op}_{a}_{b}", lambda o, x=x, y=y: getattr(o, op)(x(o), y(o)))
        )
    return cases


def _composed(first: str, then: str) -> list[Case]:
    """{then}_{first}_{a}_{b}_{c}: then(first(a, b), c) for a, b, c in {0,1}."""
    cases = []
    for a, b, c in product("01", repeat=3):
        x, y, z = _operand(a), _operand(b), _operand(c)
        cases.append(
            _fe(
                f"{then}_{first}_{a}_{b}_{c}",
                lambda o, x=x, y=y, z=z: getattr(o, then)(
                    getattr(o, first)(x(o), y(o)), z(o)
                ),
            )
        )
    return cases


def _reductions() -> list[Case]:
    cases = []
    for op in ("squeeze", "freeze"):
        cases += [
            _fe(f"{op}_zero", lambda o, op=op: getattr(o, op)(o.zero)),
            _fe(f"{op}_one", lambda o, op=op: getattr(o, op)(o.one)),
            # zero - one exercises the borrow path
            _fe(f"{op}_sub_0_1", lambda o, op=op: getattr(o, op)(o.sub(o.zero, o.one))),
        ]
    return cases


def _multiplications() -> list[Case]:
    cases = []
    for a, b in product("01", repeat=2):
        x, y = _operand(a), _operand(b)
        cases.append(_fe(f"mult_{a}_{b}", lambda o, x=x, y=y: o.mult(x(o), y(o))))
    cases.append(_fe("mult_minusp_minusp", lambda o: o.mult(o.minusp, o.minusp)))

    for k_label, k in (("0", 0), ("1", 1), ("max", MAX32)):
        for a in "01":
            x = _operand(a)
            cases.append(
                _fe(f"mult_int_{a}_{k_label}", lambda o, x=x, k=k: o.mult_int(k, x(o)))
            )

    for a in ("0", "1", "minusp"):
        x = _operand(a)
        cases.append(_fe(f"square_{a}", lambda o, x=x: o.square(x(o))))
    return cases


def _selects() -> list[Case]:
    cases = []
    for a, b in (("0", "1"), ("0", "minusp"), ("1", "minusp")):
        x, y = _operand(a), _operand(b)
        for flag in (0, 1):
            cases.append(
                _fe(
                    f"select_{a}_{b}_{flag}",
                    lambda o, x=x, y=y, flag=flag: o.select(x(o), y(o), flag),
                )
            )
    return cases


def _points() -> list[Case]:
    return [
        Case("ecc_point_double", lambda o: o.ecc_25519_double(o.base), encode_work_point),
        Case(
            "ecc_point_add",
            lambda o: o.ecc_25519_add(o.identity, o.base),
            encode_work_point,
        ),
    ]


def unpack_test_key(oracle: Oracle, index: int):
    """Unpack TEST_KEYS[index]; a failure is fatal since the keys are valid by construction."""
    point = oracle.load_packed(TEST_KEYS[index])
    if not point:
        raise KeyDecodeError(f"failed to unpack test key {index}")
    return point


def _derive_public(oracle: Oracle, index: int) -> bytes:
    unpack_test_key(oracle, index)
    key = TEST_KEYS[index]
    return oracle.store_packed(oracle.scalarmult_bits(key, oracle.base, 256))


def _keys() -> list[Case]:
    cases = []
    for i, key in enumerate(TEST_KEYS):
        cases += [
            Case(f"ecc_key_{i}", lambda o, key=key: key, encode_packed),
            Case(
                f"ecc_key_unpacked_{i}",
                lambda o, i=i: unpack_test_key(o, i),
                encode_work_point,
            ),
            Case(
                f"ecc_key_derived_public_{i}",
                lambda o, i=i: _derive_public(o, i),
                encode_packed,
            ),
        ]
    return cases


def _parities() -> list[Check]:
    return [
        Check("parity_zero", lambda o: o.parity(o.squeeze(o.zero))),
        Check("parity_one", lambda o: o.parity(o.squeeze(o.one))),
        Check("parity_minusp", lambda o: o.parity(o.squeeze(o.minusp))),
        Check("parity_sub_0_1", lambda o: o.parity(o.squeeze(o.sub(o.zero, o.one)))),
    ]


def _equalities() -> list[Check]:
    checks = []
    for a, b in product(("0", "1", "minusp"), repeat=2):
        x, y = _operand(a), _operand(b)
        checks.append(
            Check(f"equal_{a}_{b}", lambda o, x=x, y=y: o.check_equal(x(o), y(o)))
        )
    return checks


def _unique(entries: list) -> tuple:
    seen = set()
    for entry in entries:
        if entry.name in seen:
            raise ValueError(f"duplicate catalog name: {entry.name}")
        seen.add(entry.name)
    return tuple(entries)


def build_cases() -> tuple[Case, ...]:
    """All persisted cases, in generation order."""
    return _unique(
        _constants()
        + _binary("add")
        + _binary("sub")
        + _composed("add", "sub")
        + _composed("sub", "add")
        + _reductions()
        + _multiplications()
        + _selects()
        + _points()
        + _keys()
    )


def build_checks() -> tuple[Check, ...]:
    return _unique(_parities() + _equalities())


CASES: tuple[Case, ...] = build_cases()
CHECKS: tuple[Check, ...] = build_checks()


def case_names() -> list[str]:
    return [case.name for case in CASES]


__all__: tuple[str, ...] = (
    "CASES",
    "CHECKS",
    "Case",
    "Check",
    "MAX32",
    "TEST_KEYS",
    "build_cases",
    "build_checks",
    "case_names",
    "unpack_test_key",
)
