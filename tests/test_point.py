# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import pytest

from py_ecc.bls.g2_primitives import G1_to_pubkey
from py_ecc.fields import optimized_bls12_381_FQ as FQ
from py_ecc.optimized_bls12_381 import G1, curve_order, is_inf, multiply

from zkpok.errors import InvalidPointEncodingError
from zkpok.point import GroupPoint, cswap
from zkpok.scalar import Scalar

q = FQ.field_modulus


def curve_rhs(x: int) -> int:
    return (x**3 + 4) % q


def sqrt_or_none(v: int) -> int | None:
    y = pow(v, (q + 1) // 4, q)
    return y if y * y % q == v else None


def off_subgroup_point() -> tuple:
    x = 1
    while True:
        y = sqrt_or_none(curve_rhs(x))
        if y is not None:
            pt = (FQ(x), FQ(y), FQ(1))
            if not is_inf(multiply(pt, curve_order)):
                return pt
        x += 1


def off_curve_x() -> int:
    x = 1
    while sqrt_or_none(curve_rhs(x)) is not None:
        x += 1
    return x


def test_basepoint_round_trip():
    g = GroupPoint.basepoint()
    assert len(g.encode()) == 48
    assert GroupPoint.decode(g.encode()) == g
    assert GroupPoint.from_hex(g.to_hex()) == g


def test_identity_round_trip():
    o = GroupPoint.identity()
    assert o.is_identity()
    decoded = GroupPoint.decode(o.encode())
    assert decoded.is_identity()
    assert decoded == o


def test_scalar_mul_matches_double_and_add():
    g = GroupPoint.basepoint()
    for n in [2, 3, 1234567890, curve_order - 1, 2**254 + 17]:
        assert g * Scalar(n) == GroupPoint(multiply(G1, n))


def test_scalar_mul_edges():
    g = GroupPoint.basepoint()
    assert (g * Scalar.zero()).is_identity()
    assert g * Scalar.one() == g
    assert (GroupPoint.identity() * Scalar(7)).is_identity()
    assert Scalar(5) * g == g * Scalar(5)


def test_group_law():
    g = GroupPoint.basepoint()
    two = g * Scalar(2)
    assert g + g == two
    assert two - g == g
    assert (g - g).is_identity()
    assert g + (-g) == GroupPoint.identity()
    assert g + GroupPoint.identity() == g


def test_scalar_mul_distributes(seeded_rng):
    g = GroupPoint.basepoint()
    a = Scalar.random(seeded_rng)
    b = Scalar.random(seeded_rng)
    assert g * (a + b) == g * a + g * b
    assert (g * a) * b == g * (a * b)


def test_cswap():
    g = GroupPoint.basepoint()._point
    h = (GroupPoint.basepoint() * Scalar(3))._point
    p, r = cswap(g, h, 0)
    assert GroupPoint(p) == GroupPoint(g) and GroupPoint(r) == GroupPoint(h)
    p, r = cswap(g, h, 1)
    assert GroupPoint(p) == GroupPoint(h) and GroupPoint(r) == GroupPoint(g)


def test_decode_wrong_length():
    g = GroupPoint.basepoint().encode()
    with pytest.raises(InvalidPointEncodingError):
        GroupPoint.decode(g[:-1])
    with pytest.raises(InvalidPointEncodingError):
        GroupPoint.decode(g + b"\x00")


def test_decode_bad_flags():
    with pytest.raises(InvalidPointEncodingError):
        GroupPoint.decode(b"\x00" * 48)
    with pytest.raises(InvalidPointEncodingError):
        GroupPoint.decode(b"\xff" * 48)


def test_decode_off_curve():
    x = off_curve_x()
    data = (x + 2**383).to_bytes(48, "big")
    with pytest.raises(InvalidPointEncodingError):
        GroupPoint.decode(data)


def test_decode_outside_subgroup():
    data = bytes(G1_to_pubkey(off_subgroup_point()))
    with pytest.raises(InvalidPointEncodingError, match="subgroup"):
        GroupPoint.decode(data)


def test_decode_bad_hex():
    with pytest.raises(InvalidPointEncodingError):
        GroupPoint.from_hex("not hex")


def test_equality_ignores_projective_scale():
    g = GroupPoint.basepoint()
    x, y, z = G1
    scaled = GroupPoint((x * 5, y * 5, z * 5))
    assert scaled == g
    assert hash(scaled) == hash(g)
    assert g != g.encode()


def test_immutable():
    g = GroupPoint.basepoint()
    with pytest.raises(AttributeError):
        g._point = None


if __name__ == "__main__":
    pytest.main()
