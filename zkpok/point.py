# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import hmac

from eth_typing import BLSPubkey
from py_ecc.bls.g2_primitives import G1_to_pubkey, pubkey_to_G1
from py_ecc.fields import optimized_bls12_381_FQ as FQ
from py_ecc.optimized_bls12_381 import (
    G1,
    Z1,
    add,
    curve_order,
    double,
    is_inf,
    multiply,
    neg,
)

from zkpok.constants import POINT_SIZE
from zkpok.errors import InvalidPointEncodingError
from zkpok.scalar import Scalar

# every ladder runs over the full width of the scalar field
LADDER_BITS = curve_order.bit_length()


def cswap(p: tuple, q: tuple, bit: int) -> tuple[tuple, tuple]:
    """
    Swap two projective points when `bit` is 1, without branching on it.

    Each coordinate pair (a, b) becomes (a - d, b + d) with
    d = bit * (a - b), so both outcomes cost the same field operations.

    Args:
        p: A projective G1 point.
        q: A projective G1 point.
        bit: 0 to keep the order, 1 to swap.

    Returns:
        The pair `(p, q)` or `(q, p)`.
    """
    mask = FQ(bit)
    new_p = []
    new_q = []
    for a, b in zip(p, q):
        d = mask * (a - b)
        new_p.append(a - d)
        new_q.append(b + d)
    return tuple(new_p), tuple(new_q)


class GroupPoint:
    """
    An element of the prime-order subgroup G1 of BLS12-381.

    Points are stored as py_ecc projective triples and travel as the 48-byte
    compressed encoding. The identity is a valid point; callers that need a
    non-degenerate point check `is_identity()` themselves.
    """

    __slots__ = ("_point",)

    def __init__(self, point: tuple):
        object.__setattr__(self, "_point", point)

    def __setattr__(self, name, value):
        raise AttributeError("GroupPoint is immutable")

    @classmethod
    def basepoint(cls) -> "GroupPoint":
        return cls(G1)

    @classmethod
    def identity(cls) -> "GroupPoint":
        return cls(Z1)

    @classmethod
    def decode(cls, data: bytes) -> "GroupPoint":
        """
        Decode and validate a compressed G1 point.

        The flags, the field range of x, the curve equation and membership in
        the prime-order subgroup are all checked before a point is returned.

        Args:
            data: 48 bytes in the compressed G1 format.

        Returns:
            GroupPoint: The decoded point.

        Raises:
            InvalidPointEncodingError: If any check fails.
        """
        if len(data) != POINT_SIZE:
            raise InvalidPointEncodingError(
                f"point must be {POINT_SIZE} bytes, got {len(data)}"
            )
        try:
            point = pubkey_to_G1(BLSPubkey(bytes(data)))
        except ValueError as e:
            raise InvalidPointEncodingError(f"invalid compressed G1 point: {e}") from e
        if not is_inf(multiply(point, curve_order)):
            raise InvalidPointEncodingError("point is not in the prime-order subgroup")
        return cls(point)

    @classmethod
    def from_hex(cls, hex_string: str) -> "GroupPoint":
        try:
            data = bytes.fromhex(hex_string)
        except ValueError as e:
            raise InvalidPointEncodingError("point hex is not valid hex") from e
        return cls.decode(data)

    def encode(self) -> bytes:
        return bytes(G1_to_pubkey(self._point))

    def to_hex(self) -> str:
        return self.encode().hex()

    def is_identity(self) -> bool:
        return is_inf(self._point)

    def scalar_mul(self, scalar: Scalar) -> "GroupPoint":
        """
        Multiply the point by a scalar with a Montgomery ladder.

        The ladder always walks `LADDER_BITS` bits and does one addition, one
        doubling and two masked swaps per bit, whatever the scalar is.

        Args:
            scalar: The multiplier, which may be secret.

        Returns:
            GroupPoint: `scalar * self`.
        """
        k = scalar.to_int()
        r0, r1 = Z1, self._point
        for i in reversed(range(LADDER_BITS)):
            bit = (k >> i) & 1
            r0, r1 = cswap(r0, r1, bit)
            r1 = add(r0, r1)
            r0 = double(r0)
            r0, r1 = cswap(r0, r1, bit)
        return GroupPoint(r0)

    def add(self, other: "GroupPoint") -> "GroupPoint":
        return GroupPoint(add(self._point, other._point))

    def neg(self) -> "GroupPoint":
        return GroupPoint(neg(self._point))

    def sub(self, other: "GroupPoint") -> "GroupPoint":
        return GroupPoint(add(self._point, neg(other._point)))

    def __add__(self, other):
        if not isinstance(other, GroupPoint):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, GroupPoint):
            return NotImplemented
        return self.sub(other)

    def __neg__(self):
        return self.neg()

    def __mul__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.scalar_mul(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        if not isinstance(other, GroupPoint):
            return NotImplemented
        return hmac.compare_digest(self.encode(), other.encode())

    def __hash__(self):
        return hash(self.encode())

    def __bytes__(self):
        return self.encode()

    def __repr__(self):
        return f"GroupPoint({self.to_hex()})"
