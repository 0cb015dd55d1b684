# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import hmac

from py_ecc.optimized_bls12_381 import curve_order

from zkpok.constants import SCALAR_SIZE
from zkpok.errors import NonCanonicalEncodingError, ZeroInverseError
from zkpok.hashing import digest


class Scalar:
    """
    An element of the BLS12-381 scalar field, the integers modulo `curve_order`.

    The value is always kept reduced, so every observable scalar is in
    [0, curve_order). Instances are immutable. The canonical byte form is 32
    bytes little-endian.

    Equality compares the canonical encodings with `hmac.compare_digest`, so
    comparing a secret-derived scalar does not exit early on the first
    differing byte.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        object.__setattr__(self, "_value", value % curve_order)

    def __setattr__(self, name, value):
        raise AttributeError("Scalar is immutable")

    @classmethod
    def zero(cls) -> "Scalar":
        return cls(0)

    @classmethod
    def one(cls) -> "Scalar":
        return cls(1)

    @classmethod
    def from_int(cls, integer: int) -> "Scalar":
        """Reduce an arbitrary integer, negative ones included, into the field."""
        return cls(integer)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Scalar":
        """
        Decode a canonical 32-byte little-endian scalar.

        Args:
            data: Exactly 32 bytes encoding a value below `curve_order`.

        Returns:
            Scalar: The decoded field element.

        Raises:
            NonCanonicalEncodingError: If the width is wrong or the value is
                not reduced.
        """
        if len(data) != SCALAR_SIZE:
            raise NonCanonicalEncodingError(
                f"scalar must be {SCALAR_SIZE} bytes, got {len(data)}"
            )
        value = int.from_bytes(data, "little")
        if value >= curve_order:
            raise NonCanonicalEncodingError("scalar is not reduced modulo the curve order")
        return cls(value)

    @classmethod
    def from_hex(cls, hex_string: str) -> "Scalar":
        try:
            data = bytes.fromhex(hex_string)
        except ValueError as e:
            raise NonCanonicalEncodingError("scalar hex is not valid hex") from e
        return cls.from_bytes(data)

    @classmethod
    def from_hash(cls, data: bytes) -> "Scalar":
        """
        Hash `data` and reduce the wide digest modulo the curve order.

        This is a deterministic many-to-one map. It is fine for challenges and
        key derivation, where the output only has to be unpredictable, but it
        must not be used to sample nonces.
        """
        return cls(int.from_bytes(digest(data), "little"))

    @classmethod
    def random(cls, rng=None) -> "Scalar":
        """Sample a uniform scalar from `rng`, or from the OS-backed default."""
        if rng is None:
            from zkpok.entropy import default_random

            rng = default_random()
        return rng.scalar()

    def to_bytes(self) -> bytes:
        return self._value.to_bytes(SCALAR_SIZE, "little")

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    def to_int(self) -> int:
        return self._value

    def is_zero(self) -> bool:
        return hmac.compare_digest(self.to_bytes(), bytes(SCALAR_SIZE))

    def add(self, other: "Scalar") -> "Scalar":
        return Scalar(self._value + other._value)

    def sub(self, other: "Scalar") -> "Scalar":
        return Scalar(self._value - other._value)

    def mul(self, other: "Scalar") -> "Scalar":
        return Scalar(self._value * other._value)

    def neg(self) -> "Scalar":
        return Scalar(-self._value)

    def invert(self) -> "Scalar":
        """
        Multiplicative inverse by Fermat's little theorem, `x^(L-2) mod L`.

        Raises:
            ZeroInverseError: If the scalar is zero.
        """
        if self.is_zero():
            raise ZeroInverseError("zero has no multiplicative inverse")
        return Scalar(pow(self._value, curve_order - 2, curve_order))

    def __add__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.mul(other)

    def __neg__(self):
        return self.neg()

    def __eq__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        return hmac.compare_digest(self.to_bytes(), other.to_bytes())

    def __hash__(self):
        return hash(self.to_bytes())

    def __bytes__(self):
        return self.to_bytes()

    def __repr__(self):
        # the value may be a secret
        return "Scalar(...)"
