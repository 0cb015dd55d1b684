# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

from dataclasses import dataclass
from pathlib import Path

from zkpok.errors import InvalidWitnessError
from zkpok.files import get_bytes, load_json, save_json
from zkpok.point import GroupPoint
from zkpok.scalar import Scalar


@dataclass(frozen=True)
class ZKPWitness:
    """
    The public commitment `W = [x]G` to a secret scalar `x`.

    A witness holds no secret material. It is built once by the party who
    knows `x` and published; verifiers decode it from bytes. The identity
    point is refused everywhere, since it would let any `R = [s]G` verify.
    """

    point: GroupPoint

    def __post_init__(self):
        if self.point.is_identity():
            raise InvalidWitnessError("witness must not be the identity point")

    @classmethod
    def new(cls, secret: Scalar) -> "ZKPWitness":
        """
        Derive the witness of a secret instance.

        Raises:
            InvalidWitnessError: If `secret` is zero.
        """
        return cls(GroupPoint.basepoint() * secret)

    @classmethod
    def from_point(cls, point: GroupPoint) -> "ZKPWitness":
        return cls(point)

    @classmethod
    def decode(cls, data: bytes) -> "ZKPWitness":
        return cls(GroupPoint.decode(data))

    @classmethod
    def from_hex(cls, hex_string: str) -> "ZKPWitness":
        return cls(GroupPoint.from_hex(hex_string))

    def encode(self) -> bytes:
        return self.point.encode()

    def to_hex(self) -> str:
        return self.point.to_hex()

    def to_file(self, path: str | Path) -> None:
        """
        Write the witness as a constructor JSON artifact.

        Schema:
            {"constructor": 0, "fields": [{"bytes": g}, {"bytes": w}]}
        """
        data = {
            "constructor": 0,
            "fields": [
                {"bytes": GroupPoint.basepoint().to_hex()},
                {"bytes": self.to_hex()},
            ],
        }
        save_json(path, data)

    @classmethod
    def from_file(cls, path: str | Path) -> "ZKPWitness":
        """
        Load a witness artifact written by `to_file`.

        Raises:
            ValueError: If the artifact does not have the expected shape.
            InvalidPointEncodingError: If a point does not decode.
            InvalidWitnessError: If the generator is not the basepoint or
                the witness is the identity.
        """
        data = load_json(path)
        g = GroupPoint.from_hex(get_bytes(data, 0))
        if g != GroupPoint.basepoint():
            raise InvalidWitnessError("witness was made for a different generator")
        return cls.from_hex(get_bytes(data, 1))
