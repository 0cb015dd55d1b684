# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

import cbor2

from zkpok.constants import POINT_SIZE, SCALAR_SIZE
from zkpok.errors import MalformedProofError
from zkpok.proof import ZKPProof
from zkpok.witness import ZKPWitness


def _parse_map(data: bytes, required: tuple[int, ...]) -> dict[int, bytes]:
    """
    Decode a CBOR map of integer keys to byte strings and check its shape.

    Raises:
        ValueError: If the CBOR structure is not such a map or a required
            key is missing.
    """
    try:
        m = cbor2.loads(data)
    except cbor2.CBORDecodeError as e:
        raise ValueError(f"invalid CBOR: {e}") from e
    if not isinstance(m, dict):
        raise ValueError(f"Expected CBOR map, got {type(m).__name__}")
    for k, v in m.items():
        if not isinstance(k, int):
            raise ValueError(f"All keys must be int, got {type(k).__name__}")
        if not isinstance(v, bytes):
            raise ValueError(f"All values must be bytes, got {type(v).__name__} for key {k}")
    for k in required:
        if k not in m:
            raise ValueError(f"Missing required field {k}")
    extra = set(m) - set(required)
    if extra:
        raise ValueError(f"Unexpected fields {sorted(extra)}")
    return m


def witness_to_cbor(witness: ZKPWitness) -> bytes:
    """
    Encode a witness as the canonical CBOR map `{0: W}`.

    Uses canonical CBOR encoding (RFC 8949 §4.2) so equal witnesses always
    produce equal bytes.
    """
    return cbor2.dumps({0: witness.encode()}, canonical=True)


def witness_from_cbor(data: bytes) -> ZKPWitness:
    """
    Decode a witness from its CBOR map.

    Raises:
        ValueError: If the map shape is wrong.
        InvalidPointEncodingError: If `W` is not a valid point.
        InvalidWitnessError: If `W` is the identity.
    """
    m = _parse_map(data, (0,))
    return ZKPWitness.decode(m[0])


def proof_to_cbor(proof: ZKPProof) -> bytes:
    """Encode a proof as the canonical CBOR map `{0: R, 1: s}`."""
    m = {
        0: proof.commitment.encode(),
        1: proof.response.to_bytes(),
    }
    return cbor2.dumps(m, canonical=True)


def proof_from_cbor(data: bytes) -> ZKPProof:
    """
    Decode a proof from its CBOR map.

    Raises:
        MalformedProofError: If the map shape or either field is invalid.
    """
    try:
        m = _parse_map(data, (0, 1))
    except ValueError as e:
        raise MalformedProofError(f"malformed proof: {e}") from e
    if len(m[0]) != POINT_SIZE or len(m[1]) != SCALAR_SIZE:
        raise MalformedProofError("malformed proof: wrong field widths")
    return ZKPProof.from_bytes(m[0] + m[1])
