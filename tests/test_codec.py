# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import cbor2
import pytest

from zkpok.codec import proof_from_cbor, proof_to_cbor, witness_from_cbor, witness_to_cbor
from zkpok.errors import InvalidWitnessError, MalformedProofError
from zkpok.point import GroupPoint
from zkpok.proof import ZKPProof
from zkpok.scalar import Scalar
from zkpok.witness import ZKPWitness


@pytest.fixture
def proof():
    return ZKPProof.new(Scalar(1234567890), b"acab")


def test_witness_layout():
    w = ZKPWitness.new(Scalar.one())
    data = witness_to_cbor(w)
    # map(1), key 0, bytes(48)
    assert data[:4] == bytes.fromhex("a1005830")
    assert data[4:] == w.encode()
    assert witness_from_cbor(data) == w


def test_proof_layout(proof):
    data = proof_to_cbor(proof)
    assert data[:4] == bytes.fromhex("a2005830")
    assert data[4:52] == proof.commitment.encode()
    assert data[52:55] == bytes.fromhex("015820")
    assert data[55:] == proof.response.to_bytes()
    assert proof_from_cbor(data) == proof


def test_canonical_output_is_stable(proof):
    assert proof_to_cbor(proof) == proof_to_cbor(proof_from_cbor(proof_to_cbor(proof)))


def test_witness_identity_is_rejected():
    data = cbor2.dumps({0: GroupPoint.identity().encode()})
    with pytest.raises(InvalidWitnessError):
        witness_from_cbor(data)


def test_not_a_map():
    with pytest.raises(ValueError, match="map"):
        witness_from_cbor(cbor2.dumps([b"\x00"]))


def test_missing_field(proof):
    data = cbor2.dumps({0: proof.commitment.encode()})
    with pytest.raises(MalformedProofError, match="Missing"):
        proof_from_cbor(data)


def test_extra_field():
    w = ZKPWitness.new(Scalar.one())
    with pytest.raises(ValueError, match="Unexpected"):
        witness_from_cbor(cbor2.dumps({0: w.encode(), 3: b""}))


def test_wrong_types(proof):
    with pytest.raises(MalformedProofError):
        proof_from_cbor(cbor2.dumps({"0": proof.commitment.encode(), 1: b""}))
    with pytest.raises(MalformedProofError):
        proof_from_cbor(cbor2.dumps({0: proof.commitment.encode(), 1: 5}))


def test_shifted_field_widths(proof):
    r = proof.commitment.encode()
    s = proof.response.to_bytes()
    data = cbor2.dumps({0: r[:-1], 1: r[-1:] + s})
    with pytest.raises(MalformedProofError, match="widths"):
        proof_from_cbor(data)


def test_invalid_cbor():
    with pytest.raises(MalformedProofError):
        proof_from_cbor(b"\xff\xff")


if __name__ == "__main__":
    pytest.main()
