# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import logging
from dataclasses import dataclass
from pathlib import Path

from zkpok.constants import POINT_SIZE, PROOF_SIZE, SCH_DOMAIN_TAG
from zkpok.entropy import SecureRandom, default_random
from zkpok.errors import (
    InvalidPointEncodingError,
    InvalidWitnessError,
    MalformedProofError,
    NonCanonicalEncodingError,
)
from zkpok.files import get_bytes, load_json, save_json
from zkpok.point import GroupPoint
from zkpok.scalar import Scalar
from zkpok.witness import ZKPWitness

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZKPProof:
    """
    A non-interactive Schnorr proof of knowledge of `x` for `W = [x]G`.

    Attributes:
        commitment: The prover's commitment `R = [k]G` for a fresh nonce `k`.
        response: The response scalar `s = k + c*x mod L`.

    A proof only means something next to the witness and message it was made
    for. The byte form is `encode(R) || encode(s)`, 80 bytes.
    """

    commitment: GroupPoint
    response: Scalar

    @classmethod
    def new(cls, secret: Scalar, message: bytes, rng: SecureRandom | None = None) -> "ZKPProof":
        return schnorr_proof(secret, message, rng)

    def verify(self, witness: ZKPWitness, message: bytes) -> bool:
        return schnorr_verify(self, witness, message)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ZKPProof":
        """
        Decode an 80-byte proof.

        Raises:
            MalformedProofError: If the length is wrong, `R` is not a valid
                subgroup point, or `s` is not a canonical scalar.
        """
        if len(data) != PROOF_SIZE:
            raise MalformedProofError(f"proof must be {PROOF_SIZE} bytes, got {len(data)}")
        try:
            commitment = GroupPoint.decode(data[:POINT_SIZE])
            response = Scalar.from_bytes(data[POINT_SIZE:])
        except (InvalidPointEncodingError, NonCanonicalEncodingError) as e:
            raise MalformedProofError(f"malformed proof: {e}") from e
        return cls(commitment, response)

    @classmethod
    def from_hex(cls, hex_string: str) -> "ZKPProof":
        try:
            data = bytes.fromhex(hex_string)
        except ValueError as e:
            raise MalformedProofError("proof hex is not valid hex") from e
        return cls.from_bytes(data)

    def to_bytes(self) -> bytes:
        return self.commitment.encode() + self.response.to_bytes()

    def to_hex(self) -> str:
        return self.to_bytes().hex()


def fiat_shamir_heuristic(gb: bytes, grb: bytes, wb: bytes, message: bytes) -> Scalar:
    """
    Compute the Fiat–Shamir challenge for the Schnorr proof.

    The challenge is the wide hash of a domain-separated transcript, reduced
    into the scalar field:

        c = H(SCH_DOMAIN_TAG || gb || grb || wb || message) mod L

    where:
    - `gb` is the encoded generator `G`,
    - `grb` is the encoded commitment `R = [k]G`,
    - `wb` is the encoded witness `W = [x]G`,
    - `message` is the application message the proof is bound to.

    The three points are fixed width, so the message is an unambiguous suffix.

    Args:
        gb: Encoded generator.
        grb: Encoded commitment point.
        wb: Encoded witness point.
        message: Application message.

    Returns:
        Scalar: The challenge `c`.
    """
    return Scalar.from_hash(SCH_DOMAIN_TAG + gb + grb + wb + message)


def schnorr_proof(secret: Scalar, message: bytes, rng: SecureRandom | None = None) -> ZKPProof:
    """
    Generate a non-interactive Schnorr proof of knowledge of `x` for `W = [x]G`.

    This implements the Fiat–Shamir transform over a standard Schnorr protocol:

    Commit:
        k <-$ Z_L
        R = [k]G

    Challenge:
        c = H(SCH_DOMAIN_TAG || G || R || W || message) mod L

    Response:
        s = k + c*x mod L

    The verifier checks that:
        [s]G == R + [c]W

    Args:
        secret: The secret instance `x`.
        message: Application message the proof is bound to.
        rng: Nonce source. Defaults to the OS-backed `SecureRandom`.

    Returns:
        ZKPProof: The proof `(R, s)`.

    Raises:
        InvalidWitnessError: If `secret` is zero.
        EntropySourceError: If the nonce could not be sampled.

    Notes:
        - The nonce is sampled fresh on every call. Two responses sharing a
          nonce reveal `x = (s1 - s2) / (c1 - c2)`.
    """
    if rng is None:
        rng = default_random()
    g = GroupPoint.basepoint()
    witness = ZKPWitness.new(secret)

    k = rng.scalar()
    gr = g * k
    c = fiat_shamir_heuristic(g.encode(), gr.encode(), witness.encode(), message)
    s = k + c * secret
    del k

    logger.debug("generated schnorr proof for witness %s", witness.to_hex())
    return ZKPProof(gr, s)


def schnorr_verify(proof: ZKPProof, witness: ZKPWitness, message: bytes) -> bool:
    """
    Check the Schnorr relation `[s]G == R + [c]W` for a decoded proof.

    Args:
        proof: The proof `(R, s)`.
        witness: The public witness `W`.
        message: The message the proof is claimed to be bound to.

    Returns:
        bool: True iff the relation holds exactly.
    """
    g = GroupPoint.basepoint()
    c = fiat_shamir_heuristic(
        g.encode(), proof.commitment.encode(), witness.encode(), message
    )
    valid = g * proof.response == proof.commitment + witness.point * c
    if not valid:
        logger.debug("schnorr proof rejected for witness %s", witness.to_hex())
    return valid


def verify(proof: ZKPProof | bytes, witness: ZKPWitness | bytes, message: bytes) -> bool:
    """
    Verify a proof given as objects or as raw bytes.

    Decoding happens before any arithmetic. Input that cannot be decoded is
    reported as `MalformedProofError`; a well-formed proof that does not
    satisfy the relation returns False. Callers must distrust both.

    Args:
        proof: A `ZKPProof` or its 80-byte encoding.
        witness: A `ZKPWitness` or its 48-byte encoding.
        message: The message the proof is claimed to be bound to.

    Returns:
        bool: True iff the proof verifies.

    Raises:
        MalformedProofError: If the proof or witness bytes are invalid.
    """
    if not isinstance(proof, ZKPProof):
        proof = ZKPProof.from_bytes(proof)
    if not isinstance(witness, ZKPWitness):
        try:
            witness = ZKPWitness.decode(witness)
        except (InvalidPointEncodingError, InvalidWitnessError) as e:
            raise MalformedProofError(f"malformed witness: {e}") from e
    return proof.verify(witness, message)


def schnorr_to_file(proof: ZKPProof, path: str | Path) -> None:
    """
    Serialize a Schnorr proof `(s, R)` to a JSON file.

    The output schema is a constructor encoding:
        {
          "constructor": 0,
          "fields": [
            {"bytes": s},
            {"bytes": R}
          ]
        }

    Args:
        proof: The proof to write.
        path: Destination file.
    """
    data = {
        "constructor": 0,
        "fields": [
            {"bytes": proof.response.to_hex()},
            {"bytes": proof.commitment.to_hex()},
        ],
    }
    save_json(path, data)


def schnorr_from_file(path: str | Path) -> ZKPProof:
    """
    Load a proof written by `schnorr_to_file`.

    Raises:
        MalformedProofError: If the artifact shape or either field is invalid.
    """
    try:
        data = load_json(path)
        s = Scalar.from_hex(get_bytes(data, 0))
        gr = GroupPoint.from_hex(get_bytes(data, 1))
    except ValueError as e:
        raise MalformedProofError(f"malformed proof artifact: {e}") from e
    return ZKPProof(gr, s)
