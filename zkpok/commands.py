# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from pathlib import Path

from zkpok.constants import KEY_DOMAIN_TAG
from zkpok.entropy import SecureRandom
from zkpok.errors import MalformedProofError
from zkpok.files import extract_key
from zkpok.proof import ZKPProof, schnorr_from_file, schnorr_to_file, verify
from zkpok.scalar import Scalar
from zkpok.witness import ZKPWitness


def derive_secret(wallet_path: str | Path) -> Scalar:
    """
    Derive the secret instance from a wallet key file.

    The key bytes are domain separated with `KEY_DOMAIN_TAG`, hashed and
    reduced into the scalar field, so the same wallet always maps to the same
    secret and the raw key is never used as a scalar directly.
    """
    key = extract_key(wallet_path)
    return Scalar.from_hash(KEY_DOMAIN_TAG + key)


def create_proof_tx(
    wallet_path: str | Path,
    message: bytes,
    out_dir: str | Path,
    rng: SecureRandom | None = None,
) -> tuple[ZKPWitness, ZKPProof]:
    """
    Create the artifacts proving knowledge of a wallet's secret.

    High-level steps:
    1. Derive the secret `x` from the wallet key (see `derive_secret`).
    2. Build the witness `W = [x]G` and write it to `out_dir/witness.json`.
    3. Produce a Schnorr proof bound to `message` and write it to
       `out_dir/schnorr.json`.

    Args:
        wallet_path: Path to the wallet key file.
        message: Application message the proof is bound to.
        out_dir: Directory receiving the artifacts.
        rng: Nonce source. Defaults to the OS-backed `SecureRandom`.

    Returns:
        The witness and proof that were written.
    """
    out_dir = Path(out_dir)
    sk = derive_secret(wallet_path)

    witness = ZKPWitness.new(sk)
    witness.to_file(out_dir / "witness.json")

    proof = ZKPProof.new(sk, message, rng)
    schnorr_to_file(proof, out_dir / "schnorr.json")
    return witness, proof


def verify_proof_tx(
    witness_path: str | Path, proof_path: str | Path, message: bytes
) -> bool:
    """
    Verify a witness artifact and proof artifact against a message.

    Returns:
        bool: True iff the proof verifies.

    Raises:
        MalformedProofError: If either artifact cannot be decoded.
    """
    proof = schnorr_from_file(proof_path)
    try:
        witness = ZKPWitness.from_file(witness_path)
    except ValueError as e:
        raise MalformedProofError(f"malformed witness artifact: {e}") from e
    return verify(proof, witness, message)
