# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from zkpok.entropy import SecureRandom, default_random
from zkpok.errors import (
    EntropySourceError,
    InvalidPointEncodingError,
    InvalidWitnessError,
    MalformedProofError,
    NonCanonicalEncodingError,
    ZeroInverseError,
    ZKPError,
)
from zkpok.point import GroupPoint
from zkpok.proof import ZKPProof, verify
from zkpok.scalar import Scalar
from zkpok.witness import ZKPWitness

__all__ = [
    "EntropySourceError",
    "GroupPoint",
    "InvalidPointEncodingError",
    "InvalidWitnessError",
    "MalformedProofError",
    "NonCanonicalEncodingError",
    "Scalar",
    "SecureRandom",
    "ZKPError",
    "ZKPProof",
    "ZKPWitness",
    "ZeroInverseError",
    "default_random",
    "verify",
]
