# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

import hashlib

from zkpok.constants import DIGEST_SIZE


def digest(data: bytes) -> bytes:
    """
    Calculates the blake2b_512 hash digest of the input bytes.

    The 64-byte output is twice the scalar width, so reducing it modulo the
    curve order gives a value whose bias is negligible.

    Args:
        data (bytes): The bytes to be hashed.

    Returns:
        bytes: The 64-byte blake2b digest.
    """
    return hashlib.blake2b(data, digest_size=DIGEST_SIZE).digest()
