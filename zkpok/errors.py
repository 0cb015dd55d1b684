# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only


class ZKPError(Exception):
    """Base class for every failure raised by zkpok."""


class EntropySourceError(ZKPError):
    """The secure randomness source failed, returned short reads or got stuck."""


class NonCanonicalEncodingError(ZKPError, ValueError):
    """Scalar bytes have the wrong width or encode a value >= L."""


class InvalidPointEncodingError(ZKPError, ValueError):
    """Bytes do not decode to a point of the prime-order subgroup."""


class MalformedProofError(ZKPError, ValueError):
    """Proof or witness input could not be decoded for verification."""


class ZeroInverseError(ZKPError, ZeroDivisionError):
    """The zero scalar has no multiplicative inverse."""


class InvalidWitnessError(ZKPError, ValueError):
    """The witness is the identity point."""
