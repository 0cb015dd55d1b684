# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import logging
import os
from typing import Callable

from zkpok.constants import MAX_REJECTIONS, MAX_SHORT_READS, SCALAR_SIZE
from zkpok.errors import EntropySourceError
from zkpok.scalar import Scalar, curve_order

logger = logging.getLogger(__name__)


class SecureRandom:
    """
    Uniform random bytes, integers and scalars drawn from a byte source.

    The source is any callable `source(n) -> bytes`. Production code uses the
    operating system CSPRNG (`os.urandom`); tests inject a deterministic
    source to get reproducible vectors.

    Every bounded draw uses rejection sampling: candidates are masked to the
    bit length of the bound and redrawn when they fall outside it. Wide
    integers are never reduced modulo the bound, since that biases the
    distribution towards small values.
    """

    def __init__(self, source: Callable[[int], bytes] = os.urandom):
        self._source = source

    def scalar(self) -> Scalar:
        """
        Sample a scalar uniformly over [0, L).

        Returns:
            Scalar: A uniformly distributed field element.

        Raises:
            EntropySourceError: If the source fails or keeps producing
                out-of-range candidates.
        """
        return Scalar(self.below(curve_order, SCALAR_SIZE))

    def below(self, n: int, width: int | None = None) -> int:
        """
        Sample an integer uniformly over [0, n).

        Args:
            n: Exclusive upper bound, must be positive.
            width: Number of bytes drawn per candidate. Defaults to the
                minimum needed to hold `n - 1`.

        Returns:
            int: A uniformly distributed integer below `n`.
        """
        if n <= 0:
            raise ValueError(f"upper bound must be positive, got {n}")
        bits = (n - 1).bit_length()
        if width is None:
            width = (bits + 7) // 8
        mask = (1 << bits) - 1
        for attempt in range(MAX_REJECTIONS):
            candidate = int.from_bytes(self.bytes(width), "little") & mask
            if candidate < n:
                if attempt:
                    logger.debug("rejected %d candidates below %d bits", attempt, bits)
                return candidate
        logger.warning("entropy source produced %d out-of-range candidates", MAX_REJECTIONS)
        raise EntropySourceError(
            f"no candidate below the bound after {MAX_REJECTIONS} draws"
        )

    def integer(self, bits: int) -> int:
        """Sample a uniform non-negative integer of at most `bits` bits."""
        if bits < 0:
            raise ValueError(f"bit count must be non-negative, got {bits}")
        raw = self.bytes((bits + 7) // 8)
        return int.from_bytes(raw, "little") & ((1 << bits) - 1)

    def sample(self, n: int, count: int) -> list[int]:
        """Draw `count` independent integers uniformly from [0, n)."""
        return [self.below(n) for _ in range(count)]

    def bytes(self, n: int) -> bytes:
        """
        Read `n` uniformly random bytes from the source.

        A short read is topped up by further reads, at most
        `MAX_SHORT_READS` in total.

        Args:
            n: Number of bytes to return.

        Returns:
            bytes: Exactly `n` random bytes.

        Raises:
            ValueError: If `n` is negative.
            EntropySourceError: If the source is unavailable or still short
                after the allowed reads.
        """
        if n < 0:
            raise ValueError(f"byte count must be non-negative, got {n}")
        buf = b""
        for _ in range(MAX_SHORT_READS):
            try:
                buf += self._source(n - len(buf))
            except (OSError, NotImplementedError) as e:
                logger.warning("entropy source unavailable: %s", e)
                raise EntropySourceError("entropy source unavailable") from e
            if len(buf) >= n:
                return buf[:n]
        logger.warning("entropy source returned %d of %d bytes", len(buf), n)
        raise EntropySourceError(f"entropy source returned {len(buf)} of {n} bytes")


_default = SecureRandom()


def default_random() -> SecureRandom:
    """Return the process-wide SecureRandom backed by the OS CSPRNG."""
    return _default
