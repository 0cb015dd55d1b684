# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import hashlib

import pytest

from zkpok.entropy import SecureRandom


class CounterSource:
    """Deterministic byte source: blake2b(seed || counter) blocks."""

    def __init__(self, seed: bytes):
        self.seed = seed
        self.counter = 0

    def __call__(self, n: int) -> bytes:
        out = b""
        while len(out) < n:
            out += hashlib.blake2b(self.seed + self.counter.to_bytes(8, "little")).digest()
            self.counter += 1
        return out[:n]


class ScriptedSource:
    """Byte source that replays a fixed list of chunks, one per call."""

    def __init__(self, chunks: list[bytes]):
        self.chunks = list(chunks)
        self.calls = 0

    def __call__(self, n: int) -> bytes:
        self.calls += 1
        return self.chunks.pop(0)


@pytest.fixture
def seeded_rng():
    return SecureRandom(CounterSource(b"zkpok-tests"))
