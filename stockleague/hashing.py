"""String hashing used to spread names over a fixed number of buckets."""

from __future__ import annotations

MULTIPLIER = 857
HASH_SIZE = 419


def string_hash(name: str) -> int:
    """Return the bucket key of ``name``, in the range ``0 <= key < HASH_SIZE``."""
    key = 0
    for byte in name.encode("utf-8"):
        key = (key * MULTIPLIER + byte) % HASH_SIZE
    return key