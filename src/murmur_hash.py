"""
MurmurHash3 (x86_32) -- From-scratch NumPy implementation.

A seeded 32-bit non-cryptographic hash with strong avalanche behaviour: every
output bit depends on every input bit and on the seed. Input is consumed in
4-byte little-endian blocks that are mixed independently and folded into a
running state, the 0-3 trailing bytes are folded in once, and a finalization
mix (fmix32) forces the remaining bits to avalanche. All arithmetic is done on
uint32 values so that multiplication overflow wraps silently, exactly as the
reference C++ implementation relies on.
"""

from typing import Optional

import numpy as np

C1 = np.uint32(0xCC9E2D51)
C2 = np.uint32(0x1B873593)
M = np.uint32(5)
N = np.uint32(0xE6546B64)
FMIX_1 = np.uint32(0x85EBCA6B)
FMIX_2 = np.uint32(0xC2B2AE35)

BLOCK_SIZE = 4
MAX_SEED = 2**32


def rotl32(x, r: int):
    """Rotate the bits of a uint32 value (or array) r places to the left."""
    x = np.asarray(x, dtype=np.uint32)
    return (x << np.uint32(r)) | (x >> np.uint32(32 - r))


def fmix32(h):
    """Finalization mix -- force all bits of h to avalanche."""
    h = np.uint32(h)
    with np.errstate(over="ignore"):
        h ^= h >> np.uint32(16)
        h *= FMIX_1
        h ^= h >> np.uint32(13)
        h *= FMIX_2
        h ^= h >> np.uint32(16)
    return h


def _mix_blocks(blocks: np.ndarray) -> np.ndarray:
    """Apply the per-block k1 mix to every block at once."""
    k = blocks * C1
    k = rotl32(k, 15)
    return k * C2


def murmur3_32(data: bytes, seed: int = 0) -> int:
    """
    Hash a byte sequence to an unsigned 32-bit integer.

    Args:
        data: Bytes to hash
        seed: Initial state, 0 <= seed < 2**32

    Returns:
        The hash as a Python int in [0, 2**32)
    """
    if not 0 <= seed < MAX_SEED:
        raise ValueError(f"seed must be in [0, 2**32), got {seed}")

    length = len(data)
    rounded_end = length & ~0x3
    h1 = np.uint32(seed)

    with np.errstate(over="ignore"):
        if rounded_end:
            blocks = np.frombuffer(data, dtype="<u4", count=rounded_end // BLOCK_SIZE)
            for k1 in _mix_blocks(blocks.astype(np.uint32)):
                h1 ^= k1
                h1 = np.uint32(rotl32(h1, 13))
                h1 = h1 * M + N

        tail = data[rounded_end:]
        if tail:
            k1 = np.uint32(0)
            for shift, byte in enumerate(tail):
                k1 ^= np.uint32(byte) << np.uint32(8 * shift)
            k1 *= C1
            k1 = np.uint32(rotl32(k1, 15))
            k1 *= C2
            h1 ^= k1

        h1 ^= np.uint32(length & 0xFFFFFFFF)

    return int(fmix32(h1))


def hash_string(key: str, seed: int = 0) -> int:
    """Hash the UTF-8 encoding of key."""
    return murmur3_32(key.encode("utf-8"), seed)


def random_seed(rng: Optional[np.random.Generator] = None) -> int:
    """Draw one uniformly random 32-bit seed."""
    if rng is None:
        rng = np.random.default_rng()
    return int(rng.integers(0, MAX_SEED, dtype=np.uint64))
