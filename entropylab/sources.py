"""
Random sources for the strong generator.

Every source hands out uniformly distributed 32-bit integers. The strong
generator only depends on the `SecureRandomSource` interface, so tests can
inject a deterministic fake and the fallback path can be swapped freely.
"""

from __future__ import annotations

import hashlib
import logging
import os
import random
import secrets
import struct
import time
from typing import List

logger = logging.getLogger(__name__)

UINT32_MASK = 0xFFFFFFFF


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes (8 bits per byte).
    If bits length is not a multiple of 8, pad with zeros at the end.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    bits_padded = bits + [0] * pad_len

    byte_values = []
    for i in range(0, len(bits_padded), 8):
        byte = 0
        for bit in bits_padded[i : i + 8]:
            byte = (byte << 1) | bit
        byte_values.append(byte)

    return bytes(byte_values)


def amplify_entropy(data: bytes, rounds: int = 1) -> bytes:
    """
    Apply SHA-256 `rounds` times to mix the input.
    With rounds <= 0 the data is returned untouched.
    """
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return data


class SecureRandomSource:
    """
    Capability interface: a supplier of 32-bit random words.

    `is_secure` tells callers whether the words are fit for secrets.
    """

    is_secure: bool = True
    name: str = "abstract"

    def next_uint32(self) -> int:
        raise NotImplementedError

    def uint32_values(self, count: int) -> list[int]:
        return [self.next_uint32() for _ in range(max(0, count))]


class SystemRandomSource(SecureRandomSource):
    """OS entropy pool via `secrets`."""

    is_secure = True
    name = "system"

    def next_uint32(self) -> int:
        return secrets.randbits(32)


class FallbackRandomSource(SecureRandomSource):
    """
    Best-effort mixing for runtimes without an OS entropy pool.

    Two draws from the default PRNG plus the current timestamp are hashed
    with SHA-256. The output looks random but is NOT CSPRNG-grade.
    """

    is_secure = False
    name = "fallback"

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def next_uint32(self) -> int:
        material = struct.pack(
            ">ddQ", self._rng.random(), self._rng.random(), time.time_ns()
        )
        digest = amplify_entropy(material, rounds=1)
        return int.from_bytes(digest[:4], "big") & UINT32_MASK


def secure_source_available() -> bool:
    try:
        os.urandom(1)
    except NotImplementedError:
        return False
    return True


def default_source() -> SecureRandomSource:
    """
    Return the OS-backed source, or the fallback one when the runtime
    has no entropy pool.
    """
    if secure_source_available():
        return SystemRandomSource()
    logger.warning(
        "No secure random source available; strong passwords will use "
        "the non-cryptographic fallback"
    )
    return FallbackRandomSource()
