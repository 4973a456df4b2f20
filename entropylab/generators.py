"""
The three password generators.

They share one signature and differ only in where their randomness
comes from and which alphabet they honour:

- weak:   time-seeded linear congruential generator over a fixed
          lowercase+digit alphabet (deliberately broken).
- medium: the default `random` PRNG over the configured alphabet.
- strong: a `SecureRandomSource` over the configured alphabet.
"""

from __future__ import annotations

import enum
import logging
import random
import time
from dataclasses import dataclass

from .config import WEAK_ALPHABET, CharacterSetConfig
from .mapping import build_alphabet, values_to_password
from .sources import SecureRandomSource, default_source

logger = logging.getLogger(__name__)

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2 ** 31


class GeneratorKind(str, enum.Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


@dataclass(frozen=True)
class GeneratedPassword:
    value: str
    kind: GeneratorKind
    # False when the randomness behind `value` is not fit for secrets.
    secure: bool

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value


def generate_weak(length: int, now_ms: int | None = None) -> str:
    """
    LCG seeded with the current millisecond count modulo 1000.

    Two calls within the same millisecond (or 1000ms apart) collide, and
    the 36-symbol alphabet caps the entropy whatever the configuration.
    """
    if length <= 0:
        return ""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000

    seed = now_ms % 1000
    chars = []
    for _ in range(length):
        seed = (seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        chars.append(WEAK_ALPHABET[abs(seed) % len(WEAK_ALPHABET)])
    return "".join(chars)


def generate_medium(
    alphabet: str, length: int, rng: random.Random | None = None
) -> str:
    """Uniform draws from the default PRNG. Not suitable for secrets."""
    if length <= 0 or not alphabet:
        return ""
    rng = rng or random
    return "".join(alphabet[rng.randrange(len(alphabet))] for _ in range(length))


def generate_strong(
    alphabet: str, length: int, source: SecureRandomSource | None = None
) -> str:
    """32-bit words from a secure source, reduced modulo the alphabet size."""
    if length <= 0 or not alphabet:
        return ""
    source = source or default_source()
    return values_to_password(source.uint32_values(length), alphabet)


def generate(
    kind: GeneratorKind | str,
    alphabet: str,
    length: int,
    *,
    now_ms: int | None = None,
    rng: random.Random | None = None,
    source: SecureRandomSource | None = None,
) -> GeneratedPassword:
    """
    Dispatch to one generator and tag the result with its kind.
    """
    kind = GeneratorKind(kind)

    if kind is GeneratorKind.WEAK:
        value = generate_weak(length, now_ms=now_ms)
        secure = False
    elif kind is GeneratorKind.MEDIUM:
        value = generate_medium(alphabet, length, rng=rng)
        secure = False
    else:
        source = source or default_source()
        value = generate_strong(alphabet, length, source=source)
        secure = source.is_secure
        if not secure:
            logger.warning(
                "strong password generated with non-secure source %r", source.name
            )

    logger.debug("generated %s password of length %d", kind.value, len(value))
    return GeneratedPassword(value=value, kind=kind, secure=secure)


def generate_all(
    config: CharacterSetConfig,
    length: int,
    *,
    source: SecureRandomSource | None = None,
) -> dict[GeneratorKind, GeneratedPassword]:
    """
    One password per generator for the same configuration, side by side.
    """
    alphabet, _size = build_alphabet(config)
    return {
        kind: generate(kind, alphabet, length, source=source)
        for kind in GeneratorKind
    }
