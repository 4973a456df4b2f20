"""
Side-by-side comparison of a deliberately predictable password and a
strong one of the same length.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from .analyzer import EntropyReport, analyze_entropy
from .bruteforce import BruteForceReport, estimate_brute_force, search_space_for
from .config import DEFAULT_THROUGHPUT, CharacterSetConfig
from .generators import generate_strong
from .mapping import build_alphabet
from .sources import SecureRandomSource, default_source

logger = logging.getLogger(__name__)

LOW_ENTROPY_PATTERNS = ("123", "abc", "password", "111", "aaa")
COMMON_CHARS = "aeiou123"
SEQUENTIAL_SUBSTRINGS = re.compile(r"123|abc|234|bcd", re.IGNORECASE)


@dataclass(frozen=True)
class ComparisonSide:
    entropy: EntropyReport
    brute_force: BruteForceReport
    repetitions: int
    sequential_matches: int
    # False when the password is not backed by a secure random source.
    secure: bool = False

    @property
    def password(self) -> str:
        return self.entropy.password

    def as_dict(self) -> dict:
        return {
            "password": self.password,
            "entropy": self.entropy.as_dict(),
            "brute_force": self.brute_force.as_dict(),
            "repetitions": self.repetitions,
            "sequential_matches": self.sequential_matches,
            "secure": self.secure,
        }


@dataclass(frozen=True)
class ComparisonResult:
    low: ComparisonSide
    high: ComparisonSide
    max_entropy_per_char: float
    # Either ratio may be inf or nan; callers render both.
    times_harder_to_guess: float
    times_longer_to_crack: float

    def as_dict(self) -> dict:
        return {
            "low": self.low.as_dict(),
            "high": self.high.as_dict(),
            "max_entropy_per_char": self.max_entropy_per_char,
            "times_harder_to_guess": self.times_harder_to_guess,
            "times_longer_to_crack": self.times_longer_to_crack,
        }


def generate_low_entropy_password(length: int, variant: int = 0) -> str:
    """
    Three characters from the pattern table (rotated by `variant`), a few
    common characters, then the first three characters repeated.
    """
    if length <= 0:
        return ""

    pattern = LOW_ENTROPY_PATTERNS[variant % len(LOW_ENTROPY_PATTERNS)]
    chars: list[str] = []
    for i in range(min(length, 6)):
        if i < 3:
            chars.append(pattern[i] if i < len(pattern) else "a")
        else:
            chars.append(COMMON_CHARS[i % len(COMMON_CHARS)])

    while len(chars) < length:
        chars.append(chars[len(chars) % 3])

    return "".join(chars[:length])


def _side(
    password: str, alphabet_size: int, throughput: float, secure: bool = False
) -> ComparisonSide:
    entropy = analyze_entropy(password, alphabet_size)
    return ComparisonSide(
        entropy=entropy,
        brute_force=estimate_brute_force(entropy.total_entropy, throughput),
        repetitions=entropy.length - entropy.unique_char_count,
        sequential_matches=len(SEQUENTIAL_SUBSTRINGS.findall(password)),
        secure=secure,
    )


def _time_ratio(high: float, low: float) -> float:
    if low == 0:
        return math.nan if high == 0 else math.inf
    return high / low


def compare_entropy(
    config: CharacterSetConfig,
    length: int,
    *,
    throughput: float = DEFAULT_THROUGHPUT,
    variant: int = 0,
    source: SecureRandomSource | None = None,
) -> ComparisonResult:
    """
    Generate a low- and a high-entropy password, analyze and estimate
    both, and report how much harder the strong one is.
    """
    alphabet, size = build_alphabet(config)
    source = source or default_source()

    low = _side(generate_low_entropy_password(length, variant), size, throughput)
    high = _side(
        generate_strong(alphabet, length, source=source),
        size,
        throughput,
        secure=source.is_secure,
    )

    harder = search_space_for(high.entropy.total_entropy - low.entropy.total_entropy)
    longer = _time_ratio(high.brute_force.average_time, low.brute_force.average_time)

    logger.debug(
        "comparison at length %d: low=%.2f bits high=%.2f bits",
        length,
        low.entropy.total_entropy,
        high.entropy.total_entropy,
    )
    return ComparisonResult(
        low=low,
        high=high,
        max_entropy_per_char=low.entropy.theoretical_max_entropy_per_char,
        times_harder_to_guess=harder,
        times_longer_to_crack=longer,
    )
