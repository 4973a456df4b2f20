"""
Brute-force estimator: turns total entropy into a search space, attempt
counts and time-to-crack for a given attacker throughput, then places the
average time into one of seven security tiers.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import asdict, dataclass
from typing import Mapping

from .analyzer import EntropyReport
from .config import DEFAULT_THROUGHPUT

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_YEAR = 31_536_000


class InvalidThroughputError(ValueError):
    """Attacker throughput is not a positive finite number."""


class UnknownProfileError(KeyError):
    """No attacker profile with the requested key."""


@dataclass(frozen=True)
class AttackerProfile:
    key: str
    name: str
    throughput: float
    description: str


ATTACKER_PROFILES: dict[str, AttackerProfile] = {
    p.key: p
    for p in (
        AttackerProfile("hobby", "Hobbyist", 1e6, "Home CPU"),
        AttackerProfile("criminal", "Criminal", 1e9, "High-end GPU"),
        AttackerProfile("organization", "Organization", 1e12, "GPU cluster"),
        AttackerProfile("nation", "Nation State", 1e15, "Supercomputer"),
        AttackerProfile("quantum", "Quantum Computer", 1e18, "Future technology"),
    )
}


def get_profile(key: str) -> AttackerProfile:
    try:
        return ATTACKER_PROFILES[key.lower()]
    except KeyError:
        raise UnknownProfileError(
            f"Unknown attacker profile {key!r}; "
            f"choose one of: {', '.join(ATTACKER_PROFILES)}"
        ) from None


def profile_for_throughput(throughput: float) -> AttackerProfile | None:
    """The preset whose throughput matches exactly, if any."""
    for profile in ATTACKER_PROFILES.values():
        if profile.throughput == throughput:
            return profile
    return None


class SecurityTier(enum.IntEnum):
    """Ordered from weakest to strongest."""

    CRITICAL = 0
    VERY_WEAK = 1
    WEAK = 2
    FAIR = 3
    GOOD = 4
    STRONG = 5
    EXTREMELY_STRONG = 6

    @property
    def label(self) -> str:
        return _TIER_TEXT[self][0]

    @property
    def description(self) -> str:
        return _TIER_TEXT[self][1]


_TIER_TEXT = {
    SecurityTier.CRITICAL: ("Critical", "Cracked instantly"),
    SecurityTier.VERY_WEAK: ("Very Weak", "Cracked in minutes to hours"),
    SecurityTier.WEAK: ("Weak", "Cracked in hours to days"),
    SecurityTier.FAIR: ("Fair", "Cracked in days to months"),
    SecurityTier.GOOD: ("Good", "Cracked in years to decades"),
    SecurityTier.STRONG: ("Strong", "Cracked in millennia"),
    SecurityTier.EXTREMELY_STRONG: (
        "Extremely Strong",
        "Practically impossible to crack",
    ),
}

# (exclusive upper bound on average seconds, tier); first match wins.
_TIER_THRESHOLDS = (
    (1, SecurityTier.CRITICAL),
    (SECONDS_PER_HOUR, SecurityTier.VERY_WEAK),
    (SECONDS_PER_DAY, SecurityTier.WEAK),
    (SECONDS_PER_YEAR, SecurityTier.FAIR),
    (SECONDS_PER_YEAR * 1000, SecurityTier.GOOD),
    (SECONDS_PER_YEAR * 1_000_000, SecurityTier.STRONG),
)


def classify_tier(average_time: float) -> SecurityTier:
    for bound, tier in _TIER_THRESHOLDS:
        if average_time < bound:
            return tier
    return SecurityTier.EXTREMELY_STRONG


@dataclass(frozen=True)
class BruteForceReport:
    total_entropy: float
    throughput: float
    search_space: float
    worst_case_attempts: float
    average_attempts: float
    worst_case_time: float
    average_time: float
    tier: SecurityTier

    def as_dict(self) -> dict:
        data = asdict(self)
        data["tier"] = self.tier.label
        data["tier_description"] = self.tier.description
        return data


def parse_throughput(value) -> float:
    """
    Coerce a throughput (number or numeric string) to a positive finite
    float, raising InvalidThroughputError otherwise.
    """
    if isinstance(value, bool):
        raise InvalidThroughputError(f"Throughput must be a number, got {value!r}")
    try:
        throughput = float(value)
    except (TypeError, ValueError):
        raise InvalidThroughputError(
            f"Throughput must be a number, got {value!r}"
        ) from None
    if not math.isfinite(throughput) or throughput <= 0:
        raise InvalidThroughputError(
            f"Throughput must be positive and finite, got {value!r}"
        )
    return throughput


def resolve_throughput(value, fallback: float = DEFAULT_THROUGHPUT) -> float:
    """
    Accept a custom throughput, or keep the last valid one when the new
    value is rejected.
    """
    try:
        return parse_throughput(value)
    except InvalidThroughputError as exc:
        logger.warning("%s; keeping %g attempts/s", exc, fallback)
        return fallback


def search_space_for(total_entropy_bits: float) -> float:
    """
    2 ** bits as a float. Past ~1024 bits this is +inf, which stands for
    an uncrackable search space.
    """
    try:
        return 2.0 ** total_entropy_bits
    except OverflowError:
        return math.inf


def estimate_brute_force(
    total_entropy_bits: float, throughput: float = DEFAULT_THROUGHPUT
) -> BruteForceReport:
    """
    Worst-case and average time to exhaust the search space at
    `throughput` attempts per second.

    Zero, negative or NaN entropy means there is nothing to search: every
    figure is 0 and the tier is Critical.
    """
    throughput = parse_throughput(throughput)

    if not total_entropy_bits > 0:
        search_space = 0.0
    else:
        search_space = search_space_for(total_entropy_bits)

    worst_attempts = search_space
    average_attempts = search_space / 2
    average_time = average_attempts / throughput

    report = BruteForceReport(
        total_entropy=total_entropy_bits,
        throughput=throughput,
        search_space=search_space,
        worst_case_attempts=worst_attempts,
        average_attempts=average_attempts,
        worst_case_time=worst_attempts / throughput,
        average_time=average_time,
        tier=classify_tier(average_time),
    )
    logger.debug(
        "estimated %.2f bits at %g/s: average %.3g s (%s)",
        total_entropy_bits,
        throughput,
        average_time,
        report.tier.label,
    )
    return report


def simulate_attack(
    reports: Mapping[str, EntropyReport], throughput: float = DEFAULT_THROUGHPUT
) -> dict[str, BruteForceReport]:
    """Estimate every labelled EntropyReport against the same attacker."""
    return {
        label: estimate_brute_force(report.total_entropy, throughput)
        for label, report in reports.items()
    }
