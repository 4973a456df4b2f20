"""
Entropy analyzer: empirical (Shannon) and theoretical entropy of a
password, its character-class distribution and simple pattern counts.

The security score is a coarse average of entropy efficiency and
character uniqueness meant for side-by-side comparison, not a
cryptographic metric.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Mapping

logger = logging.getLogger(__name__)

KEYBOARD_PATTERNS = ("123", "abc", "qwe", "asd", "zxc")


@dataclass(frozen=True)
class CharacterDistribution:
    lowercase: int = 0
    uppercase: int = 0
    numbers: int = 0
    symbols: int = 0

    @property
    def total(self) -> int:
        return self.lowercase + self.uppercase + self.numbers + self.symbols


@dataclass(frozen=True)
class PatternCounts:
    sequential: int = 0
    repetitive: int = 0
    keyboard: int = 0

    @property
    def total(self) -> int:
        return self.sequential + self.repetitive + self.keyboard


@dataclass(frozen=True)
class EntropyReport:
    password: str
    length: int
    alphabet_size: int
    shannon_entropy: float
    total_entropy: float
    theoretical_max_entropy_per_char: float
    entropy_efficiency: float
    distribution: CharacterDistribution
    unique_char_count: int
    repetition_score: float
    patterns: PatternCounts
    security_score: float

    @property
    def random_char_count(self) -> int:
        """Characters not accounted for by any detected pattern."""
        return max(0, self.length - self.patterns.total)

    def as_dict(self) -> dict:
        data = asdict(self)
        data["random_char_count"] = self.random_char_count
        return data


@dataclass(frozen=True)
class TheoreticalEntropy:
    alphabet_size: int
    max_entropy_per_char: float
    max_total_entropy: float


@dataclass(frozen=True)
class AnalysisSummary:
    theoretical: TheoreticalEntropy
    reports: dict[str, EntropyReport] = field(default_factory=dict)


def shannon_entropy(password: str) -> float:
    """
    -sum(p * log2(p)) over the characters that actually occur.
    """
    if not password:
        return 0.0
    length = len(password)
    entropy = 0.0
    for count in Counter(password).values():
        p = count / length
        entropy -= p * math.log2(p)
    # a single repeated symbol gives -0.0
    return entropy + 0.0


def max_entropy_per_char(alphabet_size: int) -> float:
    if alphabet_size <= 0:
        return 0.0
    return math.log2(alphabet_size)


def character_distribution(password: str) -> CharacterDistribution:
    lower = upper = digits = other = 0
    for ch in password:
        if "a" <= ch <= "z":
            lower += 1
        elif "A" <= ch <= "Z":
            upper += 1
        elif "0" <= ch <= "9":
            digits += 1
        else:
            other += 1
    return CharacterDistribution(lower, upper, digits, other)


def detect_patterns(password: str) -> PatternCounts:
    codes = [ord(ch) for ch in password]

    sequential = sum(
        1
        for i in range(len(codes) - 2)
        if codes[i + 1] - codes[i] == 1 and codes[i + 2] - codes[i + 1] == 1
    )
    repetitive = sum(
        1 for i in range(len(password) - 1) if password[i] == password[i + 1]
    )
    lowered = password.lower()
    keyboard = sum(lowered.count(pattern) for pattern in KEYBOARD_PATTERNS)

    return PatternCounts(sequential, repetitive, keyboard)


def analyze_entropy(password: str, alphabet_size: int) -> EntropyReport:
    """
    Build the full EntropyReport for one password against the
    configured alphabet size.

    Efficiency is not clamped: a password drawn from a different
    alphabet than the configured one can exceed 100%. Only the final
    security score is clamped to [0, 100].
    """
    theoretical = max_entropy_per_char(alphabet_size)

    if not password:
        return EntropyReport(
            password="",
            length=0,
            alphabet_size=alphabet_size,
            shannon_entropy=0.0,
            total_entropy=0.0,
            theoretical_max_entropy_per_char=theoretical,
            entropy_efficiency=0.0,
            distribution=CharacterDistribution(),
            unique_char_count=0,
            repetition_score=0.0,
            patterns=PatternCounts(),
            security_score=0.0,
        )

    length = len(password)
    shannon = shannon_entropy(password)
    total = shannon * length

    denominator = theoretical * length
    efficiency = total / denominator * 100 if denominator > 0 else 0.0

    unique = len(set(password))
    repetition_score = unique / length * 100

    score = min(100.0, max(0.0, (efficiency + repetition_score) / 2))

    report = EntropyReport(
        password=password,
        length=length,
        alphabet_size=alphabet_size,
        shannon_entropy=shannon,
        total_entropy=total,
        theoretical_max_entropy_per_char=theoretical,
        entropy_efficiency=efficiency,
        distribution=character_distribution(password),
        unique_char_count=unique,
        repetition_score=repetition_score,
        patterns=detect_patterns(password),
        security_score=score,
    )
    logger.debug(
        "analyzed password: length=%d shannon=%.3f total=%.2f score=%.1f",
        length,
        shannon,
        total,
        score,
    )
    return report


def analyze_passwords(
    passwords: Mapping[str, str], alphabet_size: int
) -> AnalysisSummary:
    """
    Analyze several labelled passwords against the same alphabet.

    Empty passwords are skipped. The theoretical maximum total entropy
    uses the length of the first non-empty password.
    """
    per_char = max_entropy_per_char(alphabet_size)
    reference_length = next((len(p) for p in passwords.values() if p), 0)

    reports = {}
    for label, password in passwords.items():
        if not password:
            continue
        # GeneratorKind labels are keyed by their plain value
        key = str(getattr(label, "value", label))
        reports[key] = analyze_entropy(str(password), alphabet_size)
    return AnalysisSummary(
        theoretical=TheoreticalEntropy(
            alphabet_size=alphabet_size,
            max_entropy_per_char=per_char,
            max_total_entropy=per_char * reference_length,
        ),
        reports=reports,
    )


def security_grade(score: float) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Fair"
    if score >= 20:
        return "Weak"
    return "Very Weak"
