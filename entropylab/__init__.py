"""
Password entropy lab: contrasting generators, Shannon-entropy analysis
and brute-force cost estimation.
"""

from .config import CharacterSetConfig, EngineConfig, DEFAULT_CONFIG
from .mapping import build_alphabet
from .generators import (
    GeneratedPassword,
    GeneratorKind,
    generate,
    generate_all,
    generate_medium,
    generate_strong,
    generate_weak,
)
from .analyzer import EntropyReport, analyze_entropy, analyze_passwords
from .bruteforce import (
    ATTACKER_PROFILES,
    BruteForceReport,
    InvalidThroughputError,
    SecurityTier,
    estimate_brute_force,
    resolve_throughput,
)
from .comparison import ComparisonResult, compare_entropy
from .sources import SecureRandomSource, default_source

__all__ = [
    "CharacterSetConfig",
    "EngineConfig",
    "DEFAULT_CONFIG",
    "build_alphabet",
    "GeneratedPassword",
    "GeneratorKind",
    "generate",
    "generate_all",
    "generate_weak",
    "generate_medium",
    "generate_strong",
    "EntropyReport",
    "analyze_entropy",
    "analyze_passwords",
    "ATTACKER_PROFILES",
    "BruteForceReport",
    "InvalidThroughputError",
    "SecurityTier",
    "estimate_brute_force",
    "resolve_throughput",
    "ComparisonResult",
    "compare_entropy",
    "SecureRandomSource",
    "default_source",
]
