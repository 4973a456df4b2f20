"""
Configuration for the password entropy lab.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field


LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
NUMBERS = string.digits
# 32 fixed punctuation characters.
SYMBOLS = string.punctuation

# The weak generator always draws from this reduced alphabet,
# whatever the caller configured.
WEAK_ALPHABET = LOWERCASE + NUMBERS

MAX_PASSWORD_LENGTH = 64

# Attempts per second used when the caller does not pick an attacker.
DEFAULT_THROUGHPUT = 1e9


@dataclass(frozen=True)
class CharacterSetConfig:
    lowercase: bool = True
    uppercase: bool = True
    numbers: bool = True
    symbols: bool = False

    def enabled_classes(self) -> list[str]:
        """Names of the enabled classes, in concatenation order."""
        return [
            name
            for name in ("lowercase", "uppercase", "numbers", "symbols")
            if getattr(self, name)
        ]

    def any_enabled(self) -> bool:
        return bool(self.enabled_classes())


@dataclass
class EngineConfig:
    # Desired password length in characters.
    password_length: int = 12

    # Which character classes make up the alphabet.
    character_sets: CharacterSetConfig = field(default_factory=CharacterSetConfig)

    # Attacker throughput (attempts/second) for brute-force estimates.
    throughput: float = DEFAULT_THROUGHPUT

    # Quantum source settings.
    # NOTE: Keep num_qubits <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20
    entropy_rounds: int = 2
    quantum_streams: int = 2


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = EngineConfig()
