"""
Human-readable renderings of durations, large counts and ratios.

Infinity and NaN are valid engine outputs and get words rather than
errors.
"""

from __future__ import annotations

import math

from .bruteforce import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_YEAR

UNBREAKABLE = "practically unbreakable"
UNDEFINED = "undefined"

_DURATION_UNITS = (
    (60, 1, "seconds"),
    (SECONDS_PER_HOUR, 60, "minutes"),
    (SECONDS_PER_DAY, SECONDS_PER_HOUR, "hours"),
    (SECONDS_PER_YEAR, SECONDS_PER_DAY, "days"),
    (SECONDS_PER_YEAR * 1000, SECONDS_PER_YEAR, "years"),
    (SECONDS_PER_YEAR * 10**6, SECONDS_PER_YEAR * 1000, "thousand years"),
    (SECONDS_PER_YEAR * 10**9, SECONDS_PER_YEAR * 10**6, "million years"),
)

_COUNT_SUFFIXES = (
    (1e18, "quintillion"),
    (1e15, "quadrillion"),
    (1e12, "trillion"),
    (1e9, "billion"),
    (1e6, "million"),
    (1e3, "thousand"),
)


def format_duration(seconds: float) -> str:
    if math.isnan(seconds):
        return UNDEFINED
    if math.isinf(seconds):
        return UNBREAKABLE
    if seconds < 1:
        return f"{seconds * 1000:.2f} milliseconds"
    for bound, divisor, unit in _DURATION_UNITS:
        if seconds < bound:
            return f"{seconds / divisor:.2f} {unit}"
    return f"{seconds / (SECONDS_PER_YEAR * 10**9):.2f} billion years"


def format_count(value: float) -> str:
    if math.isnan(value):
        return UNDEFINED
    if math.isinf(value):
        return "infinite"
    for threshold, suffix in _COUNT_SUFFIXES:
        if value >= threshold:
            return f"{value / threshold:.2f} {suffix}"
    return f"{value:.0f}"


def format_ratio(value: float) -> str:
    if math.isnan(value):
        return UNDEFINED
    if math.isinf(value):
        return "infinitely"
    return f"{format_count(value)}x"


def log_scale(value: float) -> float:
    """log10(value + 1): keeps 0 at 0 and squashes huge times for charts."""
    if math.isinf(value) or math.isnan(value):
        return value
    return math.log10(value + 1)
