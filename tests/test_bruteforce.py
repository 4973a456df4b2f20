import logging
import math

import pytest

from entropylab.analyzer import analyze_entropy
from entropylab.bruteforce import (
    ATTACKER_PROFILES,
    SECONDS_PER_YEAR,
    InvalidThroughputError,
    SecurityTier,
    UnknownProfileError,
    classify_tier,
    estimate_brute_force,
    get_profile,
    parse_throughput,
    profile_for_throughput,
    resolve_throughput,
    simulate_attack,
)


def test_zero_entropy_is_instant():
    report = estimate_brute_force(0, 1e9)
    assert report.average_time == 0
    assert report.search_space == 0
    assert report.tier is SecurityTier.CRITICAL


@pytest.mark.parametrize("bits", [-4.0, math.nan])
def test_degenerate_entropy_is_treated_as_zero(bits):
    report = estimate_brute_force(bits, 1e9)
    assert report.average_time == 0
    assert report.tier is SecurityTier.CRITICAL


def test_search_space_and_times():
    report = estimate_brute_force(10, 2.0)
    assert report.search_space == 1024
    assert report.worst_case_attempts == 1024
    assert report.average_attempts == 512
    assert report.worst_case_time == 512
    assert report.average_time == 256
    assert report.tier is SecurityTier.VERY_WEAK


def test_average_time_strictly_increases_with_entropy():
    times = [estimate_brute_force(bits, 1e9).average_time for bits in range(1, 200)]
    assert all(a < b for a, b in zip(times, times[1:]))


def test_huge_entropy_overflows_to_infinity():
    report = estimate_brute_force(5000, 1e18)
    assert math.isinf(report.search_space)
    assert math.isinf(report.average_time)
    assert report.tier is SecurityTier.EXTREMELY_STRONG


@pytest.mark.parametrize(
    "seconds,tier",
    [
        (0.999, SecurityTier.CRITICAL),
        (1, SecurityTier.VERY_WEAK),
        (3599, SecurityTier.VERY_WEAK),
        (3600, SecurityTier.WEAK),
        (86400, SecurityTier.FAIR),
        (SECONDS_PER_YEAR, SecurityTier.GOOD),
        (SECONDS_PER_YEAR * 1000, SecurityTier.STRONG),
        (SECONDS_PER_YEAR * 1_000_000, SecurityTier.EXTREMELY_STRONG),
        (math.inf, SecurityTier.EXTREMELY_STRONG),
    ],
)
def test_tier_thresholds(seconds, tier):
    assert classify_tier(seconds) is tier


def test_tiers_are_ordered_and_labelled():
    tiers = list(SecurityTier)
    assert tiers == sorted(tiers)
    assert len(tiers) == 7
    assert SecurityTier.CRITICAL.label == "Critical"
    assert SecurityTier.EXTREMELY_STRONG.label == "Extremely Strong"
    assert all(t.description for t in tiers)


@pytest.mark.parametrize("value", [0, -1, "abc", None, True, math.inf, math.nan, ""])
def test_invalid_throughput_is_rejected(value):
    with pytest.raises(InvalidThroughputError):
        parse_throughput(value)
    with pytest.raises(InvalidThroughputError):
        estimate_brute_force(40, value)


def test_numeric_string_throughput_is_accepted():
    assert parse_throughput("1e9") == 1e9
    assert parse_throughput(250) == 250.0


def test_resolve_throughput_keeps_last_valid_value(caplog):
    with caplog.at_level(logging.WARNING, logger="entropylab.bruteforce"):
        assert resolve_throughput("-5", fallback=1e6) == 1e6
    assert "keeping" in caplog.text
    assert resolve_throughput("2e12", fallback=1e6) == 2e12


def test_attacker_profiles():
    assert {k: p.throughput for k, p in ATTACKER_PROFILES.items()} == {
        "hobby": 1e6,
        "criminal": 1e9,
        "organization": 1e12,
        "nation": 1e15,
        "quantum": 1e18,
    }
    assert get_profile("Nation").key == "nation"
    assert profile_for_throughput(1e12).key == "organization"
    assert profile_for_throughput(42.0) is None


def test_unknown_profile():
    with pytest.raises(UnknownProfileError):
        get_profile("script-kiddie")


def test_simulate_attack_and_as_dict():
    reports = {"low": analyze_entropy("aaaa", 62), "high": analyze_entropy("abcd", 62)}
    results = simulate_attack(reports, 1.0)
    assert results["low"].average_time == 0
    assert results["high"].average_time == pytest.approx(128)
    data = results["high"].as_dict()
    assert data["tier"] == "Very Weak"
    assert data["tier_description"]
