import math

import pytest

from entropylab.analyzer import (
    analyze_entropy,
    analyze_passwords,
    character_distribution,
    detect_patterns,
    security_grade,
    shannon_entropy,
)
from entropylab.generators import GeneratorKind


def test_single_symbol_has_zero_entropy():
    report = analyze_entropy("aaaa", 62)
    assert report.shannon_entropy == 0
    assert report.total_entropy == 0
    assert report.unique_char_count == 1
    assert report.repetition_score == 25.0


def test_four_equiprobable_symbols():
    report = analyze_entropy("abcd", 62)
    assert report.shannon_entropy == pytest.approx(2.0)
    assert report.total_entropy == pytest.approx(8.0)
    assert report.theoretical_max_entropy_per_char == pytest.approx(math.log2(62))


def test_efficiency_and_score():
    report = analyze_entropy("abcd", 16)
    assert report.entropy_efficiency == pytest.approx(50.0)
    assert report.repetition_score == 100.0
    assert report.security_score == pytest.approx(75.0)


def test_efficiency_is_not_clamped_but_score_is():
    # four distinct symbols measured against a two-letter alphabet
    report = analyze_entropy("abcd", 2)
    assert report.entropy_efficiency == pytest.approx(200.0)
    assert report.security_score == 100.0


def test_zero_alphabet_size_gives_zero_efficiency():
    report = analyze_entropy("abcd", 0)
    assert report.theoretical_max_entropy_per_char == 0.0
    assert report.entropy_efficiency == 0.0


def test_empty_password_report_is_zero():
    report = analyze_entropy("", 62)
    assert report.length == 0
    assert report.shannon_entropy == 0
    assert report.total_entropy == 0
    assert report.entropy_efficiency == 0
    assert report.unique_char_count == 0
    assert report.repetition_score == 0
    assert report.security_score == 0
    assert report.patterns.total == 0
    assert report.distribution.total == 0


@pytest.mark.parametrize("password", ["x", "hello world", "Tr0ub4dor&3", "zzzzzz", "é€a"])
def test_uniqueness_bounds(password):
    report = analyze_entropy(password, 94)
    assert report.unique_char_count <= report.length
    assert 0 <= report.repetition_score <= 100
    assert report.repetition_score == pytest.approx(
        report.unique_char_count / report.length * 100
    )
    assert 0 <= report.security_score <= 100


def test_analysis_is_idempotent():
    assert analyze_entropy("P@ssw0rd123", 94) == analyze_entropy("P@ssw0rd123", 94)


def test_character_distribution_priority():
    dist = character_distribution("aB3$zZ9 é")
    assert dist.lowercase == 2
    assert dist.uppercase == 2
    assert dist.numbers == 2
    # space and non-ASCII letters count as symbols
    assert dist.symbols == 3
    assert dist.total == 9


def test_pattern_detection_scenario():
    patterns = detect_patterns("abc123xyz")
    assert patterns.sequential >= 2
    assert patterns.keyboard >= 2
    assert patterns.repetitive == 0


def test_sequential_counts_overlapping_runs():
    assert detect_patterns("abcd").sequential == 2
    assert detect_patterns("ab").sequential == 0


def test_repetitive_counts_adjacent_pairs():
    assert detect_patterns("aaab").repetitive == 2
    assert detect_patterns("abab").repetitive == 0


def test_keyboard_patterns_case_insensitive_and_independent():
    assert detect_patterns("QWEasd").keyboard == 2
    assert detect_patterns("abcabc").keyboard == 2
    assert detect_patterns("q1w2e3").keyboard == 0


def test_random_char_count():
    report = analyze_entropy("abc123xyz", 62)
    assert report.random_char_count == max(0, 9 - report.patterns.total)
    assert analyze_entropy("aaaaaaa", 62).random_char_count == 1


def test_as_dict_is_plain_data():
    data = analyze_entropy("abcd", 62).as_dict()
    assert data["total_entropy"] == pytest.approx(8.0)
    assert data["distribution"]["lowercase"] == 4
    assert data["patterns"]["sequential"] == 2
    assert "random_char_count" in data


def test_shannon_entropy_matches_frequency_formula():
    # frequencies 2/4 and 1/4 twice -> 1.5 bits
    assert shannon_entropy("aabc") == pytest.approx(1.5)


def test_analyze_passwords_summary():
    summary = analyze_passwords(
        {GeneratorKind.WEAK: "aaaa", "medium": "", GeneratorKind.STRONG: "abcd"}, 16
    )
    assert set(summary.reports) == {"weak", "strong"}
    assert summary.theoretical.alphabet_size == 16
    assert summary.theoretical.max_entropy_per_char == 4.0
    assert summary.theoretical.max_total_entropy == 16.0
    assert summary.reports["strong"].total_entropy == pytest.approx(8.0)


@pytest.mark.parametrize(
    "score,grade",
    [(100, "Excellent"), (80, "Excellent"), (60, "Good"), (45, "Fair"), (20, "Weak"), (5, "Very Weak")],
)
def test_security_grade(score, grade):
    assert security_grade(score) == grade
