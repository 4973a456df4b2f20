"""
Command-line interface for the password entropy lab.

Usage (from repo root):
    python -m entropylab.cli generate --length 16 --symbols
    python -m entropylab.cli generate --quantum
    python -m entropylab.cli analyze "hunter2" --profile nation
    python -m entropylab.cli estimate 64 --throughput 1e12
    python -m entropylab.cli compare --length 12 --symbols --json
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys

from .analyzer import analyze_entropy, security_grade
from .bruteforce import (
    ATTACKER_PROFILES,
    InvalidThroughputError,
    UnknownProfileError,
    estimate_brute_force,
    get_profile,
    parse_throughput,
)
from .comparison import compare_entropy
from .config import DEFAULT_CONFIG, MAX_PASSWORD_LENGTH, CharacterSetConfig
from .formatting import UNDEFINED, format_count, format_duration, format_ratio
from .generators import generate_all
from .mapping import build_alphabet

logger = logging.getLogger(__name__)


def _add_charset_args(p: argparse.ArgumentParser) -> None:
    defaults = DEFAULT_CONFIG.character_sets
    for name in ("lowercase", "uppercase", "numbers", "symbols"):
        p.add_argument(
            f"--{name}",
            action=argparse.BooleanOptionalAction,
            default=getattr(defaults, name),
            help=f"Include {name} in the alphabet",
        )


def _add_attacker_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--profile",
        default=None,
        help=f"Attacker preset: {', '.join(ATTACKER_PROFILES)}",
    )
    p.add_argument(
        "--throughput",
        default=None,
        help="Custom attempts per second (overrides --profile)",
    )


def _length(value: str) -> int:
    n = int(value)
    if not 0 <= n <= MAX_PASSWORD_LENGTH:
        raise argparse.ArgumentTypeError(
            f"length must be between 0 and {MAX_PASSWORD_LENGTH}"
        )
    return n


def _charset(args) -> CharacterSetConfig:
    return CharacterSetConfig(
        lowercase=args.lowercase,
        uppercase=args.uppercase,
        numbers=args.numbers,
        symbols=args.symbols,
    )


def _throughput(args) -> float:
    if args.throughput is not None:
        return parse_throughput(args.throughput)
    if args.profile is not None:
        return get_profile(args.profile).throughput
    return DEFAULT_CONFIG.throughput


def _source(args):
    if not args.quantum:
        return None
    from .quantum_engine import QuantumRandomSource

    return QuantumRandomSource(DEFAULT_CONFIG)


def _json_safe(value):
    """Replace inf/nan floats with words so the output stays strict JSON."""
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return UNDEFINED
        return "infinite" if value > 0 else "-infinite"
    return value


def _emit(data, as_json: bool, lines: list[str]) -> None:
    if as_json:
        print(json.dumps(_json_safe(data), indent=2, default=str, allow_nan=False))
    else:
        print("\n".join(lines))


def _cmd_generate(args) -> int:
    config = _charset(args)
    if not config.any_enabled():
        logger.warning("No character classes selected; medium/strong will be empty")

    passwords = generate_all(config, args.length, source=_source(args))
    data = {
        kind.value: {"password": p.value, "secure": p.secure}
        for kind, p in passwords.items()
    }
    lines = [
        f"{kind.value:>6}: {p.value}" + ("" if p.secure else "  (not secure)")
        for kind, p in passwords.items()
    ]
    _emit(data, args.json, lines)
    return 0


def _cmd_analyze(args) -> int:
    throughput = _throughput(args)
    _alphabet, size = build_alphabet(_charset(args))
    report = analyze_entropy(args.password, size)
    bf = estimate_brute_force(report.total_entropy, throughput)

    data = {"entropy": report.as_dict(), "brute_force": bf.as_dict()}
    lines = [
        f"Shannon entropy:   {report.shannon_entropy:.3f} bits/char",
        f"Total entropy:     {report.total_entropy:.2f} bits",
        f"Efficiency:        {report.entropy_efficiency:.1f}%",
        f"Unique characters: {report.unique_char_count}/{report.length}",
        f"Patterns:          sequential={report.patterns.sequential} "
        f"repetitive={report.patterns.repetitive} "
        f"keyboard={report.patterns.keyboard}",
        f"Security score:    {report.security_score:.1f} "
        f"({security_grade(report.security_score)})",
        f"Average crack:     {format_duration(bf.average_time)}",
        f"Tier:              {bf.tier.label} - {bf.tier.description}",
    ]
    _emit(data, args.json, lines)
    return 0


def _cmd_estimate(args) -> int:
    bf = estimate_brute_force(args.bits, _throughput(args))
    lines = [
        f"Search space:  {format_count(bf.search_space)}",
        f"Worst case:    {format_duration(bf.worst_case_time)}",
        f"Average:       {format_duration(bf.average_time)}",
        f"Tier:          {bf.tier.label} - {bf.tier.description}",
    ]
    _emit(bf.as_dict(), args.json, lines)
    return 0


def _cmd_compare(args) -> int:
    result = compare_entropy(
        _charset(args),
        args.length,
        throughput=_throughput(args),
        variant=args.variant,
        source=_source(args),
    )
    lines = []
    for title, side in (("Low entropy", result.low), ("High entropy", result.high)):
        lines += [
            f"{title}: {side.password}" + ("" if side.secure else "  (not secure)"),
            f"  total entropy {side.entropy.total_entropy:.2f} bits, "
            f"{side.repetitions} repeats, {side.sequential_matches} sequences",
            f"  average crack {format_duration(side.brute_force.average_time)}",
        ]
    lines += [
        f"Harder to guess: {format_ratio(result.times_harder_to_guess)}",
        f"Longer to crack: {format_ratio(result.times_longer_to_crack)}",
    ]
    _emit(result.as_dict(), args.json, lines)
    return 0


def _cmd_profiles(args) -> int:
    data = {key: p.throughput for key, p in ATTACKER_PROFILES.items()}
    lines = [
        f"{p.key:<13} {p.throughput:>8.0e}/s  {p.name} ({p.description})"
        for p in ATTACKER_PROFILES.values()
    ]
    _emit(data, args.json, lines)
    return 0


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Machine-readable output")
    quantum = argparse.ArgumentParser(add_help=False)
    quantum.add_argument(
        "--quantum",
        action="store_true",
        help="Draw strong passwords from the qiskit Aer simulator",
    )

    p = argparse.ArgumentParser(prog="entropylab")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", parents=[common, quantum], help="Generate weak, medium and strong passwords")
    gen.add_argument("--length", type=_length, default=DEFAULT_CONFIG.password_length)
    _add_charset_args(gen)
    gen.set_defaults(func=_cmd_generate)

    ana = sub.add_parser("analyze", parents=[common], help="Entropy and crack time of one password")
    ana.add_argument("password")
    _add_charset_args(ana)
    _add_attacker_args(ana)
    ana.set_defaults(func=_cmd_analyze)

    est = sub.add_parser("estimate", parents=[common], help="Crack time for a number of entropy bits")
    est.add_argument("bits", type=float)
    _add_attacker_args(est)
    est.set_defaults(func=_cmd_estimate)

    cmp_ = sub.add_parser("compare", parents=[common, quantum], help="Low vs high entropy side by side")
    cmp_.add_argument("--length", type=_length, default=DEFAULT_CONFIG.password_length)
    cmp_.add_argument("--variant", type=int, default=0, help="Pattern table rotation")
    _add_charset_args(cmp_)
    _add_attacker_args(cmp_)
    cmp_.set_defaults(func=_cmd_compare)

    prof = sub.add_parser("profiles", parents=[common], help="List attacker presets")
    prof.set_defaults(func=_cmd_profiles)

    return p


def main(argv=None) -> int:
    """
    Entry point for `python -m entropylab.cli`, `run_entropylab.py` and the
    `entropylab` console script.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (InvalidThroughputError, UnknownProfileError) as exc:
        # KeyError wraps its message in quotes
        message = exc.args[0] if exc.args else str(exc)
        print(f"error: {message}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
