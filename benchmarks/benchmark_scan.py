"""Benchmark option resolution over a long expression.

Compares tokenizing with literal/pattern options against tokenizing
through registered types, which pay for a duplicate per attempt.

Run with:
    pytest benchmarks/benchmark_scan.py -v --benchmark-only
"""

import re

import pytest

WS = re.compile(r"\s+")
PLAIN = [
    [re.compile(r"\d+"), "NUMBER"],
    [re.compile(r"[A-Za-z_]\w*"), "NAME"],
    [re.compile(r"[-+*/]"), "OP"],
    ["(", "LPAREN"],
    [")", "RPAREN"],
]


def tokenize(make_scanner, source: str, options: list) -> int:
    s = make_scanner(source)
    count = 0
    while not s.at_end:
        s.scan(WS)
        if s.at_end:
            break
        if s.scan(*options) is None:
            break
        count += 1
    return count


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_plain_options(benchmark, scanner_factory, expression_source):
    """Literal and pattern options only (baseline)."""
    benchmark(tokenize, scanner_factory, expression_source, PLAIN)


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_type_options(benchmark, scanner_factory, expression_source, token_options):
    """Same token set resolved through registered types."""
    benchmark(tokenize, scanner_factory, expression_source, token_options)


@pytest.mark.benchmark(group="duplicate")
def test_benchmark_duplicate(benchmark, scanner_factory, expression_source):
    """Cost of one duplicate with populated registries and data."""
    s = scanner_factory(expression_source)
    s.data["tokens"] = list(range(100))
    benchmark(s.duplicate)
