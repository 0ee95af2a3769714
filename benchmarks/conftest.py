"""Benchmark fixtures and configuration."""

from __future__ import annotations

import re

import pytest

from xscanner import EnumOption, Scanner, TypeRef


@pytest.fixture
def expression_source() -> str:
    """Generate a long arithmetic expression (~40KB)."""
    terms = [f"(alpha_{i} + {i * 7}) * beta_{i}" for i in range(1000)]
    return " - ".join(terms)


@pytest.fixture
def token_options() -> list:
    return [
        EnumOption(TypeRef("number"), "NUMBER"),
        EnumOption(TypeRef("name"), "NAME"),
        EnumOption(re.compile(r"[-+*/]"), "OP"),
        EnumOption("(", "LPAREN"),
        EnumOption(")", "RPAREN"),
    ]


def make_scanner(source: str) -> Scanner:
    s = Scanner(source)
    s.add_type("number", lambda d: d.scan_regex(r"\d+"))
    s.add_type("name", lambda d: d.scan_regex(r"[A-Za-z_]\w*"))
    return s


@pytest.fixture
def scanner_factory():
    """Build a scanner with the "number" and "name" types registered."""
    return make_scanner
