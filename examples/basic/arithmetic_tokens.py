"""Tokenize an arithmetic expression with types and enum options."""

import re

from xscanner import EnumOption, Scanner, TypeRef

WS = re.compile(r"\s+")

s = Scanner("width * (2 + 40)")
s.add_type("number", lambda d: d.scan_regex(r"\d+"))
s.add_type("name", lambda d: d.scan_regex(r"[A-Za-z_]\w*"))

options = [
    EnumOption(TypeRef("number"), "NUMBER"),
    EnumOption(TypeRef("name"), "NAME"),
    EnumOption(re.compile(r"[-+*/]"), "OP"),
    EnumOption("(", "LPAREN"),
    EnumOption(")", "RPAREN"),
]

tokens = []
while not s.at_end:
    s.scan(WS)
    if s.at_end:
        break
    kind = s.scan(*options)
    if kind is None:
        raise SystemExit(f"unexpected input at {s.pos}: {s.unscanned_text!r}")
    tokens.append((kind, s.last_match))

for kind, text in tokens:
    print(f"{kind:<7} {text}")
