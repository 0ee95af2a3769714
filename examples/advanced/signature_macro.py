"""Collect a function signature into the data store with a macro."""

import re

from xscanner import Scanner

IDENT = re.compile(r"[A-Za-z_]\w*")
WS = re.compile(r"\s+")


def scan_signature(s: Scanner) -> None:
    s.scan_string("def")
    s.scan(WS)
    s.data["name"] = s.scan(IDENT)
    s.scan_string("(")
    params = []
    while (param := s.scan(IDENT)) is not None:
        params.append(param)
        s.scan(re.compile(r",\s*"))
    s.scan_string(")")
    s.data["params"] = params


s = Scanner("def area(width, height): ...")
s.add_macro("signature", scan_signature)
s.do("signature")
print(s.data)
print(s.unscanned_text)
