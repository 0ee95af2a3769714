"""Scan a greeting in a few lines with zero config."""

import re

from xscanner import Scanner

s = Scanner("Hello, World")
print(s.scan_string("Hello"))
print(s.scan([re.compile(r",\s*"), "COMMA"]))
print(s.scan_regex(r"\w+"))
print(s)
