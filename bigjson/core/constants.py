"""
Character classes, patterns and literal tables used by the scanner.
"""

import re

from .tokens import Kind

# Skipped between tokens without being emitted
SKIP_CHARS = frozenset(" \n\r\t,:")

NUMBER_START_CHARS = frozenset("-0123456789")

# Maximal run of number characters; no grammar check
NUMBER_PATTERN = re.compile(r"[0-9eE.+\-]+")

# String body up to, not including, the first unescaped quote. A backslash
# always consumes the following character, newline included.
STRING_BODY_PATTERN = re.compile(r'[^"\\]*(?:\\.[^"\\]*)*', re.DOTALL)

OPEN_CHARS = {
    "{": Kind.OBJECT,
    "[": Kind.ARRAY,
}
CLOSE_CHARS = frozenset("}]")

# Literal text -> kind, tried in order at a token start
LITERALS = (
    ("null", Kind.NULL),
    ("true", Kind.BOOL),
    ("false", Kind.BOOL),
)

TRUE_LITERAL = "true"
