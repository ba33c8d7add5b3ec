"""
Numeral Parsing
===============

Converts literal tokens from Y86 source into integers.

Number Formats
--------------
| Format      | Example           | Value |
|-------------|-------------------|-------|
| Decimal     | 42, -7, $42       | 42    |
| Hexadecimal | 0x2a, $0x2A       | 42    |
| Empty       | $ (or nothing)    | 0     |

A leading '$' (the immediate marker) is always optional. Hexadecimal
numbers are written with a '0x' prefix only; there is no binary or octal
form and no expression arithmetic.

Tokens with identifier syntax are not numbers at all: they are label
references and are left for the resolution pass.
"""

import re
from typing import Optional

from y86asm.errors import MalformedNumeralError, SourceLocation


# Labels: a letter followed by letters or digits
IDENTIFIER_PATTERN = r"[a-zA-Z][a-zA-Z0-9]*"

_IDENTIFIER_RE = re.compile(rf"^{IDENTIFIER_PATTERN}$")
_DECIMAL_RE = re.compile(r"^[+-]?[0-9]+$")
_HEX_DIGITS_RE = re.compile(r"^[0-9a-fA-F]+$")


def is_symbol_reference(token: str) -> bool:
    """Return True if the token has identifier syntax (a label reference)."""
    return bool(_IDENTIFIER_RE.match(token))


def parse_numeral(
    token: str,
    location: Optional[SourceLocation] = None,
    source_line: Optional[str] = None,
) -> int:
    """
    Parse a numeral token into an integer.

    Args:
        token: The token text, optionally '$'-prefixed
        location: Source location for error reporting
        source_line: Source text for error reporting

    Returns:
        The integer value

    Raises:
        MalformedNumeralError: If the token is not valid for its base

    Example:
        >>> parse_numeral("$0x100")
        256
        >>> parse_numeral("-5")
        -5
        >>> parse_numeral("$")
        0
    """
    text = token.strip()
    if text.startswith("$"):
        text = text[1:]

    if text == "":
        return 0

    if text[:2] in ("0x", "0X"):
        digits = text[2:]
        if not _HEX_DIGITS_RE.match(digits):
            raise MalformedNumeralError(token, location, source_line)
        return int(digits, 16)

    if not _DECIMAL_RE.match(text):
        raise MalformedNumeralError(token, location, source_line)
    return int(text, 10)
