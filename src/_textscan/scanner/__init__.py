"""
In this module, a scanner is a cursor over a text held in memory, together
with the primitives a hand written recursive descent parser needs: reading
and peeking characters, skipping whitespace, lines and comments, reading up
to a delimiter and reading identifiers.

The cursor points at the most recently read character. It starts out before
the first character (position -1) and ends at the length of the text. Reading
past the end of the text is not an error, it gives the empty string.

Parsers are written against ScannerOps. Spans that run into the end of the
text (an unterminated comment or string) raise UnterminatedSpanError after
winding the cursor back to where the span started, so a parser may try
something else from the same position.
"""

from .errors import ConfigurationError, ContractViolation, UnterminatedSpanError
from .scanner_ops import ScannerOps
from .text_scanner import Scanner

__all__ = [
    "ConfigurationError",
    "ContractViolation",
    "Scanner",
    "ScannerOps",
    "UnterminatedSpanError",
]
