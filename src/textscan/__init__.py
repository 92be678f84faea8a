import textscan.version
from _textscan.reading import open_scanner, read_text
from _textscan.scanner import (
    ConfigurationError,
    ContractViolation,
    Scanner,
    ScannerOps,
    UnterminatedSpanError,
)
from _textscan.scanner.classify import (
    IdentifierRules,
    is_alnum,
    is_alpha,
    is_digit,
    is_id_next,
    is_id_start,
    is_quotation_mark,
    is_underscore,
    is_whitespace,
    is_whitespace_line,
)
from _textscan.scanner.common import read_quoted, skip_trivia
from _textscan.scanner.location import Location

__version__ = textscan.version.version

__all__ = [
    "ConfigurationError",
    "ContractViolation",
    "IdentifierRules",
    "Location",
    "Scanner",
    "ScannerOps",
    "UnterminatedSpanError",
    "is_alnum",
    "is_alpha",
    "is_digit",
    "is_id_next",
    "is_id_start",
    "is_quotation_mark",
    "is_underscore",
    "is_whitespace",
    "is_whitespace_line",
    "open_scanner",
    "read_quoted",
    "read_text",
    "skip_trivia",
]
