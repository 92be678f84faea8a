"""
Helpers composed from the ScannerOps primitives, for the scanning tasks most
grammars share.
"""

from _textscan.scanner.classify import is_quotation_mark
from _textscan.scanner.errors import ContractViolation


def skip_trivia(ops, line_comment=None):
    """
    Skip any sequence of whitespace and comments, ie. for "  /* a */ b" the
    cursor is left at "b".

    :param ops: A ScannerOps.
    :param line_comment: Opener of comments that run to the end of the line,
        eg. "//" or "#". None if the grammar has no line comments.
    :returns: Whether anything was skipped.
    """
    skipped = False
    while True:
        if ops.skip_whitespaces():
            skipped = True
        if ops.follows_text("/*"):
            ops.skip_comment()
        elif line_comment and ops.follows_text(line_comment):
            ops.skip_line()
        else:
            return skipped
        skipped = True


def read_quoted(ops):
    """
    Read a string quoted with ', " or ` starting at the cursor. There is no
    escaping, the string ends at the next occurrence of the opening quote.

    :param ops: A ScannerOps with the cursor at the opening quote.
    :returns: The contents of the string, without quotes. The cursor is left
        at the closing quote.
    """
    quote = ops.act_char()
    if not is_quotation_mark(quote):
        raise ContractViolation(f"Expected a quotation mark, got {quote!r}")
    return ops.follow_delimiter(quote)[:-1]
