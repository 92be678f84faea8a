"""
Character classification. All predicates take a single character and
return False for the empty string (which the scanner returns when out of
range), for None and for anything longer than one character.

Only ASCII classes are recognized, there is no locale or unicode awareness.
"""

from dataclasses import dataclass

WHITESPACE = " \t\r\n"
WHITESPACE_LINE = " \t\r"
QUOTATION_MARKS = "'\"`"


def _is_char(char):
    return char is not None and len(char) == 1


def is_whitespace(char):
    return _is_char(char) and char in WHITESPACE


def is_whitespace_line(char):
    """
    Same as is_whitespace, but line feed is not counted as whitespace, so
    that skipping stops at the end of a line.
    """
    return _is_char(char) and char in WHITESPACE_LINE


def is_alpha(char):
    return _is_char(char) and ("a" <= char <= "z" or "A" <= char <= "Z")


def is_digit(char):
    return _is_char(char) and "0" <= char <= "9"


def is_underscore(char):
    return char == "_"


def is_alnum(char):
    return is_alpha(char) or is_digit(char)


def is_quotation_mark(char):
    return _is_char(char) and char in QUOTATION_MARKS


def is_id_start(char, sigils=""):
    """
    :param sigils: Extra characters allowed to start an identifier, eg. "$"
        for languages with variable prefixes.
    :returns: Whether char can be the first character of an identifier.
    """
    return (
        is_underscore(char) or is_alpha(char) or (_is_char(char) and char in sigils)
    )


def is_id_next(char, sigils=""):
    """
    :param sigils: Extra characters allowed inside an identifier.
    :returns: Whether char can be the second or later character of an
        identifier.
    """
    return is_id_start(char, sigils) or is_alnum(char)


@dataclass(frozen=True)
class IdentifierRules:
    """
    The lexical rules for identifiers of a grammar. By default an identifier
    is an ascii letter or underscore followed by letters, digits and
    underscores. start_sigils are additionally accepted anywhere in the
    identifier, next_sigils only after the first character.
    """

    start_sigils: str = ""
    next_sigils: str = ""

    def is_id_start(self, char):
        return is_id_start(char, self.start_sigils)

    def is_id_next(self, char):
        return is_id_next(char, self.start_sigils + self.next_sigils)
