import pytest
from hypothesis import given

from _textscan.scanner import Scanner
from _textscan.scanner.classify import IdentifierRules

from .generators.scanner_texts import identifiers, whitespace


def test_parse_identifier():
    scanner = Scanner("  foo_bar2 rest")
    assert scanner.parse_identifier() == "foo_bar2"
    assert scanner.position == 10
    assert scanner.act_char() == " "
    assert scanner.parse_identifier() == "rest"
    assert scanner.eot()


@pytest.mark.parametrize("text", ["123abc", "-x", "$var"])
def test_no_identifier(text):
    scanner = Scanner(text)
    assert scanner.parse_identifier() == ""
    assert scanner.position == 0


def test_no_identifier_after_whitespace():
    scanner = Scanner("   9")
    assert scanner.parse_identifier() == ""
    assert scanner.act_char() == "9"


def test_identifier_stops_at_punctuation():
    scanner = Scanner("name=value")
    assert scanner.parse_identifier() == "name"
    assert scanner.act_char() == "="


def test_sigils():
    scanner = Scanner("$var$x other", identifier_rules=IdentifierRules("$"))
    assert scanner.parse_identifier() == "$var$x"
    assert scanner.is_id_start("$")
    assert scanner.is_id_next("$")


@given(whitespace, identifiers)
def test_parse_any_identifier(spaces, identifier):
    scanner = Scanner(spaces + identifier + ";")
    assert scanner.parse_identifier() == identifier
    assert scanner.act_char() == ";"
