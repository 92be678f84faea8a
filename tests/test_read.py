import io

import pytest

from textscan import ConfigurationError, open_scanner, read_text


def test_read_text_from_path(tmp_path):
    test_file = tmp_path / "test.txt"
    test_file.write_text("name = σ", encoding="utf-8")

    assert read_text(test_file) == "name = σ"
    assert read_text(str(test_file)) == "name = σ"


def test_read_text_from_streams():
    assert read_text(io.StringIO("abc")) == "abc"
    assert read_text(io.BytesIO("σ".encode("utf-8"))) == "σ"
    assert read_text(io.BytesIO("é".encode("latin-1")), encoding="latin-1") == "é"


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="does not exist"):
        read_text(tmp_path / "missing.txt")


def test_empty_file(tmp_path):
    test_file = tmp_path / "empty.txt"
    test_file.write_text("")
    with pytest.raises(ConfigurationError, match="empty"):
        read_text(test_file)


def test_undecodable_file():
    with pytest.raises(ConfigurationError, match="decode"):
        read_text(io.BytesIO(b"\xff\xfe\xfa"), encoding="ascii")


def test_open_scanner(tmp_path):
    test_file = tmp_path / "test.txt"
    test_file.write_text("/* x", encoding="utf-8")

    scanner = open_scanner(test_file, strict_comments=False)
    assert scanner.source_name == str(test_file)
    assert not scanner.strict_comments
    assert scanner.get_char() == "/"
    assert len(scanner) == 4


def test_open_scanner_stream_name():
    scanner = open_scanner(io.StringIO("abc"))
    assert scanner.source_name == "<stream>"
