import textscan


def test_version():
    assert isinstance(textscan.__version__, str)


def test_public_api():
    scanner = textscan.Scanner("x = 1")
    assert isinstance(scanner, textscan.ScannerOps)
    assert scanner.parse_identifier() == "x"
    assert textscan.skip_trivia(scanner)
    assert scanner.location() == textscan.Location(1, 3)
