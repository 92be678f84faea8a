import pathlib

from _textscan.scanner import Scanner
from _textscan.scanner.errors import ConfigurationError


def decode(bytelike, encoding, source_name):
    try:
        return bytelike.decode(encoding)
    except UnicodeDecodeError as err:
        raise ConfigurationError(
            f"Could not decode {source_name} as {encoding}: {err}"
        ) from err


def source_name_of(filelike):
    if isinstance(filelike, (str, pathlib.Path)):
        return str(filelike)
    return getattr(filelike, "name", None) or "<stream>"


def read_text(filelike, encoding="utf-8"):
    """
    Reads the text to be scanned, ie. text = read_text("/my/file.txt").

    :param filelike: Either a path or an open stream, in text or
        binary mode.
    :param encoding: The encoding used to decode binary contents.
    :returns: The contents as a str.
    """
    source_name = source_name_of(filelike)
    if isinstance(filelike, (str, pathlib.Path)):
        path = pathlib.Path(filelike)
        if not path.is_file():
            raise ConfigurationError(f"The file '{source_name}' does not exist")
        contents = path.read_bytes()
    else:
        contents = filelike.read()

    if hasattr(contents, "decode"):
        contents = decode(contents, encoding, source_name)

    if not contents:
        raise ConfigurationError(f"The file '{source_name}' is empty")
    return contents


def open_scanner(filelike, encoding="utf-8", **options):
    """
    Creates a Scanner for the contents of the given file.

    :param filelike: Either a path or an open stream.
    :param encoding: The encoding used to decode binary contents.
    :param options: Keyword arguments passed on to Scanner, eg. debug=True.
    """
    return Scanner(
        read_text(filelike, encoding),
        source_name=source_name_of(filelike),
        **options,
    )
