import logging
from functools import cached_property

from _textscan.scanner.classify import IdentifierRules, is_whitespace, is_whitespace_line
from _textscan.scanner.cursor import BOT_POSITION, Cursor
from _textscan.scanner.errors import (
    ConfigurationError,
    ContractViolation,
    UnterminatedSpanError,
)
from _textscan.scanner.location import LineIndex
from _textscan.scanner.scanner_ops import ScannerOps

logger = logging.getLogger(__name__)

ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class Scanner(ScannerOps):
    """
    Scanner over a text held in memory, see ScannerOps for the meaning of
    each primitive.

    A scanner is meant for a single parse by a single caller, create one per
    text.
    """

    def __init__(
        self,
        text,
        source_name=None,
        debug=False,
        identifier_rules=None,
        strict_comments=True,
    ):
        """
        :param text: The (decoded) text to scan.
        :param source_name: Where text came from, used in messages.
        :param debug: Whether to log the spans consumed by the scanner.
        :param identifier_rules: IdentifierRules for parse_identifier,
            defaults to letters, digits and underscores.
        :param strict_comments: Whether an unterminated block comment is an
            error. If False, skip_comment stops at the end of text.
        """
        if not isinstance(text, str):
            raise ConfigurationError(
                f"Expected text to be a str, got {type(text).__name__}"
            )
        if not text:
            raise ConfigurationError(
                f"Cannot scan empty text from {source_name or '<string>'}"
            )
        self._text = text
        self._length = len(text)
        self._cursor = Cursor()
        self.source_name = source_name or "<string>"
        self.debug = debug
        self.identifier_rules = identifier_rules or IdentifierRules()
        self.strict_comments = strict_comments

    def __len__(self):
        return self._length

    def __repr__(self):
        return (
            f"Scanner(source_name={self.source_name!r}, "
            f"position={self.position}, length={self._length})"
        )

    @property
    def length(self):
        return self._length

    @property
    def position(self):
        return self._cursor.position

    @property
    def pending(self):
        return "".join(self._cursor.pending)

    @cached_property
    def _line_index(self):
        return LineIndex(self._text)

    def location(self, position=None):
        """
        :param position: A position in the text, defaults to the cursor
            position.
        :returns: The Location (line and column) of position.
        """
        if position is None:
            position = self._cursor.position
        return self._line_index.location(position)

    def _log_span(self, what, start, span):
        if self.debug:
            logger.debug(
                "%s:%s: %s %r", self.source_name, self.location(start), what, span
            )

    def _char_at(self, position):
        if 0 <= position < self._length:
            return self._text[position]
        return ""

    def rewind(self):
        self._cursor.reset()

    def get_char(self):
        self._cursor.advance(self._length)
        return self._char_at(self._cursor.position)

    def unget_char(self):
        self._cursor.retreat()

    def next_char(self):
        return self._char_at(self._cursor.position + 1)

    def act_char(self):
        return self._char_at(self._cursor.position)

    def eot(self):
        return self._cursor.position >= self._length

    def bot(self):
        return self._cursor.position <= 0

    def eol(self):
        return self.act_char() in ("\n", "\r")

    def is_id_start(self, char):
        return self.identifier_rules.is_id_start(char)

    def is_id_next(self, char):
        return self.identifier_rules.is_id_next(char)

    def _start(self):
        if self._cursor.position == BOT_POSITION:
            self.get_char()

    def skip_line(self):
        self._start()
        skipped = False
        while not self.eol() and not self.eot():
            self.get_char()
            skipped = True
        return skipped

    def _skip_while(self, predicate):
        self._start()
        skipped = False
        while predicate(self.act_char()) and not self.eot():
            self.get_char()
            skipped = True
        return skipped

    def skip_whitespaces(self):
        return self._skip_while(is_whitespace)

    def skip_whitespaces_line(self):
        return self._skip_while(is_whitespace_line)

    def follows_text(self, text, ignorecase=False):
        position = self._cursor.position
        window = self._text[position : position + len(text)] if position >= 0 else ""
        if len(window) != len(text):
            return False
        if ignorecase:
            # ascii only, so the window keeps its length
            return window.translate(ASCII_LOWER) == text.translate(ASCII_LOWER)
        return window == text

    def skip_comment(self):
        if not (self.act_char() == "/" and self.next_char() == "*"):
            raise ContractViolation(
                f"skip_comment called at {self.source_name}:{self.location()} "
                f"where there is no comment opener, got {self.act_char()!r}"
            )
        start = self._cursor.position
        self.get_char()
        while True:
            char = self.get_char()
            if not char:
                if self.strict_comments:
                    self._cursor.position = start
                    raise UnterminatedSpanError(
                        f"Reached end of text in comment starting at "
                        f"{self.source_name}:{self.location(start)}",
                        start,
                        self.location(start),
                        "*/",
                    )
                break
            if char == "*" and self.next_char() == "/":
                self.get_char()
                self.get_char()
                break
        comment = self._text[start : self._cursor.position]
        self._log_span("skipped comment", start, comment)
        return comment

    def follow_delimiter(self, delimiter):
        if not isinstance(delimiter, str) or len(delimiter) != 1:
            raise ContractViolation(
                f"Delimiter has to be a single character, got {delimiter!r}"
            )
        start = self._cursor.position
        pending = self._cursor.pending
        pending.clear()
        while True:
            char = self.get_char()
            if not char:
                self._cursor.position = start
                pending.clear()
                raise UnterminatedSpanError(
                    f"Reached end of text looking for {delimiter!r} after "
                    f"{self.source_name}:{self.location(start)}",
                    start,
                    self.location(start),
                    delimiter,
                )
            pending.append(char)
            if char == delimiter:
                break
        span = "".join(pending)
        self._log_span("read up to delimiter", start + 1, span)
        return span

    def follow_begrenzer(self, begrenzer):
        """
        Same as follow_delimiter.
        """
        return self.follow_delimiter(begrenzer)

    def parse_identifier(self):
        if self._cursor.position == BOT_POSITION or is_whitespace(self.act_char()):
            self.skip_whitespaces()
        if not self.is_id_start(self.act_char()):
            return ""
        start = self._cursor.position
        chars = []
        while not self.eot() and self.is_id_next(self.act_char()):
            chars.append(self.act_char())
            self.get_char()
        identifier = "".join(chars)
        self._log_span("identifier", start, identifier)
        return identifier
