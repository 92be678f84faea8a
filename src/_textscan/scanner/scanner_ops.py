from abc import ABC, abstractmethod


class ScannerOps(ABC):
    """
    The scanning primitives a hand written parser is built from. Grammar
    code should depend on this interface only, the text and the cursor stay
    private to the implementing scanner.

    The cursor points at the "current" character, the one most recently read
    by get_char. Before anything is read the cursor is at the bottom of the
    text (BOT, position -1), after the last character has been read it is at
    the end of the text (EOT, position == length). Peeking outside of the
    text gives the empty string.

    Skipping primitives leave the cursor on the first character they did not
    skip, so that act_char() is the next character for the parser to look
    at.
    """

    @property
    @abstractmethod
    def position(self):
        pass

    @property
    @abstractmethod
    def pending(self):
        """
        The text accumulated by the last delimiter bounded read.
        """
        pass

    @abstractmethod
    def rewind(self):
        """
        Move the cursor back to the bottom of the text.
        """
        pass

    @abstractmethod
    def get_char(self):
        """
        Advance the cursor by one character.

        :returns: The character now under the cursor, or "" at the end of
            text.
        """
        pass

    @abstractmethod
    def unget_char(self):
        """
        Move the cursor back by one character, does nothing at the bottom of
        the text.
        """
        pass

    @abstractmethod
    def next_char(self):
        """
        :returns: The character after the cursor without moving it, or "".
        """
        pass

    @abstractmethod
    def act_char(self):
        """
        :returns: The character under the cursor without moving it, or "".
        """
        pass

    @abstractmethod
    def eot(self):
        pass

    @abstractmethod
    def bot(self):
        pass

    @abstractmethod
    def eol(self):
        pass

    @abstractmethod
    def is_id_start(self, char):
        pass

    @abstractmethod
    def is_id_next(self, char):
        pass

    @abstractmethod
    def skip_line(self):
        """
        Skip up to, but not including, the next line terminator.

        :returns: Whether any characters were skipped.
        """
        pass

    @abstractmethod
    def skip_whitespaces(self):
        """
        Skip spaces, tabs and line terminators.

        :returns: Whether any whitespace was skipped.
        """
        pass

    @abstractmethod
    def skip_whitespaces_line(self):
        """
        Skip spaces, tabs and carriage returns, stopping at a line feed.

        :returns: Whether any whitespace was skipped.
        """
        pass

    @abstractmethod
    def follows_text(self, text, ignorecase=False):
        """
        :param ignorecase: Whether to ignore the case of ascii letters.
        :returns: Whether text starts at the cursor position. The cursor is
            not moved.
        """
        pass

    @abstractmethod
    def skip_comment(self):
        """
        Skip a block comment, ie. "/* comment */". The cursor has to be at
        the opening "/*".

        :returns: The skipped comment.
        """
        pass

    @abstractmethod
    def follow_delimiter(self, delimiter):
        """
        Read characters up to and including delimiter.

        :returns: The characters read, delimiter included.
        """
        pass

    @abstractmethod
    def parse_identifier(self):
        """
        :returns: The identifier at the cursor, skipping leading whitespace,
            or "" if there is no identifier.
        """
        pass
