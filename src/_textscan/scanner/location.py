"""
Conversion of scanner positions to line and column numbers, used for error
messages and debug output.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Location:
    """
    1-based line and column of a position in the text. Column 0 is used for
    the position before the first character.
    """

    line: int
    column: int

    def __str__(self):
        return f"{self.line}:{self.column}"


class LineIndex:
    """
    Index of the line breaks in a text, built once so that locations can be
    looked up with a binary search instead of by counting.

    A line ends at a line feed, or at a carriage return not followed by a
    line feed, the same characters the scanner treats as end of line.
    """

    def __init__(self, text):
        codes = np.frombuffer(
            text.encode("utf-32-le", errors="surrogatepass"), dtype="<u4"
        )
        line_feeds = codes == ord("\n")
        carriage_returns = codes == ord("\r")
        carriage_returns[:-1] &= ~line_feeds[1:]
        self.line_breaks = np.flatnonzero(line_feeds | carriage_returns)

    @property
    def num_lines(self):
        return len(self.line_breaks) + 1

    def location(self, position):
        """
        :param position: A cursor position, -1 for the position before the
            text.
        :returns: The Location of the character at position.
        """
        if position < 0:
            return Location(1, 0)
        preceding = int(np.searchsorted(self.line_breaks, position, side="left"))
        if preceding == 0:
            return Location(1, position + 1)
        return Location(preceding + 1, position - int(self.line_breaks[preceding - 1]))
