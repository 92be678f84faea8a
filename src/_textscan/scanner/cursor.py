from dataclasses import dataclass, field

BOT_POSITION = -1


@dataclass
class Cursor:
    """
    The position of a scanner in its text, together with the scratch buffer
    used by delimiter bounded reads.

    position is -1 before anything has been read, otherwise the index of the
    most recently read character, or the length of the text once the text has
    been exhausted.
    """

    position: int = BOT_POSITION
    pending: list = field(default_factory=list)

    def advance(self, limit):
        """
        Move one character forward, but never beyond limit.
        """
        if self.position < limit:
            self.position += 1

    def retreat(self):
        if self.position > BOT_POSITION:
            self.position -= 1

    def reset(self):
        self.position = BOT_POSITION
        self.pending.clear()
