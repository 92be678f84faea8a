class ConfigurationError(Exception):
    """
    Raised when a scanner cannot be set up, ie. the text is empty, is not
    a string or could not be loaded.
    """

    pass


class ContractViolation(AssertionError):
    """
    Raised when a primitive is called outside of its precondition, for
    instance skip_comment when the cursor is not at a comment opener. This
    is a bug in the calling parser and is not meant to be recovered from.
    """

    pass


class UnterminatedSpanError(Exception):
    """
    Raised when the end of text is reached while looking for the closer of
    a span (the end of a block comment or a delimiter). The scanner winds
    its cursor back to where the span started before raising, so the
    caller may recover.
    """

    def __init__(self, message, start, location, expected):
        super().__init__(message)
        self.start = start
        self.location = location
        self.expected = expected
