"""
Input errors raised while turning card codes into a hand.
"""


class ParseError(ValueError):
    """Base class for malformed card input."""


class InvalidLength(ParseError):
    """The query does not contain exactly three cards."""

    def __init__(self, query: str, expected: int = 3, length: int = None):
        self.query = query
        self.length = len(query) if length is None else length
        self.expected = expected
        super().__init__(f'Expected {expected} cards. Found {self.length} in "{query}".')


class InvalidCardCode(ParseError):
    """A character is not one of the known card codes."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Expected a/b/q. Found {code!r}.")
