from typing import Sequence

from sumcc.errors import ParseError
from sumcc.token import EndOfInput, Number, Token, equal


class TokenCursor:
    """Read-only position over a token sequence ending in ``EndOfInput``."""

    tokens: Sequence[Token]
    index: int

    def __init__(self, tokens: Sequence[Token]) -> None:
        if not tokens or not isinstance(tokens[-1], EndOfInput):
            raise ValueError("token sequence must end with EndOfInput")
        self.tokens = tuple(tokens)
        self.index = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def advance(self) -> None:
        # EndOfInput is never stepped over
        if not self.at_end_of_input():
            self.index += 1

    def try_consume_operator(self, op: str) -> bool:
        if not equal(self.current, op):
            return False
        self.advance()
        return True

    def expect_operator(self, op: str) -> None:
        if not equal(self.current, op):
            raise ParseError(f"not '{op}'", self.current.location)
        self.advance()

    def expect_number(self) -> int:
        token = self.current
        if not isinstance(token, Number):
            raise ParseError("not a number", token.location)
        self.advance()
        return token.value

    def at_end_of_input(self) -> bool:
        return isinstance(self.current, EndOfInput)
