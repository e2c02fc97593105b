from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Union


class TokenType(IntEnum):
    Operator = 1
    Number = 2
    EOF = 3


OPERATORS = ("+", "-")


@dataclass(frozen=True)
class Operator:
    kind: ClassVar[TokenType] = TokenType.Operator
    op: str
    location: int = 0

    def __post_init__(self) -> None:
        if self.op not in OPERATORS:
            raise ValueError(f"unsupported operator {self.op!r}")


@dataclass(frozen=True)
class Number:
    kind: ClassVar[TokenType] = TokenType.Number
    value: int
    location: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("number literal must be non-negative")


@dataclass(frozen=True)
class EndOfInput:
    kind: ClassVar[TokenType] = TokenType.EOF
    location: int = 0


Token = Union[Operator, Number, EndOfInput]


def equal(token: Token, op: str) -> bool:
    return isinstance(token, Operator) and token.op == op
