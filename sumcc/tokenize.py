from sumcc.errors import LexError
from sumcc.token import OPERATORS, EndOfInput, Number, Operator, Token

DIGITS = "0123456789"
WHITESPACE = " \t\n\v\f\r"


def read_number(expression: str, index: int) -> tuple[Number, int]:
    end = index
    while end < len(expression) and expression[end] in DIGITS:
        end += 1
    return Number(int(expression[index:end]), index), end


def tokenize(expression: str) -> list[Token]:
    index = 0
    tokens: list[Token] = []
    while index < len(expression):
        if expression[index] in WHITESPACE:
            index += 1
            continue
        if expression[index] in OPERATORS:
            tokens.append(Operator(expression[index], index))
            index += 1
            continue
        if expression[index] in DIGITS:
            token, index = read_number(expression, index)
            tokens.append(token)
            continue
        raise LexError("can not tokenize", index)
    tokens.append(EndOfInput(index))
    return tokens
