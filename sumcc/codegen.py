from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Iterator, Sequence

from sumcc.cursor import TokenCursor
from sumcc.errors import ParseError
from sumcc.token import Token

# mov accepts a 64-bit immediate, add/sub a sign-extended 32-bit one
MAX_LOAD_IMMEDIATE = 9223372036854775807
MAX_ARITH_IMMEDIATE = 2147483647


class Syntax(str, Enum):
    INTEL = "intel"
    ATT = "att"


class Step(IntEnum):
    LOAD = 1
    ADD = 2
    SUB = 3


@dataclass(frozen=True)
class Dialect:
    preamble: tuple[str, ...]
    load: str
    add: str
    sub: str
    ret: str


DIALECTS = {
    Syntax.INTEL: Dialect(
        preamble=(".intel_syntax noprefix\n", ".globl main\n", "main:\n"),
        load="    mov rax, {}\n",
        add="    add rax, {}\n",
        sub="    sub rax, {}\n",
        ret="    ret\n",
    ),
    Syntax.ATT: Dialect(
        preamble=("  .globl main\n", "main:\n"),
        load="  mov ${}, %rax\n",
        add="  add ${}, %rax\n",
        sub="  sub ${}, %rax\n",
        ret="  ret\n",
    ),
}


def expect_immediate(cursor: TokenCursor, limit: int) -> int:
    location = cursor.current.location
    value = cursor.expect_number()
    if value > limit:
        raise ParseError("number out of range", location)
    return value


def walk(cursor: TokenCursor) -> Iterator[tuple[Step, int]]:
    """Yield one ``(step, literal)`` pair per instruction, range-checked.

    The first literal seeds ``rax``; every following ``+ N`` / ``- N`` pair
    becomes an add / sub against it, so there is no precedence and no
    intermediate tree.
    """
    yield Step.LOAD, expect_immediate(cursor, MAX_LOAD_IMMEDIATE)
    while not cursor.at_end_of_input():
        if cursor.try_consume_operator("+"):
            yield Step.ADD, expect_immediate(cursor, MAX_ARITH_IMMEDIATE)
            continue
        cursor.expect_operator("-")
        yield Step.SUB, expect_immediate(cursor, MAX_ARITH_IMMEDIATE)


class Emitter:
    def __init__(self, syntax: Syntax = Syntax.INTEL) -> None:
        self.dialect = DIALECTS[Syntax(syntax)]

    def emit(self, cursor: TokenCursor, write: Callable[[str], object]) -> None:
        dialect = self.dialect
        templates = {
            Step.LOAD: dialect.load,
            Step.ADD: dialect.add,
            Step.SUB: dialect.sub,
        }
        for line in dialect.preamble:
            write(line)
        for step, value in walk(cursor):
            write(templates[step].format(value))
        write(dialect.ret)


def codegen(tokens: Sequence[Token], syntax: Syntax = Syntax.INTEL) -> str:
    result: list[str] = []
    Emitter(syntax).emit(TokenCursor(tokens), result.append)
    return "".join(result)


def evaluate(tokens: Sequence[Token]) -> int:
    """Value the generated ``main`` returns, without the 64-bit wrap-around."""
    value = 0
    for step, literal in walk(TokenCursor(tokens)):
        match step:
            case Step.LOAD:
                value = literal
            case Step.ADD:
                value += literal
            case Step.SUB:
                value -= literal
    return value
