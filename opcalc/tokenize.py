import string
from typing import Iterator

from opcalc.errors import IntegerOverflow
from opcalc.token import PUNCTUATORS, Token, new_number, new_token
from opcalc.utils import Peekable, maxsize


def read_number(expression: str, index: int) -> tuple[Token, int]:
    start = index
    temp = []
    while index < len(expression) and expression[index] in string.digits:
        temp.append(expression[index])
        index += 1
    value = int("".join(temp))
    if value > maxsize:
        raise IntegerOverflow(expression, start, value)
    return new_number(value, start), index


def iter_tokens(expression: str) -> Iterator[Token]:
    index = 0
    while index < len(expression):
        char = expression[index]
        if char in PUNCTUATORS:
            yield new_token(PUNCTUATORS[char], index)
            index += 1
            continue
        if char in string.digits:
            token, index = read_number(expression, index)
            yield token
            continue
        # anything else, whitespace included, only separates tokens
        index += 1


def tokenize(expression: str) -> Peekable[Token]:
    return Peekable(iter_tokens(expression))
