from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class TokenKind(IntEnum):
    Int = 1
    Add = 2
    Mul = 3
    LParen = 4
    RParen = 5


PUNCTUATORS = {
    "+": TokenKind.Add,
    "*": TokenKind.Mul,
    "(": TokenKind.LParen,
    ")": TokenKind.RParen,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Optional[int] = None
    location: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if self.kind == TokenKind.Int:
            return str(self.value)
        for char, kind in PUNCTUATORS.items():
            if kind == self.kind:
                return char
        raise ValueError("invalid token kind")


def new_token(kind: TokenKind, location: int = 0) -> Token:
    return Token(kind, None, location)


def new_number(value: int, location: int = 0) -> Token:
    return Token(TokenKind.Int, value, location)


def equal(token: Optional[Token], kind: TokenKind) -> bool:
    return token is not None and token.kind == kind
