import logging
from typing import Callable, Iterable, Iterator

from opcalc.errors import (
    EvaluationError,
    IllegalOperandToken,
    IllegalOperatorToken,
    IntegerOverflow,
    UnclosedParenthesis,
    UnexpectedEndOfInput,
)
from opcalc.token import Token, TokenKind, equal
from opcalc.tokenize import tokenize
from opcalc.utils import Peekable, in_i64_range

logger = logging.getLogger(__name__)


class FlatEvaluate:
    """Recursive descent evaluator where ``+`` and ``*`` share one precedence.

    Grammar::

        expr     := operand (operator operand)*
        operand  := INT | "(" expr ")"
        operator := "+" | "*"

    Each instance owns the token stream of a single expression and
    consumes it exactly once.
    """

    expression: str
    tokens: Peekable[Token]

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.tokens = tokenize(expression)

    def evaluate(self) -> int:
        current = self.operand()
        while self.tokens:
            current = self.operation(current)
        return current

    def next_token(self, expected: str) -> Token:
        try:
            return next(self.tokens)
        except StopIteration:
            raise UnexpectedEndOfInput(self.expression, expected) from None

    def operand(self) -> int:
        token = self.next_token("operand")
        match token.kind:
            case TokenKind.Int:
                return token.value
            case TokenKind.LParen:
                return self.subexpr(token)
        raise IllegalOperandToken(self.expression, token)

    def right_operand(self) -> int:
        return self.operand()

    def subexpr(self, opening: Token) -> int:
        current = self.operand()
        while self.tokens:
            if equal(self.tokens.peek(), TokenKind.RParen):
                next(self.tokens)
                return current
            current = self.operation(current)
        raise UnclosedParenthesis(self.expression, opening)

    def operation(self, left: int) -> int:
        token = self.next_token("operation")
        right = self.right_operand()
        return self.fold(token, left, right)

    def fold(self, token: Token, left: int, right: int) -> int:
        match token.kind:
            case TokenKind.Add:
                result = left + right
            case TokenKind.Mul:
                result = left * right
            case _:
                raise IllegalOperatorToken(self.expression, token)
        if not in_i64_range(result):
            raise IntegerOverflow(self.expression, token.location, result)
        return result


class PrecedenceEvaluate(FlatEvaluate):
    """Evaluator where a chain of additions binds tighter than ``*``.

    The left operand of an operation is a plain operand. The right operand
    also swallows every ``+ operand`` that follows it, recursing to the
    right, so a pending multiplication only ever sees a fully reduced sum::

        10 * 11 + 12  ->  10 * (11 + 12)  ->  230
    """

    def right_operand(self) -> int:
        right = self.operand()
        if equal(self.tokens.peek(), TokenKind.Add):
            return self.addition(right, next(self.tokens))
        return right

    def addition(self, left: int, token: Token) -> int:
        return self.fold(token, left, self.right_operand())


def evaluate_flat(expression: str) -> int:
    return FlatEvaluate(expression).evaluate()


def evaluate_with_precedence(expression: str) -> int:
    return PrecedenceEvaluate(expression).evaluate()


EVALUATORS: dict[str, Callable[[str], int]] = {
    "flat": evaluate_flat,
    "precedence": evaluate_with_precedence,
}


def evaluate_lines(
    lines: Iterable[str], evaluate: Callable[[str], int]
) -> Iterator[int]:
    """Evaluate every non-blank line independently, in order."""
    for line_number, line in enumerate(lines, start=1):
        expression = line.rstrip("\r\n")
        if not expression.strip():
            continue
        try:
            result = evaluate(expression)
        except EvaluationError as error:
            error.line_number = line_number
            raise
        logger.debug("line %d: %s = %d", line_number, expression, result)
        yield result
