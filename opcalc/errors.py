from typing import Optional

from opcalc.token import Token


def error_message(expression: str, location: int, message: str) -> str:
    """Render ``expression`` with a caret under ``location``."""
    return f"{expression}\n{' ' * location}^ {message}\n"


class EvaluationError(Exception):
    """Base class for every fatal condition raised while evaluating one line."""

    def __init__(self, message: str, expression: str, location: int) -> None:
        super().__init__(message)
        self.message = message
        self.expression = expression
        self.location = location
        self.line_number: Optional[int] = None

    def render(self) -> str:
        return error_message(self.expression, self.location, self.message)


class UnexpectedEndOfInput(EvaluationError):
    def __init__(
        self,
        expression: str,
        expected: str = "operand",
        message: Optional[str] = None,
        location: Optional[int] = None,
    ) -> None:
        super().__init__(
            message or f"unexpected end of tokens evaluating {expected}",
            expression,
            len(expression) if location is None else location,
        )
        self.expected = expected


class UnclosedParenthesis(UnexpectedEndOfInput):
    def __init__(self, expression: str, opening: Token) -> None:
        super().__init__(
            expression, "')'", "unclosed parenthesis", opening.location
        )
        self.opening = opening


class IllegalOperandToken(EvaluationError):
    def __init__(self, expression: str, token: Token) -> None:
        super().__init__(
            f"illegal token in operand {token}", expression, token.location
        )
        self.token = token


class IllegalOperatorToken(EvaluationError):
    def __init__(self, expression: str, token: Token) -> None:
        super().__init__(f"{token} is not an operation", expression, token.location)
        self.token = token


class IntegerOverflow(EvaluationError):
    def __init__(self, expression: str, location: int, value: int) -> None:
        super().__init__(
            f"{value} does not fit in a 64-bit integer", expression, location
        )
        self.value = value
