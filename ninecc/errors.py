"""
Compile errors raised by the lexer and the parser.

Every error carries the full source line and the offset it points at, so
the driver can print a caret diagnostic:

    1+a
      ^ invalid token
"""


def error_message(expression: str, location: int, message: str) -> str:
    messages = [f"{expression}\n", f"{' ' * location}^ {message}"]
    return "".join(messages)


class CompileError(Exception):
    """Base class for errors that abort a compilation."""

    def __init__(self, message: str, expression: str, location: int):
        self.message = message
        self.expression = expression
        self.location = location
        super().__init__(f"{location}: {message}")

    def render(self) -> str:
        return error_message(self.expression, self.location, self.message)


class LexicalError(CompileError):
    """A character that starts no token, or a literal out of range."""


class ExpressionSyntaxError(CompileError):
    """The token stream does not match the grammar."""
