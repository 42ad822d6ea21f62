from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Punctuator = 1
    Number = 2
    EOF = 3


@dataclass(frozen=True)
class Token:
    kind: TokenType
    location: int = 0
    length: int = 0
    expression: str = ""
    value: Optional[int] = None
    original_expression: str = field(default="", repr=False, compare=False)


def new_token(
    token_type: TokenType,
    original_expression: str,
    start: int = 0,
    end: int = 0,
    value: Optional[int] = None,
) -> Token:
    return Token(
        token_type,
        start,
        end - start,
        original_expression[start:end],
        value,
        original_expression,
    )


def equal(token: Token, expression: str) -> bool:
    return token.kind == TokenType.Punctuator and token.expression == expression
