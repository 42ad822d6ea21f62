import logging

from ninecc.errors import ExpressionSyntaxError
from ninecc.node import Node, NodeKind, new_binary, new_number
from ninecc.token import Token, TokenType, equal
from ninecc.utils import Peekable

logger = logging.getLogger(__name__)


class Parse:
    tokens: Peekable[Token]

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = Peekable(tokens)

    def error(self, token: Token, message: str) -> ExpressionSyntaxError:
        return ExpressionSyntaxError(
            message, token.original_expression, token.location
        )

    def consume(self, op: str) -> bool:
        if equal(self.tokens.peek(), op):
            next(self.tokens)
            return True
        return False

    def expect(self, op: str) -> Token:
        token = self.tokens.peek()
        if not equal(token, op):
            raise self.error(token, f"expected '{op}'")
        return next(self.tokens)

    def expect_number(self) -> int:
        token = self.tokens.peek()
        if token.kind != TokenType.Number:
            raise self.error(token, "expected a number")
        next(self.tokens)
        return token.value

    def at_eof(self) -> bool:
        return self.tokens.peek().kind == TokenType.EOF

    def parse_program(self) -> Node:
        node = self.expression_parse()
        if not self.at_eof():
            raise self.error(self.tokens.peek(), "extra token")
        return node

    # expression = term (("+" | "-") term)*
    def expression_parse(self) -> Node:
        node = self.convert_mul_token()
        while True:
            token = self.tokens.peek()
            if self.consume("+"):
                node = new_binary(NodeKind.Add, node, self.convert_mul_token(), token)
                continue
            if self.consume("-"):
                node = new_binary(NodeKind.Sub, node, self.convert_mul_token(), token)
                continue
            return node

    # term = factor (("*" | "/") factor)*
    def convert_mul_token(self) -> Node:
        node = self.primary_token()
        while True:
            token = self.tokens.peek()
            if self.consume("*"):
                node = new_binary(NodeKind.Mul, node, self.primary_token(), token)
                continue
            if self.consume("/"):
                node = new_binary(NodeKind.Div, node, self.primary_token(), token)
                continue
            return node

    # factor = "(" expression ")" | num
    def primary_token(self) -> Node:
        if self.consume("("):
            node = self.expression_parse()
            self.expect(")")
            return node
        token = self.tokens.peek()
        return new_number(self.expect_number(), token)


def parse(tokens: list[Token]) -> Node:
    node = Parse(tokens).parse_program()
    logger.debug("parsed %s expression", type(node).__name__)
    return node
