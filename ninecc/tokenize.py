import logging
import string

from ninecc.errors import LexicalError
from ninecc.token import TokenType, Token, new_token
from ninecc.utils import maxsize

logger = logging.getLogger(__name__)


def read_number(expression: str, index: int) -> tuple[Token, int]:
    end = index
    while end < len(expression) and expression[end] in string.digits:
        end += 1
    digits = expression[index:end].lstrip("0") or "0"
    if len(digits) > len(str(maxsize)):
        raise LexicalError("number too large", expression, index)
    value = int(digits)
    if value > maxsize:
        raise LexicalError("number too large", expression, index)
    return new_token(TokenType.Number, expression, index, end, value), end


def tokenize(expression: str) -> list[Token]:
    index = 0
    tokens = []
    while index < len(expression):
        if expression[index] in string.whitespace:
            index += 1
            continue
        if expression[index] in string.punctuation:
            tokens.append(
                new_token(TokenType.Punctuator, expression, index, index + 1)
            )
            index += 1
            continue
        if expression[index] in string.digits:
            token, index = read_number(expression, index)
            tokens.append(token)
            continue
        raise LexicalError("invalid token", expression, index)
    tokens.append(new_token(TokenType.EOF, expression, index, index))
    logger.debug("tokenized %d tokens", len(tokens))
    return tokens
