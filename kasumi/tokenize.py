import logging
import string

from kasumi.errors import TokenizeError
from kasumi.token import TokenType, Token, new_token

logger = logging.getLogger(__name__)

RESERVED = "+-"

# C locale whitespace; other Unicode spaces and control characters are invalid.
WHITESPACE = string.whitespace

maxsize = 9223372036854775807


def read_number(expression: str, index: int) -> tuple[Token, int]:
    current = new_token(TokenType.Number, index, index)
    temp = []
    while index < len(expression) and expression[index] in string.digits:
        temp.append(expression[index])
        index += 1
    current.value = int("".join(temp))
    if current.value > maxsize:
        raise TokenizeError("number out of range", current.location)
    current.length = index - current.location
    current.expression = expression[
        current.location : current.location + current.length
    ]
    return current, index


def tokenize(expression: str) -> list[Token]:
    index = 0
    tokens = []
    while index < len(expression):
        if expression[index] in WHITESPACE:
            index += 1
            continue
        if expression[index] in RESERVED:
            current = new_token(TokenType.Reserved, index, index + 1)
            current.expression = expression[index]
            tokens.append(current)
            index += 1
            continue
        if expression[index] in string.digits:
            current, index = read_number(expression, index)
            tokens.append(current)
            continue
        raise TokenizeError("tokenization failed", index)
    eof = new_token(TokenType.EOF, index, index)
    eof.expression = ""
    tokens.append(eof)
    logger.debug(
        "tokenized %d characters into %d tokens", len(expression), len(tokens)
    )
    return tokens
