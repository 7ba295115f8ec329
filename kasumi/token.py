from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Reserved = 1
    Number = 2
    EOF = 3


@dataclass
class Token:
    kind: Optional[TokenType] = None
    value: Optional[int] = None
    location: int = 0
    length: int = 0
    expression: Optional[str] = None


def new_token(
    token_type: Optional[TokenType] = None, start: int = 0, end: int = 0
) -> Token:
    return Token(token_type, None, start, end - start, None)


def equal(token: Token, expression: str) -> bool:
    return token.kind == TokenType.Reserved and token.expression == expression
