import logging

from kasumi.errors import ParseError
from kasumi.token import Token, TokenType, equal

logger = logging.getLogger(__name__)

PREAMBLE = [".intel_syntax noprefix\n", ".global main\n", "main:\n"]


class Emitter:
    """Parses `num (("+" | "-") num)*` and emits one instruction per term.

    There is no syntax tree: each instruction is appended as soon as its
    tokens have been consumed, with `rax` holding the running value.
    """

    tokens: list[Token]
    position: int

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.position = 0

    def peek(self) -> Token:
        return self.tokens[self.position]

    def advance(self) -> Token:
        token = self.tokens[self.position]
        if token.kind != TokenType.EOF:
            self.position += 1
        return token

    def at_eof(self) -> bool:
        return self.peek().kind == TokenType.EOF

    def consume(self, op: str) -> bool:
        if not equal(self.peek(), op):
            return False
        self.advance()
        return True

    def expect(self, op: str) -> None:
        token = self.peek()
        if not equal(token, op):
            raise ParseError(f"not '{op}'", token.location)
        self.advance()

    def expect_number(self) -> int:
        token = self.peek()
        if token.kind != TokenType.Number:
            raise ParseError("not a number", token.location)
        self.advance()
        return token.value

    def instruction(self, global_stmt: list[str], text: str) -> None:
        logger.debug("emit %s", text)
        global_stmt.append(f"\t{text}\n")

    def emit(self) -> list[str]:
        self.position = 0
        global_stmt = list(PREAMBLE)
        self.instruction(global_stmt, f"mov rax, {self.expect_number()}")
        while not self.at_eof():
            if self.consume("+"):
                self.instruction(global_stmt, f"add rax, {self.expect_number()}")
                continue
            self.expect("-")
            self.instruction(global_stmt, f"sub rax, {self.expect_number()}")
        self.instruction(global_stmt, "ret")
        return global_stmt


def codegen(tokens: list[Token]) -> str:
    return "".join(Emitter(tokens).emit())
