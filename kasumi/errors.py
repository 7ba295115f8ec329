class CompileError(Exception):
    """Fatal compile failure pointing at an offset of the input expression."""

    def __init__(self, message: str, location: int) -> None:
        super().__init__(message)
        self.message = message
        self.location = location


class TokenizeError(CompileError):
    pass


class ParseError(CompileError):
    pass
