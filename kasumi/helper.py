from kasumi.errors import CompileError


def error_message(expression: str, error: CompileError) -> str:
    """Render `error` as the expression followed by a caret under its offset."""
    return f"{expression}\n{' ' * error.location}^ {error.message}\n"
