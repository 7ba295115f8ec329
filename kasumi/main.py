import logging
from typing import Optional

import click
import typer

from kasumi.codegen import codegen
from kasumi.errors import CompileError
from kasumi.helper import error_message
from kasumi.tokenize import tokenize

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


def compile_expression(expression: str) -> str:
    tokens = tokenize(expression)
    return codegen(tokens)


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expressions: Optional[list[str]] = typer.Argument(None, metavar="EXPRESSION"),
    output: typer.FileTextWrite = typer.Option("-", "--output", "-o"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Compile EXPRESSION into x86-64 assembly.

    A bare `--` ends option parsing and is not taken as the expression;
    use `kasumi -- --` to compile the text `--` itself.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    if not expressions or len(expressions) != 1:
        click.echo("invalid number of arguments", err=True)
        raise typer.Exit(code=1)
    expression = expressions[0]
    try:
        result = compile_expression(expression)
    except CompileError as e:
        logger.debug("compile failed: %s at %d", e.message, e.location)
        message = error_message(expression, e)
        click.echo(message, err=True, nl=False)
        raise typer.Exit(code=1)
    output.write(result)


if __name__ == "__main__":
    app()
