import logging
from importlib.metadata import version
from typing import Optional

import click
import typer

from ninecc.codegen import codegen
from ninecc.errors import CompileError
from ninecc.parse import parse
from ninecc.tokenize import tokenize

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


def compile_expression(expression: str) -> str:
    tokens = tokenize(expression)
    node = parse(tokens)
    return "\n".join(codegen(node)) + "\n"


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    if value:
        click.echo(f"ninecc {version('ninecc')}")
        raise typer.Exit()


@app.command()
def main(
    expression: str = typer.Argument(..., help="Arithmetic expression to compile."),
    output: typer.FileTextWrite = typer.Option(
        "-", "-o", "--output", help="Write assembly to this file."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log each stage."),
    show_version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True
    ),
):
    setup_logging(verbose)
    logger.debug("compiling %r", expression)
    try:
        result = compile_expression(expression)
    except CompileError as e:
        click.echo(e.render(), err=True)
        raise typer.Exit(code=1)
    output.write(result)
    output.flush()


if __name__ == "__main__":
    app()
