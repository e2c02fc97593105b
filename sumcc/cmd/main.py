from typing import Optional

import typer

from sumcc.codegen import Syntax, codegen
from sumcc.errors import CompileError, UsageError
from sumcc.helper import error_message
from sumcc.tokenize import tokenize

app = typer.Typer(add_completion=False)


def compile_expression(expression: str, syntax: Syntax = Syntax.INTEL) -> str:
    tokens = tokenize(expression)
    return codegen(tokens, syntax)


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expression: Optional[list[str]] = typer.Argument(None, metavar="EXPRESSION"),
    output: typer.FileTextWrite = typer.Option(
        "-", "--output", "-o", help="Output file, - for stdout."
    ),
    syntax: Syntax = typer.Option(Syntax.INTEL, "--syntax", help="Assembly dialect."),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Point at the failing position."
    ),
):
    """Compile an expression like "5+20-4" into x86-64 assembly."""
    source = expression[0] if expression and len(expression) == 1 else None
    try:
        if source is None:
            raise UsageError("the number of args is wrong")
        result = compile_expression(source, syntax)
    except CompileError as e:
        if verbose and source is not None:
            typer.echo(error_message(source, e.location, e.message), err=True, nl=False)
        else:
            typer.echo(e.message, err=True)
        raise typer.Exit(code=1)

    output.write(result)
    output.flush()


if __name__ == "__main__":
    app()
