from typing import TextIO

import click

from sumcc.cmd.main import compile_expression
from sumcc.codegen import Syntax
from sumcc.errors import CompileError
from sumcc.helper import error_message


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option(
    "--syntax",
    type=click.Choice([item.value for item in Syntax]),
    default=Syntax.INTEL.value,
    show_default=True,
)
def main(source: TextIO, output: TextIO, syntax: str):
    """Compile the expression stored in SOURCE (stdin by default)."""
    expression = source.read()
    try:
        result = compile_expression(expression, Syntax(syntax))
    except CompileError as e:
        message = error_message(expression.rstrip("\n"), e.location, e.message)
        click.echo(message, err=True, nl=False)
        raise SystemExit(1)
    output.write(result)


if __name__ == "__main__":
    main()
