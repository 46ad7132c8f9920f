"""
Command line front end for Kaleido.

    kaleido parse program.kal        # one s-expression per top-level form
    kaleido parse -                  # read standard input
    kaleido tokens program.kal       # dump the token stream

Author: xwest
"""

import logging
import sys
from typing import Tuple

import click

from .backend.resolver import ResolvingBackend
from .driver import Driver, DEFINITION, EXTERN
from .lexer.lexer import Lexer
from .parser.errors import ConfigurationError, DiagnosticReporter
from .parser.precedence import PrecedenceTable
from .parser.printer import to_sexpr


def _build_precedence(entries: Tuple[str, ...]) -> PrecedenceTable:
    table = PrecedenceTable()
    for entry in entries:
        op, sep, value = entry.rpartition('=')
        if not sep or not op:
            raise click.BadParameter(f"expected OP=N, got {entry!r}", param_hint="--precedence")
        try:
            table.register(op, int(value))
        except (ValueError, ConfigurationError) as e:
            raise click.BadParameter(str(e), param_hint="--precedence")
    return table


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log each top-level form to stderr.")
def main(verbose: bool):
    """Kaleido expression language front end."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--filename", default=None, help="Name used in diagnostics.")
@click.option("--no-resolve", is_flag=True, help="Only parse; skip name resolution.")
@click.option("--precedence", "precedences", multiple=True, metavar="OP=N",
              help="Register an extra binary operator, e.g. '/=40'.")
def parse(source, filename, no_resolve, precedences):
    """Parse SOURCE and print every top-level form as an s-expression."""
    table = _build_precedence(precedences)
    backend = None if no_resolve else ResolvingBackend(operators=table)
    reporter = DiagnosticReporter(click.get_text_stream("stderr"))
    name = filename or getattr(source, "name", "<stdin>")

    driver = Driver(source, backend=backend, precedence=table, reporter=reporter, filename=name)

    failed = False
    for result in driver.forms():
        if not result.ok:
            failed = True
            continue
        if result.kind == DEFINITION:
            click.echo(f"def {to_sexpr(result.node)}")
        elif result.kind == EXTERN:
            click.echo(f"extern {to_sexpr(result.node)}")
        else:
            click.echo(f"expr {to_sexpr(result.node.body)}")

    for warning in driver.warnings:
        click.echo(str(warning), err=True, nl=False)

    sys.exit(1 if failed else 0)


@main.command()
@click.argument("source", type=click.File("r"), default="-")
def tokens(source):
    """Print the token stream of SOURCE, one token per line."""
    lexer = Lexer(source, getattr(source, "name", "<stdin>"))
    for token in lexer.tokenize():
        click.echo(f"{token.location}\t{token}")


if __name__ == "__main__":
    main()
