import logging
import sys
from typing import TextIO

import click

from opcalc.errors import EvaluationError
from opcalc.evaluate import EVALUATORS, evaluate_lines
from opcalc.log import setup_logging

logger = logging.getLogger(__name__)

PARTS = {"flat": 1, "precedence": 2}


@click.command(context_settings={"auto_envvar_prefix": "OPCALC"})
@click.argument("filename", type=click.File("r"), default="-")
@click.option(
    "-m",
    "--mode",
    type=click.Choice(["flat", "precedence", "both"]),
    default="both",
    show_default=True,
)
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("-v", "--verbose", is_flag=True, help="Log every line's result.")
def main(filename: TextIO, mode: str, output: TextIO, verbose: bool):
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    lines = filename.readlines()
    modes = list(PARTS) if mode == "both" else [mode]
    for name in modes:
        try:
            results = list(evaluate_lines(lines, EVALUATORS[name]))
        except EvaluationError as error:
            click.echo(f"line {error.line_number}:", err=True)
            click.echo(error.render(), err=True, nl=False)
            sys.exit(1)
        total = sum(results)
        logger.info("%s: %d lines summed to %d", name, len(results), total)
        output.write(f"The answer to part {PARTS[name]} is {total}\n")


if __name__ == "__main__":
    main()
