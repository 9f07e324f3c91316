import typer

from opcalc.errors import EvaluationError
from opcalc.evaluate import evaluate_flat, evaluate_with_precedence

app = typer.Typer()


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expression: str,
    precedence: bool = typer.Option(
        False, "--precedence", "-p", help="Evaluate additions before multiplications."
    ),
):
    evaluate = evaluate_with_precedence if precedence else evaluate_flat
    try:
        result = evaluate(expression)
    except EvaluationError as error:
        typer.echo(error.render(), err=True, nl=False)
        raise typer.Exit(1)
    print(result, flush=True)


if __name__ == "__main__":
    app()
