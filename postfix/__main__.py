"""CLI for the postfix calculator.

Usage:
    python -m postfix eval "23 4 * 5 +" "8 2 / -"   # Evaluate expressions given as arguments
    python -m postfix file expressions.txt          # Evaluate one expression per line
    python -m postfix demo                          # Run the demonstration expressions
    python -m postfix --skip-empty eval "1  2 +"    # Ignore empty tokens from repeated whitespace
    python -m postfix eval -- "-3 4 +"              # "--" ends option parsing, though "-3 4 +" alone also works
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.text import Text

from postfix.driver import DEMO_EXPRESSIONS, SourceUnreadable, evaluate_lines, format_outcome
from postfix.evaluator import evaluate
from postfix.outcome import Outcome, Success

app = typer.Typer(
    name="postfix",
    help="Evaluate integer arithmetic in postfix (reverse Polish) notation",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    skip_empty: bool = typer.Option(False, "--skip-empty", help="Drop empty tokens instead of rejecting them"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log evaluation details"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = {"skip_empty": skip_empty}


def _print_outcome(expression: str, outcome: Outcome) -> None:
    style = "green" if isinstance(outcome, Success) else "red"
    console.print(Text(format_outcome(expression, outcome), style=style))


@app.command("eval", context_settings={"ignore_unknown_options": True})
def cmd_eval(
    ctx: typer.Context,
    expressions: list[str] = typer.Argument(help="Postfix expressions, quote each one"),
) -> None:
    """Evaluate expressions given on the command line."""
    all_ok = True
    for expression in expressions:
        outcome = evaluate(expression, skip_empty=ctx.obj["skip_empty"])
        _print_outcome(expression, outcome)
        all_ok = all_ok and outcome.ok
    if not all_ok:
        raise typer.Exit(1)


@app.command("file")
def cmd_file(
    ctx: typer.Context,
    path: Path = typer.Argument(help="Text file with one postfix expression per line"),
) -> None:
    """Evaluate every line of a file."""
    console.print("These are the expressions from the saved file.")
    try:
        results = evaluate_lines(path, skip_empty=ctx.obj["skip_empty"])
    except SourceUnreadable:
        console.print("[red]Error: Unable to read file.[/red]")
        raise typer.Exit(2)
    for expression, outcome in results:
        _print_outcome(expression, outcome)


@app.command("demo")
def cmd_demo(ctx: typer.Context) -> None:
    """Run the built-in demonstration expressions."""
    for expression in DEMO_EXPRESSIONS:
        _print_outcome(expression, evaluate(expression, skip_empty=ctx.obj["skip_empty"]))


if __name__ == "__main__":
    app()
