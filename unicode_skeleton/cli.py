"""Command line front end: prints JSON results on stdout."""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from .data import get_confusables_path, load_confusables
from .skeleton import confusable, skeleton
from .table import TableBuildError

app = typer.Typer(
    name="unicode-skeleton",
    help="Compute UTS #39 skeletons and test strings for confusability.",
    no_args_is_help=True,
)


def emit(result):
    typer.echo(json.dumps(result, ensure_ascii=False))


@app.callback()
def setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@app.command("skeleton")
def skeleton_command(texts: List[str] = typer.Argument(..., help="Strings to reduce.")) -> None:
    """Print the skeleton of each TEXT."""
    emit({"skeletons": {text: skeleton(text) for text in texts}})


@app.command("confusable")
def confusable_command(a: str, b: str) -> None:
    """Exit 0 if A and B share a skeleton, 1 otherwise."""
    skeletons = [skeleton(a), skeleton(b)]
    same = confusable(a, b)
    emit({"confusable": same, "skeletons": skeletons})
    if not same:
        raise typer.Exit(code=1)


@app.command("check")
def check_command(
    path: Optional[Path] = typer.Argument(None, help="confusables.txt to validate."),
) -> None:
    """Validate a confusables data file."""
    path = path or get_confusables_path()
    try:
        table = load_confusables(path)
    except TableBuildError as err:
        emit({"error": str(err), "path": str(path)})
        raise typer.Exit(code=2)

    emit({"entries": len(table), "pool_size": table.pool_size, "path": str(path)})


def main():
    app()


if __name__ == "__main__":
    main()
