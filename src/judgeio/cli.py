"""CLI implementation for judgeio."""

import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import typer

from . import validate_source
from .core.errors import UnknownProblemError
from .core.model import Result
from .core.registry import _REGISTRY

app = typer.Typer(add_completion=False, help="Validate competitive-programming input files.")


def resolve_source(src: str):
    """Map a command-line source to something Reader accepts."""
    if src == "-":
        return sys.stdin.buffer
    parsed_url = urlparse(src)
    if parsed_url.scheme in ("http", "https") and parsed_url.netloc:
        return src
    return str(Path(src).resolve())


def result_asdict(res: Result, source: str) -> dict:
    """Return a JSON-serialisable dict (skip None)."""
    payload = {k: v for k, v in asdict(res).items() if v is not None}
    payload["source"] = source
    return payload


@app.command()
def validate(
    problem: str = typer.Argument(..., help="Registered problem name (see 'judgeio problems')"),
    files: list[str] = typer.Argument(None, help="Input files or URLs, or '-' for stdin"),
    jsonl: bool = typer.Option(False, "--jsonl", help="Force JSON-lines output"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to PATH instead of stdout"),
):
    """Check one or many input files against a problem's grammar and constraints."""
    try:
        _REGISTRY.get(problem)
    except UnknownProblemError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

    sources = list(files) if files else []
    if not sources:
        typer.echo("No input files given.", err=True)
        raise typer.Exit(code=1)

    results: list[Result] = []
    for src in sources:
        res = validate_source(problem, resolve_source(src))
        if not res.success:
            typer.echo(f"{src}: {res.error}", err=True)
        results.append(res)

    # open output sink
    sink = open(output, "w", encoding="utf-8") if output else sys.stdout
    try:
        if len(sources) == 1 and not jsonl:
            json.dump(result_asdict(results[0], sources[0]), sink, indent=2)
            sink.write("\n")
        else:
            for src, res in zip(sources, results):
                sink.write(json.dumps(result_asdict(res, src)))
                sink.write("\n")
    finally:
        if output:
            sink.close()

    # exit code
    if any(not r.success for r in results):
        raise typer.Exit(code=1)


@app.command()
def problems():
    """List the registered problem validators."""
    for name in _REGISTRY.names():
        validator_cls = _REGISTRY.get(name)
        typer.echo(f"{name}\t{validator_cls.description}")


if __name__ == "__main__":
    app()
