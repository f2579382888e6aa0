from __future__ import annotations
import json
import logging
import pathlib

import typer
from rich import print as rprint
from rich.logging import RichHandler
from rich.markup import escape

from .config import ExportConfig, load_endpoints, load_object
from .emitters.types import project
from .errors import ShapeKitError
from .export import generate_client, save_to_file
from .validator import validate

app = typer.Typer(add_completion=False)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(message)s", handlers=[RichHandler(show_path=False)], force=True)


def _fail(message: str) -> None:
    rprint(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=1)


@app.callback()
def main(ctx: typer.Context, verbose: bool = typer.Option(False, "-v", "--verbose")):
    ctx.obj = {"verbose": verbose}
    configure_logging("DEBUG" if verbose else "WARNING")


@app.command()
def generate(ctx: typer.Context, config_path: str, stdout: bool = typer.Option(False, "--stdout")):
    try:
        config = ExportConfig.from_file(config_path)
        if not ctx.obj["verbose"]:
            configure_logging(config.log_level)
        endpoints = config.load_endpoints()
        if stdout:
            print(generate_client(endpoints, config.flavor), end="")
            return
        target = save_to_file(endpoints, config.output, config.flavor)
    except ShapeKitError as error:
        _fail(str(error))
    rprint(f"[green]Wrote[/green] {escape(str(target))}")


@app.command()
def types(reference: str):
    try:
        print(project(load_object(reference)))
    except ShapeKitError as error:
        _fail(str(error))


@app.command()
def check(reference: str, path: str, loose: bool = typer.Option(False, "--loose")):
    try:
        schema = load_object(reference)
        document = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
        validate(schema, document, strict=not loose)
    except (OSError, json.JSONDecodeError) as error:
        _fail(f"Cannot read {path}: {error}")
    except ShapeKitError as error:
        _fail(str(error))
    rprint("[green]OK[/green]")


@app.command()
def endpoints(reference: str):
    try:
        found = load_endpoints(reference)
        print(json.dumps([e.to_json_obj() for e in found], indent=2))
    except ShapeKitError as error:
        _fail(str(error))
