"""CLI interface."""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

import typer

from block_animator.animation.animation_config import AnimationConfig
from block_animator.exceptions import AnimationError, AnimationValidationError
from block_animator.services.animation_service import AnimationService
from block_animator.utils.config import settings
from block_animator.utils.file_utils import load_json, read_text_file

app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level.")):
    """Validate, sanitize and expand block animation configurations."""
    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level)


def _load_config(file: Optional[str], text: Optional[str]) -> Any:
    if not file and not text:
        raise typer.BadParameter("Provide --file or --text")
    try:
        if file:
            return load_json(read_text_file(file), file)
        return load_json(text or "", "--text")
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc))


@app.command()
def validate(
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Path to a JSON animation config."),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Inline JSON animation config."),
):
    """Validate a configuration; exit code 1 when it is invalid."""
    result = AnimationService().validate(_load_config(file, text))
    typer.echo(json.dumps(result.to_dict(), indent=2))
    if not result.valid:
        raise typer.Exit(code=1)


@app.command()
def sanitize(
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Path to a JSON animation config."),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Inline JSON animation config."),
):
    """Print the defaulted, sanitized form of a configuration."""
    config = AnimationConfig.from_dict(_load_config(file, text))
    typer.echo(json.dumps(config.to_dict(), indent=2))


@app.command()
def instruction(
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Path to a JSON animation config."),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Inline JSON animation config."),
    block_id: Optional[str] = typer.Option(None, "--block-id", help="Block the instruction targets."),
):
    """Print the playback instruction for a valid, enabled configuration."""
    try:
        result = AnimationService().instruction_for(_load_config(file, text), block_id)
    except AnimationValidationError as exc:
        typer.echo(json.dumps({"valid": False, "errors": exc.errors}, indent=2))
        raise typer.Exit(code=1)
    except AnimationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    app()
