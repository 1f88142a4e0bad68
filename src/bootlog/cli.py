"""CLI interface for bootlog."""

import sys
from pathlib import Path

import typer
from pydantic import ValidationError

from .domain.entries import Level
from .errors import ConfigLoadError, EventDecodeError
from .interfaces.cli_handlers import replay_events, resolve_config
from .interfaces.event_codec import event_names

app = typer.Typer(help="bootlog command line interface")


@app.command("replay")
def replay_command(
    events: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON-lines file of serialized lifecycle events.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help="Optional JSON/YAML sink config.",
    ),
    min_level: Level | None = typer.Option(
        None,
        "--min-level",
        case_sensitive=False,
        help="Drop records below this level: debug, info or error.",
    ),
    output_format: str | None = typer.Option(
        None,
        "--format",
        help="Sink implementation: json (direct) or logging (stdlib bridge).",
    ),
) -> None:
    """Replay serialized lifecycle events as structured log lines on stdout."""

    try:
        sink_config = resolve_config(config, min_level=min_level, output_format=output_format)
        replay_events(events, sink_config, sys.stdout)
    except (ConfigLoadError, EventDecodeError, ValidationError) as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error


@app.command("variants")
def variants_command() -> None:
    """List the lifecycle event names accepted by replay."""

    for name in event_names():
        typer.echo(name)


def main(prog_name: str | None = None) -> None:
    app(prog_name=prog_name)


if __name__ == "__main__":
    main()
