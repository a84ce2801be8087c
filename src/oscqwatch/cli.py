# src/oscqwatch/cli.py
"""Command-line interface for the OSCQuery helper watchdog."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from . import __version__, config, paths
from .control import ControlClient
from .errors import ExitCode, WatchdogError
from .process import ProcessLauncher
from .supervisor import Supervisor

app = typer.Typer(
    name="oscq-watchdog",
    help="Keeps the Giggletech OSCQuery helper running and reports its UDP port.",
    add_completion=False,
)

console = Console(stderr=True)


def version_callback(value: bool):
    """Print the version and exit."""
    if value:
        print(f"oscq-watchdog version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help=f"Path to the config_oscq.yml file. [default: {paths.get_default_config_path()}]",
        resolve_path=True,
    ),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True
    ),
):
    """
    OSCQuery helper watchdog.
    """
    from . import logging
    try:
        cfg = config.load_config(config_path)
        logging.setup_logging(cfg)
        ctx.obj = cfg
    except WatchdogError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=e.exit_code)


def _client(cfg: config.WatchdogConfig) -> ControlClient:
    return ControlClient(cfg.http_port, timeout=cfg.http_timeout)


@app.command()
def run(
    ctx: typer.Context,
    once: bool = typer.Option(
        False, "--once", help="Exit as soon as the helper reports a UDP port."
    ),
):
    """Launch the helper and keep it running."""
    cfg: config.WatchdogConfig = ctx.obj
    console.print(
        f"Supervising [bold cyan]{cfg.executable}[/bold cyan] "
        f"(control port {cfg.http_port}, every {cfg.poll_interval:g}s)"
    )

    try:
        with _client(cfg) as client:
            supervisor = Supervisor(client, ProcessLauncher(cfg.executable), cfg.poll_interval)
            if once:
                print(supervisor.discover_udp_port(), flush=True)
            else:
                supervisor.run_forever(on_port=lambda port: print(port, flush=True))
    except WatchdogError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=e.exit_code)
    except KeyboardInterrupt:
        console.print("\nWatchdog stopped.")
        raise typer.Exit(code=ExitCode.OK)


@app.command()
def port(ctx: typer.Context):
    """Print the UDP port of an already running helper (0 if not started)."""
    cfg: config.WatchdogConfig = ctx.obj
    try:
        with _client(cfg) as client:
            print(client.get_udp_port())
    except WatchdogError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=e.exit_code)


@app.command()
def info(ctx: typer.Context):
    """Show the helper's status text."""
    cfg: config.WatchdogConfig = ctx.obj
    try:
        with _client(cfg) as client:
            print(client.get_info())
    except WatchdogError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=e.exit_code)


@app.command()
def stop(ctx: typer.Context):
    """Ask the helper to shut down."""
    cfg: config.WatchdogConfig = ctx.obj
    try:
        with _client(cfg) as client:
            client.request_stop()
    except WatchdogError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=e.exit_code)
    console.print("[bold green]Stop command sent.[/bold green]")


if __name__ == "__main__":
    app()
