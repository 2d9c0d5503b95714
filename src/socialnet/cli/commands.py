"""CLI commands for SocialNet."""

import logging
from pathlib import Path
from typing import TextIO

import click
from rich.console import Console
from rich.markup import escape

from socialnet import __version__
from socialnet.cli.script import ScriptRunner
from socialnet.cli.session import NetworkSession
from socialnet.cli.shell import MenuShell
from socialnet.cli.verbose import get_verbose_logger
from socialnet.core.config import (
    SocialNetConfig,
    get_config_display,
    get_config_path,
    load_config,
    write_default_config,
)
from socialnet.core.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_INTERNAL_ERROR,
    EXIT_SUCCESS,
    EXIT_USER_ERROR,
    STDIN_SCRIPT,
)
from socialnet.core.exceptions import ConfigError, ScriptError

logger = logging.getLogger(__name__)
console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)


def _configure_logging(debug: bool) -> None:
    """Configure logging levels based on debug flag."""
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


def _load_config(ctx: click.Context) -> SocialNetConfig:
    """Load configuration for a command, exiting on invalid files."""
    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(EXIT_CONFIG_ERROR)


def _build_session(ctx: click.Context) -> NetworkSession:
    return NetworkSession(
        config=_load_config(ctx),
        console=console,
        error_console=error_console,
        vlog=get_verbose_logger(ctx),
    )


@click.group()
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging output")
@click.option("--verbose", "-v", is_flag=True, help="Show operation details on stderr")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (default: ~/.config/socialnet/config.toml).",
)
@click.version_option(version=__version__, prog_name="socialnet")
@click.pass_context
def main(ctx: click.Context, debug: bool, verbose: bool, config_path: Path | None) -> None:
    """SocialNet - explore a network of people and friendships.

    Find who knows whom, the shortest chain of friends between two people
    (optionally avoiding some), and who someone should meet next.
    Networks live in memory for the duration of one command.

    Example: socialnet shell
    """
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path
    _configure_logging(debug)


@main.command()
@click.pass_context
def shell(ctx: click.Context) -> None:
    """Manage a network interactively through a numbered menu.

    Example: socialnet shell
    """
    session = _build_session(ctx)
    try:
        MenuShell(session).run()
    except Exception:
        logger.exception("Unhandled exception in shell command")
        error_console.print("[red]Unexpected error[/red]")
        raise SystemExit(EXIT_INTERNAL_ERROR)
    raise SystemExit(EXIT_SUCCESS)


@main.command()
@click.argument("script", type=click.File("r"), default=STDIN_SCRIPT)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on commands that change or find nothing (unknown people, duplicates).",
)
@click.option("--show", "show_network", is_flag=True, help="List the network when done.")
@click.pass_context
def run(ctx: click.Context, script: TextIO, strict: bool, show_network: bool) -> None:
    """Run a script of commands against one network.

    SCRIPT holds one command per line ('-' reads stdin). Commands:
    add, friend, unfriend, delete, friends?, path, avoid, recommend, show, draw.

    Examples:
        socialnet run network.txt
        socialnet run --strict network.txt
        printf 'add Alice\\nadd Bob\\nfriend Alice Bob\\nshow\\n' | socialnet run -
    """
    session = _build_session(ctx)
    vlog = session.vlog
    runner = ScriptRunner(session, strict=strict)

    try:
        vlog.start_operation("script")
        executed = runner.run(script)
        vlog.end_operation("script", f"{executed} commands")

        if show_network:
            session.show_network()

        raise SystemExit(EXIT_SUCCESS)

    except ScriptError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(EXIT_USER_ERROR)
    except SystemExit:
        raise
    except Exception:
        logger.exception("Unhandled exception in run command")
        error_console.print("[red]Unexpected error[/red]")
        raise SystemExit(EXIT_INTERNAL_ERROR)


@main.command(name="config")
@click.option("--init", is_flag=True, help="Write a documented default config file.")
@click.option("--force", is_flag=True, help="With --init, overwrite an existing file.")
@click.pass_context
def config_cmd(ctx: click.Context, init: bool, force: bool) -> None:
    """Show effective settings or create the config file.

    Examples:
        socialnet config
        socialnet config --init
    """
    config_path = ctx.obj.get("config_path") or get_config_path()

    if init:
        if config_path.exists() and not force:
            error_console.print(
                f"[yellow]Config already exists at {escape(str(config_path))}.[/yellow] "
                "Use --force to overwrite."
            )
            raise SystemExit(EXIT_USER_ERROR)
        try:
            written = write_default_config(config_path)
        except OSError as e:
            logger.exception("Failed to write config")
            error_console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise SystemExit(EXIT_INTERNAL_ERROR)
        console.print(f"[green]✓[/green] Wrote {escape(str(written))}")
        raise SystemExit(EXIT_SUCCESS)

    config = _load_config(ctx)
    console.print(f"[dim]# {escape(str(config_path))}[/dim]")
    console.print(get_config_display(config), markup=False)
    raise SystemExit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
