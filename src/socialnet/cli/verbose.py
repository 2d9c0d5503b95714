"""Progress notes for `socialnet --verbose`.

Path searches, recommendation scoring and whole scripts report when they
start and how long they took. Notes are written to stderr so the answers
printed on stdout can still be piped or diffed.
"""

import time
from datetime import UTC, datetime

import click
from rich.console import Console

_stderr = Console(stderr=True, highlight=False)


class VerboseLogger:
    """Timestamped operation notes, silent unless enabled.

    A disabled logger still tracks start times, so callers never need to
    check the flag themselves.
    """

    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled
        self._started: dict[str, float] = {}
        self._console = _stderr

    def log(self, message: str) -> None:
        if self.enabled:
            stamp = datetime.now(UTC).strftime("%H:%M:%S")
            self._console.print(f"[dim][{stamp}][/dim] {message}")

    def start_operation(self, name: str) -> None:
        """Remember when name began and announce it."""
        self._started[name] = time.perf_counter()
        self.log(f"Starting: {name}")

    def end_operation(self, name: str, result: str | None = None) -> None:
        """Announce that name finished, with its duration if it was started.

        Args:
            name: Same label given to start_operation.
            result: Short summary such as "3 hops" or "12 commands".
        """
        message = f"Completed: {name}"
        started = self._started.pop(name, None)
        if started is not None:
            message += f" ({(time.perf_counter() - started) * 1000:.1f}ms)"
        if result:
            message += f" - {result}"
        self.log(message)


def get_verbose_logger(ctx: click.Context) -> VerboseLogger:
    """Build a logger from the --verbose flag stored on the root context."""
    verbose = bool(ctx.obj and ctx.obj.get("verbose", False))
    return VerboseLogger(enabled=verbose)
