"""Batch command scripts for SocialNet.

A script is one command per line, tokenized with shell quoting rules so
names may contain spaces ("Mary Ann"). Blank lines and lines starting
with '#' are skipped. All commands of one script act on the same network.

Commands:
    add NAME                 friend A B           unfriend A B
    delete NAME              friends? A B         path A B
    avoid A B X [Y ...]      recommend NAME [K]   show
    draw
"""

import logging
import shlex
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from socialnet.cli.session import NetworkSession
from socialnet.core.constants import SCRIPT_COMMENT_PREFIX
from socialnet.core.exceptions import ScriptError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandSpec:
    """Arity and handler of one script command.

    Attributes:
        min_args: Fewest arguments accepted.
        max_args: Most arguments accepted, None for unbounded.
        usage: Usage line shown on arity errors.
        handler: Called with the session and the argument list.
    """

    min_args: int
    max_args: int | None
    usage: str
    handler: Callable[[NetworkSession, list[str]], bool]


def _recommend(session: NetworkSession, args: list[str]) -> bool:
    k = None
    if len(args) == 2:
        try:
            k = int(args[1])
        except ValueError:
            raise ScriptError(f"K must be an integer, got {args[1]!r}") from None
    return session.show_recommendations(args[0], k)


COMMANDS: dict[str, CommandSpec] = {
    "add": CommandSpec(1, 1, "add NAME", lambda s, a: s.add_person(a[0])),
    "friend": CommandSpec(2, 2, "friend A B", lambda s, a: s.add_friend(a[0], a[1])),
    "unfriend": CommandSpec(2, 2, "unfriend A B", lambda s, a: s.unfriend(a[0], a[1])),
    "delete": CommandSpec(1, 1, "delete NAME", lambda s, a: s.delete_person(a[0])),
    "friends?": CommandSpec(2, 2, "friends? A B", lambda s, a: s.check_friends(a[0], a[1])),
    "path": CommandSpec(2, 2, "path A B", lambda s, a: s.show_path(a[0], a[1])),
    "avoid": CommandSpec(
        3, None, "avoid A B X [Y ...]", lambda s, a: s.show_path_avoiding(a[0], a[1], a[2:])
    ),
    "recommend": CommandSpec(1, 2, "recommend NAME [K]", _recommend),
    "show": CommandSpec(0, 0, "show", lambda s, a: s.show_network()),
    "draw": CommandSpec(0, 0, "draw", lambda s, a: s.draw_network()),
}


def parse_line(line: str) -> list[str]:
    """Split a script line into tokens, [] for blank and comment lines.

    Raises:
        ScriptError: If quoting is unbalanced.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(SCRIPT_COMMENT_PREFIX):
        return []
    try:
        return shlex.split(stripped)
    except ValueError as e:
        raise ScriptError(f"cannot parse {stripped!r}: {e}") from e


class ScriptRunner:
    """Execute script lines against a NetworkSession.

    In strict mode a command that changed or found nothing (adding a
    duplicate, naming an unknown person) raises ScriptError instead of
    being reported and skipped.
    """

    def __init__(self, session: NetworkSession, strict: bool = False) -> None:
        self.session = session
        self.strict = strict
        self.executed = 0

    def execute(self, line: str, line_number: int | None = None) -> None:
        """Run one script line.

        Raises:
            ScriptError: On unknown commands, bad arity, or strict failures.
        """
        try:
            tokens = parse_line(line)
        except ScriptError as e:
            raise ScriptError(str(e), line_number) from e
        if not tokens:
            return

        command, args = tokens[0].lower(), tokens[1:]
        spec = COMMANDS.get(command)
        if spec is None:
            known = ", ".join(sorted(COMMANDS))
            raise ScriptError(f"unknown command {command!r}. Known: {known}", line_number)

        if len(args) < spec.min_args or (spec.max_args is not None and len(args) > spec.max_args):
            raise ScriptError(f"usage: {spec.usage}", line_number)

        logger.debug("executing %s %r", command, args)
        try:
            ok = spec.handler(self.session, args)
        except ScriptError as e:
            raise ScriptError(str(e), line_number) from e
        self.executed += 1

        if self.strict and not ok:
            raise ScriptError(f"{command} had no effect (strict mode)", line_number)

    def run(self, lines: Iterable[str]) -> int:
        """Run every line in order, stopping at the first error.

        Returns:
            Number of commands executed.
        """
        for line_number, line in enumerate(lines, start=1):
            self.execute(line, line_number)
        return self.executed
