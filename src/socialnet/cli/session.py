"""One in-memory network plus the console glue around it.

NetworkSession turns user-level actions into core calls and prints the
results. Both the interactive shell and the script runner drive it. Every
action returns True when it did what was asked and False on a soft
failure (unknown person, duplicate friendship, ...), which script strict
mode turns into an error.
"""

import logging

from rich.console import Console
from rich.markup import escape

from socialnet.cli.verbose import VerboseLogger
from socialnet.core.config import DEFAULT_CONFIG, SocialNetConfig
from socialnet.core.matching import find_person, format_suggestions
from socialnet.core.network import SocialNetwork
from socialnet.core.recommend import rank_candidates
from socialnet.core.types import Outcome
from socialnet.viz import format_people, render_adjacency, render_ascii

logger = logging.getLogger(__name__)

NO_PATH = "[dim](no path)[/dim]"
NO_RECOMMENDATIONS = "[dim](no recommendations)[/dim]"


class NetworkSession:
    """Run user actions against a single SocialNetwork."""

    def __init__(
        self,
        network: SocialNetwork | None = None,
        config: SocialNetConfig = DEFAULT_CONFIG,
        console: Console | None = None,
        error_console: Console | None = None,
        vlog: VerboseLogger | None = None,
    ) -> None:
        self.network = network if network is not None else SocialNetwork()
        self.config = config
        self.console = console if console is not None else Console(highlight=False)
        self.error_console = (
            error_console if error_console is not None else Console(stderr=True, highlight=False)
        )
        self.vlog = vlog if vlog is not None else VerboseLogger(enabled=False)

    # Helpers

    @staticmethod
    def _name(raw: str) -> str:
        """Normalize user input to the stored form of a name."""
        return raw.strip()

    def _known(self, *names: str) -> bool:
        """Check names exist, reporting suggestions for each unknown one."""
        ok = True
        for name in names:
            result = find_person(
                self.network,
                name,
                threshold=self.config.fuzzy_threshold,
                limit=self.config.max_suggestions,
            )
            if not result.found:
                self.error_console.print(
                    f"[yellow]{escape(format_suggestions(name, result.suggestions))}[/yellow]"
                )
                ok = False
        return ok

    # Mutations

    def add_person(self, name: str) -> bool:
        name = self._name(name)
        if not name:
            self.error_console.print("[red]Error:[/red] Name cannot be empty.")
            return False
        outcome = self.network.add_person(name)
        if outcome is Outcome.ALREADY_EXISTS:
            self.console.print(f"{escape(name)} is already in the network.")
            return False
        self.console.print(f"{escape(name)} has been added to the network.")
        return True

    def add_friend(self, a: str, b: str) -> bool:
        a, b = self._name(a), self._name(b)
        if a == b:
            self.error_console.print("[red]Error:[/red] Cannot add friendship with self.")
            return False
        if not self._known(a, b):
            return False
        outcome = self.network.add_friend(a, b)
        if outcome is Outcome.ALREADY_EXISTS:
            self.console.print(f"{escape(a)} and {escape(b)} are already friends.")
            return False
        self.console.print(f"{escape(a)} and {escape(b)} are now friends.")
        return True

    def unfriend(self, a: str, b: str) -> bool:
        a, b = self._name(a), self._name(b)
        if self.network.unfriend(a, b).changed:
            self.console.print(f"{escape(a)} and {escape(b)} are no longer friends.")
            return True
        self.console.print(f"{escape(a)} and {escape(b)} were not friends.")
        return False

    def delete_person(self, name: str) -> bool:
        name = self._name(name)
        if self.network.delete_person(name):
            self.console.print(f"{escape(name)} has been deleted from the network.")
            return True
        self.console.print("Person not found in the network.")
        return False

    # Queries

    def check_friends(self, a: str, b: str) -> bool:
        a, b = self._name(a), self._name(b)
        if not self._known(a, b):
            return False
        verb = "are" if self.network.are_friends(a, b) else "are not"
        self.console.print(f"{escape(a)} and {escape(b)} {verb} friends.")
        return True

    def show_path(self, start: str, goal: str) -> bool:
        start, goal = self._name(start), self._name(goal)
        if not self._known(start, goal):
            self.console.print(f"Shortest path: {NO_PATH}")
            return False
        self.vlog.start_operation("shortest path")
        path = self.network.shortest_path(start, goal)
        self.vlog.end_operation("shortest path", f"{max(len(path) - 1, 0)} hops")
        self.console.print(f"Shortest path: {escape(format_people(path)) or NO_PATH}")
        return True

    def show_path_avoiding(self, start: str, goal: str, blacklist: list[str]) -> bool:
        start, goal = self._name(start), self._name(goal)
        blacklist = [self._name(name) for name in blacklist]
        label = "Shortest path avoiding specified people:"
        if not self._known(start, goal):
            self.console.print(f"{label} {NO_PATH}")
            return False
        ignored = [name for name in blacklist if name not in self.network]
        if ignored:
            self.vlog.log(f"Ignoring unknown names to avoid: {escape(', '.join(ignored))}")
        self.vlog.start_operation("shortest path avoiding")
        path = self.network.shortest_path_avoiding(start, goal, blacklist)
        self.vlog.end_operation("shortest path avoiding", f"{len(path)} people on path")
        self.console.print(f"{label} {escape(format_people(path)) or NO_PATH}")
        return True

    def show_recommendations(self, name: str, k: int | None = None) -> bool:
        name = self._name(name)
        if k is None:
            k = self.config.default_top_k
        label = f"Top {k} recommendations for {escape(name)}:"
        if not self._known(name):
            self.console.print(f"{label} {NO_RECOMMENDATIONS}")
            return False

        self.vlog.start_operation("recommendations")
        ranked = rank_candidates(self.network, name)
        for candidate in ranked:
            self.vlog.log(
                f"  {escape(candidate.person.name)}: {candidate.mutual_count} mutual friend(s)"
            )
        self.vlog.end_operation("recommendations", f"{len(ranked)} candidates")

        top = self.network.top_k(name, k)
        self.console.print(f"{label} {escape(format_people(top)) or NO_RECOMMENDATIONS}")
        return True

    def show_network(self) -> bool:
        self.console.print("----- Social Network Graph -----")
        listing = render_adjacency(self.network)
        if listing:
            self.console.print(listing, markup=False)
        self.console.print("-------------------------------")
        return True

    def draw_network(self) -> bool:
        output = render_ascii(self.network, max_nodes=self.config.draw_max_nodes)
        self.console.print(output, markup=False)
        return True
