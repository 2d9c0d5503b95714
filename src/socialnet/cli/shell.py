"""Interactive menu shell for SocialNet.

A numbered menu loop over one in-memory network. The network lives only
as long as the shell does.
"""

import logging

import click

from socialnet.cli.session import NetworkSession

logger = logging.getLogger(__name__)

MENU = """\
===== Social Network Menu =====
1. Add Person
2. Add Friend Connection
3. Remove Friend Connection
4. Delete Person
5. Check if Two People are Friends
6. Display Shortest Path Between Two People
7. Display Shortest Path Avoiding Specific People
8. Display Top K Friend Recommendations
9. Display Entire Social Network
0. Exit
==============================="""

EXIT_CHOICE = 0


def _prompt_pair(
    first: str = "Enter first person's name",
    second: str = "Enter second person's name",
) -> tuple[str, str]:
    return click.prompt(first), click.prompt(second)


class MenuShell:
    """Read menu choices and dispatch them to a NetworkSession."""

    def __init__(self, session: NetworkSession) -> None:
        self.session = session
        self._actions = {
            1: self._add_person,
            2: self._add_friend,
            3: self._unfriend,
            4: self._delete_person,
            5: self._check_friends,
            6: self._shortest_path,
            7: self._shortest_path_avoiding,
            8: self._recommendations,
            9: self._show_network,
        }

    def run(self) -> None:
        """Loop until the user picks Exit or input ends."""
        console = self.session.console
        console.print("Welcome to Social Network Manager!")
        while True:
            console.print()
            console.print(MENU, markup=False)
            try:
                raw = click.prompt("Enter your choice", default="", show_default=False)
            except click.Abort:
                break

            try:
                choice = int(raw)
            except ValueError:
                choice = None

            if choice == EXIT_CHOICE:
                break
            action = self._actions.get(choice) if choice is not None else None
            if action is None:
                console.print("Invalid choice. Please try again.")
                continue

            logger.debug("menu choice %d", choice)
            try:
                action()
            except click.Abort:
                break

        console.print("Exiting Social Network Manager. Goodbye!")

    def _add_person(self) -> None:
        self.session.add_person(click.prompt("Enter person's name"))

    def _add_friend(self) -> None:
        self.session.add_friend(*_prompt_pair())

    def _unfriend(self) -> None:
        self.session.unfriend(*_prompt_pair())

    def _delete_person(self) -> None:
        self.session.delete_person(click.prompt("Enter person's name to delete"))

    def _check_friends(self) -> None:
        self.session.check_friends(*_prompt_pair())

    def _shortest_path(self) -> None:
        start, goal = _prompt_pair("Enter starting person's name", "Enter ending person's name")
        self.session.show_path(start, goal)

    def _shortest_path_avoiding(self) -> None:
        start, goal = _prompt_pair("Enter starting person's name", "Enter ending person's name")
        count = click.prompt(
            "Enter number of people to avoid", type=click.IntRange(min=0), default=0
        )
        blacklist = [click.prompt(f"Enter name {i + 1} to avoid") for i in range(count)]
        self.session.show_path_avoiding(start, goal, blacklist)

    def _recommendations(self) -> None:
        name = click.prompt("Enter person's name")
        k = click.prompt(
            "Enter number of recommendations (K)",
            type=int,
            default=self.session.config.default_top_k,
        )
        self.session.show_recommendations(name, k)

    def _show_network(self) -> None:
        self.session.show_network()
