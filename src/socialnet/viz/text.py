"""Plain-text rendering of people and networks."""

from collections.abc import Iterable

from socialnet.core.network import SocialNetwork
from socialnet.core.types import Person


def format_people(people: Iterable[Person]) -> str:
    """Join names with single spaces, e.g. a path or a recommendation list."""
    return " ".join(person.name for person in people)


def render_adjacency(network: SocialNetwork) -> str:
    """List every person followed by their friends.

    One line per person in insertion order, formatted `Name: friend friend`.
    A person without friends renders as `Name:`.
    """
    lines = []
    for person, friends in network.adjacency():
        listing = format_people(friends)
        lines.append(f"{person.name}: {listing}" if listing else f"{person.name}:")
    return "\n".join(lines)
