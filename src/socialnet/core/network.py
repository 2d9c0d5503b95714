"""Graph store for SocialNet.

SocialNetwork owns the people and friendships of one network and resolves
names to Person identities. Every mutation follows the soft-failure
contract: unknown names, duplicates and self references are no-ops that
report an Outcome instead of raising.

This module must NOT import from cli/ or viz/ - it's pure graph logic.
"""

import logging
from collections.abc import Iterable, Iterator

from socialnet.core import recommend, traversal
from socialnet.core.constants import NOT_FOUND_INDEX
from socialnet.core.types import Friendship, Outcome, Person, Recommendation

logger = logging.getLogger(__name__)


class SocialNetwork:
    """An undirected, unweighted graph of people and friendships.

    People are keyed by name in an insertion-ordered dict, so lookups are
    O(1) while iteration still follows insertion order. Each person keeps an
    ordered adjacency dict; appending on add_friend and deleting on removal
    keeps every neighbor list in friendship-insertion order.
    """

    def __init__(self) -> None:
        self._people: dict[str, Person] = {}
        self._adjacency: dict[str, dict[str, None]] = {}
        self._friendships: dict[Friendship, None] = {}

    @classmethod
    def from_pairs(
        cls,
        people: Iterable[str],
        friendships: Iterable[tuple[str, str]] = (),
    ) -> "SocialNetwork":
        """Build a network from names and friendship pairs.

        The usual rules apply: duplicate names collapse, pairs naming
        unknown people or the same person twice are skipped.

        Args:
            people: Names to add, in order.
            friendships: (a, b) name pairs to connect, in order.

        Returns:
            A new SocialNetwork.
        """
        network = cls()
        for name in people:
            network.add_person(name)
        for a, b in friendships:
            network.add_friend(a, b)
        return network

    # Identity resolution

    def get(self, name: str) -> Person | None:
        """Return the stored Person with this name, or None."""
        return self._people.get(name)

    def find_index(self, name: str) -> int:
        """Return the insertion position of name, or NOT_FOUND_INDEX."""
        for index, stored in enumerate(self._people):
            if stored == name:
                return index
        return NOT_FOUND_INDEX

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Person):
            name = name.name
        return name in self._people

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people.values())

    @property
    def persons(self) -> tuple[Person, ...]:
        """All people in insertion order."""
        return tuple(self._people.values())

    @property
    def friendships(self) -> tuple[Friendship, ...]:
        """All friendships in insertion order."""
        return tuple(self._friendships)

    # Mutations

    def add_person(self, name: str) -> Outcome:
        """Add a person unless one with the same name exists."""
        if name in self._people:
            logger.debug("add_person: %r already present", name)
            return Outcome.ALREADY_EXISTS
        self._people[name] = Person(name)
        self._adjacency[name] = {}
        logger.debug("add_person: added %r", name)
        return Outcome.ADDED

    def add_friend(self, a: str, b: str) -> Outcome:
        """Connect two existing people.

        Returns:
            ADDED on success; NOT_FOUND if either person is unknown;
            SELF_REFERENCE if a == b; ALREADY_EXISTS if they are friends.
        """
        if a not in self._people or b not in self._people:
            logger.debug("add_friend: unknown person in (%r, %r)", a, b)
            return Outcome.NOT_FOUND
        if a == b:
            logger.debug("add_friend: rejected self friendship for %r", a)
            return Outcome.SELF_REFERENCE
        if self.are_friends(a, b):
            logger.debug("add_friend: %r and %r already friends", a, b)
            return Outcome.ALREADY_EXISTS

        self._friendships[Friendship(self._people[a], self._people[b])] = None
        self._adjacency[a][b] = None
        self._adjacency[b][a] = None
        logger.debug("add_friend: connected %r and %r", a, b)
        return Outcome.ADDED

    def unfriend(self, a: str, b: str) -> Outcome:
        """Remove the friendship between a and b if it exists."""
        if not self.are_friends(a, b):
            logger.debug("unfriend: no friendship between %r and %r", a, b)
            return Outcome.NOT_FOUND
        self._disconnect(a, b)
        logger.debug("unfriend: removed friendship %r - %r", a, b)
        return Outcome.REMOVED

    def delete_person(self, name: str) -> bool:
        """Delete a person and every friendship incident to them.

        Returns:
            True if the person existed, False otherwise.
        """
        if name not in self._people:
            logger.debug("delete_person: %r not found", name)
            return False

        for friend in list(self._adjacency[name]):
            self._disconnect(name, friend)
        del self._adjacency[name]
        del self._people[name]
        logger.debug("delete_person: deleted %r", name)
        return True

    def _disconnect(self, a: str, b: str) -> None:
        del self._friendships[Friendship(Person(a), Person(b))]
        del self._adjacency[a][b]
        del self._adjacency[b][a]

    # Adjacency queries

    def are_friends(self, a: str, b: str) -> bool:
        """Check whether a friendship connects a and b."""
        return b in self._adjacency.get(a, {})

    def neighbors(self, name: str) -> list[Person]:
        """Return the friends of name in friendship-insertion order.

        Unknown or friendless names yield an empty list.
        """
        return [self._people[friend] for friend in self._adjacency.get(name, {})]

    def adjacency(self) -> list[tuple[Person, list[Person]]]:
        """Enumerate every person with their friends.

        People come in insertion order, friends in friendship-insertion
        order. Used to render the whole network.
        """
        return [(person, self.neighbors(person.name)) for person in self._people.values()]

    # Queries delegated to the engines

    def shortest_path(self, start: str, goal: str) -> list[Person]:
        """See traversal.shortest_path."""
        return traversal.shortest_path(self, start, goal)

    def shortest_path_avoiding(
        self, start: str, goal: str, blacklist: Iterable[str]
    ) -> list[Person]:
        """See traversal.shortest_path_avoiding."""
        return traversal.shortest_path_avoiding(self, start, goal, blacklist)

    def common_friends(self, p: str, q: str) -> int:
        """See recommend.common_friends."""
        return recommend.common_friends(self, p, q)

    def rank_candidates(self, person: str) -> list[Recommendation]:
        """See recommend.rank_candidates."""
        return recommend.rank_candidates(self, person)

    def top_k(self, person: str, k: int) -> list[Person]:
        """See recommend.top_k."""
        return recommend.top_k(self, person, k)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(people={len(self._people)}, "
            f"friendships={len(self._friendships)})"
        )
