"""Core data types for SocialNet.

These types define the people, friendships and query results of the graph.
All types are immutable dataclasses so they can be shared freely between
the store, the engines and the CLI.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto


class Outcome(Enum):
    """Diagnostic result of a mutation.

    Mutations never raise for domain conditions. Callers that ignore the
    returned Outcome see plain silent no-op behavior.
    """

    ADDED = auto()
    REMOVED = auto()
    ALREADY_EXISTS = auto()
    NOT_FOUND = auto()
    SELF_REFERENCE = auto()

    @property
    def changed(self) -> bool:
        """True if the mutation modified the network."""
        return self in (Outcome.ADDED, Outcome.REMOVED)


@dataclass(frozen=True)
class Person:
    """A participant in the social network.

    Two Persons are equal iff their names are equal.

    Attributes:
        name: Canonical name, the person's only identity.
    """

    name: str

    def renamed(self, name: str) -> "Person":
        """Return a copy of this person under a new name."""
        return replace(self, name=name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class Friendship:
    """An undirected friendship between two people.

    Equality and hashing ignore endpoint order, so Friendship(a, b) and
    Friendship(b, a) are the same relation. The stored order is kept only
    for display.

    Attributes:
        first: The person named first when the friendship was created.
        second: The other person.
    """

    first: Person
    second: Person

    @property
    def pair(self) -> frozenset[Person]:
        return frozenset((self.first, self.second))

    def involves(self, person: Person) -> bool:
        """Check whether person is one of the endpoints."""
        return person == self.first or person == self.second

    def other(self, person: Person) -> Person:
        """Return the endpoint opposite to person.

        Raises:
            ValueError: If person is not an endpoint of this friendship.
        """
        if person == self.first:
            return self.second
        if person == self.second:
            return self.first
        raise ValueError(f"{person.name!r} is not part of this friendship")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Friendship):
            return NotImplemented
        return self.pair == other.pair

    def __hash__(self) -> int:
        return hash(self.pair)


@dataclass(frozen=True)
class Recommendation:
    """A friend suggestion with its mutual-friend score.

    Attributes:
        person: The suggested person.
        mutual_count: Number of friends shared with the target person.
    """

    person: Person
    mutual_count: int
