"""Thread-safe access to a SocialNetwork.

The graph core assumes one caller at a time. Hosts that share a network
between threads wrap it in LockedSocialNetwork, which serializes every
call behind a single lock.
"""

import threading
from collections.abc import Iterable, Iterator

from socialnet.core.network import SocialNetwork
from socialnet.core.types import Friendship, Outcome, Person, Recommendation


class LockedSocialNetwork:
    """Serialize all access to a SocialNetwork behind one re-entrant lock.

    Reads that iterate (adjacency, persons, iteration itself) return snapshots taken while
    holding the lock, so callers never observe a half-applied mutation.
    """

    def __init__(self, network: SocialNetwork | None = None) -> None:
        self._network = network if network is not None else SocialNetwork()
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """The lock, for callers that need several calls to be atomic."""
        return self._lock

    def add_person(self, name: str) -> Outcome:
        with self._lock:
            return self._network.add_person(name)

    def add_friend(self, a: str, b: str) -> Outcome:
        with self._lock:
            return self._network.add_friend(a, b)

    def unfriend(self, a: str, b: str) -> Outcome:
        with self._lock:
            return self._network.unfriend(a, b)

    def delete_person(self, name: str) -> bool:
        with self._lock:
            return self._network.delete_person(name)

    def are_friends(self, a: str, b: str) -> bool:
        with self._lock:
            return self._network.are_friends(a, b)

    def neighbors(self, name: str) -> list[Person]:
        with self._lock:
            return self._network.neighbors(name)

    def get(self, name: str) -> Person | None:
        with self._lock:
            return self._network.get(name)

    def find_index(self, name: str) -> int:
        with self._lock:
            return self._network.find_index(name)

    def adjacency(self) -> list[tuple[Person, list[Person]]]:
        with self._lock:
            return self._network.adjacency()

    @property
    def persons(self) -> tuple[Person, ...]:
        with self._lock:
            return self._network.persons

    @property
    def friendships(self) -> tuple[Friendship, ...]:
        with self._lock:
            return self._network.friendships

    def shortest_path(self, start: str, goal: str) -> list[Person]:
        with self._lock:
            return self._network.shortest_path(start, goal)

    def shortest_path_avoiding(
        self, start: str, goal: str, blacklist: Iterable[str]
    ) -> list[Person]:
        blacklist = tuple(blacklist)
        with self._lock:
            return self._network.shortest_path_avoiding(start, goal, blacklist)

    def common_friends(self, p: str, q: str) -> int:
        with self._lock:
            return self._network.common_friends(p, q)

    def rank_candidates(self, person: str) -> list[Recommendation]:
        with self._lock:
            return self._network.rank_candidates(person)

    def top_k(self, person: str, k: int) -> list[Person]:
        with self._lock:
            return self._network.top_k(person, k)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._network

    def __len__(self) -> int:
        with self._lock:
            return len(self._network)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.persons)
