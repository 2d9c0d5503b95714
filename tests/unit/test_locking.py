"""Tests for the thread-safe network wrapper."""

import threading

from socialnet.core.constants import NOT_FOUND_INDEX
from socialnet.core.locking import LockedSocialNetwork
from socialnet.core.matching import find_person
from socialnet.core.network import SocialNetwork
from socialnet.core.recommend import rank_candidates, top_k
from socialnet.core.traversal import shortest_path
from socialnet.core.types import Outcome, Person, Recommendation


class TestLockedSocialNetworkDelegation:
    """Every call reaches the wrapped network."""

    def test_wraps_existing_network(self, chain_network: SocialNetwork) -> None:
        locked = LockedSocialNetwork(chain_network)

        assert len(locked) == 4
        assert "Alice" in locked
        assert locked.are_friends("Alice", "Bob")
        assert locked.neighbors("Bob") == [Person("Alice"), Person("Carol")]
        assert [p.name for p in locked.shortest_path("Alice", "Dave")] == [
            "Alice",
            "Bob",
            "Carol",
            "Dave",
        ]
        assert locked.shortest_path_avoiding("Alice", "Dave", ["Bob"]) == []
        assert locked.common_friends("Alice", "Carol") == 1
        assert locked.top_k("Alice", 2) == [Person("Carol")]

    def test_creates_empty_network_by_default(self) -> None:
        locked = LockedSocialNetwork()

        assert locked.add_person("A") is Outcome.ADDED
        assert locked.add_person("B") is Outcome.ADDED
        assert locked.add_friend("A", "B") is Outcome.ADDED
        assert len(locked.friendships) == 1
        assert locked.unfriend("A", "B") is Outcome.REMOVED
        assert locked.delete_person("A") is True
        assert locked.persons == (Person("B"),)
        assert locked.adjacency() == [(Person("B"), [])]

    def test_lookups_and_iteration(self, chain_network: SocialNetwork) -> None:
        locked = LockedSocialNetwork(chain_network)

        assert locked.get("Carol") == Person("Carol")
        assert locked.get("Ghost") is None
        assert locked.find_index("Dave") == 3
        assert locked.find_index("Ghost") == NOT_FOUND_INDEX
        assert [p.name for p in locked] == ["Alice", "Bob", "Carol", "Dave"]

    def test_iteration_is_a_snapshot(self, chain_network: SocialNetwork) -> None:
        locked = LockedSocialNetwork(chain_network)

        seen = []
        for person in locked:
            seen.append(person.name)
            locked.add_person(f"{person.name}2")

        assert seen == ["Alice", "Bob", "Carol", "Dave"]
        assert len(locked) == 8

    def test_rank_candidates_method(self, recommendation_network: SocialNetwork) -> None:
        locked = LockedSocialNetwork(recommendation_network)

        assert locked.rank_candidates("P") == [
            Recommendation(Person("Q1"), 3),
            Recommendation(Person("Q2"), 1),
        ]

    def test_module_functions_accept_wrapper(self, chain_network: SocialNetwork) -> None:
        """Engine and matching helpers work on the wrapper like on a network."""
        locked = LockedSocialNetwork(chain_network)

        assert rank_candidates(locked, "Alice") == [Recommendation(Person("Carol"), 1)]
        assert top_k(locked, "Alice", 3) == [Person("Carol")]
        assert [p.name for p in shortest_path(locked, "Alice", "Dave")] == [
            "Alice",
            "Bob",
            "Carol",
            "Dave",
        ]

        result = find_person(locked, "Alic")
        assert not result.found
        assert "Alice" in result.suggestions

    def test_lock_is_reentrant(self) -> None:
        locked = LockedSocialNetwork()

        with locked.lock:
            locked.add_person("A")
            assert "A" in locked


class TestLockedSocialNetworkConcurrency:
    """Concurrent writers never break the store's invariants."""

    def test_parallel_adds_keep_identity_unique(self) -> None:
        locked = LockedSocialNetwork()
        names = [f"p{i}" for i in range(50)]

        def worker() -> None:
            for name in names:
                locked.add_person(name)
            for a, b in zip(names, names[1:]):
                locked.add_friend(a, b)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(locked) == 50
        assert len(locked.friendships) == 49, "Duplicate friendships slipped in"
        assert len(locked.shortest_path("p0", "p49")) == 50
