"""Tests for mutual-friend recommendations."""

import pytest

from socialnet.core.network import SocialNetwork
from socialnet.core.recommend import common_friends, rank_candidates, top_k
from socialnet.core.types import Person, Recommendation


def names(people: list[Person]) -> list[str]:
    return [p.name for p in people]


class TestCommonFriends:
    """Tests for common_friends()."""

    def test_counts_shared_friends(self, recommendation_network: SocialNetwork) -> None:
        assert common_friends(recommendation_network, "P", "Q1") == 3
        assert common_friends(recommendation_network, "P", "Q2") == 1
        assert common_friends(recommendation_network, "P", "Q3") == 0

    def test_is_symmetric(self, recommendation_network: SocialNetwork) -> None:
        assert common_friends(recommendation_network, "Q1", "P") == 3

    def test_chain_scenario(self, chain_network: SocialNetwork) -> None:
        assert common_friends(chain_network, "Alice", "Carol") == 1

    def test_unknown_person_is_zero(self, chain_network: SocialNetwork) -> None:
        assert common_friends(chain_network, "Alice", "Ghost") == 0
        assert common_friends(chain_network, "Ghost", "Alice") == 0


class TestTopK:
    """Tests for top_k()."""

    def test_ranks_by_mutual_count(self, recommendation_network: SocialNetwork) -> None:
        assert names(top_k(recommendation_network, "P", 2)) == ["Q1", "Q2"]

    def test_excludes_zero_mutual_even_with_large_k(
        self, recommendation_network: SocialNetwork
    ) -> None:
        """Q3 shares nothing with P, so only two results come back."""
        assert names(top_k(recommendation_network, "P", 5)) == ["Q1", "Q2"]

    def test_truncates_to_k(self, recommendation_network: SocialNetwork) -> None:
        assert names(top_k(recommendation_network, "P", 1)) == ["Q1"]

    def test_excludes_self_and_friends(self, recommendation_network: SocialNetwork) -> None:
        result = names(top_k(recommendation_network, "P", 10))

        assert "P" not in result
        assert not {"F1", "F2", "F3"} & set(result)

    @pytest.mark.parametrize("k", [0, -1, -100])
    def test_non_positive_k_is_empty(
        self, recommendation_network: SocialNetwork, k: int
    ) -> None:
        assert top_k(recommendation_network, "P", k) == []

    def test_fractional_k_is_truncated(self, recommendation_network: SocialNetwork) -> None:
        assert names(top_k(recommendation_network, "P", 2.0)) == ["Q1", "Q2"]
        assert names(top_k(recommendation_network, "P", 1.9)) == ["Q1"]
        assert top_k(recommendation_network, "P", 0.5) == []

    @pytest.mark.parametrize("k", [None, "abc", float("inf"), float("nan")])
    def test_unusable_k_is_empty(self, recommendation_network: SocialNetwork, k: object) -> None:
        assert top_k(recommendation_network, "P", k) == []

    def test_unknown_person_is_empty(self, recommendation_network: SocialNetwork) -> None:
        assert top_k(recommendation_network, "Ghost", 3) == []

    def test_ties_keep_network_order(self) -> None:
        """Equal scores come back in the order people were added."""
        network = SocialNetwork.from_pairs(
            ["Me", "Hub", "Zoe", "Adam", "Mia"],
            [("Me", "Hub"), ("Hub", "Zoe"), ("Hub", "Adam"), ("Hub", "Mia")],
        )

        assert names(top_k(network, "Me", 3)) == ["Zoe", "Adam", "Mia"]

    def test_higher_score_beats_earlier_position(self) -> None:
        network = SocialNetwork.from_pairs(
            ["Me", "F1", "F2", "Early", "Late"],
            [
                ("Me", "F1"),
                ("Me", "F2"),
                ("Early", "F1"),
                ("Late", "F1"),
                ("Late", "F2"),
            ],
        )

        assert names(top_k(network, "Me", 2)) == ["Late", "Early"]

    def test_friendless_person_gets_nothing(self, chain_network: SocialNetwork) -> None:
        chain_network.add_person("Loner")

        assert top_k(chain_network, "Loner", 3) == []


class TestRankCandidates:
    """Tests for rank_candidates()."""

    def test_returns_counts(self, recommendation_network: SocialNetwork) -> None:
        assert rank_candidates(recommendation_network, "P") == [
            Recommendation(Person("Q1"), 3),
            Recommendation(Person("Q2"), 1),
        ]

    def test_unknown_person_is_empty(self, recommendation_network: SocialNetwork) -> None:
        assert rank_candidates(recommendation_network, "Ghost") == []
