"""Graph core for SocialNet.

Storage, traversal and recommendation logic. Nothing here performs I/O.
"""

from socialnet.core.locking import LockedSocialNetwork
from socialnet.core.network import SocialNetwork
from socialnet.core.recommend import common_friends, rank_candidates, top_k
from socialnet.core.traversal import shortest_path, shortest_path_avoiding
from socialnet.core.types import Friendship, Outcome, Person, Recommendation

__all__ = [
    "SocialNetwork",
    "LockedSocialNetwork",
    "Person",
    "Friendship",
    "Outcome",
    "Recommendation",
    "shortest_path",
    "shortest_path_avoiding",
    "common_friends",
    "rank_candidates",
    "top_k",
]
