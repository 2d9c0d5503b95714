"""Mutual-friend recommendations for SocialNet.

Scores every non-friend of a person by the number of friends they share
and ranks them. Pure graph logic: no I/O, no mutation.
"""

import logging
from typing import TYPE_CHECKING

from socialnet.core.types import Person, Recommendation

if TYPE_CHECKING:
    from socialnet.core.network import SocialNetwork

logger = logging.getLogger(__name__)


def common_friends(network: "SocialNetwork", p: str, q: str) -> int:
    """Count the friends p and q have in common.

    Returns:
        Size of the intersection of both neighbor sets, 0 if either
        person is unknown.
    """
    if p not in network or q not in network:
        return 0
    return len(set(network.neighbors(p)) & set(network.neighbors(q)))


def rank_candidates(network: "SocialNetwork", person: str) -> list[Recommendation]:
    """Score and rank every potential new friend of person.

    Candidates are everyone except the person and their current friends,
    dropping anyone with no mutual friends. The sort is stable, so equal
    scores keep network insertion order.

    Args:
        network: The network to search.
        person: Name of the person to recommend for.

    Returns:
        Recommendations, highest mutual count first. Empty for unknown names.
    """
    if person not in network:
        return []

    candidates: list[Recommendation] = []
    for other in network:
        if other.name == person or network.are_friends(person, other.name):
            continue
        mutual = common_friends(network, person, other.name)
        if mutual > 0:
            candidates.append(Recommendation(person=other, mutual_count=mutual))

    logger.debug("rank_candidates %r: %d candidates", person, len(candidates))
    return sorted(candidates, key=lambda c: c.mutual_count, reverse=True)


def top_k(network: "SocialNetwork", person: str, k: int) -> list[Person]:
    """Return up to k recommended friends for person.

    Returns:
        The best-ranked candidates, or an empty list if person is
        unknown or k is not a positive count. Fractional k is truncated.
    """
    try:
        limit = int(k)
    except (TypeError, ValueError, OverflowError):
        logger.debug("top_k %r: ignoring unusable k=%r", person, k)
        return []
    if limit <= 0:
        return []
    return [candidate.person for candidate in rank_candidates(network, person)[:limit]]
