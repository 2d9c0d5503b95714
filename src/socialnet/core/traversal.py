"""Shortest-path traversal for SocialNet.

Breadth-first search over a SocialNetwork, optionally treating a set of
people as impassable. Pure graph logic: no I/O, no mutation.
"""

import logging
from collections import deque
from collections.abc import Iterable
from typing import TYPE_CHECKING

from socialnet.core.constants import NOT_FOUND_INDEX
from socialnet.core.types import Person

if TYPE_CHECKING:
    from socialnet.core.network import SocialNetwork

logger = logging.getLogger(__name__)


def shortest_path(network: "SocialNetwork", start: str, goal: str) -> list[Person]:
    """Find a shortest chain of friendships from start to goal.

    Args:
        network: The network to search.
        start: Name of the first person.
        goal: Name of the last person.

    Returns:
        People along a fewest-edges path, start first and goal last.
        [start] when start == goal; an empty list when either name is
        unknown or goal is unreachable.
    """
    return shortest_path_avoiding(network, start, goal, ())


def shortest_path_avoiding(
    network: "SocialNetwork",
    start: str,
    goal: str,
    blacklist: Iterable[str],
) -> list[Person]:
    """Find a shortest path that never passes through blacklisted people.

    A blacklisted start or goal means no path exists. Blacklist names that
    are not in the network are ignored. Among several shortest paths the one
    found first wins, which follows friendship-insertion order.

    Args:
        network: The network to search.
        start: Name of the first person.
        goal: Name of the last person.
        blacklist: Names of people the path must avoid.

    Returns:
        People along the path, or an empty list if none exists.
    """
    source = network.get(start)
    target = network.get(goal)
    if source is None or target is None:
        return []

    excluded = set(blacklist)
    if start in excluded or goal in excluded:
        return []

    if source == target:
        return [source]

    people = network.persons
    position = {person.name: index for index, person in enumerate(people)}

    visited = [False] * len(people)
    parent = [NOT_FOUND_INDEX] * len(people)

    # Blocked people behave as already explored
    for name in excluded:
        index = position.get(name)
        if index is not None:
            visited[index] = True

    start_index = position[start]
    goal_index = position[goal]
    visited[start_index] = True
    queue: deque[int] = deque([start_index])
    expanded = 0

    while queue:
        current = queue.popleft()
        if current == goal_index:
            break
        expanded += 1

        for neighbor in network.neighbors(people[current].name):
            neighbor_index = position[neighbor.name]
            if not visited[neighbor_index]:
                visited[neighbor_index] = True
                parent[neighbor_index] = current
                queue.append(neighbor_index)

    logger.debug(
        "shortest_path %r -> %r: expanded %d of %d people (%d blocked)",
        start,
        goal,
        expanded,
        len(people),
        len(excluded),
    )

    if parent[goal_index] == NOT_FOUND_INDEX:
        return []

    path: list[Person] = []
    at = goal_index
    while at != NOT_FOUND_INDEX:
        path.append(people[at])
        at = parent[at]
    path.reverse()
    return path
