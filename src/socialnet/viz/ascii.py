"""ASCII network visualization using phart.

This module converts a SocialNetwork to a NetworkX DiGraph and renders
it as ASCII art using the phart library. Friendships are undirected; each
is drawn once, from the person who was named first.
"""

import logging
from collections.abc import Iterable

import networkx as nx
from phart import ASCIIRenderer, NodeStyle

from socialnet.core.constants import MAX_NODES_FOR_DRAWING
from socialnet.core.network import SocialNetwork
from socialnet.viz.text import render_adjacency

logger = logging.getLogger(__name__)


def _format_label(name: str, highlight: bool = False) -> str:
    """Bracket a name, prefixing ">>" when it is highlighted."""
    base = f"[{name}]"
    if highlight:
        return f">> {base}"
    return base


def network_to_networkx(
    network: SocialNetwork,
    highlight: Iterable[str] | None = None,
) -> nx.DiGraph:
    """Convert a SocialNetwork to a NetworkX DiGraph for phart.

    Uses formatted labels as node IDs so phart displays styled labels.

    Args:
        network: The network to convert.
        highlight: Optional names to mark, e.g. the people on a path.

    Returns:
        NetworkX DiGraph with one node per person and one edge per friendship.
    """
    graph_nx = nx.DiGraph()
    highlight_set = set(highlight or ())

    labels: dict[str, str] = {}
    for person in network:
        label = _format_label(person.name, highlight=person.name in highlight_set)
        labels[person.name] = label
        graph_nx.add_node(label, name=person.name)

    for friendship in network.friendships:
        graph_nx.add_edge(labels[friendship.first.name], labels[friendship.second.name])

    return graph_nx


def _format_friendships(network: SocialNetwork) -> str:
    if not network.friendships:
        return ""
    lines = ["Friendships:"]
    for friendship in network.friendships:
        lines.append(f"  [{friendship.first.name}] -- [{friendship.second.name}]")
    return "\n".join(lines)


def render_ascii(
    network: SocialNetwork,
    highlight: Iterable[str] | None = None,
    max_nodes: int = MAX_NODES_FOR_DRAWING,
) -> str:
    """Render a network as ASCII art using phart.

    Args:
        network: The network to render.
        highlight: Optional names to mark with a ">>" prefix.
        max_nodes: Above this many people, fall back to the adjacency listing.

    Returns:
        ASCII art of the network followed by the friendship list, or a
        friendly message if the network is empty.
    """
    if len(network) == 0:
        return "The network is empty. Add someone first."

    if len(network) > max_nodes:
        return (
            f"⚠ Large network ({len(network)} people). Showing listing instead.\n\n"
            f"{render_adjacency(network)}"
        )

    try:
        nx_graph = network_to_networkx(network, highlight=highlight)

        # MINIMAL style since labels already have brackets
        renderer = ASCIIRenderer(nx_graph, node_style=NodeStyle.MINIMAL)
        parts = [renderer.render().strip()]

        friendships = _format_friendships(network)
        if friendships:
            parts.append("")
            parts.append(friendships)

        return "\n".join(parts)

    except Exception as e:
        logger.warning("Visualization failed: %s", e)
        return f"⚠ Could not draw the network.\n\n{render_adjacency(network)}"
