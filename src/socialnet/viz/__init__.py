"""Visualization module for SocialNet.

Provides plain-text listings and ASCII graph rendering.
"""

from socialnet.viz.ascii import network_to_networkx, render_ascii
from socialnet.viz.text import format_people, render_adjacency

__all__ = ["render_ascii", "network_to_networkx", "format_people", "render_adjacency"]
