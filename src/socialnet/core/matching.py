"""Fuzzy name matching utilities for SocialNet.

Provides "did you mean" suggestions when a command names someone who is
not in the network. Uses RapidFuzz for fuzzy string matching. The graph
core never fuzzes identity; only the CLI consults this module.
"""

from dataclasses import dataclass, field

from rapidfuzz import fuzz, process

from socialnet.core.constants import FUZZY_THRESHOLD, MAX_SUGGESTIONS
from socialnet.core.network import SocialNetwork


@dataclass
class MatchResult:
    """Result of a name lookup.

    Attributes:
        name: The exact name found in the network, or None.
        suggestions: Close names when there is no exact match, best first.
    """

    name: str | None = None
    suggestions: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.name is not None


def find_person(
    network: SocialNetwork,
    query: str,
    threshold: int = FUZZY_THRESHOLD,
    limit: int = MAX_SUGGESTIONS,
) -> MatchResult:
    """Look up a name, collecting suggestions if it is unknown.

    Names are identities, so only an exact match counts as found.
    Otherwise close names scoring at or above threshold are suggested.

    Args:
        network: The network to search.
        query: Name typed by the user.
        threshold: Minimum fuzzy match score (0-100).
        limit: Maximum number of suggestions.

    Returns:
        MatchResult with the exact name or suggestions.
    """
    if query in network:
        return MatchResult(name=query)

    names = [person.name for person in network]
    if not names:
        return MatchResult()

    matches = process.extract(
        query,
        names,
        scorer=fuzz.WRatio,
        score_cutoff=threshold,
        limit=limit,
    )
    return MatchResult(suggestions=[m[0] for m in matches])


def format_suggestions(query: str, suggestions: list[str]) -> str:
    """Format an unknown-name message for display.

    Args:
        query: The name that was not found.
        suggestions: Suggested names.

    Returns:
        Formatted message with suggestions, if any.
    """
    message = f"'{query}' is not in the network."
    if not suggestions:
        return message

    formatted = "\n".join(f"  - {s}" for s in suggestions)
    return f"{message}\nDid you mean one of these?\n{formatted}"
