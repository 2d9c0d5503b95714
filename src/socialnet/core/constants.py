"""Constants for SocialNet application.

Exit codes, recommendation defaults and display limits.
"""

from typing import Final

# Exit codes (following Unix conventions)
EXIT_SUCCESS: Final[int] = 0
EXIT_USER_ERROR: Final[int] = 1
EXIT_INTERNAL_ERROR: Final[int] = 2
EXIT_CONFIG_ERROR: Final[int] = 3

# Position returned by SocialNetwork.find_index for unknown names
NOT_FOUND_INDEX: Final[int] = -1

# Recommendation defaults
DEFAULT_TOP_K: Final[int] = 3

# RapidFuzz similarity threshold for name suggestions (0-100 scale)
FUZZY_THRESHOLD: Final[int] = 70
MAX_SUGGESTIONS: Final[int] = 5

# Above this many people `draw` falls back to the adjacency listing
MAX_NODES_FOR_DRAWING: Final[int] = 50

# Script syntax
SCRIPT_COMMENT_PREFIX: Final[str] = "#"
STDIN_SCRIPT: Final[str] = "-"
