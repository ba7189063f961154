"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

These are the defaults used by ScanConfig.

Usage:
    from socialscan.charsets import WHITESPACE

    if char in WHITESPACE:  # O(1) lookup
        ...
"""

# Only these three end a token; \r and other Unicode spaces do not
WHITESPACE: frozenset[str] = frozenset(" \t\n")

# Hashtag marker
TAG_MARKERS: frozenset[str] = frozenset("#")

# Mention markers (@user, +user)
MENTION_MARKERS: frozenset[str] = frozenset("@+")

# Case-sensitive URL schemes that open a link
LINK_PREFIXES: tuple[str, ...] = ("http://", "https://")

# Characters that end a tag or mention (links only end on WHITESPACE)
BREAKING_CHARS: frozenset[str] = WHITESPACE | TAG_MARKERS | MENTION_MARKERS
