"""Scan results: the three ordered token sequences.

ResultAccumulator collects token values while the lexer runs;
ParseResult is the frozen view returned to callers.

Thread Safety:
ParseResult is frozen (immutable) and safe to share across threads.
ResultAccumulator is per-call state and must not be shared.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from socialscan.tokens import Token, TokenType

_FIELDS: tuple[str, ...] = tuple(t.field_name for t in TokenType)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Tags, mentions and links found in a message.

    Each sequence keeps the order tokens were completed in, which is
    their left-to-right order in the message. Repeats are kept.

    Attributes:
        tags: Hashtags, including the leading marker
        mentions: Mentions, including the leading ``@`` or ``+``
        links: URLs, starting at the scheme

    Example:
        >>> result = ParseResult(tags=("#a",))
        >>> result["tags"]
        ('#a',)
        >>> result.to_dict()
        {'tags': ['#a'], 'mentions': [], 'links': []}

    """

    tags: tuple[str, ...] = ()
    mentions: tuple[str, ...] = ()
    links: tuple[str, ...] = ()

    def __getitem__(self, key: str) -> tuple[str, ...]:
        if key not in _FIELDS:
            raise KeyError(key)
        return getattr(self, key)

    def to_dict(self) -> dict[str, list[str]]:
        """Return ``{"tags": [...], "mentions": [...], "links": [...]}``."""
        return {name: list(getattr(self, name)) for name in _FIELDS}


@dataclass(slots=True)
class ResultAccumulator:
    """Mutable accumulator filled in token completion order."""

    tags: list[str] = field(default_factory=list)
    mentions: list[str] = field(default_factory=list)
    links: list[str] = field(default_factory=list)

    def add(self, token: Token) -> None:
        """Append the token's text to the sequence for its type."""
        getattr(self, token.type.field_name).append(token.value)

    def extend(self, tokens: Iterable[Token]) -> ResultAccumulator:
        for token in tokens:
            self.add(token)
        return self

    def build(self) -> ParseResult:
        """Freeze the accumulated sequences into a ParseResult."""
        return ParseResult(
            tags=tuple(self.tags),
            mentions=tuple(self.mentions),
            links=tuple(self.links),
        )
