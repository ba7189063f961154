"""State-machine lexer with O(n) guaranteed performance.

Single forward pass over an explicit index. In SCAN mode the lexer looks
for a marker; in TOKEN mode it extends the current token until a
terminator or end of input. A terminator is never consumed by the token
it ends: the cursor stays on it and SCAN mode examines it next, so a
``#`` that ends a mention can open a tag straight away.

No regex in the hot path. Zero ReDoS vulnerability by construction.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from socialscan.config import ScanConfig, get_scan_config
from socialscan.lexer.modes import LexerMode
from socialscan.tokens import Token, TokenType


class Lexer:
    """State-machine lexer for tags, mentions and links.

    Usage:
            >>> lexer = Lexer("see https://a.io/#x or @me")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(LINK, 'https://a.io/#x', 1:5)
        Token(MENTION, '@me', 1:24)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_mode",
        "_config",
        "_link_starts",  # First characters of link prefixes (fast reject)
        "_breaking_chars",
        # Current token state
        "_token_type",
        "_token_start",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, source: str, config: ScanConfig | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Message text to scan
            config: Scan configuration (uses the active context config if None)
        """
        if config is None:
            config = get_scan_config()
        self._config = config
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._mode = LexerMode.SCAN

        self._link_starts = frozenset(prefix[0] for prefix in config.link_prefixes)
        self._breaking_chars = config.breaking_chars

        self._token_type: TokenType | None = None
        self._token_start: int = 0
        self._saved_lineno: int = 1
        self._saved_col: int = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects in left-to-right order

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        source_len = self._source_len
        while self._pos < source_len:
            if self._mode == LexerMode.SCAN:
                self._scan_for_marker()
            else:
                yield self._scan_token()

        # A marker at end of input leaves an open token
        if self._mode == LexerMode.TOKEN:
            yield self._emit_token()

    # =========================================================================
    # Mode scanners
    # =========================================================================

    def _scan_for_marker(self) -> None:
        """Examine the current character and open a token if it is a marker.

        Link prefixes are tried first, so ``https://`` is never read as
        plain text followed by something else. Non-marker characters are
        discarded.
        """
        token_type, marker_len = self._classify_marker()
        if token_type is None:
            self._advance()
            return

        self._save_location()
        self._token_type = token_type
        self._token_start = self._pos
        self._mode = LexerMode.TOKEN
        self._advance_to(self._pos + marker_len)

    def _classify_marker(self) -> tuple[TokenType | None, int]:
        """Classify the marker starting at the current position.

        Returns:
            (token_type, marker_length), or (None, 0) if no marker starts here.
        """
        char = self._source[self._pos]
        config = self._config

        if char in self._link_starts:
            for prefix in config.link_prefixes:
                if self._source.startswith(prefix, self._pos):
                    return TokenType.LINK, len(prefix)

        if char in config.tag_markers:
            return TokenType.TAG, 1
        if char in config.mention_markers:
            return TokenType.MENTION, 1
        return None, 0

    def _scan_token(self) -> Token:
        """Extend the open token up to its terminator or end of input.

        The terminator itself is left unconsumed.
        """
        if self._token_type is TokenType.LINK:
            terminators = self._config.whitespace
        else:
            terminators = self._breaking_chars

        source = self._source
        source_len = self._source_len
        end = self._pos
        while end < source_len and source[end] not in terminators:
            end += 1

        self._advance_to(end)
        return self._emit_token()

    def _emit_token(self) -> Token:
        """Close the open token and return to SCAN mode."""
        assert self._token_type is not None
        token = Token(
            type=self._token_type,
            value=self._source[self._token_start : self._pos],
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=self._token_start,
            _end_offset=self._pos,
        )
        self._token_type = None
        self._mode = LexerMode.SCAN
        return token

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _advance_to(self, end: int) -> None:
        """Move position to end, updating line/column tracking.

        Uses C-optimized str.count/str.rfind instead of a per-character loop.
        """
        if end <= self._pos:
            return

        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)
        self._pos = end

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col
