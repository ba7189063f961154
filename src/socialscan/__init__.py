"""
socialscan — Hashtag, Mention and Link Extraction for Python

Extracts social-media-style tokens from free-form text in a single
O(n) pass: ``#tags``, ``@mentions`` and ``+mentions``, and
``http://`` / ``https://`` links. Zero runtime dependencies.

Quick Start:
    >>> from socialscan import parse
    >>> result = parse("hi @you check http://example.com/ that +someone hosted #example")
    >>> result.tags
    ('#example',)
    >>> result.mentions
    ('@you', '+someone')
    >>> result.links
    ('http://example.com/',)

Positions:
    >>> from socialscan import Lexer
    >>> [(t.value, t.location.offset) for t in Lexer("a #b").tokenize()]
    [('#b', 2)]

Installation:
    pip install socialscan
"""

from socialscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from socialscan.errors import ConfigError, SocialScanError
from socialscan.lexer import Lexer, LexerMode
from socialscan.location import SourceLocation
from socialscan.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from socialscan.result import ParseResult, ResultAccumulator
from socialscan.tokens import Token, TokenType
from socialscan.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def parse(message: str, *, config: ScanConfig | None = None) -> ParseResult:
    """Extract tags, mentions and links from a message.

    Never raises for str input: empty text, dangling markers and
    non-ASCII content all produce a (possibly empty) result.

    Args:
        message: Text to scan
        config: Scan configuration (uses the active context config if None)

    Returns:
        ParseResult with tags, mentions and links in left-to-right order

    Example:
        >>> parse("#a#b").tags
        ('#a', '#b')
        >>> parse("visit https://example.com/a#fragment now").links
        ('https://example.com/a#fragment',)
    """
    lexer = Lexer(message, config=config)
    result = ResultAccumulator().extend(lexer.tokenize()).build()

    token_count = len(result.tags) + len(result.mentions) + len(result.links)
    logger.debug(
        "Scanned %d chars: %d tags, %d mentions, %d links",
        len(message),
        len(result.tags),
        len(result.mentions),
        len(result.links),
    )

    accumulator = get_scan_accumulator()
    if accumulator is not None:
        accumulator.record_scan(len(message), token_count)

    return result


__all__ = [
    # Main API
    "parse",
    "ParseResult",
    "ResultAccumulator",
    # Lexer
    "Lexer",
    "LexerMode",
    "Token",
    "TokenType",
    "SourceLocation",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Errors
    "SocialScanError",
    "ConfigError",
    # Version
    "__version__",
]
