"""ContextVar-based scan configuration for socialscan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
parse() reads the active config unless one is passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Default markers: #tag, @mention, +mention, http(s):// links
    result = parse("hi @you")

    # Scoped override
    from socialscan.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(mention_markers=frozenset("@"))):
        result = parse("hi +you")  # "+" no longer starts a mention

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from socialscan.charsets import (
    LINK_PREFIXES,
    MENTION_MARKERS,
    TAG_MARKERS,
    WHITESPACE,
)
from socialscan.errors import ConfigError


def _as_charset(value: Iterable[str]) -> frozenset[str]:
    return frozenset(value)


def _as_prefixes(value: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).
    Containers are normalized on construction, so sets, lists and
    strings are all accepted.

    Attributes:
        tag_markers: Single characters that open a tag
        mention_markers: Single characters that open a mention
        link_prefixes: Case-sensitive prefixes that open a link, checked
            before the single-character markers
        whitespace: Characters that end any token

    Raises:
        ConfigError: If the markers cannot form an unambiguous scanner.

    """

    tag_markers: frozenset[str] = TAG_MARKERS
    mention_markers: frozenset[str] = MENTION_MARKERS
    link_prefixes: tuple[str, ...] = LINK_PREFIXES
    whitespace: frozenset[str] = WHITESPACE

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag_markers", _as_charset(self.tag_markers))
        object.__setattr__(self, "mention_markers", _as_charset(self.mention_markers))
        object.__setattr__(self, "link_prefixes", _as_prefixes(self.link_prefixes))
        object.__setattr__(self, "whitespace", _as_charset(self.whitespace))
        self._validate()

    def _validate(self) -> None:
        for name in ("tag_markers", "mention_markers", "whitespace"):
            for char in getattr(self, name):
                if not isinstance(char, str) or len(char) != 1:
                    raise ConfigError(name, f"expected single characters, got {char!r}")

        for prefix in self.link_prefixes:
            if not isinstance(prefix, str) or not prefix:
                raise ConfigError("link_prefixes", f"expected non-empty strings, got {prefix!r}")

        shared = self.tag_markers & self.mention_markers
        if shared:
            raise ConfigError(
                "mention_markers",
                f"{''.join(sorted(shared))!r} is also a tag marker",
            )

        clash = self.whitespace & (self.tag_markers | self.mention_markers)
        if clash:
            raise ConfigError(
                "whitespace",
                f"{''.join(sorted(clash))!r} is also a marker",
            )

    @property
    def breaking_chars(self) -> frozenset[str]:
        """Characters that end a tag or mention.

        Links only end on whitespace, since URLs may contain
        marker characters (fragments, userinfo, query strings).
        """
        return self.whitespace | self.tag_markers | self.mention_markers

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "mention_markers": ["@"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.mention_markers)
            ['@']

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

# Thread-local configuration via ContextVar
_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local).

    Returns:
        The active ScanConfig for this thread/context.

    """
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Example:
        >>> with scan_config_context(ScanConfig(tag_markers=frozenset("#$"))):
        ...     result = parse("$AAPL #stocks")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
