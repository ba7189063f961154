"""Source location tracking for extracted tokens.

Provides SourceLocation dataclass for tracking where a token was found
in the scanned message.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token in the scanned message.
    
    lineno and col_offset are 1-indexed. offset and end_offset are
    0-indexed code point positions, half-open, so that
    ``message[loc.offset:loc.end_offset]`` is the token text.
    
    Attributes:
        lineno: Line number of the token start (1-indexed)
        col_offset: Column of the token start (1-indexed)
        offset: Absolute start offset in the message
        end_offset: Absolute end offset in the message (exclusive)
    
    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=9, end_offset=13)
            >>> str(loc)
            '2:5'
        
    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0

    def __str__(self) -> str:
        """Format location as "line:col"."""
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of code points covered."""
        return self.end_offset - self.offset
