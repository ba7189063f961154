"""Lexer operating modes.

This module defines the finite state machine modes for the lexer.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.
    
    The lexer switches between modes based on context:
    - SCAN: Between tokens, looking for a marker
    - TOKEN: Inside a tag, mention or link, looking for a terminator
        
    """

    SCAN = auto()  # Between tokens
    TOKEN = auto()  # Inside a token
