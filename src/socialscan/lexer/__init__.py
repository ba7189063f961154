"""State-machine lexer for socialscan.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (marker dispatch + token scanning)
└── modes.py             # LexerMode enum

Usage:
    >>> from socialscan.lexer import Lexer
    >>> for token in Lexer("hi @you #welcome").tokenize():
    ...     print(token)
Token(MENTION, '@you', 1:4)
Token(TAG, '#welcome', 1:9)

"""

from socialscan.lexer.core import Lexer
from socialscan.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]
