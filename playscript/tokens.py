"""Token definitions for PlayScript.

Tokens are produced by the lexer and consumed, never mutated, by the
parser. Each token records the line and column of its first character.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


KEYWORD_FUNCTION = 'function'
SEPARATORS = frozenset('(){};,')


class TokenKind(Enum):
    KEYWORD = 'Keyword'
    IDENTIFIER = 'Identifier'
    STRING_LITERAL = 'StringLiteral'
    SEPARATOR = 'Separator'
    OPERATOR = 'Operator'
    EOF = 'EOF'


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    line: int = 0
    column: int = 0

    def is_separator(self, text: str) -> bool:
        return self.kind is TokenKind.SEPARATOR and self.text == text

    def is_keyword(self, text: str) -> bool:
        return self.kind is TokenKind.KEYWORD and self.text == text

    def __str__(self) -> str:
        if self.kind is TokenKind.EOF:
            return f"EOF at {self.line}:{self.column}"
        return f"{self.kind.value} {self.text!r} at {self.line}:{self.column}"
