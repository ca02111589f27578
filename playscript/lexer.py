"""Lexer for the PlayScript language.

The lexer pulls characters from a :class:`CharStream` and produces
tokens lazily. It recognizes:

* the keyword ``function`` and identifiers (a letter followed by letters,
  digits or underscores),
* string literals in double quotes with the escapes ``\\n`` and ``\\\\``,
* the separators ``( ) { } ; ,``,
* the operators ``+ ++ += - -- -= * *= / /=``,
* line comments (``//``) and block comments (``/* ... */``), which are
  skipped.

After the end of input is reached exactly one EOF token is emitted;
further calls return ``None``.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional

from .char_stream import CharStream
from .errors import LexerError
from .tokens import KEYWORD_FUNCTION, SEPARATORS, Token, TokenKind


ESCAPES = {'n': '\n', '\\': '\\'}

# operator -> characters that may follow it to form a longer operator
OPERATORS = {
    '+': '+=',
    '-': '-=',
    '*': '=',
}


class LexerState(Enum):
    SCANNING = 'scanning'
    DONE = 'done'


class Lexer:
    def __init__(self, source: str):
        self.stream = CharStream(source)
        self.state = LexerState.SCANNING

    @classmethod
    def from_stream(cls, stream: CharStream) -> 'Lexer':
        lexer = cls('')
        lexer.stream = stream
        return lexer

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Optional[Token]:
        while self.state is LexerState.SCANNING:
            self.skip_whitespace()
            ch = self.stream.peek()
            if ch is None:
                self.state = LexerState.DONE
                return Token(TokenKind.EOF, '', self.stream.line, self.stream.column)
            if ch == '"':
                return self.parse_string_literal()
            if ch in SEPARATORS:
                self.stream.next()
                return self.make_token(TokenKind.SEPARATOR, ch)
            if ch in OPERATORS:
                return self.parse_operator()
            if ch == '/':
                token = self.parse_slash()
                if token is None:
                    # comment skipped, scan again
                    continue
                return token
            if ch.isalpha():
                return self.parse_identifier()
            self.stream.next()
            raise LexerError(f"invalid character {ch!r}", self.stream.line, self.stream.column)
        return None

    def make_token(self, kind: TokenKind, text: str, line: Optional[int] = None,
                   column: Optional[int] = None) -> Token:
        if line is None:
            line = self.stream.line
            column = self.stream.column - len(text) + 1
        return Token(kind, text, line, column)

    def skip_whitespace(self):
        while True:
            ch = self.stream.peek()
            if ch is None or not ch.isspace():
                return
            self.stream.next()

    def skip_line(self):
        while True:
            ch = self.stream.peek()
            if ch is None or ch == '\n':
                return
            self.stream.next()

    def skip_block_comment(self, line: int, column: int):
        # the opening "/*" has already been consumed
        while True:
            ch = self.stream.next()
            if ch is None:
                raise LexerError("unterminated block comment", line, column)
            if ch == '*' and self.stream.peek() == '/':
                self.stream.next()
                return

    def parse_operator(self) -> Token:
        op = self.stream.next()
        line, column = self.stream.line, self.stream.column
        follow = self.stream.peek()
        if follow is not None and follow in OPERATORS[op]:
            self.stream.next()
            op += follow
        return self.make_token(TokenKind.OPERATOR, op, line, column)

    def parse_slash(self) -> Optional[Token]:
        """Handle ``/``, ``/=``, ``//`` and ``/*``.

        Returns ``None`` when a comment was skipped.
        """
        self.stream.next()
        line, column = self.stream.line, self.stream.column
        follow = self.stream.peek()
        if follow == '/':
            self.skip_line()
            return None
        if follow == '*':
            self.stream.next()
            self.skip_block_comment(line, column)
            return None
        if follow == '=':
            self.stream.next()
            return self.make_token(TokenKind.OPERATOR, '/=', line, column)
        return self.make_token(TokenKind.OPERATOR, '/', line, column)

    def parse_identifier(self) -> Token:
        chars: List[str] = [self.stream.next()]
        line, column = self.stream.line, self.stream.column
        while True:
            ch = self.stream.peek()
            if ch is None or not (ch.isalnum() or ch == '_'):
                break
            chars.append(self.stream.next())
        text = ''.join(chars)
        kind = TokenKind.KEYWORD if text == KEYWORD_FUNCTION else TokenKind.IDENTIFIER
        return self.make_token(kind, text, line, column)

    def parse_string_literal(self) -> Token:
        self.stream.next()  # opening quote
        line, column = self.stream.line, self.stream.column
        chars: List[str] = []
        while True:
            ch = self.stream.peek()
            if ch is None:
                raise LexerError("unterminated string literal, expecting '\"'",
                                 self.stream.line, self.stream.column)
            if ch == '\n':
                raise LexerError("unexpected line break in string literal",
                                 self.stream.line, self.stream.column)
            self.stream.next()
            if ch == '"':
                return self.make_token(TokenKind.STRING_LITERAL, ''.join(chars), line, column)
            if ch == '\\':
                escaped = self.stream.peek()
                if escaped not in ESCAPES:
                    raise LexerError(f"unknown escape sequence '\\{escaped or ''}'",
                                     self.stream.line, self.stream.column)
                self.stream.next()
                chars.append(ESCAPES[escaped])
                continue
            chars.append(ch)


def tokenize(source: str) -> List[Token]:
    """Convert source code into a list of tokens ending with one EOF token."""
    return list(Lexer(source))
