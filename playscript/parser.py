"""Recursive-descent parser for the PlayScript language.

The grammar is::

    program        = (functionDecl | functionCall)* ;
    functionDecl   = "function" Identifier "(" ")" functionBody ;
    functionBody   = "{" functionCall* "}" ;
    functionCall   = Identifier "(" parameterList? ")" ";" ;
    parameterList  = StringLiteral ("," StringLiteral)* ;

The two statement forms start with different tokens, so :class:`Parser`
picks the rule by peeking at one token. :class:`BacktrackingParser` keeps
the older strategy of attempting each rule in turn and rewinding the token
cursor when the first token does not match. Both build the same AST.

Any syntax error aborts the parse; there is no error recovery.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .ast import FunctionBody, FunctionCall, FunctionDecl, Program, Statement
from .errors import ParseError, TryNext
from .lexer import Lexer
from .tokens import KEYWORD_FUNCTION, Token, TokenKind


class TokenCursor:
    """Peekable, rewindable view over a token sequence.

    Tokens are pulled from the underlying iterable on demand and buffered,
    so the cursor can move back to any earlier position. The sequence must
    end with exactly one EOF token; reading past it keeps returning EOF.
    """
    def __init__(self, tokens: Iterable[Token]):
        self.source: Iterator[Token] = iter(tokens)
        self.buffer: List[Token] = []
        self.pos = 0
        self.exhausted = False

    def fill(self, index: int) -> bool:
        while len(self.buffer) <= index and not self.exhausted:
            token = next(self.source, None)
            if token is None:
                raise ParseError("token sequence does not end with EOF")
            self.buffer.append(token)
            # anything after the first EOF is never read
            self.exhausted = token.kind is TokenKind.EOF
        return index < len(self.buffer)

    def peek(self) -> Token:
        if self.fill(self.pos):
            return self.buffer[self.pos]
        return self.buffer[-1]

    def next(self) -> Token:
        token = self.peek()
        if self.pos < len(self.buffer):
            self.pos += 1
        return token

    def eof(self) -> bool:
        return self.peek().kind is TokenKind.EOF

    def position(self) -> int:
        return self.pos

    def trace_back(self, pos: int) -> bool:
        if pos > self.pos:
            return False
        self.pos = pos
        return True


def describe(kind: TokenKind, text: Optional[str] = None) -> str:
    if text is None or kind is TokenKind.EOF:
        return kind.value
    return f"{kind.value} '{text}'"


class Parser:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens = TokenCursor(tokens)

    def expect(self, kind: TokenKind, text: Optional[str] = None) -> Token:
        token = self.tokens.next()
        if token.kind is not kind or (text is not None and token.text != text):
            raise ParseError(f"expected {describe(kind, text)} but got {describe(token.kind, token.text)}",
                             token.line, token.column)
        return token

    def parse_program(self) -> Program:
        stmts: List[Statement] = []
        while not self.tokens.eof():
            stmts.append(self.parse_statement())
        return Program(stmts)

    def parse_statement(self) -> Statement:
        token = self.tokens.peek()
        if token.is_keyword(KEYWORD_FUNCTION):
            return self.parse_function_decl()
        if token.kind is TokenKind.IDENTIFIER:
            return self.parse_function_call()
        raise self.unknown_statement(token)

    def unknown_statement(self, token: Token) -> ParseError:
        return ParseError(f"unknown statement starting with {describe(token.kind, token.text)}",
                          token.line, token.column)

    def parse_function_decl(self) -> FunctionDecl:
        self.expect(TokenKind.KEYWORD, KEYWORD_FUNCTION)
        name = self.expect(TokenKind.IDENTIFIER)
        self.expect(TokenKind.SEPARATOR, '(')
        # declarations take no parameters
        self.expect(TokenKind.SEPARATOR, ')')
        body = self.parse_function_body()
        return FunctionDecl(name.text, body)

    def parse_function_body(self) -> FunctionBody:
        self.expect(TokenKind.SEPARATOR, '{')
        stmts: List[FunctionCall] = []
        while True:
            token = self.tokens.peek()
            if token.kind is TokenKind.IDENTIFIER:
                stmts.append(self.parse_function_call())
                continue
            if token.is_separator('}'):
                self.tokens.next()
                return FunctionBody(stmts)
            raise ParseError(f"expected {describe(TokenKind.SEPARATOR, '}')} but got "
                             f"{describe(token.kind, token.text)}", token.line, token.column)

    def parse_function_call(self) -> FunctionCall:
        name = self.expect(TokenKind.IDENTIFIER)
        self.expect(TokenKind.SEPARATOR, '(')
        parameters: List[str] = []
        if not self.tokens.peek().is_separator(')'):
            while True:
                parameters.append(self.expect(TokenKind.STRING_LITERAL).text)
                token = self.tokens.next()
                if token.is_separator(')'):
                    break
                if not token.is_separator(','):
                    raise ParseError(f"expected Separator ',' or ')' but got {describe(token.kind, token.text)}",
                                     token.line, token.column)
        else:
            self.tokens.next()
        self.expect(TokenKind.SEPARATOR, ';')
        return FunctionCall(name.text, parameters)


class BacktrackingParser(Parser):
    """Parser variant that tries each statement rule and rewinds on mismatch.

    An attempt that fails on its very first token rewinds the cursor and
    raises :class:`TryNext`; once the first token matched, any later
    mismatch is a fatal syntax error.
    """

    def parse_statement(self) -> Statement:
        for attempt in (self.try_function_decl, self.try_function_call):
            try:
                return attempt()
            except TryNext:
                continue
        raise self.unknown_statement(self.tokens.peek())

    def try_function_decl(self) -> FunctionDecl:
        start = self.tokens.position()
        if not self.tokens.next().is_keyword(KEYWORD_FUNCTION):
            self.tokens.trace_back(start)
            raise TryNext('functionDecl')
        self.tokens.trace_back(start)
        return self.parse_function_decl()

    def try_function_call(self) -> FunctionCall:
        start = self.tokens.position()
        if self.tokens.next().kind is not TokenKind.IDENTIFIER:
            self.tokens.trace_back(start)
            raise TryNext('functionCall')
        self.tokens.trace_back(start)
        return self.parse_function_call()


def parse_tokens(tokens: Iterable[Token], backtracking: bool = False) -> Program:
    parser_cls = BacktrackingParser if backtracking else Parser
    return parser_cls(tokens).parse_program()


def parse_program(source: str, backtracking: bool = False) -> Program:
    """Parse PlayScript source code into a Program AST."""
    return parse_tokens(Lexer(source), backtracking=backtracking)
