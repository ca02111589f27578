"""Reference grammar for PlayScript, built with Lark.

This module expresses the language grammar declaratively and turns the
Lark parse tree into the same AST classes the hand-written parser
produces. It serves as an independent front end for checking that the
lexer and parser in this package accept exactly the documented language.

The `parse_with_grammar` function is the public entry point and returns
an unresolved `Program`.
"""

from __future__ import annotations

import re
from typing import List

from lark import Lark, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .ast import FunctionBody, FunctionCall, FunctionDecl, Program
from .errors import LexerError, ParseError


PLAYSCRIPT_GRAMMAR = r"""
    start: statement*

    ?statement: function_decl
              | function_call

    function_decl: "function" IDENT "(" ")" function_body
    function_body: "{" function_call* "}"
    function_call: IDENT "(" [parameter_list] ")" ";"
    parameter_list: STRING_LIT ("," STRING_LIT)*

    // Tokens
    IDENT: /[^\W\d_]\w*/
    STRING_LIT: /"(?:[^"\\\n]|\\[n\\])*"/

    %import common.WS
    %ignore WS

    // Comments
    LINE_COMMENT: /\/\/[^\n]*/
    %ignore LINE_COMMENT
    BLOCK_COMMENT: /\/\*[\s\S]*?\*\//
    %ignore BLOCK_COMMENT
"""


PLAYSCRIPT_PARSER = Lark(
    PLAYSCRIPT_GRAMMAR,
    parser='lalr',
    propagate_positions=True,
    maybe_placeholders=False,
    lexer='basic',
)

ESCAPE_RE = re.compile(r'\\([n\\])')


def unescape(raw: str) -> str:
    """Strip the quotes from a string literal token and decode its escapes."""
    body = raw[1:-1]
    return ESCAPE_RE.sub(lambda m: '\n' if m.group(1) == 'n' else '\\', body)


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def start(self, items):
        return Program(list(items))

    def function_decl(self, items):
        name = str(items[0])
        body = items[1]
        return FunctionDecl(name, body)

    def function_body(self, items):
        return FunctionBody(list(items))

    def function_call(self, items):
        name = str(items[0])
        parameters: List[str] = items[1] if len(items) > 1 else []
        return FunctionCall(name, parameters)

    def parameter_list(self, items):
        return [unescape(str(token)) for token in items]


def parse_with_grammar(source: str) -> Program:
    """Parse PlayScript source with the reference grammar.

    Lark lexing failures are reported as `LexerError`, everything else the
    grammar rejects as `ParseError`.
    """
    try:
        tree = PLAYSCRIPT_PARSER.parse(source)
    except UnexpectedCharacters as e:
        raise LexerError(f"invalid character {e.char!r}", e.line, e.column) from e
    except UnexpectedEOF as e:
        raise ParseError(f"unexpected end of input, expected one of {sorted(e.expected)}") from e
    except UnexpectedToken as e:
        raise ParseError(f"unexpected token {e.token!r}, expected one of {sorted(e.expected)}",
                         e.line, e.column) from e
    except UnexpectedInput as e:
        raise ParseError(str(e)) from e
    return ASTTransformer().transform(tree)
