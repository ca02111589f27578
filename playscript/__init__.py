# PlayScript language package
# This package provides a lexer, parser, reference resolver and interpreter
# for the PlayScript language.
from .ast import FunctionBody, FunctionCall, FunctionDecl, Program
from .errors import ExecutionError, LexerError, ParseError, PlayScriptError, ResolveError
from .interpreter import Interpreter, parse_program, run_program
from .lexer import Lexer, tokenize
from .resolver import RefResolver
from .tokens import Token, TokenKind

__all__ = [
    'FunctionBody',
    'FunctionCall',
    'FunctionDecl',
    'Program',
    'PlayScriptError',
    'LexerError',
    'ParseError',
    'ResolveError',
    'ExecutionError',
    'Interpreter',
    'parse_program',
    'run_program',
    'Lexer',
    'tokenize',
    'RefResolver',
    'Token',
    'TokenKind',
]
