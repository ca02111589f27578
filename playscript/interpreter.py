"""Interpreter for the PlayScript language.

This module ties the toolchain together: the lexer and parser build an
AST, the resolver binds each call to its declaration, and the
:class:`Interpreter` walks the resolved tree. Top-level calls run in
source order; a call bound to a declaration runs every call in that
declaration's body, depth first. Unbound calls must name a built-in.

Recursion is not limited. A function that calls itself without end
exhausts the Python stack and the resulting ``RecursionError`` is left
to propagate.
"""

from __future__ import annotations

from typing import Dict, Optional, TextIO

from .ast import FunctionCall, FunctionDecl, Program
from .builtin_function import BuiltinFunction, make_builtins
from .errors import ExecutionError
from .lexer import tokenize
from .parser import Parser, parse_program
from .resolver import RefResolver

__all__ = ['Interpreter', 'parse_program', 'run_program']


class Interpreter:
    """Core interpreter that executes a resolved PlayScript AST."""
    def __init__(self, out: Optional[TextIO] = None, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.builtins: Dict[str, BuiltinFunction] = make_builtins(out)
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None
        self.depth = 0

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def run(self, program: Program):
        try:
            for stmt in program.stmts:
                if isinstance(stmt, FunctionCall):
                    self.execute_call(stmt)
                elif not isinstance(stmt, FunctionDecl):
                    raise ExecutionError(f"unexpected statement {stmt!r}")
        finally:
            self.close()

    def execute_call(self, call: FunctionCall):
        if self.debug_level >= 3:
            self.debug(f"{'  ' * self.depth}call {call.name}({', '.join(map(repr, call.parameters))})")
        decl = call.definition
        if decl is None:
            builtin = self.builtins.get(call.name)
            if builtin is None:
                raise ExecutionError(f"unknown function {call.name}")
            builtin(call.parameters)
            return
        if self.debug_level >= 2:
            self.debug(f"{'  ' * self.depth}enter function {decl.name}")
        self.depth += 1
        try:
            for inner in decl.body.stmts:
                self.execute_call(inner)
        finally:
            self.depth -= 1


def run_program(source: str, out: Optional[TextIO] = None, debug_level: int = 0,
                debug_file: str = 'debug.txt') -> Program:
    """Lex, parse, resolve and execute PlayScript source code.

    Returns the resolved program. Diagnostics go to ``debug_file`` when
    ``debug_level`` is greater than zero.
    """
    interpreter = Interpreter(out=out, debug_level=debug_level, debug_file=debug_file)
    try:
        tokens = tokenize(source)
        interpreter.debug(f"lexed {len(tokens)} tokens")
        if debug_level >= 2:
            for token in tokens:
                interpreter.debug(f"  {token}")
        program = Parser(tokens).parse_program()
        interpreter.debug(f"parsed {len(program.stmts)} statements")
        if debug_level >= 2:
            interpreter.debug("AST after parsing:\n" + program.dump())
        RefResolver(interpreter.builtins.keys()).resolve(program)
        if debug_level >= 2:
            interpreter.debug("AST after resolution:\n" + program.dump())
        interpreter.debug("running program")
        interpreter.run(program)
    finally:
        interpreter.close()
    return program
