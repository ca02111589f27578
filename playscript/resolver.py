"""Reference resolution for PlayScript programs.

Resolution runs in two passes over the top-level statements. The first
pass indexes every function declaration by name; the second binds each
call, both at top level and inside function bodies, to the declaration
it names. Because binding only starts once the whole index is built, a
call may refer to a function declared further down the program.

When several declarations share a name, the last one wins and every
call of that name binds to it, including calls written before it.
"""

from typing import AbstractSet, Dict, Optional

from .ast import FunctionCall, FunctionDecl, Program
from .builtin_function import BUILTIN_NAMES
from .errors import ResolveError


class RefResolver:
    def __init__(self, builtins: Optional[AbstractSet[str]] = None):
        self.builtins = BUILTIN_NAMES if builtins is None else frozenset(builtins)
        self.functions: Dict[str, FunctionDecl] = {}

    def resolve(self, program: Program) -> Program:
        self.functions = {}
        for stmt in program.stmts:
            if isinstance(stmt, FunctionDecl):
                self.functions[stmt.name] = stmt

        for stmt in program.stmts:
            if isinstance(stmt, FunctionDecl):
                for call in stmt.body.stmts:
                    self.resolve_function_call(call)
            elif isinstance(stmt, FunctionCall):
                self.resolve_function_call(stmt)
            else:
                raise TypeError(f"unexpected statement {stmt!r}")
        return program

    def resolve_function_call(self, call: FunctionCall):
        decl = self.functions.get(call.name)
        if decl is not None:
            call.definition = decl
            return
        if call.name in self.builtins:
            call.definition = None
            return
        raise ResolveError(f"unknown function {call.name}")


def resolve_program(program: Program) -> Program:
    return RefResolver().resolve(program)
