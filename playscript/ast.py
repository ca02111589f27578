"""Abstract Syntax Tree (AST) definitions for the PlayScript language.

A program is a flat list of statements, each either a function
declaration or a function call. Function bodies hold calls only.

Every node can render itself as an indented tree through ``dump``. The
rendering is diagnostic output for tooling; it is not a source format and
lexing it again does not give back the original tokens.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


INDENT = '\t'


@dataclass
class Node:
    """Base class for all AST nodes."""

    def dump(self, prefix: str = '') -> str:
        raise NotImplementedError


@dataclass
class FunctionCall(Node):
    name: str
    parameters: List[str] = field(default_factory=list)
    # set by the resolver; None means unresolved or built-in
    definition: Optional['FunctionDecl'] = field(default=None, compare=False, repr=False)

    @property
    def resolved(self) -> bool:
        return self.definition is not None

    def dump(self, prefix: str = '') -> str:
        state = 'resolved' if self.resolved else 'not resolved'
        lines = [f"{prefix}FunctionCall {self.name}, {state}"]
        for param in self.parameters:
            lines.append(f"{prefix}{INDENT}Parameter: {param}")
        return '\n'.join(lines)


@dataclass
class FunctionBody(Node):
    stmts: List[FunctionCall] = field(default_factory=list)

    def dump(self, prefix: str = '') -> str:
        lines = [f"{prefix}FunctionBody"]
        lines.extend(call.dump(prefix + INDENT) for call in self.stmts)
        return '\n'.join(lines)


@dataclass
class FunctionDecl(Node):
    name: str
    body: FunctionBody

    def dump(self, prefix: str = '') -> str:
        return f"{prefix}FunctionDecl {self.name}\n" + self.body.dump(prefix + INDENT)


Statement = Union[FunctionDecl, FunctionCall]


@dataclass
class Program(Node):
    stmts: List[Statement] = field(default_factory=list)

    def declarations(self) -> List[FunctionDecl]:
        return [stmt for stmt in self.stmts if isinstance(stmt, FunctionDecl)]

    def calls(self) -> List[FunctionCall]:
        return [stmt for stmt in self.stmts if isinstance(stmt, FunctionCall)]

    def dump(self, prefix: str = '') -> str:
        lines = [f"{prefix}Prog"]
        lines.extend(stmt.dump(prefix + INDENT) for stmt in self.stmts)
        return '\n'.join(lines)
