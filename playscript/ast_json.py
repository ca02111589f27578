"""JSON serialization/deserialization for PlayScript ASTs.

This module converts between AST dataclasses and plain Python dict/list
structures suitable for JSON encoding. Call bindings are not references
that JSON can hold, so they are exported only as a ``resolved`` flag;
an AST read back with `ast_from_obj` is unresolved.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import FunctionBody, FunctionCall, FunctionDecl, Program


def ast_to_obj(node: Any) -> Any:
    if isinstance(node, Program):
        return {"type": "Program", "stmts": [ast_to_obj(n) for n in node.stmts]}
    if isinstance(node, FunctionDecl):
        return {"type": "FunctionDecl", "name": node.name, "body": ast_to_obj(node.body)}
    if isinstance(node, FunctionBody):
        return {"type": "FunctionBody", "stmts": [ast_to_obj(n) for n in node.stmts]}
    if isinstance(node, FunctionCall):
        return {
            "type": "FunctionCall",
            "name": node.name,
            "parameters": list(node.parameters),
            "resolved": node.resolved,
        }
    raise TypeError(f"Unsupported node type for serialization: {type(node).__name__}")


def ast_from_obj(o: Dict[str, Any]) -> Any:
    t = o.get("type")
    if t == "Program":
        return Program([ast_from_obj(x) for x in o.get("stmts", [])])
    if t == "FunctionDecl":
        return FunctionDecl(o["name"], ast_from_obj(o["body"]))
    if t == "FunctionBody":
        return FunctionBody([ast_from_obj(x) for x in o.get("stmts", [])])
    if t == "FunctionCall":
        return FunctionCall(o["name"], list(o.get("parameters", [])))
    raise ValueError(f"Unknown node type in AST JSON: {t}")
