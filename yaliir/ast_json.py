"""JSON serialization/deserialization for the Lox AST.

This module converts between AST dataclasses and plain Python dict/list
structures suitable for JSON encoding, so a parsed program can be saved
with `--emit-ast` and executed later with `--ast`. Tokens keep their kind,
lexeme, line and literal so runtime errors still report the right line.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict

from . import ast
from .tokens import Token, TokenType

NODE_TYPES: Dict[str, type] = {
    cls.__name__: cls
    for cls in (
        ast.Literal, ast.Grouping, ast.UnaryOp, ast.BinaryOp, ast.Logical,
        ast.Ident, ast.Assign, ast.Call, ast.Member, ast.SetMember, ast.This,
        ast.Super, ast.ExprStmt, ast.PrintStmt, ast.VarDecl, ast.Block,
        ast.IfStmt, ast.WhileStmt, ast.FuncDecl, ast.ReturnStmt, ast.ClassDecl,
    )
}


def token_to_obj(token: Token) -> Dict[str, Any]:
    return {
        "__type__": "Token",
        "kind": token.type.name,
        "lexeme": token.lexeme,
        "line": token.line,
        "literal": token.literal,
    }


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(TokenType[o["kind"]], o["lexeme"], o["line"], o.get("literal"))


def ast_to_obj(node: Any) -> Any:
    # Primitives
    if node is None or isinstance(node, (bool, float, str)):
        return node
    if isinstance(node, Token):
        return token_to_obj(node)
    if isinstance(node, (list, tuple)):
        return [ast_to_obj(item) for item in node]
    if isinstance(node, ast.Node):
        obj: Dict[str, Any] = {"type": type(node).__name__}
        for f in fields(node):
            obj[f.name] = ast_to_obj(getattr(node, f.name))
        return obj
    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None or isinstance(obj, (bool, str)):
        return obj
    if isinstance(obj, (int, float)):
        # hand-written AST files may spell 3.0 as 3
        return float(obj)
    if isinstance(obj, list):
        return tuple(ast_from_obj(item) for item in obj)
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    if obj.get("__type__") == "Token":
        return token_from_obj(obj)
    t = obj.get("type")
    cls = NODE_TYPES.get(t)
    if cls is None:
        raise ValueError(f"Unknown AST node type: {t}")
    kwargs = {f.name: ast_from_obj(obj.get(f.name)) for f in fields(cls)}
    return cls(**kwargs)


def program_to_obj(statements) -> Dict[str, Any]:
    return {"type": "Program", "body": [ast_to_obj(s) for s in statements]}


def program_from_obj(obj: Dict[str, Any]):
    if obj.get("type") != "Program":
        raise ValueError("AST file does not hold a Program")
    return [ast_from_obj(s) for s in obj["body"]]
