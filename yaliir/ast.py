"""Abstract Syntax Tree (AST) definitions for the Lox language.

The parser builds these nodes once per parse and nothing mutates them
afterwards, so every node is a frozen dataclass and child sequences are
tuples. Each node keeps the tokens the interpreter needs for line-accurate
runtime errors.

`Member`, `SetMember`, `This`, `Super` and `ClassDecl` belong to the object
model. They parse, but the interpreter refuses to evaluate them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .tokens import Token


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class Expr(Node):
    """Base class for expression nodes."""
    pass


@dataclass(frozen=True)
class Stmt(Node):
    """Base class for statement nodes."""
    pass


# Expressions

@dataclass(frozen=True)
class Literal(Expr):
    value: Any  # None, bool, float or str


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr


@dataclass(frozen=True)
class UnaryOp(Expr):
    operator: Token
    operand: Expr


@dataclass(frozen=True)
class BinaryOp(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Logical(Expr):
    left: Expr
    operator: Token  # AND or OR
    right: Expr


@dataclass(frozen=True)
class Ident(Expr):
    name: Token


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class Call(Expr):
    callee: Expr
    paren: Token  # closing paren, used for error location
    arguments: Tuple[Expr, ...]


@dataclass(frozen=True)
class Member(Expr):
    target: Expr
    name: Token


@dataclass(frozen=True)
class SetMember(Expr):
    target: Expr
    name: Token
    value: Expr


@dataclass(frozen=True)
class This(Expr):
    keyword: Token


@dataclass(frozen=True)
class Super(Expr):
    keyword: Token
    method: Token


# Statements

@dataclass(frozen=True)
class ExprStmt(Stmt):
    expression: Expr


@dataclass(frozen=True)
class PrintStmt(Stmt):
    expression: Expr


@dataclass(frozen=True)
class VarDecl(Stmt):
    name: Token
    initializer: Optional[Expr]


@dataclass(frozen=True)
class Block(Stmt):
    statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class IfStmt(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt]


@dataclass(frozen=True)
class WhileStmt(Stmt):
    condition: Expr
    body: Stmt


@dataclass(frozen=True)
class FuncDecl(Stmt):
    name: Token
    params: Tuple[Token, ...]
    body: Tuple[Stmt, ...]


@dataclass(frozen=True)
class ReturnStmt(Stmt):
    keyword: Token
    value: Optional[Expr]


@dataclass(frozen=True)
class ClassDecl(Stmt):
    name: Token
    superclass: Optional[Ident]
    methods: Tuple[FuncDecl, ...]
