"""Canonical parenthesized rendering of Lox syntax trees.

Used to check what the parser built: `-123 * (45.67)` prints as
`(* (- 123) (group 45.67))`.
"""

from __future__ import annotations

from typing import Any, Iterable

from .ast import (
    Assign, BinaryOp, Block, Call, ClassDecl, ExprStmt, FuncDecl, Grouping,
    Ident, IfStmt, Literal, Logical, Member, Node, PrintStmt, ReturnStmt,
    SetMember, Super, This, UnaryOp, VarDecl, WhileStmt,
)
from .types import stringify


class AstPrinter:
    def print(self, node: Node) -> str:
        if isinstance(node, Literal):
            if isinstance(node.value, str):
                return f'"{node.value}"'
            return stringify(node.value)
        if isinstance(node, Grouping):
            return self.parenthesize('group', node.expression)
        if isinstance(node, UnaryOp):
            return self.parenthesize(node.operator.lexeme, node.operand)
        if isinstance(node, (BinaryOp, Logical)):
            return self.parenthesize(node.operator.lexeme, node.left, node.right)
        if isinstance(node, Ident):
            return node.name.lexeme
        if isinstance(node, Assign):
            return self.parenthesize('=', node.name.lexeme, node.value)
        if isinstance(node, Call):
            return self.parenthesize('call', node.callee, *node.arguments)
        if isinstance(node, Member):
            return self.parenthesize('.', node.target, node.name.lexeme)
        if isinstance(node, SetMember):
            return self.parenthesize('=', node.target, node.name.lexeme, node.value)
        if isinstance(node, This):
            return 'this'
        if isinstance(node, Super):
            return self.parenthesize('super', node.method.lexeme)

        if isinstance(node, ExprStmt):
            return self.parenthesize(';', node.expression)
        if isinstance(node, PrintStmt):
            return self.parenthesize('print', node.expression)
        if isinstance(node, VarDecl):
            if node.initializer is None:
                return self.parenthesize('var', node.name.lexeme)
            return self.parenthesize('var', node.name.lexeme, '=', node.initializer)
        if isinstance(node, Block):
            return self.parenthesize('block', *node.statements)
        if isinstance(node, IfStmt):
            if node.else_branch is None:
                return self.parenthesize('if', node.condition, node.then_branch)
            return self.parenthesize('if-else', node.condition, node.then_branch, node.else_branch)
        if isinstance(node, WhileStmt):
            return self.parenthesize('while', node.condition, node.body)
        if isinstance(node, FuncDecl):
            params = '(' + ' '.join(p.lexeme for p in node.params) + ')'
            return self.parenthesize('fun', node.name.lexeme, params, *node.body)
        if isinstance(node, ReturnStmt):
            if node.value is None:
                return '(return)'
            return self.parenthesize('return', node.value)
        if isinstance(node, ClassDecl):
            parts: list = [node.name.lexeme]
            if node.superclass is not None:
                parts += ['<', node.superclass]
            return self.parenthesize('class', *parts, *node.methods)
        raise TypeError(f"Unsupported node for printing: {type(node).__name__}")

    def print_program(self, statements: Iterable[Node]) -> str:
        return '\n'.join(self.print(stmt) for stmt in statements)

    def parenthesize(self, name: str, *parts: Any) -> str:
        pieces = [name]
        for part in parts:
            pieces.append(part if isinstance(part, str) else self.print(part))
        return '(' + ' '.join(pieces) + ')'
