"""Tree-walking interpreter for the Lox language.

`Interpreter.execute` runs statements and hands back an outcome
(`Completed` or `Returned`); `Interpreter.evaluate` computes expression
values. Runtime errors are raised as `LoxRuntimeError` and only turned into
a `Failed` outcome by `interpret`, which stops at the first one and hands
it to the reporter.
"""

from __future__ import annotations

import math
import sys
import threading
from typing import Any, Callable, List, Optional, Sequence

from .ast import (
    Assign, BinaryOp, Block, Call, ClassDecl, Expr, ExprStmt, FuncDecl,
    Grouping, Ident, IfStmt, Literal, Logical, Member, PrintStmt,
    ReturnStmt, SetMember, Stmt, Super, This, UnaryOp, VarDecl, WhileStmt,
)
from .environment import Environment
from .errors import LoxRuntimeError, UnsupportedFeatureError
from .function import LoxCallable, LoxFunction
from .outcome import COMPLETED, Failed, Outcome, Returned
from .parser import scan_and_parse
from .std import populate_globals
from .tokens import Token, TokenType
from .types import is_equal, is_number, is_truthy, stringify, type_name

# sysexits(3) status codes used by the driver
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70

# room for a few thousand nested Lox calls
RECURSION_LIMIT = 100_000
THREAD_STACK_SIZE = 256 * 1024 * 1024

Reporter = Callable[[str, int], None]


def report_runtime_error(message: str, line: int):
    print(f"{message}\n[line {line}]", file=sys.stderr)


class Interpreter:
    """Core interpreter that executes a Lox AST."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt', out=None):
        self.globals = populate_globals(Environment())
        self.environment = self.globals
        self.out = out
        self.call_depth = 0
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def interpret(self, statements: Sequence[Stmt], reporter: Optional[Reporter] = None) -> Outcome:
        """Execute top-level statements, stopping at the first runtime error."""
        if reporter is None:
            reporter = report_runtime_error
        for stmt in statements:
            if self.debug_level >= 1:
                self.debug(f"execute {type(stmt).__name__}")
            try:
                self.execute(stmt)
            except LoxRuntimeError as err:
                self.debug(f"runtime error: {err.message} [line {err.line}]")
                reporter(err.message, err.line)
                return Failed(err)
        return COMPLETED

    def execute_block(self, statements: Sequence[Stmt], env: Environment) -> Outcome:
        previous = self.environment
        self.environment = env
        try:
            for stmt in statements:
                outcome = self.execute(stmt)
                if isinstance(outcome, Returned):
                    return outcome
            return COMPLETED
        finally:
            self.environment = previous

    def execute(self, node: Stmt) -> Outcome:
        if isinstance(node, ExprStmt):
            self.evaluate(node.expression)
            return COMPLETED
        if isinstance(node, PrintStmt):
            value = self.evaluate(node.expression)
            print(stringify(value), file=self.out)
            return COMPLETED
        if isinstance(node, VarDecl):
            value = None
            if node.initializer is not None:
                value = self.evaluate(node.initializer)
            self.environment.define(node.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"declare {node.name.lexeme}: {type_name(value)} = {stringify(value)}")
            return COMPLETED
        if isinstance(node, Block):
            return self.execute_block(node.statements, Environment(enclosing=self.environment))
        if isinstance(node, IfStmt):
            cond = self.evaluate(node.condition)
            truthy = is_truthy(cond)
            if self.debug_level >= 3:
                self.debug(f"if condition {stringify(cond)} -> {truthy}")
            if truthy:
                return self.execute(node.then_branch)
            if node.else_branch is not None:
                return self.execute(node.else_branch)
            return COMPLETED
        if isinstance(node, WhileStmt):
            while True:
                cond = self.evaluate(node.condition)
                if self.debug_level >= 3:
                    self.debug(f"while condition {stringify(cond)}")
                if not is_truthy(cond):
                    break
                outcome = self.execute(node.body)
                if isinstance(outcome, Returned):
                    return outcome
            return COMPLETED
        if isinstance(node, FuncDecl):
            function = LoxFunction(node, self.environment)
            self.environment.define(node.name.lexeme, function)
            if self.debug_level >= 2:
                self.debug(f"define function {node.name.lexeme}/{function.arity()} "
                           f"at scope depth {self.environment.depth()}")
            return COMPLETED
        if isinstance(node, ReturnStmt):
            if self.call_depth == 0:
                raise LoxRuntimeError(node.keyword, "Can't return from top-level code.")
            value = None
            if node.value is not None:
                value = self.evaluate(node.value)
            return Returned(value)
        if isinstance(node, ClassDecl):
            raise UnsupportedFeatureError(node.name, 'Class declaration')
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Expr) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Grouping):
            return self.evaluate(node.expression)
        if isinstance(node, UnaryOp):
            operand = self.evaluate(node.operand)
            if node.operator.type == TokenType.BANG:
                return not is_truthy(operand)
            if node.operator.type == TokenType.MINUS:
                self.check_number_operands(node.operator, operand)
                return -operand
            raise LoxRuntimeError(node.operator, f"Unknown unary operator '{node.operator.lexeme}'.")
        if isinstance(node, BinaryOp):
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            return self.apply_binary_op(node.operator, left, right)
        if isinstance(node, Logical):
            left = self.evaluate(node.left)
            if node.operator.type == TokenType.OR:
                if is_truthy(left):
                    return left
            elif not is_truthy(left):
                return left
            return self.evaluate(node.right)
        if isinstance(node, Ident):
            return self.environment.get(node.name)
        if isinstance(node, Assign):
            value = self.evaluate(node.value)
            self.environment.assign(node.name, value)
            return value
        if isinstance(node, Call):
            return self.call_function(node)
        if isinstance(node, Member):
            raise UnsupportedFeatureError(node.name, 'Property access')
        if isinstance(node, SetMember):
            raise UnsupportedFeatureError(node.name, 'Property assignment')
        if isinstance(node, This):
            raise UnsupportedFeatureError(node.keyword, "'this'")
        if isinstance(node, Super):
            raise UnsupportedFeatureError(node.keyword, "'super'")
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def call_function(self, node: Call) -> Any:
        callee = self.evaluate(node.callee)
        if not isinstance(callee, LoxCallable):
            raise LoxRuntimeError(node.paren, "Can only call functions and classes.")
        arguments = [self.evaluate(arg) for arg in node.arguments]
        if len(arguments) != callee.arity():
            raise LoxRuntimeError(
                node.paren,
                f"Expected {callee.arity()} arguments but got {len(arguments)}.",
            )
        if self.debug_level >= 2:
            self.debug(f"call {callee!r} with {len(arguments)} arguments")
        self.call_depth += 1
        try:
            return callee.call(self, arguments)
        finally:
            self.call_depth -= 1

    def check_number_operands(self, operator: Token, *operands: Any):
        for operand in operands:
            if not is_number(operand):
                raise LoxRuntimeError(operator, "Operand must be a number.")

    def apply_binary_op(self, operator: Token, a: Any, b: Any) -> Any:
        kind = operator.type
        if kind == TokenType.PLUS:
            if is_number(a) and is_number(b):
                return a + b
            if isinstance(a, str) and isinstance(b, str):
                return a + b
            raise LoxRuntimeError(operator, "Operands must be two numbers or two strings.")
        if kind == TokenType.EQUAL_EQUAL:
            return is_equal(a, b)
        if kind == TokenType.BANG_EQUAL:
            return not is_equal(a, b)
        self.check_number_operands(operator, a, b)
        if kind == TokenType.MINUS:
            return a - b
        if kind == TokenType.STAR:
            return a * b
        if kind == TokenType.SLASH:
            return divide(a, b)
        if kind == TokenType.GREATER:
            return a > b
        if kind == TokenType.GREATER_EQUAL:
            return a >= b
        if kind == TokenType.LESS:
            return a < b
        if kind == TokenType.LESS_EQUAL:
            return a <= b
        raise LoxRuntimeError(operator, f"Unknown operator '{operator.lexeme}'.")


def divide(a: float, b: float) -> float:
    """IEEE-754 division; Python raises on a zero divisor instead."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def report_diagnostics(diagnostics) -> None:
    for diag in diagnostics:
        print(str(diag), file=sys.stderr)


def run_source(source: str, interpreter: Optional[Interpreter] = None,
               reporter: Optional[Reporter] = None) -> int:
    """Scan, parse and run Lox source, returning a sysexits status.

    Syntax or lexical errors are printed to stderr and nothing runs.
    """
    statements, diagnostics = scan_and_parse(source)
    if diagnostics:
        report_diagnostics(diagnostics)
        return EX_DATAERR
    if interpreter is None:
        interpreter = Interpreter()
    outcome = interpreter.interpret(statements, reporter)
    if isinstance(outcome, Failed):
        return EX_SOFTWARE
    return EX_OK


def run_statements(statements: List[Stmt], debug_level: int = 0) -> int:
    """Run an already parsed program in a fresh interpreter."""
    interpreter = Interpreter(debug_level=debug_level)
    try:
        outcome = interpreter.interpret(statements)
    finally:
        interpreter.close()
    return EX_SOFTWARE if isinstance(outcome, Failed) else EX_OK


def run_with_deep_stack(fn: Callable[..., Any], *args: Any) -> Any:
    """Call `fn(*args)` on a thread sized for deep Lox recursion.

    Every Lox call costs several Python frames, so the default recursion
    limit would stop correct programs a couple of hundred calls deep. The
    call runs on a worker thread with a large stack and a raised recursion
    limit; its result is returned and anything it raises (including
    `SystemExit`) is re-raised in the caller.
    """
    results: List[Any] = []
    failures: List[BaseException] = []

    def target():
        try:
            results.append(fn(*args))
        except BaseException as exc:
            failures.append(exc)

    previous_limit = sys.getrecursionlimit()
    previous_size = threading.stack_size(THREAD_STACK_SIZE)
    sys.setrecursionlimit(max(previous_limit, RECURSION_LIMIT))
    try:
        worker = threading.Thread(target=target, name='yaliir-interpreter')
        worker.start()
        worker.join()
    finally:
        threading.stack_size(previous_size)
        sys.setrecursionlimit(previous_limit)
    if failures:
        raise failures[0]
    return results[0]
