"""Recursive-descent parser for the Lox language.

Grammar, lowest precedence first::

    program     -> declaration* EOF
    declaration -> classDecl | funDecl | varDecl | statement
    statement   -> exprStmt | forStmt | ifStmt | printStmt
                 | returnStmt | whileStmt | block
    expression  -> assignment
    assignment  -> ( call "." )? IDENTIFIER "=" assignment | logic_or
    logic_or    -> logic_and ( "or" logic_and )*
    logic_and   -> equality ( "and" equality )*
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | call
    call        -> primary ( "(" arguments? ")" | "." IDENTIFIER )*
    primary     -> "true" | "false" | "nil" | "this" | NUMBER | STRING
                 | IDENTIFIER | "(" expression ")" | "super" "." IDENTIFIER

Syntax errors never stop the parse. Each one is recorded as a diagnostic,
the parser skips to the next statement boundary and carries on, and the
broken declaration is left out of the result. `for` loops are rewritten
into `while` loops here, so the interpreter never sees them.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .ast import (
    Assign, BinaryOp, Block, Call, ClassDecl, Expr, ExprStmt, FuncDecl,
    Grouping, Ident, IfStmt, Literal, Logical, Member, PrintStmt,
    ReturnStmt, SetMember, Stmt, Super, This, UnaryOp, VarDecl, WhileStmt,
)
from .errors import Diagnostic, ParseError
from .scanner import scan
from .tokens import Token, TokenType

MAX_ARGUMENTS = 255

STATEMENT_STARTS = {
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
}


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0
        self.errors: List[Diagnostic] = []

    def parse(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        return statements

    # Token helpers

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.previous()

    def check(self, kind: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == kind

    def match(self, *kinds: TokenType) -> bool:
        for kind in kinds:
            if self.check(kind):
                self.advance()
                return True
        return False

    def consume(self, kind: TokenType, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        """Record a diagnostic and return an exception the caller may raise.

        Non-fatal problems (too many arguments, bad assignment target) are
        reported without raising so parsing continues in place.
        """
        self.errors.append(Diagnostic.at_token(token, message))
        return ParseError(message)

    def synchronize(self):
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_STARTS:
                return
            self.advance()

    # Declarations

    def declaration(self) -> Optional[Stmt]:
        try:
            if self.match(TokenType.CLASS):
                return self.class_declaration()
            if self.match(TokenType.FUN):
                return self.function('function')
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except ParseError:
            self.synchronize()
            return None

    def class_declaration(self) -> ClassDecl:
        name = self.consume(TokenType.IDENTIFIER, "Expect class name.")
        superclass = None
        if self.match(TokenType.LESS):
            self.consume(TokenType.IDENTIFIER, "Expect superclass name.")
            superclass = Ident(self.previous())
        self.consume(TokenType.LEFT_BRACE, "Expect '{' before class body.")
        methods: List[FuncDecl] = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end():
            methods.append(self.function('method'))
        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after class body.")
        return ClassDecl(name, superclass, tuple(methods))

    def function(self, kind: str) -> FuncDecl:
        name = self.consume(TokenType.IDENTIFIER, f"Expect {kind} name.")
        self.consume(TokenType.LEFT_PAREN, f"Expect '(' after {kind} name.")
        params: List[Token] = []
        if not self.check(TokenType.RIGHT_PAREN):
            while True:
                if len(params) >= MAX_ARGUMENTS:
                    self.error(self.peek(), f"Can't have more than {MAX_ARGUMENTS} parameters.")
                params.append(self.consume(TokenType.IDENTIFIER, "Expect parameter name."))
                if not self.match(TokenType.COMMA):
                    break
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after parameters.")
        self.consume(TokenType.LEFT_BRACE, f"Expect '{{' before {kind} body.")
        body = self.block()
        return FuncDecl(name, tuple(params), tuple(body))

    def var_declaration(self) -> VarDecl:
        name = self.consume(TokenType.IDENTIFIER, "Expect variable name.")
        initializer: Optional[Expr] = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return VarDecl(name, initializer)

    # Statements

    def statement(self) -> Stmt:
        if self.match(TokenType.FOR):
            return self.for_statement()
        if self.match(TokenType.IF):
            return self.if_statement()
        if self.match(TokenType.PRINT):
            return self.print_statement()
        if self.match(TokenType.RETURN):
            return self.return_statement()
        if self.match(TokenType.WHILE):
            return self.while_statement()
        if self.match(TokenType.LEFT_BRACE):
            return Block(tuple(self.block()))
        return self.expression_statement()

    def for_statement(self) -> Stmt:
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'for'.")
        initializer: Optional[Stmt]
        if self.match(TokenType.SEMICOLON):
            initializer = None
        elif self.match(TokenType.VAR):
            initializer = self.var_declaration()
        else:
            initializer = self.expression_statement()

        condition: Optional[Expr] = None
        if not self.check(TokenType.SEMICOLON):
            condition = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after loop condition.")

        increment: Optional[Expr] = None
        if not self.check(TokenType.RIGHT_PAREN):
            increment = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.")

        body = self.statement()
        if increment is not None:
            body = Block((body, ExprStmt(increment)))
        if condition is None:
            condition = Literal(True)
        body = WhileStmt(condition, body)
        if initializer is not None:
            body = Block((initializer, body))
        return body

    def if_statement(self) -> IfStmt:
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'if'.")
        condition = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after if condition.")
        then_branch = self.statement()
        else_branch = None
        # else binds to the nearest if
        if self.match(TokenType.ELSE):
            else_branch = self.statement()
        return IfStmt(condition, then_branch, else_branch)

    def print_statement(self) -> PrintStmt:
        value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return PrintStmt(value)

    def return_statement(self) -> ReturnStmt:
        keyword = self.previous()
        value = None
        if not self.check(TokenType.SEMICOLON):
            value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after return value.")
        return ReturnStmt(keyword, value)

    def while_statement(self) -> WhileStmt:
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'while'.")
        condition = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after condition.")
        body = self.statement()
        return WhileStmt(condition, body)

    def expression_statement(self) -> ExprStmt:
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return ExprStmt(expr)

    def block(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        return statements

    # Expressions

    def expression(self) -> Expr:
        return self.assignment()

    def assignment(self) -> Expr:
        expr = self.logic_or()
        if self.match(TokenType.EQUAL):
            equals = self.previous()
            value = self.assignment()
            if isinstance(expr, Ident):
                return Assign(expr.name, value)
            if isinstance(expr, Member):
                return SetMember(expr.target, expr.name, value)
            self.error(equals, "Invalid assignment target.")
        return expr

    def logic_or(self) -> Expr:
        expr = self.logic_and()
        while self.match(TokenType.OR):
            operator = self.previous()
            right = self.logic_and()
            expr = Logical(expr, operator, right)
        return expr

    def logic_and(self) -> Expr:
        expr = self.equality()
        while self.match(TokenType.AND):
            operator = self.previous()
            right = self.equality()
            expr = Logical(expr, operator, right)
        return expr

    def binary_level(self, operand, *operators: TokenType) -> Expr:
        """Fold one left-associative precedence level."""
        expr = operand()
        while self.match(*operators):
            operator = self.previous()
            right = operand()
            expr = BinaryOp(expr, operator, right)
        return expr

    def equality(self) -> Expr:
        return self.binary_level(self.comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def comparison(self) -> Expr:
        return self.binary_level(
            self.term,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
        )

    def term(self) -> Expr:
        return self.binary_level(self.factor, TokenType.MINUS, TokenType.PLUS)

    def factor(self) -> Expr:
        return self.binary_level(self.unary, TokenType.SLASH, TokenType.STAR)

    def unary(self) -> Expr:
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            operand = self.unary()
            return UnaryOp(operator, operand)
        return self.call()

    def call(self) -> Expr:
        expr = self.primary()
        while True:
            if self.match(TokenType.LEFT_PAREN):
                expr = self.finish_call(expr)
            elif self.match(TokenType.DOT):
                name = self.consume(TokenType.IDENTIFIER, "Expect property name after '.'.")
                expr = Member(expr, name)
            else:
                break
        return expr

    def finish_call(self, callee: Expr) -> Call:
        arguments: List[Expr] = []
        if not self.check(TokenType.RIGHT_PAREN):
            while True:
                if len(arguments) >= MAX_ARGUMENTS:
                    self.error(self.peek(), f"Can't have more than {MAX_ARGUMENTS} arguments.")
                arguments.append(self.expression())
                if not self.match(TokenType.COMMA):
                    break
        paren = self.consume(TokenType.RIGHT_PAREN, "Expect ')' after arguments.")
        return Call(callee, paren, tuple(arguments))

    def primary(self) -> Expr:
        if self.match(TokenType.FALSE):
            return Literal(False)
        if self.match(TokenType.TRUE):
            return Literal(True)
        if self.match(TokenType.NIL):
            return Literal(None)
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous().literal)
        if self.match(TokenType.THIS):
            return This(self.previous())
        if self.match(TokenType.SUPER):
            keyword = self.previous()
            self.consume(TokenType.DOT, "Expect '.' after 'super'.")
            method = self.consume(TokenType.IDENTIFIER, "Expect superclass method name.")
            return Super(keyword, method)
        if self.match(TokenType.IDENTIFIER):
            return Ident(self.previous())
        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)
        raise self.error(self.peek(), "Expect expression.")


def parse(tokens: List[Token]) -> Tuple[List[Stmt], List[Diagnostic]]:
    """Parse a token sequence into statements, collecting syntax errors."""
    parser = Parser(tokens)
    statements = parser.parse()
    return statements, parser.errors


def scan_and_parse(source: str) -> Tuple[List[Stmt], List[Diagnostic]]:
    """Scan and parse source text.

    Parsing only starts once scanning has finished. If the scanner reported
    anything, those diagnostics are returned with no statements.
    """
    tokens, errors = scan(source)
    if errors:
        return [], errors
    return parse(tokens)
