"""Scanner for the Lox language.

The lexical grammar is declared as lark terminals and tokenized with
lark's basic lexer. Keywords are string terminals that lark retypes from
IDENTIFIER matches, so `and` becomes AND while `android` stays an
identifier.

Scanning never stops at the first problem: an unexpected character is
recorded as a diagnostic and lexing resumes on the character after it, so
a single pass reports every lexical error. An unterminated string is
matched by its own terminal, reported, and dropped.
"""

from __future__ import annotations

from typing import List, Tuple

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from .errors import Diagnostic
from .tokens import KEYWORDS, Token, TokenType


PUNCTUATION = {
    'LEFT_PAREN': '(',
    'RIGHT_PAREN': ')',
    'LEFT_BRACE': '{',
    'RIGHT_BRACE': '}',
    'COMMA': ',',
    'DOT': '.',
    'MINUS': '-',
    'PLUS': '+',
    'SEMICOLON': ';',
    'SLASH': '/',
    'STAR': '*',
    'BANG': '!',
    'BANG_EQUAL': '!=',
    'EQUAL': '=',
    'EQUAL_EQUAL': '==',
    'GREATER': '>',
    'GREATER_EQUAL': '>=',
    'LESS': '<',
    'LESS_EQUAL': '<=',
}


def build_grammar() -> str:
    """Assemble the lark grammar holding every Lox terminal.

    The single rule only exists so that lark keeps all terminals; the
    parser it generates is never used.
    """
    terminals = list(PUNCTUATION) + [kind.name for kind in KEYWORDS.values()]
    terminals += ['IDENTIFIER', 'NUMBER', 'STRING', 'UNTERMINATED_STRING']
    lines = [
        'start: lexeme*',
        'lexeme: ' + '\n       | '.join(terminals),
        '',
    ]
    for name, text in PUNCTUATION.items():
        lines.append(f'{name}: "{text}"')
    for word, kind in KEYWORDS.items():
        lines.append(f'{kind.name}: "{word}"')
    lines += [
        r'IDENTIFIER: /[A-Za-z_][A-Za-z0-9_]*/',
        r'NUMBER: /[0-9]+(\.[0-9]+)?/',
        r'STRING.2: /"[^"]*"/',
        r'UNTERMINATED_STRING: /"[^"]*/',
        r'COMMENT: /\/\/[^\n]*/',
        r'WHITESPACE: /[ \t\r\n]+/',
        '%ignore COMMENT',
        '%ignore WHITESPACE',
    ]
    return '\n'.join(lines) + '\n'


LOX_GRAMMAR = build_grammar()

LOX_LEXER = Lark(
    LOX_GRAMMAR,
    parser='lalr',
    lexer='basic',
)


def convert_token(raw, line: int) -> Token:
    """Turn a lark token into a Lox token."""
    kind = TokenType[raw.type]
    text = str(raw)
    if kind is TokenType.NUMBER:
        return Token(kind, text, line, float(text))
    if kind is TokenType.STRING:
        return Token(kind, text, line, text[1:-1])
    return Token(kind, text, line)


def scan(source: str) -> Tuple[List[Token], List[Diagnostic]]:
    """Convert source text into tokens, collecting lexical errors.

    The returned token list always ends with a single EOF token.
    """
    tokens: List[Token] = []
    errors: List[Diagnostic] = []
    offset = 0
    line_base = 0
    while True:
        try:
            for raw in LOX_LEXER.lex(source[offset:]):
                line = raw.line + line_base
                if raw.type == 'UNTERMINATED_STRING':
                    errors.append(Diagnostic(line, '', 'Unterminated string.'))
                    continue
                tokens.append(convert_token(raw, line))
            break
        except UnexpectedCharacters as exc:
            line = exc.line + line_base
            errors.append(Diagnostic(line, '', f'Unexpected character: {exc.char}'))
            offset += exc.pos_in_stream + 1
            line_base = line - 1
    tokens.append(Token(TokenType.EOF, '', source.count('\n') + 1))
    return tokens, errors
