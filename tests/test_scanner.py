from yaliir.scanner import scan
from yaliir.tokens import TokenType as T


def kinds(source):
    tokens, errors = scan(source)
    assert errors == []
    return [t.type for t in tokens]


def test_punctuation_and_operators():
    assert kinds('(){},.-+;*/') == [
        T.LEFT_PAREN, T.RIGHT_PAREN, T.LEFT_BRACE, T.RIGHT_BRACE, T.COMMA,
        T.DOT, T.MINUS, T.PLUS, T.SEMICOLON, T.STAR, T.SLASH, T.EOF,
    ]


def test_two_character_operators_use_maximal_munch():
    assert kinds('!= ! == = <= < >= >') == [
        T.BANG_EQUAL, T.BANG, T.EQUAL_EQUAL, T.EQUAL,
        T.LESS_EQUAL, T.LESS, T.GREATER_EQUAL, T.GREATER, T.EOF,
    ]
    assert kinds('!==') == [T.BANG_EQUAL, T.EQUAL, T.EOF]


def test_comment_runs_to_end_of_line():
    tokens, errors = scan('// nothing here\n1 / 2')
    assert errors == []
    assert [t.type for t in tokens] == [T.NUMBER, T.SLASH, T.NUMBER, T.EOF]
    assert tokens[0].line == 2


def test_numbers_carry_float_payload():
    tokens, _ = scan('123 45.67')
    assert tokens[0].literal == 123.0
    assert isinstance(tokens[0].literal, float)
    assert tokens[1].literal == 45.67
    assert tokens[1].lexeme == '45.67'


def test_trailing_dot_is_not_part_of_number():
    tokens, _ = scan('123.')
    assert [t.type for t in tokens] == [T.NUMBER, T.DOT, T.EOF]
    assert tokens[0].lexeme == '123'


def test_keywords_and_identifiers():
    assert kinds('and android _x or1 nil fun') == [
        T.AND, T.IDENTIFIER, T.IDENTIFIER, T.IDENTIFIER, T.NIL, T.FUN, T.EOF,
    ]


def test_strings_are_verbatim_and_count_lines():
    tokens, errors = scan('"a\\n\nb" x')
    assert errors == []
    assert tokens[0].type == T.STRING
    assert tokens[0].literal == 'a\\n\nb'
    assert tokens[1].type == T.IDENTIFIER
    assert tokens[1].line == 2


def test_unterminated_string_is_reported():
    tokens, errors = scan('print "abc')
    assert [t.type for t in tokens] == [T.PRINT, T.EOF]
    assert len(errors) == 1
    assert errors[0].message == 'Unterminated string.'
    assert str(errors[0]) == '[line 1] Error: Unterminated string.'


def test_unexpected_characters_do_not_stop_scanning():
    tokens, errors = scan('1\n\n@ 2 #\n3')
    assert [t.type for t in tokens] == [T.NUMBER, T.NUMBER, T.NUMBER, T.EOF]
    assert [(e.line, e.message) for e in errors] == [
        (3, 'Unexpected character: @'),
        (3, 'Unexpected character: #'),
    ]
    assert tokens[1].line == 3
    assert tokens[2].line == 4


def test_eof_is_always_last():
    tokens, errors = scan('')
    assert [t.type for t in tokens] == [T.EOF]
    tokens, errors = scan('$')
    assert tokens[-1].type == T.EOF
    assert len(errors) == 1
    tokens, _ = scan('a\nb\n')
    assert tokens[-1].line == 3
