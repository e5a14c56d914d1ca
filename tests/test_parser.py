from yaliir.ast import Block, ClassDecl, ExprStmt, FuncDecl, IfStmt, PrintStmt, WhileStmt
from yaliir.ast_printer import AstPrinter
from yaliir.parser import scan_and_parse


def parse_ok(source):
    statements, diagnostics = scan_and_parse(source)
    assert diagnostics == []
    return statements


def printed(source):
    return AstPrinter().print_program(parse_ok(source))


def test_precedence_ladder():
    assert printed('1 + 2 * 3;') == '(; (+ 1 (* 2 3)))'
    assert printed('1 < 2 == true;') == '(; (== (< 1 2) true))'
    assert printed('-a * b;') == '(; (* (- a) b))'
    assert printed('!!a;') == '(; (! (! a)))'


def test_binary_operators_are_left_associative():
    assert printed('1 - 2 - 3;') == '(; (- (- 1 2) 3))'
    assert printed('8 / 4 / 2;') == '(; (/ (/ 8 4) 2))'


def test_logical_operators():
    assert printed('a or b and c;') == '(; (or a (and b c)))'


def test_assignment_is_right_associative():
    assert printed('a = b = 1;') == '(; (= a (= b 1)))'


def test_invalid_assignment_target_is_reported_but_parses():
    statements, diagnostics = scan_and_parse('1 + 2 = 3;')
    assert [str(d) for d in diagnostics] == ["[line 1] Error at '=': Invalid assignment target."]
    assert len(statements) == 1
    assert isinstance(statements[0], ExprStmt)


def test_chained_calls():
    assert printed('f(1)(2, 3);') == '(; (call (call f 1) 2 3))'
    assert printed('f();') == '(; (call f))'


def test_too_many_arguments_is_a_soft_error():
    args = ', '.join(['1'] * 256)
    statements, diagnostics = scan_and_parse(f'f({args});')
    assert [d.message for d in diagnostics] == ["Can't have more than 255 arguments."]
    assert len(statements) == 1


def test_too_many_parameters_is_a_soft_error():
    params = ', '.join(f'p{i}' for i in range(256))
    statements, diagnostics = scan_and_parse(f'fun f({params}) {{}}')
    assert [d.message for d in diagnostics] == ["Can't have more than 255 parameters."]
    assert isinstance(statements[0], FuncDecl)
    assert len(statements[0].params) == 256


def test_else_binds_to_nearest_if():
    [stmt] = parse_ok('if (a) if (b) print 1; else print 2;')
    assert isinstance(stmt, IfStmt)
    assert stmt.else_branch is None
    assert isinstance(stmt.then_branch, IfStmt)
    assert isinstance(stmt.then_branch.else_branch, PrintStmt)


def test_for_loop_is_desugared_into_while():
    [stmt] = parse_ok('for (var i = 0; i < 3; i = i + 1) print i;')
    assert isinstance(stmt, Block)
    assert isinstance(stmt.statements[1], WhileStmt)
    assert AstPrinter().print(stmt) == (
        '(block (var i = 0) (while (< i 3) (block (print i) (; (= i (+ i 1))))))'
    )


def test_for_loop_without_clauses_loops_on_true():
    assert printed('for (;;) print 1;') == '(while true (print 1))'


def test_function_declaration():
    [stmt] = parse_ok('fun add(a, b) { return a + b; }')
    assert isinstance(stmt, FuncDecl)
    assert [p.lexeme for p in stmt.params] == ['a', 'b']
    assert AstPrinter().print(stmt) == '(fun add (a b) (return (+ a b)))'


def test_synchronize_recovers_after_each_bad_statement():
    source = 'var = 1;\nprint "fine";\nprint 1 +;\nvar ok = 2;'
    statements, diagnostics = scan_and_parse(source)
    assert [str(d) for d in diagnostics] == [
        "[line 1] Error at '=': Expect variable name.",
        "[line 3] Error at ';': Expect expression.",
    ]
    assert AstPrinter().print_program(statements) == '(print "fine")\n(var ok = 2)'


def test_error_at_end_of_input():
    _, diagnostics = scan_and_parse('print 1')
    assert [str(d) for d in diagnostics] == ["[line 1] Error at end: Expect ';' after value."]


def test_lexical_errors_stop_before_parsing():
    statements, diagnostics = scan_and_parse('print @;')
    assert statements == []
    assert [d.message for d in diagnostics] == ['Unexpected character: @']


def test_object_model_shapes_still_parse():
    statements = parse_ok('class A < B { go() { return this.x; } } a.b = super.c;')
    assert isinstance(statements[0], ClassDecl)
    assert statements[0].superclass.name.lexeme == 'B'
    assert AstPrinter().print(statements[1]) == '(; (= a b (super c)))'
