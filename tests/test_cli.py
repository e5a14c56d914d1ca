import io
import json

import pytest

from yaliir.__main__ import main, run_prompt
from yaliir.interpreter import EX_DATAERR, EX_NOINPUT, EX_OK, EX_SOFTWARE, EX_USAGE


def write_script(tmp_path, text, name='script.lox'):
    path = tmp_path / name
    path.write_text(text, encoding='utf-8')
    return path


def test_runs_a_script(tmp_path, capsys):
    script = write_script(tmp_path, 'print "from file";')
    assert main([str(script)]) == EX_OK
    assert capsys.readouterr().out == 'from file\n'


def test_syntax_error_exit_status(tmp_path, capsys):
    script = write_script(tmp_path, 'print ;')
    assert main([str(script)]) == EX_DATAERR
    assert capsys.readouterr().err.strip() == "[line 1] Error at ';': Expect expression."


def test_runtime_error_exit_status(tmp_path, capsys):
    script = write_script(tmp_path, 'print -"a";')
    assert main([str(script)]) == EX_SOFTWARE


def test_missing_script(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / 'missing.lox')])
    assert exc.value.code == EX_NOINPUT


def test_conflicting_options_are_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['--emit-ast', 'a.lox', '--ast', 'a.lox.ast.json'])
    assert exc.value.code == EX_USAGE


def test_emit_ast_then_run_it(tmp_path, capsys):
    script = write_script(tmp_path, 'fun sq(n) { return n * n; }\nprint sq(4);')
    assert main(['--emit-ast', str(script)]) == EX_OK
    ast_file = tmp_path / 'script.lox.ast.json'
    assert capsys.readouterr().out.strip() == str(ast_file)
    assert json.loads(ast_file.read_text(encoding='utf-8'))['type'] == 'Program'

    assert main(['--ast', str(ast_file)]) == EX_OK
    assert capsys.readouterr().out == '16\n'


def test_emit_ast_refuses_broken_source(tmp_path, capsys):
    script = write_script(tmp_path, 'var = 1;')
    assert main(['--emit-ast', str(script)]) == EX_DATAERR
    assert not (tmp_path / 'script.lox.ast.json').exists()


def test_run_ast_with_missing_file(tmp_path, capsys):
    assert main(['--ast', str(tmp_path / 'nothing.json')]) == EX_NOINPUT


def test_prompt_keeps_state_and_survives_errors(capsys):
    stdin = io.StringIO('var a = 1;\nprint nope;\nprint a + 1;\nprint ;\nprint a;\n')
    assert run_prompt(stdin=stdin) == EX_OK
    captured = capsys.readouterr()
    assert captured.out.split() == ['2', '1']
    assert "Undefined variable 'nope'." in captured.err
    assert "[line 1] Error at ';': Expect expression." in captured.err


def test_verbose_run_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    script = write_script(tmp_path, 'var x = 2;\nprint x;')
    assert main(['-vv', str(script)]) == EX_OK
    trace = (tmp_path / 'debug.txt').read_text(encoding='utf-8')
    assert 'execute VarDecl' in trace
    assert 'declare x: number = 2' in trace


def test_deep_recursion_from_a_script(tmp_path, capsys):
    script = write_script(tmp_path, 'fun down(n) { if (n == 0) return "done"; return down(n - 1); }\n'
                                    'print down(3000);')
    assert main([str(script)]) == EX_OK
    assert capsys.readouterr().out == 'done\n'


def test_run_ast_with_malformed_json(tmp_path, capsys):
    broken = write_script(tmp_path, '{"type": "Program", "body": [', name='broken.ast.json')
    assert main(['--ast', str(broken)]) == EX_DATAERR
    assert 'invalid AST file' in capsys.readouterr().err
