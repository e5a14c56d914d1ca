from pathlib import Path

from yaliir.interpreter import Interpreter
from yaliir.parser import scan_and_parse

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1(capsys):
    with open(EXAMPLES / 'program_1.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    statements, diagnostics = scan_and_parse(source)
    assert diagnostics == []
    interp = Interpreter()
    interp.interpret(statements)
    out = capsys.readouterr().out.strip()
    assert out == 'Hello World!!'
