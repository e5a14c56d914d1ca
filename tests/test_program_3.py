from pathlib import Path

from yaliir.interpreter import Interpreter
from yaliir.parser import scan_and_parse

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_fibonacci(capsys):
    with open(EXAMPLES / 'program_3.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    statements, diagnostics = scan_and_parse(source)
    assert diagnostics == []
    Interpreter().interpret(statements)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['0', '1', '1', '2', '3', '5', '8', '13', '21', '34']
