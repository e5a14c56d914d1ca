"""CLI entry point for the yaliir Lox interpreter.

Usage:
    python -m yaliir [-v|-vv|-vvv] [script]
    python -m yaliir [-v...] --emit-ast <script>
    python -m yaliir [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given script and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a script an interactive prompt starts; globals persist between
lines and errors do not end the session. Debug information is written to
`debug.txt` in the current directory when verbosity is greater than zero.

Exit status follows sysexits: 65 for lexical or syntax errors, 66 for a
missing input file, 70 for a runtime error.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import program_from_obj, program_to_obj
from .interpreter import (
    EX_DATAERR, EX_NOINPUT, EX_OK, EX_USAGE, Interpreter, report_diagnostics,
    run_source, run_statements, run_with_deep_stack,
)
from .parser import scan_and_parse


class CliParser(argparse.ArgumentParser):
    """Argument parser that exits with EX_USAGE on bad arguments."""
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(EX_NOINPUT)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def run_file(path: Path, debug_level: int = 0) -> int:
    source = read_source(path)
    interpreter = Interpreter(debug_level=debug_level)
    try:
        return run_source(source, interpreter)
    finally:
        interpreter.close()


def run_prompt(debug_level: int = 0, stdin=None) -> int:
    stdin = stdin or sys.stdin
    interpreter = Interpreter(debug_level=debug_level)
    try:
        while True:
            print('> ', end='', file=sys.stderr, flush=True)
            line = stdin.readline()
            if not line:
                break
            run_source(line, interpreter)
    finally:
        interpreter.close()
    print(file=sys.stderr)
    return EX_OK


def emit_ast(path: Path) -> int:
    source = read_source(path)
    statements, diagnostics = scan_and_parse(source)
    if diagnostics:
        report_diagnostics(diagnostics)
        return EX_DATAERR
    out_path = path.with_name(path.name + '.ast.json')
    with open(out_path, 'w', encoding='utf-8') as out:
        json.dump(program_to_obj(statements), out, ensure_ascii=False, indent=2)
    print(str(out_path))
    return EX_OK


def run_ast(path: Path, debug_level: int = 0) -> int:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        return EX_NOINPUT
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        statements = program_from_obj(data)
    except (AttributeError, TypeError, ValueError, KeyError) as e:
        print(f"Error: invalid AST file {path}: {e}", file=sys.stderr)
        return EX_DATAERR
    return run_statements(statements, debug_level=debug_level)


def main(argv: list[str] | None = None) -> int:
    parser = CliParser(prog='yaliir', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='SCRIPT', help='emit AST JSON for the given script')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('script', nargs='?', help='Lox script to execute; omit for a prompt')
    args = parser.parse_args(argv)

    if args.emit_ast:
        return emit_ast(Path(args.emit_ast))
    if args.ast:
        return run_with_deep_stack(run_ast, Path(args.ast), args.v)
    if args.script:
        return run_with_deep_stack(run_file, Path(args.script), args.v)
    return run_with_deep_stack(run_prompt, args.v)


if __name__ == '__main__':
    sys.exit(main())
