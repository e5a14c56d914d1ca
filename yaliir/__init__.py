# yaliir language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .ast_printer import AstPrinter
from .errors import Diagnostic, LoxRuntimeError
from .interpreter import Interpreter, run_source
from .parser import parse, scan_and_parse
from .scanner import scan

__all__ = [
    'AstPrinter',
    'Diagnostic',
    'Interpreter',
    'LoxRuntimeError',
    'parse',
    'run_source',
    'scan',
    'scan_and_parse',
]
