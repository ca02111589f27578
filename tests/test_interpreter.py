import io

import pytest

from playscript.ast import FunctionCall, Program
from playscript.errors import ExecutionError, LexerError, ParseError, ResolveError
from playscript.interpreter import Interpreter, parse_program, run_program
from playscript.resolver import RefResolver


def run(source):
    out = io.StringIO()
    run_program(source, out=out)
    return out.getvalue()


def test_hello_world():
    assert run('function sayHello(){ println("Hello World!"); } sayHello();') == 'Hello World!\n'


def test_println_joins_arguments_with_spaces():
    assert run('println("a", "b c", "", "d");') == 'a b c  d\n'


def test_println_without_arguments_prints_empty_line():
    assert run('println();') == '\n'


def test_empty_program_prints_nothing():
    assert run('') == ''


def test_declarations_alone_print_nothing():
    assert run('function a() { println("never"); }') == ''


def test_execution_order_is_depth_first():
    source = '''
        function inner() { println("inner"); }
        function outer() { println("before"); inner(); println("after"); }
        outer();
        inner();
    '''
    assert run(source).splitlines() == ['before', 'inner', 'after', 'inner']


def test_same_function_called_repeatedly():
    assert run('function t() { println("t"); } t(); t(); t();') == 't\nt\nt\n'


def test_output_goes_to_stdout_by_default(capsys):
    run_program('println("to stdout");')
    assert capsys.readouterr().out == 'to stdout\n'


def test_unbounded_recursion_exhausts_the_stack():
    program = parse_program('function f(){ f(); } f();')
    RefResolver().resolve(program)
    assert program.calls()[0].definition is program.declarations()[0]
    with pytest.raises(RecursionError):
        Interpreter().run(program)


def test_unresolved_call_is_an_internal_error():
    # skipping the resolver leaves user calls unbound
    program = parse_program('function f() {} f();')
    with pytest.raises(ExecutionError, match='unknown function f'):
        Interpreter(out=io.StringIO()).run(program)


def test_builtin_runs_without_resolution():
    out = io.StringIO()
    Interpreter(out=out).run(Program([FunctionCall('println', ['raw'])]))
    assert out.getvalue() == 'raw\n'


def test_errors_abort_before_any_output():
    out = io.StringIO()
    with pytest.raises(ResolveError, match='foo'):
        run_program('println("first"); foo();', out=out)
    assert out.getvalue() == ''


@pytest.mark.parametrize('source, error', [
    ('println("unterminated);', LexerError),
    ('println("x")', ParseError),
    ('nothing();', ResolveError),
])
def test_pipeline_errors(source, error):
    with pytest.raises(error):
        run_program(source, out=io.StringIO())


def test_debug_file(tmp_path):
    debug_file = tmp_path / 'debug.txt'
    out = io.StringIO()
    run_program('function hi() { println("hi"); } hi();', out=out, debug_level=3,
                debug_file=str(debug_file))
    assert out.getvalue() == 'hi\n'
    log = debug_file.read_text(encoding='utf-8')
    assert 'lexed 16 tokens' in log
    assert 'parsed 2 statements' in log
    assert 'AST after resolution:' in log
    assert 'FunctionCall hi, resolved' in log
    assert 'enter function hi' in log
    assert "call println('hi')" in log


def test_no_debug_file_by_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    run_program('println("x");', out=io.StringIO())
    assert not (tmp_path / 'debug.txt').exists()
