import pytest

from playscript.errors import LexerError, ParseError
from playscript.grammar import parse_with_grammar, unescape
from playscript.parser import parse_program


EXAMPLES = ['program_1.ps', 'program_2.ps', 'program_3.ps', 'program_4.ps', 'program_5.ps']


@pytest.mark.parametrize('name', EXAMPLES)
def test_grammar_matches_hand_written_parser(name, read_example):
    source = read_example(name)
    assert parse_with_grammar(source) == parse_program(source)


@pytest.mark.parametrize('name', EXAMPLES)
def test_backtracking_parser_matches_grammar(name, read_example):
    source = read_example(name)
    assert parse_program(source, backtracking=True) == parse_with_grammar(source)


def test_keyword_prefix_is_an_identifier():
    source = 'function functional() { println("ok"); } functional();'
    assert parse_with_grammar(source) == parse_program(source)


def test_unescape():
    assert unescape(r'"a\nb\\c"') == 'a\nb\\c'
    assert unescape('""') == ''


@pytest.mark.parametrize('source', [
    'foo()',
    'function f("a") {}',
    'function f() { function g() {} }',
    'foo("a",);',
])
def test_grammar_rejects_what_the_parser_rejects(source):
    with pytest.raises(ParseError):
        parse_with_grammar(source)
    with pytest.raises(ParseError):
        parse_program(source)


@pytest.mark.parametrize('source', [
    r'println("\t");',
    'println("a\nb");',
    'a(); /* never closed',
    'a(); @',
])
def test_grammar_lexical_errors(source):
    with pytest.raises(LexerError):
        parse_with_grammar(source)
    with pytest.raises(LexerError):
        parse_program(source)
