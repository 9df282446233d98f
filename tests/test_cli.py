'''
RPN command line interface tests
'''

import io

from revpol.cli import CLI, InteractiveInput
from revpol.lexer import Lexer

from pytest import raises


def test_expression(capsys):
    assert CLI().run(args=['-e', '3 4 +']) == 0
    captured = capsys.readouterr()
    assert captured.out == '7\n'
    assert captured.err == ''


def test_expression_per_argument(capsys):
    assert CLI().run(args=['-e', '10', '3', '-']) == 0
    assert capsys.readouterr().out == '7\n'


def test_nothing_printed_unless_single_element(capsys):
    assert CLI().run(args=['-e', '1 2']) == 0
    assert capsys.readouterr().out == ''


def test_parse_error_stops(capsys):
    assert CLI().run(args=['-e', '1', '3 four +', '5']) == 1
    captured = capsys.readouterr()
    assert captured.err == "Couldn't parse four\n"
    # Stopped reading, and the lone 1 left behind is no answer
    assert captured.out == ''


def test_failure_discards_line(capsys):
    assert CLI().run(args=['-e', '1 + 2', '5']) == 0
    captured = capsys.readouterr()
    assert captured.err == 'Not enough elements on stack\n'
    assert captured.out == '5\n'


def test_verbose(capsys):
    assert CLI().run(args=['-v', '-e', '3 4 +']) == 0
    captured = capsys.readouterr()
    assert captured.err.splitlines() == ['    3     4     +',
                                         '    3     4     +',
                                         '    7']
    assert captured.out == '7\n'


def test_stdin(capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO('6 2 set\n2 get\n'))
    assert CLI().run(args=[]) == 0
    assert capsys.readouterr().out == '6\n'


def test_interactive_keeps_going(capsys, monkeypatch, tmp_path):
    monkeypatch.setattr(CLI, 'HISTORY_FILE', str(tmp_path / 'history'))
    monkeypatch.setattr(InteractiveInput, '__iter__',
                        lambda self: iter(['3 four', '3 4 +']))
    assert CLI().run(args=['-p']) == 0
    captured = capsys.readouterr()
    assert captured.err.splitlines()[0] == "Couldn't parse four"
    # Interactive sessions are always verbose
    assert captured.err.splitlines()[-1] == '    7'
    assert captured.out == '7\n'


def test_prompt_and_expression_exclusive(capsys):
    with raises(SystemExit):
        CLI().run(args=['-p', '-e', '1'])


def test_dump(capsys):
    assert CLI().run(args=['-D', '-e', '3 x']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == '<word>\t<operation>\t<arity>'
    assert lines[1] == "'3'\tNumber(value=3.0)\tNone"
    assert lines[2].startswith("'x'\t")
    assert lines[2].endswith('\t2')


def test_dump_bad_word(capsys):
    assert CLI().run(args=['-D', '-e', 'foo']) == 1
    assert capsys.readouterr().err == "Couldn't parse foo\n"


def test_raw_grammar(capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO(''))
    assert CLI().run(args=['-G']) == 0
    assert capsys.readouterr().out == Lexer.NUMBER + '\n'
