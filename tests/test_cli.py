'''
Command line interface tests
'''

from contextlib import redirect_stderr, redirect_stdout
import io
import logging

from infix.cli import CLI

from pytest import raises


def run(capsys, *args):
    CLI().run(args=list(args))
    return capsys.readouterr()


def test_evaluates_and_times(capsys):
    out, err = run(capsys, '-n', '10', '-e', '2+3*4', '-3^2')
    lines = out.splitlines()
    assert lines[0] == '14.0'
    assert 'calculations per second' in lines[1]
    assert '9.0' in lines
    assert not err


def test_reports_errors_and_continues(capsys):
    out, err = run(capsys, '-n', '1', '-e', '(1+2', '3.', '1/0')
    assert 'missing close bracket(s)' in err
    assert 'digit expected after point' in err
    assert out.splitlines()[0] == 'inf'


def test_empty_line_ends_session(capsys):
    out, _ = run(capsys, '-n', '1', '-e', '1', '', '2')
    assert '1.0' in out.splitlines()
    assert '2.0' not in out.splitlines()


def test_spaces_only_line_is_an_error(capsys):
    out, err = run(capsys, '-n', '1', '-e', '1', '  ', '2')
    assert 'syntax error' in err
    assert '1.0' in out.splitlines()
    assert '2.0' in out.splitlines()


def test_trailing_newline_ignored(capsys):
    out, err = run(capsys, '-D', '-e', 'x + 1\n', '\n', 'y')
    assert out.splitlines() == ['x 1.0 +']
    assert not err


def test_errors_go_to_current_stderr():
    stream = io.StringIO()
    with redirect_stderr(stream), redirect_stdout(io.StringIO()):
        CLI().run(args=['-e', '1+2)'])
    assert 'right bracket mismatch' in stream.getvalue()


def test_dump(capsys):
    out, _ = run(capsys, '-D', '-e', 'x + 2*3', '-y!')
    assert out.splitlines() == ['x 6.0 +', 'y ! minus']


def test_failures_logged(capsys, caplog):
    caplog.set_level(logging.DEBUG, logger='infix')
    run(capsys, '-e', '1+')
    assert 'failed to compile' in caplog.text


def test_trials_must_be_positive(capsys):
    with raises(SystemExit):
        run(capsys, '-n', '0', '-e', '1')
