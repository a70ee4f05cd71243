import logging

import pytest

from dfakit.describe import get_parser, run

@pytest.fixture
def console_logger() -> logging.Logger:
    return logging.getLogger('test_describe')

def run_describe(argv: list[str], console_logger: logging.Logger) -> int:
    args = get_parser().parse_args(argv)
    return run(args, console_logger)

SCENARIO_ARGS = [
    '--states', 'q0', 'q1',
    '--alphabet', 'ab',
    '--start', 'q0',
    '--final', 'q1',
    '--transition', 'q0', 'a', 'q1',
    '--transition', 'q0', 'b', 'q0',
    '--transition', 'q1', 'a', 'q0',
    '--transition', 'q1', 'b', 'q1'
]

def test_explicit_construction(capsys, console_logger) -> None:
    assert run_describe([*SCENARIO_ARGS, '--input', 'a', '--input', 'aa', '--input', '', '--input', 'ab'], console_logger) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ['Q = { q0 q1 }', 'Sigma = { a b }', 'delta =']
    assert lines[-4:] == ['accept\ta', 'reject\taa', 'reject\t', 'accept\tab']

def test_swap_option(capsys, console_logger) -> None:
    assert run_describe([*SCENARIO_ARGS, '--swap', 'a', 'b', '--input', 'a', '--input', 'b'], console_logger) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ['reject\ta', 'accept\tb']

def test_named_language(capsys, console_logger) -> None:
    assert run_describe(['--language', 'parity', '--input', '1', '--input', '11'], console_logger) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == 'Q = { q_even q_odd }'
    assert lines[-2:] == ['accept\t1', 'reject\t11']

@pytest.mark.parametrize('argv', [
    ['--states', 'q0', 'q0'],
    ['--states', 'q0', '--transition', 'q0', 'a', 'q0'],
    ['--states', 'q0', '--start', 'q1'],
    ['--states', 'q0', '--final', 'q1'],
    ['--language', 'parity', '--swap', '0', '2'],
    ['--language', 'parity', '--input', '012']
])
def test_failures(argv, console_logger) -> None:
    assert run_describe(argv, console_logger) == 1
