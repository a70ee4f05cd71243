import argparse
import logging
import sys

from dfakit.automaton import DFA, InvalidSymbolError
from dfakit.languages import get_automaton

def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=
        'Build a DFA, optionally swap two of its symbols, print its formal '
        'description, and decide which of the given strings it accepts.'
    )
    group = parser.add_argument_group('Automaton')
    group.add_argument('--language',
        help='Name of a hand-picked language, e.g. even-a, parity, first, '
             'repeat-01, all-strings, empty-set, ends-with-1. Overrides the '
             'explicit construction options.')
    group.add_argument('--states', nargs='+', default=[], metavar='NAME',
        help='State names, in order.')
    group.add_argument('--alphabet', default='',
        help='Alphabet symbols written as one string, e.g. ab.')
    group.add_argument('--start', metavar='NAME',
        help='Name of the start state.')
    group.add_argument('--final', nargs='+', default=[], metavar='NAME',
        help='Names of the final states.')
    group.add_argument('--transition', nargs=3, action='append', default=[],
        metavar=('FROM', 'SYMBOL', 'TO'),
        help='A transition. May be repeated.')
    parser.add_argument('--input', action='append', default=[], metavar='STRING',
        help='A string to run through the automaton. May be repeated.')
    parser.add_argument('--swap', nargs=2, metavar=('A', 'B'),
        help='Swap the transitions on symbols A and B before running.')
    return parser

def build_automaton(
    args: argparse.Namespace,
    console_logger: logging.Logger
) -> DFA | None:
    if args.language is not None:
        return get_automaton(args.language)
    M = DFA()
    for a in args.alphabet:
        M.add_symbol(a)
    for q in args.states:
        if not M.add_state(q):
            console_logger.error(f'duplicate state: {q}')
            return None
    for q, a, r in args.transition:
        if not M.add_transition(q, r, a):
            console_logger.error(f'invalid transition: {q} --{a}--> {r}')
            return None
    if args.start is not None and not M.set_start(args.start):
        console_logger.error(f'unknown start state: {args.start}')
        return None
    for q in args.final:
        if not M.set_final(q):
            console_logger.error(f'unknown final state: {q}')
            return None
    return M

def run(args: argparse.Namespace, console_logger: logging.Logger) -> int:
    M = build_automaton(args, console_logger)
    if M is None:
        return 1
    console_logger.info(f'automaton: {M!r}')
    if args.swap is not None:
        a, b = args.swap
        M = M.swap(a, b)
        if M is None:
            console_logger.error(f'cannot swap {a!r} and {b!r}: not in the alphabet')
            return 1
    print(M.to_formal_description(), end='')
    for s in args.input:
        try:
            accepted = M.accepts(s)
        except InvalidSymbolError as e:
            console_logger.error(f'{s!r}: {e}')
            return 1
        print('accept' if accepted else 'reject', s, sep='\t')
    return 0

def main(argv: list[str] | None=None) -> None:

    # Configure logging to stdout.
    console_logger = logging.getLogger('main')
    console_logger.addHandler(logging.StreamHandler(sys.stdout))
    console_logger.setLevel(logging.INFO)
    console_logger.info(f'arguments: {sys.argv if argv is None else argv}')

    parser = get_parser()
    args = parser.parse_args(argv)
    console_logger.info(f'parsed arguments: {args}')

    try:
        status = run(args, console_logger)
    except ValueError as e:
        parser.error(str(e))
    sys.exit(status)

if __name__ == '__main__':
    main()
