import inspect
import logging
import sys
from argparse import ArgumentParser, Namespace
from typing import Callable, Dict, List, Optional

import docstring_parser
import stringcase

from . import programs
from .console import Console
from .interpreter import interpret
from .io import IO

logger = logging.getLogger(__name__)

Program = Callable[..., IO]

PROGRAMS: Dict[str, Program] = {
    stringcase.spinalcase(name): getattr(programs, name)
    for name in programs.__all__
}


def _format_name(name: str) -> str:
    return '--%s' % stringcase.spinalcase(name.lower())


def _add_program(subparsers, name: str, program: Program) -> None:
    docs = docstring_parser.parse(program.__doc__ or '')
    doc_params = {p.arg_name: p.description for p in docs.params}
    parser = subparsers.add_parser(
        name,
        help=docs.short_description,
        description=docs.long_description or docs.short_description
    )
    parser.set_defaults(program=program)
    for param in inspect.signature(program).parameters.values():
        arg_help = doc_params.get(param.name)
        if param.default is inspect.Parameter.empty:
            parser.add_argument(param.name, help=arg_help)
        elif isinstance(param.default, bool):
            parser.add_argument(
                _format_name(param.name),
                dest=param.name,
                action='store_false' if param.default else 'store_true',
                help=arg_help
            )
        else:
            parser.add_argument(
                _format_name(param.name),
                dest=param.name,
                type=type(param.default),
                default=param.default,
                help=arg_help
            )


def make_parser() -> ArgumentParser:
    """
    Build the argument parser with one sub command per program in
    `purio.programs`. Options and help texts are taken from each
    program's signature and docstring
    """
    parser = ArgumentParser(
        prog='purio', description='Run a console program'
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='log every host call'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)
    for name, program in PROGRAMS.items():
        _add_program(subparsers, name, program)
    return parser


def _program_kwargs(args: Namespace) -> dict:
    names = inspect.signature(args.program).parameters
    return {name: getattr(args, name) for name in names}


def main(argv: Optional[List[str]] = None,
         console: Optional[Console] = None) -> int:
    """
    Entry point of the ``purio`` command

    Args:
        argv: command line arguments, `sys.argv` when omitted
        console: console to run the program with, `StdConsole` when omitted
    Return:
        exit status
    """
    args = make_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(levelname)s:%(name)s:%(message)s',
        stream=sys.stderr
    )
    logging.getLogger('purio').setLevel(level)
    io = args.program(**_program_kwargs(args))
    try:
        interpret(io, console)
    except EOFError:
        logger.debug('Input ended while running %s', args.command)
        print('purio: unexpected end of input', file=sys.stderr)
        return 1
    except BrokenPipeError:
        logger.debug('Output closed while running %s', args.command)
        print('purio: output closed', file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print('purio: interrupted', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
