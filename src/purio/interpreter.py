"""
The only part of purio that performs effects. `interpret` walks an `IO`
description depth first, left to right, calling the console once for
every `ReadLine` and `WriteLine` it reaches.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, TypeVar, Union, cast

from typing_extensions import assert_never, get_args

from .console import Console, HasConsole, StdConsole
from .io import IO, Node, Point, ReadLine, Sequence, WriteLine

logger = logging.getLogger(__name__)

A = TypeVar('A')


class UnhandledEffect(TypeError):
    """
    Raised when the interpreter reaches something that is not
    one of the `IO` variants, for example when a continuation
    returns a plain value instead of an `IO`
    """
    def __init__(self, node: object):
        super().__init__(
            f'Cannot interpret {type(node).__name__}: '
            'expected ReadLine, WriteLine, Point or Sequence'
        )
        self.node = node


def _as_node(value: object) -> Node:
    if not isinstance(value, get_args(Node)):
        raise UnhandledEffect(value)
    return cast(Node, value)


def _get_console(console: Optional[Union[Console, HasConsole]]) -> Console:
    if console is None:
        return StdConsole()
    if isinstance(console, Console):
        return console
    return console.console


def interpret(
    io: IO[A], console: Optional[Union[Console, HasConsole]] = None
) -> A:
    """
    Perform the effects described by ``io`` and return its result

    Nested `Sequence` nodes are unwound onto an explicit stack of pending
    continuations rather than the Python call stack, so descriptions of
    any depth can be interpreted. Exceptions raised by the console
    propagate unchanged and stop interpretation.

    Example:
        >>> from purio.io import get_line, put_line
        >>> interpret(get_line().and_then(lambda n: put_line('Hi ' + n)))
        Ada  # typed by the user
        Hi Ada

    Args:
        io: the description to interpret
        console: console, or environment with a ``console`` attribute, \
            to read and write lines with. `StdConsole` when omitted
    Raises:
        UnhandledEffect: if a node is not an `IO` variant
    Return:
        the result of ``io``
    """
    host = _get_console(console)
    continuations: List[Callable[[Any], Any]] = []
    node = _as_node(io)
    host_calls = 0
    logger.debug('Interpreting %s with %s', type(io).__name__, host)
    while True:
        if isinstance(node, Sequence):
            continuations.append(node.continuation)
            node = _as_node(node.first)
            continue

        if isinstance(node, Point):
            result = node.value
        elif isinstance(node, ReadLine):
            result = host.read_line()
            host_calls += 1
            logger.debug('read_line() -> %r', result)
        elif isinstance(node, WriteLine):
            logger.debug('write_line(%r)', node.text)
            host.write_line(node.text)
            host_calls += 1
            result = None
        else:
            assert_never(node)

        if not continuations:
            logger.debug('Interpretation done after %d host calls', host_calls)
            return result
        node = _as_node(continuations.pop()(result))


__all__ = ['interpret', 'UnhandledEffect']
