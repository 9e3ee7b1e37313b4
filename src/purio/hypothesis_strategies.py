from string import printable
from typing import Any, Callable, Tuple, TypeVar, Union

from . import io

try:
    from hypothesis.strategies import (
        SearchStrategy,
        booleans,
        builds,
        composite,
        floats,
        integers,
        just,
        lists,
        one_of,
        recursive,
        text
    )
except ImportError:
    raise ImportError(
        'Could not import hypothesis. To use purio.hypothesis_strategies, '
        'install purio with \n\n\tpip install purio[test]'
    )

A = TypeVar('A')


def _everything(allow_nan: bool = False) -> Tuple[SearchStrategy[int],
                                                  SearchStrategy[bool],
                                                  SearchStrategy[str],
                                                  SearchStrategy[float]]:
    return integers(), booleans(), text(), floats(allow_nan=allow_nan)


def anything(allow_nan: bool = False
             ) -> SearchStrategy[Union[int, bool, str, float]]:
    """
    Create a search strategy that produces one of int, bool, str or floats.

    Args:
        allow_nan: whether to allow nan values
    Return:
        Search strategy that produces ints, bools, str or floats
    """
    return one_of(*_everything(allow_nan))


def unaries(return_strategy: SearchStrategy[A]
            ) -> SearchStrategy[Callable[[object], A]]:
    """
    Create a search strategy that produces functions of 1 argument
    that ignore the argument

    Example:
        >>> f = unaries(integers()).example()
        >>> f(None)
        2

    Args:
        return_strategy: strategy used to draw the return value of \
            the function
    Return:
        Search strategy that produces callables of 1 argument
    """
    @composite
    def f(draw):
        a = draw(return_strategy)
        return lambda _: a

    return f()


def lines() -> SearchStrategy[str]:
    """
    Create a search strategy that produces single lines of text

    Return:
        Search strategy of `str` without line breaks
    """
    return text(alphabet=printable.strip())


def io_leaves(value_strategy: SearchStrategy[Any] = anything()
              ) -> SearchStrategy[io.IO[Any]]:
    """
    Create a search strategy that produces `ReadLine`, `WriteLine`
    and `Point` descriptions

    Args:
        value_strategy: strategy used to draw the values of `Point`
    Return:
        Search strategy of leaf descriptions
    """
    return one_of(
        builds(io.Point, value_strategy),
        just(io.ReadLine()),
        builds(io.WriteLine, lines())
    )


def continuations(io_strategy: SearchStrategy[io.IO[A]]
                  ) -> SearchStrategy[Callable[[Any], io.IO[Any]]]:
    """
    Create a search strategy that produces continuations: either
    functions ignoring their argument and returning a description drawn
    from ``io_strategy``, or functions writing or returning their argument

    Args:
        io_strategy: strategy for the descriptions returned by constant \
            continuations
    Return:
        Search strategy of continuations
    """
    return one_of(
        unaries(io_strategy),
        just(io.value),
        just(lambda v: io.put_line(repr(v)))
    )


def ios(value_strategy: SearchStrategy[Any] = anything(),
        max_leaves: int = 10) -> SearchStrategy[io.IO[Any]]:
    """
    Create a search strategy that produces arbitrarily nested
    `IO` descriptions

    Example:
        >>> ios().example()
        Sequence(first=ReadLine(), continuation=<function ...>)

    Args:
        value_strategy: strategy used to draw the values of `Point`
        max_leaves: upper bound on the number of leaves in a tree
    Return:
        Search strategy of `IO` descriptions
    """
    def extend(children):
        return builds(io.Sequence, children, continuations(children))

    return recursive(
        io_leaves(value_strategy), extend, max_leaves=max_leaves
    )


def inputs() -> SearchStrategy[list]:
    """
    Create a search strategy that produces lists of lines to feed
    a scripted console

    Return:
        Search strategy of lists of lines
    """
    return lists(lines(), max_size=20)


__all__ = [
    'anything',
    'unaries',
    'lines',
    'io_leaves',
    'continuations',
    'ios',
    'inputs'
]
