from __future__ import annotations

from functools import wraps
from typing import (TYPE_CHECKING, Callable, Generator, Generic, Iterable,
                    Optional, Tuple, TypeVar, Union, cast)

from .functions import always, curry
from .immutable import Immutable
from .monad import filter_m_, map_m_, sequence_, then_, with_effect_

if TYPE_CHECKING:
    from .console import Console, HasConsole

A = TypeVar('A')
B = TypeVar('B')


class IO(Immutable, Generic[A]):
    """
    Inert description of console interaction that produces an `A`
    when interpreted. Building an `IO` never reads or writes anything;
    only `purio.interpreter.interpret` does.

    Every `IO` is exactly one of `ReadLine`, `WriteLine`, `Point` or
    `Sequence`.
    """
    def and_then(self, f: Callable[[A], IO[B]]) -> IO[B]:
        """
        Sequence this description with a continuation producing the next
        description from this one's result

        Example:
            >>> get_line().and_then(put_line).run()
            Ada  # typed by the user
            Ada

        Args:
            f: function from the result of this description \
                to the next description
        Return:
            `Sequence` of this description and `f`
        """
        return io_monad.bind(self, f)

    def map(self, f: Callable[[A], B]) -> IO[B]:
        """
        Map ``f`` over the result of this description

        Example:
            >>> get_line().map(str.upper).run()
            Ada  # typed by the user
            'ADA'

        Args:
            f: function to apply to the result
        Return:
            description producing the result of ``f``
        """
        return self.and_then(lambda a: Point(f(a)))

    def discard_and_then(self, io: IO[B]) -> IO[B]:
        """
        Sequence this description with ``io``, ignoring the result of this
        description

        Example:
            >>> put_line('A').discard_and_then(put_line('B')).run()
            A
            B

        Args:
            io: description to run after this one
        Return:
            description producing the result of ``io``
        """
        return cast(IO[B], then_(io_monad, self, io))

    def run(self, console: Optional[Console | HasConsole] = None) -> A:
        """
        Interpret this description, performing its effects on ``console``

        Args:
            console: console (or environment with a ``console`` attribute) \
                to read and write lines with. Standard in and standard out \
                when omitted
        Return:
            the result of interpreting this description
        """
        from .interpreter import interpret
        return interpret(self, console)


class ReadLine(IO[str]):
    """
    Read one line from the console
    """


class WriteLine(IO[None]):
    """
    Write one line to the console
    """
    text: str


class Point(IO[A]):
    """
    Produce ``value`` without performing any effect
    """
    value: A


class Sequence(IO[B], Generic[A, B]):
    """
    Run ``first``, then the description produced by applying
    ``continuation`` to its result. ``continuation`` is only called when
    interpretation reaches this node.
    """
    first: IO[A]
    continuation: Callable[[A], IO[B]]


# every IO is exactly one of these
Node = Union[ReadLine, WriteLine, Point, Sequence]


class IOMonad(Immutable):
    """
    Composition capability for `IO` descriptions
    """
    def point(self, value: A) -> IO[A]:
        return Point(value)

    def bind(self, m: IO[A], f: Callable[[A], IO[B]]) -> IO[B]:
        return Sequence(m, f)


io_monad = IOMonad()


def value(a: A) -> IO[A]:
    """
    Create an `IO` that simply produces `a` when interpreted

    Example:
        >>> value('Ada').run()
        'Ada'

    Args:
        a: The value to wrap
    Return:
        `Point` wrapping `a`
    """
    return io_monad.point(a)


def get_line() -> IO[str]:
    """
    Create an `IO` that reads a line from the console when interpreted

    Return:
        `ReadLine` description
    """
    return ReadLine()


def put_line(text: str = '') -> IO[None]:
    """
    Create an `IO` that writes ``text`` as a line to the console when
    interpreted

    Example:
        >>> put_line('Hello, Ada').run()
        Hello, Ada

    Args:
        text: The line to write
    Return:
        `WriteLine` description
    """
    return WriteLine(text)


def prompt(question: str) -> IO[str]:
    """
    Write ``question`` and read the answer

    Example:
        >>> prompt("What's your name?").run()
        What's your name?
        Ada  # typed by the user
        'Ada'

    Args:
        question: The line to write before reading
    Return:
        description producing the line read
    """
    return put_line(question).discard_and_then(get_line())


def lift(f: Callable[..., A]) -> Callable[..., IO[A]]:
    """
    Decorator that turns a plain function into one returning its
    result wrapped in `Point`. ``f`` is called when the decorated
    function is called, not during interpretation

    Args:
        f: The function to wrap
    Return:
        `f` with its result wrapped in `Point`
    """
    @wraps(f)
    def decorator(*args, **kwargs):
        return value(f(*args, **kwargs))

    return decorator


@curry
def map_m(f: Callable[[A], IO[B]],
          iterable: Iterable[A]) -> IO[Tuple[B, ...]]:
    """
    Map each element in ``iterable`` to an `IO` by applying ``f``,
    combine them from left to right and collect the results

    Example:
        >>> map_m(put_line, ['A', 'B']).run()
        A
        B
        (None, None)

    Args:
        f: Function to map over ``iterable``
        iterable: Iterable to map ``f`` over
    Return:
        ``f`` mapped over ``iterable`` and combined from left to right
    """
    return cast(IO[Tuple[B, ...]], map_m_(io_monad, f, iterable))


def sequence(iterable: Iterable[IO[A]]) -> IO[Tuple[A, ...]]:
    """
    Combine each `IO` in ``iterable`` from left to right and collect
    the results

    Example:
        >>> sequence([get_line(), get_line()]).run()
        A  # typed by the user
        B  # typed by the user
        ('A', 'B')

    Args:
        iterable: The descriptions to combine
    Return:
        `IO` of collected results
    """
    return cast(IO[Tuple[A, ...]], sequence_(io_monad, iterable))


@curry
def filter_m(f: Callable[[A], IO[bool]],
             iterable: Iterable[A]) -> IO[Tuple[A, ...]]:
    """
    Map each element in ``iterable`` to an `IO[bool]` by applying ``f``,
    combine them from left to right and keep the elements for which
    the result is `True`

    Example:
        >>> filter_m(lambda v: value(v % 2 == 0), range(3)).run()
        (0, 2)

    Args:
        f: Function to map ``iterable`` by
        iterable: Iterable to filter
    Return:
        `IO` of the kept elements
    """
    return cast(IO[Tuple[A, ...]], filter_m_(io_monad, f, iterable))


def forever(io: IO[A]) -> IO[None]:
    """
    Repeat ``io`` until interpretation is interrupted, typically by
    the console raising `EOFError`

    Args:
        io: the description to repeat
    Return:
        description that never produces a value
    """
    def loop(_: object) -> IO[None]:
        return io.and_then(loop)

    return io.and_then(loop)


def repeat(n: int, io: IO[A]) -> IO[Tuple[A, ...]]:
    """
    Run ``io`` ``n`` times and collect the results

    Example:
        >>> repeat(2, get_line()).run()
        A  # typed by the user
        B  # typed by the user
        ('A', 'B')

    Args:
        n: number of repetitions
        io: the description to repeat
    Return:
        `IO` of collected results
    """
    return map_m(always(io), range(n))


IOs = Generator[IO[A], A, B]


def with_effect(f: Callable[..., IOs[A, B]]) -> Callable[..., IO[B]]:
    """
    Decorator for generator functions yielding `IO` descriptions.
    Chains the yielded descriptions together with `IO.and_then`,
    sending each result back into the generator

    Example:
        >>> @with_effect
        ... def greet() -> IOs[str, str]:
        ...     yield put_line("What's your name?")
        ...     name = yield get_line()
        ...     yield put_line('Hello, ' + name)
        ...     return name
        >>> greet().run()
        What's your name?
        Ada  # typed by the user
        Hello, Ada
        'Ada'

    Args:
        f: the generator function to decorate
    Return:
        function returning one `IO` composed of the generated descriptions
    """
    return with_effect_(io_monad, f)


__all__ = [
    'IO',
    'ReadLine',
    'WriteLine',
    'Point',
    'Sequence',
    'Node',
    'IOMonad',
    'io_monad',
    'value',
    'get_line',
    'put_line',
    'prompt',
    'lift',
    'map_m',
    'sequence',
    'filter_m',
    'forever',
    'repeat',
    'with_effect',
    'IOs'
]
