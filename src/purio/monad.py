from functools import reduce, wraps
from typing import Any, Callable, Generator, Iterable

from typing_extensions import Protocol

from .functions import always, curry


class Monad(Protocol):
    """
    The capability contract an effect description type must supply
    to take part in generic composition. Implementations are plain
    objects with a ``point`` and a ``bind`` method; descriptions
    themselves need not share a base class.
    """
    def point(self, value: Any) -> Any:
        """
        Wrap ``value`` in a description that performs no effect

        Args:
            value: the value to wrap
        Return:
            description producing ``value``
        """
        ...

    def bind(self, m: Any, f: Callable[[Any], Any]) -> Any:
        """
        Sequence ``m`` with the continuation ``f`` without running either

        Args:
            m: the description to run first
            f: function from the result of ``m`` to the next description
        Return:
            composite description
        """
        ...


# PEP484 has no higher-kinded type variables, so the combinators below
# are typed loosely. Typed versions live next to each description type
# (e.g purio.io.sequence)


def sequence_(monad: Monad, iterable: Iterable[Any]) -> Any:
    def combine(ms, m):
        return monad.bind(
            ms,
            lambda xs: monad.bind(m, lambda x: monad.point(xs + (x, )))
        )

    return reduce(combine, iterable, monad.point(()))


def map_m_(
    monad: Monad, f: Callable[[Any], Any], iterable: Iterable[Any]
) -> Any:
    return sequence_(monad, (f(x) for x in iterable))


def filter_m_(
    monad: Monad, f: Callable[[Any], Any], iterable: Iterable[Any]
) -> Any:
    def combine(ms, mbx):
        mb, x = mbx
        return monad.bind(
            ms,
            lambda xs: monad.bind(
                mb, lambda b: monad.point(xs + (x, ) if b else xs)
            )
        )

    elements = tuple(iterable)
    mbxs = zip((f(x) for x in elements), elements)
    return reduce(combine, mbxs, monad.point(()))


def then_(monad: Monad, first: Any, second: Any) -> Any:
    return monad.bind(first, always(second))


@curry
def with_effect_(
    monad: Monad, f: Callable[..., Generator[Any, Any, Any]]
) -> Callable[..., Any]:
    """
    Turn a generator function yielding descriptions into a function
    returning one description. Each yielded description is bound with
    ``monad.bind`` and its result sent back into the generator; the
    generator's return value is wrapped with ``monad.point``.

    The generator is created when the description is interpreted, not
    when it is built, so the returned description can be run any number
    of times.
    """
    @wraps(f)
    def decorator(*args, **kwargs):
        def start(_: object) -> Any:
            g = f(*args, **kwargs)

            def cont(v: Any) -> Any:
                try:
                    m = g.send(v)
                except StopIteration as e:
                    return monad.point(e.value)
                return monad.bind(m, cont)

            return cont(None)

        return monad.bind(monad.point(None), start)

    return decorator


__all__ = ['Monad', 'sequence_', 'map_m_', 'filter_m_', 'then_', 'with_effect_']
