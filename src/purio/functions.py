import functools
import inspect
from typing import Any, Callable, Generic, Tuple, TypeVar

from .immutable import Immutable

A = TypeVar('A')
B = TypeVar('B')


def identity(v: A) -> A:
    """
    The identity function. Gives back its argument

    Example:
        >>> identity('Ada')
        'Ada'

    Args:
        v: The value to get back
    Return:
        `v`
    """
    return v


class Always(Generic[A], Immutable):
    """
    A callable that ignores its arguments and returns the same value.
    Used as the continuation of sequences that discard an intermediate
    result
    """
    value: A

    def __call__(self, *args, **kwargs) -> A:
        return self.value


def always(value: A) -> Callable[..., A]:
    """
    Get a function that always returns `value`

    Example:
        >>> f = always(put_line('done'))
        >>> f(None)
        WriteLine(text='done')

    Args:
        value: The value to return
    Return:
        function that returns `value` regardless of its arguments
    """
    return Always(value)


class Composition(Immutable):
    functions: Tuple[Callable, ...]

    def __call__(self, *args, **kwargs):
        first, *rest = reversed(self.functions)
        result = first(*args, **kwargs)
        for f in rest:
            result = f(result)
        return result


def compose(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    *functions: Callable[[Any], Any]
) -> Callable[[Any], Any]:
    """
    Compose functions from right to left, so that ``f`` is applied last

    Example:
        >>> greet = compose(str.upper, lambda name: 'Hello, ' + name)
        >>> greet('Ada')
        'HELLO, ADA'

    Args:
        f: the outermost function
        g: the function to compose with `f`
        functions: further functions, applied before `g`
    Return:
        the composition of all functions
    """
    return Composition((f, g) + functions)


class Curry:
    _f: Callable

    def __init__(self, f: Callable):
        functools.wraps(f)(self)
        self._f = f  # type: ignore

    def __repr__(self):
        return repr(self._f)

    def __call__(self, *args, **kwargs):
        signature = inspect.signature(self._f)
        bound = signature.bind_partial(*args, **kwargs)
        bound.apply_defaults()
        missing = set(signature.parameters) - set(bound.arguments)
        if not missing:
            return self._f(*args, **kwargs)
        return Curry(functools.partial(self._f, *args, **kwargs))


def curry(f: Callable) -> Callable:
    """
    Get a version of ``f`` that can be partially applied

    Example:
        >>> shout = curry(lambda suffix, line: line + suffix)('!')
        >>> shout('Hello')
        'Hello!'

    Args:
        f: The function to curry
    Return:
        Curried version of ``f``
    """
    @functools.wraps(f)
    def decorator(*args, **kwargs):
        return Curry(f)(*args, **kwargs)

    return decorator


__all__ = ['curry', 'always', 'compose', 'identity']
