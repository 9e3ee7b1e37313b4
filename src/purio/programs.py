from typing import Tuple

from .io import IO, IOs, get_line, put_line, repeat, value, with_effect


def greet() -> IO[str]:
    """
    Ask for a name and greet it

    Example:
        >>> greet().run()
        What's your name?
        Ada  # typed by the user
        Hello, Ada
        'Hello, Ada'
    """
    return put_line("What's your name?").and_then(
        lambda _: get_line().and_then(
            lambda name: put_line('Hello, ' + name).and_then(
                lambda _: value('Hello, ' + name)
            )
        )
    )


@with_effect
def echo(count: int = 1) -> IOs[str, Tuple[str, ...]]:
    """
    Read lines and write each one back

    Args:
        count: number of lines to echo
    """
    lines = yield repeat(count, get_line())
    for line in lines:
        yield put_line(line)
    return lines


__all__ = ['greet', 'echo']
