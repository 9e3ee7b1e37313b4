import logging
from functools import reduce
from unittest.mock import patch

import pytest
from hypothesis import given
from typing_extensions import get_args

from purio.hypothesis_strategies import anything, inputs, ios
from purio.interpreter import UnhandledEffect, interpret
from purio.io import (IO, Node, Point, ReadLine, Sequence, WriteLine,
                      get_line, put_line, value)

from .mocks import BrokenConsole, Env, ScriptedConsole
from .utils import recursion_limit


def greeting():
    return Sequence(
        WriteLine("What's your name?"),
        lambda _: Sequence(
            ReadLine(),
            lambda name: Sequence(
                WriteLine('Hello, ' + name),
                lambda _: Point('Hello, ' + name)
            )
        )
    )


@given(anything())
def test_point_makes_no_host_call(a):
    console = ScriptedConsole()
    assert interpret(Point(a), console) == a
    assert console.calls == []


def test_read_line():
    console = ScriptedConsole(['Ada'])
    assert interpret(ReadLine(), console) == 'Ada'
    assert console.calls == [('read_line', )]


def test_write_line():
    console = ScriptedConsole()
    assert interpret(WriteLine('Hello'), console) is None
    assert console.calls == [('write_line', 'Hello')]


def test_sequence_order():
    console = ScriptedConsole()
    interpret(Sequence(WriteLine('A'), lambda _: WriteLine('B')), console)
    assert console.written == ['A', 'B']


def test_effects_in_first_run_before_continuation():
    console = ScriptedConsole()

    def continuation(_):
        console.write_line('continuation')
        return WriteLine('C')

    first = Sequence(WriteLine('A'), lambda _: WriteLine('B'))
    interpret(Sequence(first, continuation), console)
    assert console.written == ['A', 'B', 'continuation', 'C']


def test_greeting():
    console = ScriptedConsole(['Ada'])
    assert interpret(greeting(), console) == 'Hello, Ada'
    assert console.calls == [
        ('write_line', "What's your name?"),
        ('read_line', ),
        ('write_line', 'Hello, Ada'),
    ]


def test_construction_makes_no_host_call():
    console = ScriptedConsole(['Ada'])
    greeting()
    Sequence(WriteLine('A'), lambda _: WriteLine('B'))
    get_line().and_then(put_line)
    assert console.calls == []


def test_continuation_called_once_when_reached():
    calls = []

    def continuation(line):
        calls.append(line)
        return WriteLine(line)

    io = Sequence(ReadLine(), continuation)
    assert calls == []
    interpret(io, ScriptedConsole(['a']))
    assert calls == ['a']


def test_unreached_branch_is_not_interpreted():
    def answer(line):
        if line == 'y':
            return WriteLine('yes')
        return Point(None)

    console = ScriptedConsole(['n'])
    interpret(Sequence(ReadLine(), answer), console)
    assert console.calls == [('read_line', )]


@given(ios(), inputs())
def test_deterministic(io, lines):
    outcomes = []
    for _ in range(2):
        console = ScriptedConsole(lines)
        try:
            outcome = interpret(io, console)
        except EOFError:
            outcome = EOFError
        outcomes.append((console.calls, outcome))
    assert outcomes[0] == outcomes[1]


def test_reusable():
    io = greeting()
    assert interpret(io, ScriptedConsole(['Ada'])) == 'Hello, Ada'
    assert interpret(io, ScriptedConsole(['Grace'])) == 'Hello, Grace'


def test_host_error_propagates():
    console = ScriptedConsole()
    with pytest.raises(EOFError):
        interpret(greeting(), console)
    assert console.calls == [
        ('write_line', "What's your name?"), ('read_line', )
    ]


def test_host_error_stops_interpretation():
    console = BrokenConsole()
    io = Sequence(WriteLine('A'), lambda _: WriteLine('B'))
    with pytest.raises(BrokenPipeError):
        interpret(io, console)
    assert console.written == ['A']


def test_unhandled_effect():
    with pytest.raises(UnhandledEffect):
        interpret('not an effect', ScriptedConsole())

    console = ScriptedConsole()
    with pytest.raises(TypeError) as e:
        interpret(Sequence(WriteLine('A'), lambda _: 'B'), console)
    assert e.value.node == 'B'
    assert console.written == ['A']


def test_node_covers_every_variant():
    variants = {c for c in IO.__subclasses__() if c.__module__ == 'purio.io'}
    assert set(get_args(Node)) == variants


def test_unknown_io_variant():
    class Sleep(IO[None]):
        seconds: float

    console = ScriptedConsole()
    with pytest.raises(UnhandledEffect):
        interpret(Sleep(1.0), console)
    with pytest.raises(UnhandledEffect):
        interpret(Sequence(WriteLine('A'), lambda _: Sleep(1.0)), console)
    assert console.written == ['A']


def test_right_nested_stack_safety():
    def countdown(n):
        if n == 0:
            return Point('done')
        return Sequence(WriteLine(str(n)), lambda _: countdown(n - 1))

    console = ScriptedConsole()
    with recursion_limit(200):
        assert interpret(countdown(5000), console) == 'done'
    assert len(console.written) == 5000
    assert console.written[0] == '5000'
    assert console.written[-1] == '1'


def test_left_nested_stack_safety():
    io = reduce(
        lambda io, _: Sequence(io, lambda n: Point(n + 1)),
        range(5000),
        Point(0)
    )
    with recursion_limit(200):
        assert interpret(io, ScriptedConsole()) == 5000


def test_environment_with_console():
    console = ScriptedConsole(['Ada'])
    assert interpret(get_line(), Env(console)) == 'Ada'


def test_run_delegates_to_interpret():
    console = ScriptedConsole(['Ada'])
    assert greeting().run(console) == 'Hello, Ada'


def test_default_console():
    with patch('purio.console.input') as mocked_input, \
            patch('purio.console.print') as mocked_print:
        mocked_input.return_value = 'Ada'
        assert interpret(greeting()) == 'Hello, Ada'
        mocked_input.assert_called_once_with()
        assert mocked_print.call_count == 2


def test_logs_host_calls(caplog):
    with caplog.at_level(logging.DEBUG, logger='purio.interpreter'):
        interpret(
            Sequence(WriteLine('A'), lambda _: value(1)), ScriptedConsole()
        )
    assert "write_line('A')" in caplog.text
    assert 'after 1 host calls' in caplog.text
