import logging

import pytest

from tello_blocks.dispatcher import Dispatcher, build_command


def test_connect_only_requests_link(transport):
    Dispatcher(transport).connect()
    assert transport.connect_count == 1
    assert transport.sent == []


def test_takeoff_and_land_are_bare_verbs(transport):
    dispatcher = Dispatcher(transport)
    dispatcher.takeoff()
    dispatcher.land()
    assert transport.sent == ["takeoff", "land"]


@pytest.mark.parametrize("verb, expected", [
    ('up', "up 50"),
    ('down', "down 50"),
    ('left', "left 50"),
    ('right', "right 50"),
    ('forward', "forward 50"),
    ('back', "back 50"),
    ('cw', "cw 90"),
    ('ccw', "ccw 90"),
])
def test_missing_x_uses_declared_default(transport, verb, expected):
    getattr(Dispatcher(transport), verb)()
    getattr(Dispatcher(transport), verb)({})
    assert transport.sent == [expected, expected]


def test_numeric_x_is_stringified(transport):
    dispatcher = Dispatcher(transport)
    dispatcher.up({"X": 120})
    dispatcher.up({"X": 12.5})
    dispatcher.cw({"X": "45"})
    assert transport.sent == ["up 120", "up 12.5", "cw 45"]


def test_non_numeric_x_forwards_zero(transport):
    dispatcher = Dispatcher(transport)
    dispatcher.forward({"X": "fast"})
    dispatcher.ccw({"X": [1, 2]})
    assert transport.sent == ["forward 0", "ccw 0"]


def test_non_mapping_args_use_default(transport):
    Dispatcher(transport).up("oops")
    assert transport.sent == ["up 50"]


def test_invoke_routes_by_opcode(transport):
    dispatcher = Dispatcher(transport)
    dispatcher.invoke('connect')
    dispatcher.invoke('takeoff')
    dispatcher.invoke('back', {"X": 30})
    dispatcher.invoke('land', {"X": 10})
    assert transport.connect_count == 1
    assert transport.sent == ["takeoff", "back 30", "land"]


def test_unknown_opcode_is_ignored(transport, caplog):
    with caplog.at_level(logging.WARNING):
        Dispatcher(transport).invoke('flip', {"X": 1})
    assert transport.sent == []
    assert "flip" in caplog.text


def test_transport_errors_do_not_reach_host(failing_transport, caplog):
    dispatcher = Dispatcher(failing_transport)
    with caplog.at_level(logging.ERROR):
        dispatcher.connect()
        dispatcher.takeoff()
        dispatcher.up({"X": 20})
    assert failing_transport.attempts == 3
    assert "link down" in caplog.text


def test_unexpected_errors_do_not_reach_host(crashing_transport):
    dispatcher = Dispatcher(crashing_transport)
    dispatcher.connect()
    dispatcher.land()
    assert crashing_transport.attempts == 2


def test_build_command():
    assert build_command('takeoff') == "takeoff"
    assert build_command('up', {"X": 7}) == "up 7"
    assert build_command('up', None, {"X": 50}) == "up 50"
    assert build_command('cw') == "cw 0"


def test_huge_and_exotic_numbers_never_raise(transport):
    from decimal import Decimal
    from fractions import Fraction

    dispatcher = Dispatcher(transport)
    dispatcher.up({"X": 10 ** 5000})
    dispatcher.up({"X": Decimal("12.5")})
    dispatcher.cw({"X": Fraction(45, 1)})
    dispatcher.down({"X": 0.00001})
    assert transport.sent == ["up 0", "up 12.5", "cw 45", "down 0.00001"]


def test_errors_building_the_command_stay_inside(transport, monkeypatch, caplog):
    def explode(*args, **kwargs):
        raise ValueError("cannot format")

    monkeypatch.setattr("tello_blocks.dispatcher.build_command", explode)
    with caplog.at_level(logging.ERROR):
        Dispatcher(transport).up({"X": 1})
    assert transport.sent == []
    assert "cannot format" in caplog.text
