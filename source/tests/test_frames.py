# test_frames.py
import pytest

from prt7.frames import Load, MalformedFrameError, Map, interpret, parse_frame
from prt7.payload import Payload
from prt7.reports import LoadReport, MapReport
from prt7.rotor import Rotor


def test_parse_load():
    assert parse_frame("L,X") == Load("X")
    assert parse_frame(b"L,X") == Load("X")
    assert parse_frame(b"L,\xff") == Load("\xff")
    assert parse_frame("L,7") == Load("7")


def test_parse_load_takes_first_character_only():
    assert parse_frame("L,AB") == Load("A")


def test_parse_space_token():
    assert parse_frame("L,Space") == Load(" ")
    assert parse_frame("L,Spa") == Load(" ")
    # prefix match: any "Spa..." is a space
    assert parse_frame("L,Spark") == Load(" ")
    assert parse_frame("L,Sp") == Load("S")
    assert parse_frame("L,S") == Load("S")


def test_parse_literal_space_character():
    assert parse_frame("L, ") == Load(" ")


@pytest.mark.parametrize("line, delta", [
    ("M,3", 3),
    ("M,+3", 3),
    ("M,-2", -2),
    ("M,0", 0),
    ("M,27", 27),
    ("M,-100", -100),
    ("M,5abc", 5),
    ("M,-12 trailing", -12),
    ("M,abc", 0),
    ("M,", 0),
    ("M,-", 0),
])
def test_parse_map(line, delta):
    assert parse_frame(line) == Map(delta)


@pytest.mark.parametrize("line", ["X,1", "L", "M", "LX", "M3", "L;A", "l,A", "m,3", "L,", ",L,A", ""])
def test_malformed_frames(line):
    with pytest.raises(MalformedFrameError):
        parse_frame(line)


def test_malformed_frame_is_a_value_error():
    with pytest.raises(ValueError):
        parse_frame("X,1")


def test_interpret_load_without_rotation():
    rotor, payload = Rotor(), Payload()
    report = interpret(parse_frame("L,X"), rotor, payload)
    assert report == LoadReport(original="X", decoded="X", payload="[X]")
    assert payload.render() == "X"


def test_interpret_map_then_load():
    rotor, payload = Rotor(), Payload()
    report = interpret(Map(3), rotor, payload)
    assert report == MapReport(delta=3, head="D")
    assert payload.render() == ""

    report = interpret(Load("A"), rotor, payload)
    assert report.decoded == "D"
    assert report.payload == "[D]"


def test_interpret_space_appends_literal_space():
    rotor, payload = Rotor(), Payload()
    rotor.rotate(5)
    interpret(parse_frame("L,Space"), rotor, payload)
    assert payload.render() == " "


def test_interpret_negative_map_reports_signed_delta():
    rotor, payload = Rotor(), Payload()
    report = interpret(Map(-1), rotor, payload)
    assert report.delta == -1
    assert report.head == "Z"


def test_interpret_rejects_non_frames():
    with pytest.raises(TypeError):
        interpret(("L", "A"), Rotor(), Payload())
