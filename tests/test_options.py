import pytest

from wormgame.common import NAP_TIME, ResCode
from wormgame.options import GameOptions, UsageError, parse_options, usage_text


def test_defaults():
    options = parse_options([])
    assert options == GameOptions(NAP_TIME, False, None)


def test_nap_time():
    assert parse_options(["-n", "50"]).nap_time == 50
    assert parse_options(["-n50"]).nap_time == 50


def test_nap_time_leading_number_only():
    assert parse_options(["-n", "20ms"]).nap_time == 20


def test_nap_time_not_a_number_reads_as_zero():
    assert parse_options(["-n", "abc"]).nap_time == 0


def test_single_step():
    options = parse_options(["-s"])
    assert options.start_single_step is True
    assert options.nap_time == NAP_TIME


def test_level_filename():
    options = parse_options(["-s", "my.level", "-n", "30"])
    assert options.start_level_filename == "my.level"
    assert options.start_single_step is True
    assert options.nap_time == 30


@pytest.mark.parametrize(
    "argv",
    [["-h"], ["-x"], ["-n"], ["a.level", "b.level"]],
)
def test_wrong_options(argv):
    with pytest.raises(UsageError) as info:
        parse_options(argv)
    assert info.value.code == ResCode.WRONG_OPTION
    assert info.value.message == usage_text()


def test_usage_text():
    assert usage_text() == "Aufruf: worm [-h] [-n ms] [-s] [ Dateiname ] "


def test_reads_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["worm", "-n", "7"])
    assert parse_options().nap_time == 7