import io
from itertools import islice

import pytest

from algokit.clock import main, parse_time, ticks


def _minute_of_day(time):
    hour, minute = time
    return hour * 60 + minute


def test_parse_time_reads_hour_and_minute():
    assert parse_time("07:05") == (7, 5)


def test_parse_time_ignores_surrounding_whitespace():
    assert parse_time(" 13:47\n") == (13, 47)


@pytest.mark.parametrize("text", ["7:05", "24:00", "12:60", "ab:cd", "1205", "12-05", ""])
def test_parse_time_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_time(text)


def test_ticks_rejects_bad_start_eagerly():
    with pytest.raises(ValueError):
        ticks("bad")


def test_midnight_rollover():
    assert next(ticks("23:59")) == (0, 0)


def test_full_day_returns_to_start():
    day = list(islice(ticks("13:47"), 24 * 60))
    assert day[-1] == (13, 47)
    assert len(set(day)) == 24 * 60


def test_each_tick_is_one_minute_later():
    start = "22:58"
    previous = parse_time(start)
    for current in islice(ticks(start), 200):
        assert (_minute_of_day(current) - _minute_of_day(previous)) % (24 * 60) == 1
        assert 0 <= current[0] < 24
        assert 0 <= current[1] < 60
        previous = current


def test_main_prints_requested_count(capsys):
    assert main(["09:59", "--count", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == ["10 00", "10 01"]


def test_main_reads_start_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("22:58\n"))
    main(["--count", "1"])
    assert capsys.readouterr().out == "22 59\n"


def test_main_rejects_bad_time():
    with pytest.raises(SystemExit):
        main(["99:99", "--count", "1"])