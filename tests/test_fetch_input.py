import pytest
import requests
import responses

from aoc2023.fetch_input import (
    fetch_input,
    input_url,
    main,
    parse_day,
    parse_prefixed_u32,
    write_inputs,
)


def test_parse_day():
    assert parse_day("day-01") == ("", 1)


def test_parse_day_keeps_remainder():
    assert parse_day("day-12abc") == ("abc", 12)


@pytest.mark.parametrize("text", ["day01", "day-", "day-x1", "01", ""])
def test_parse_day_rejects_bad_names(text):
    with pytest.raises(ValueError):
        parse_day(text)


def test_parse_prefixed_u32_custom_prefix():
    assert parse_prefixed_u32("year:", "year:2023") == ("", 2023)


def test_parse_prefixed_u32_overflow():
    assert parse_prefixed_u32("n", "n4294967295") == ("", 4294967295)
    with pytest.raises(ValueError):
        parse_prefixed_u32("n", "n4294967296")


def test_input_url():
    assert input_url(2023, 1) == "https://adventofcode.com/2023/day/1/input"


def test_fetch_input_sends_session_cookie():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, input_url(2023, 1), body="1abc2\n")
        assert fetch_input(2023, 1, "token") == "1abc2\n"
        assert rsps.calls[0].request.headers["Cookie"] == "session=token"


def test_fetch_input_connection_failure():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            input_url(2023, 2),
            body=requests.ConnectionError("refused"),
        )
        with pytest.raises(RuntimeError):
            fetch_input(2023, 2, "token")


def test_write_inputs_writes_both_files(tmp_path):
    paths = write_inputs(tmp_path, "day-01", "data\n")
    assert [p.name for p in paths] == ["input1.txt", "input2.txt"]
    for path in paths:
        assert path.parent == tmp_path / "day-01"
        assert path.read_text(encoding="utf-8") == "data\n"


def test_write_inputs_overwrites(tmp_path):
    write_inputs(tmp_path, "day-03", "old")
    paths = write_inputs(tmp_path, "day-03", "new")
    assert all(p.read_text(encoding="utf-8") == "new" for p in paths)


def test_main_downloads_and_writes(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SESSION", "token")
    argv = [
        "--year", "2023",
        "--day", "day-01",
        "--current-working-directory", str(tmp_path),
    ]
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, input_url(2023, 1), body="puzzle\n")
        assert main(argv) == 0
    for name in ("input1.txt", "input2.txt"):
        assert (tmp_path / "day-01" / name).read_text(encoding="utf-8") == "puzzle\n"
    out = capsys.readouterr().out
    assert f"Getting input from `{input_url(2023, 1)}`" in out
    assert out.count("Wrote ") == 2


def test_main_rejects_bad_day(tmp_path, monkeypatch):
    monkeypatch.setenv("SESSION", "token")
    argv = [
        "-y", "2023",
        "-d", "first",
        "--current-working-directory", str(tmp_path),
    ]
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2


def test_main_requires_session(tmp_path, monkeypatch):
    monkeypatch.delenv("SESSION", raising=False)
    with pytest.raises(SystemExit) as info:
        main(["-y", "2023", "-d", "day-01", "--current-working-directory", str(tmp_path)])
    assert "session" in str(info.value.code)