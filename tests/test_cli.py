"""CLI commands against a temporary events file."""

from datetime import date

import pytest

from monthpad_cli import is_today, main, render_month


@pytest.fixture
def run(events_file, capsys):
    def _run(*argv):
        code = main(["--data", str(events_file), *argv])
        out, err = capsys.readouterr()
        return code, out, err
    return _run


def test_is_today():
    today = date(2026, 10, 19)
    assert is_today(2026, 10, 19, today)
    assert not is_today(2026, 10, 18, today)
    assert not is_today(2025, 10, 19, today)
    assert not is_today(2026, 10, None, today)


def test_render_month_marks_today_and_events():
    lines = render_month(2026, 10, {3, 19}, today=date(2026, 10, 19))
    assert lines[0].strip() == "October 2026"
    assert lines[1].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert len(lines) == 2 + 5
    assert lines[2].split() == ["1", "2", "3*"]
    assert "[19]*" in lines[5]
    assert lines[-1].split() == ["25", "26", "27", "28", "29", "30", "31"]


def test_add_then_day_and_list(run):
    code, out, _ = run("add", "2026-10-19", "Standup", "09:00", "09:15")
    assert code == 0
    assert "Added: Standup (09:00 - 09:15)" in out

    code, _, _ = run("add", "2026-1-11", "Dentist", "14:00", "15:00")
    assert code == 0

    code, out, _ = run("day", "2026-10-19")
    assert code == 0
    assert "Standup (09:00 - 09:15)" in out

    code, out, _ = run("list")
    assert out.index("2026-1-11") < out.index("2026-10-19")

    code, out, _ = run("list", "--filter", "dent")
    assert "Dentist" in out
    assert "Standup" not in out


def test_add_rejections_exit_nonzero(run):
    run("add", "2026-10-19", "Standup", "09:00", "10:00")

    code, _, err = run("add", "2026-10-19", "Clash", "09:30", "09:45")
    assert code == 1
    assert "overlaps" in err

    code, _, err = run("add", "2026-10-19", "Backwards", "12:00", "11:00")
    assert code == 1
    assert "End time must be after start time." in err

    code, _, err = run("add", "2026-10-19", "", "12:00", "13:00")
    assert code == 1
    assert "Please fill in all fields." in err


def test_add_with_held_lock_reports_unsaved(run, events_file, monkeypatch):
    from utils.config import CONFIG

    monkeypatch.setitem(CONFIG["storage"], "lock_timeout_s", 0.1)
    events_file.parent.mkdir(parents=True)
    events_file.with_suffix(events_file.suffix + ".lock").touch()
    code, out, err = run("add", "2026-10-19", "Standup", "09:00", "10:00")
    assert code == 2
    assert "Added" in out
    assert "not saved" in err


def test_month_view(run):
    run("add", "2021-2-14", "Dinner", "19:00", "21:00")
    code, out, _ = run("month", "--year", "2021", "--month", "2")
    assert code == 0
    assert "February 2021" in out
    assert "14*" in out

    code, out, _ = run("month", "--year", "2021", "--month", "2", "--filter", "lunch")
    assert "*" not in out


def test_month_offset(run):
    code, out, _ = run("month", "--year", "2021", "--month", "1", "--offset", "-1")
    assert "December 2020" in out


def test_bad_day_argument(run):
    with pytest.raises(SystemExit):
        run("day", "2026-02-30")


def test_bad_month_argument(run):
    with pytest.raises(SystemExit):
        run("month", "--month", "13")


def test_offset_past_last_year_is_a_usage_error(run, capsys):
    with pytest.raises(SystemExit) as exc:
        run("month", "--year", "9999", "--month", "12", "--offset", "1")
    assert exc.value.code == 2
    assert "--offset" in capsys.readouterr().err


@pytest.mark.parametrize("year", ["0", "10000", "-5"])
def test_year_out_of_range_is_a_usage_error(run, capsys, year):
    with pytest.raises(SystemExit) as exc:
        run("month", "--year", year, "--month", "2")
    assert exc.value.code == 2
    assert "--year" in capsys.readouterr().err


def test_first_and_last_supported_months(run):
    code, out, _ = run("month", "--year", "1", "--month", "1")
    assert code == 0
    assert "January 1" in out
    code, out, _ = run("month", "--year", "9999", "--month", "11", "--offset", "1")
    assert "December 9999" in out
