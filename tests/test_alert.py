import subprocess
from unittest import mock

import pytest

from rasterbot import alert


@pytest.fixture(autouse=True)
def fresh_program_choice(monkeypatch):
    monkeypatch.setattr(alert, "_preferred", None)


def _completed(code):
    return subprocess.CompletedProcess(args=[], returncode=code)


def test_args_without_cancel_button():
    args = alert.build_message_args("Title", "Hello", None, None)
    assert args == [
        "Hello", "-title", "Title", "-center",
        "-buttons", "OK:2", "-default", "OK",
    ]


def test_args_with_cancel_button():
    args = alert.build_message_args("T", "M", "Yes", "No")
    assert args[args.index("-buttons") + 1] == "Yes:2,No:3"
    assert args[-1] == "Yes"


def test_default_button_returns_true():
    with mock.patch("rasterbot.alert.subprocess.run", return_value=_completed(2)) as run:
        assert alert.show_alert("T", "M", None, "Cancel") is True
    command = run.call_args.args[0]
    assert command[0] == "gmessage"
    assert command[1:] == alert.build_message_args("T", "M", None, "Cancel")


def test_cancel_button_returns_false():
    with mock.patch("rasterbot.alert.subprocess.run", return_value=_completed(3)):
        assert alert.show_alert("T", "M", "OK", "Cancel") is False


def test_falls_back_to_next_program_and_remembers_it():
    def fake_run(command, check):
        if command[0] in ("gmessage", "gxmessage"):
            raise FileNotFoundError(command[0])
        return _completed(2)

    with mock.patch("rasterbot.alert.subprocess.run", side_effect=fake_run) as run:
        assert alert.show_alert("T", "M", None, None) is True
        assert [c.args[0][0] for c in run.call_args_list] == [
            "gmessage", "gxmessage", "kmessage",
        ]
        run.reset_mock()
        alert.show_alert("T", "M", None, None)
        assert [c.args[0][0] for c in run.call_args_list] == ["kmessage"]


def test_exec_failure_status_counts_as_missing():
    with mock.patch(
        "rasterbot.alert.subprocess.run", return_value=_completed(42)
    ) as run:
        with pytest.raises(alert.AlertError):
            alert.show_alert("T", "M", None, None)
    assert run.call_count == 4


def test_no_program_raises():
    with mock.patch(
        "rasterbot.alert.subprocess.run", side_effect=FileNotFoundError("x")
    ):
        with pytest.raises(alert.AlertError, match="not found"):
            alert.show_alert("T", "M", None, None)