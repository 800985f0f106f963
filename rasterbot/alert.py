"""Blocking alert dialogs shown through an external message program."""

from __future__ import annotations

import subprocess

_MESSAGE_PROGRAMS = ("gmessage", "gxmessage", "kmessage", "xmessage")
_DEFAULT_EXIT = 2
_CANCEL_EXIT = 3
# Exit status meaning the program itself could not be started.
_EXEC_FAILED_STATUS = 42

# The program that last worked, tried alone on later calls.
_preferred: str | None = None


class AlertError(RuntimeError):
    """Raised when no alert could be shown."""


class _LaunchFailed(Exception):
    pass


def build_message_args(
    title: str,
    msg: str,
    default_button: str | None = None,
    cancel_button: str | None = None,
) -> list[str]:
    """Return the arguments, after the program name, for a message dialog."""
    if default_button is None:
        default_button = "OK"
    if cancel_button is None:
        buttons = f"{default_button}:{_DEFAULT_EXIT}"
    else:
        buttons = f"{default_button}:{_DEFAULT_EXIT},{cancel_button}:{_CANCEL_EXIT}"
    return [
        msg,
        "-title",
        title,
        "-center",
        "-buttons",
        buttons,
        "-default",
        default_button,
    ]


def _run(program: str, args: list[str]) -> int:
    try:
        result = subprocess.run([program, *args], check=False)
    except OSError as exc:
        raise _LaunchFailed(program) from exc
    if result.returncode < 0 or result.returncode == _EXEC_FAILED_STATUS:
        raise _LaunchFailed(program)
    return result.returncode


def show_alert(
    title: str,
    msg: str,
    default_button: str | None = None,
    cancel_button: str | None = None,
) -> bool:
    """Show an alert and block until the user answers.

    Returns True if the default button was pressed and False otherwise.
    Raises AlertError if no message program could be run.
    """
    global _preferred
    args = build_message_args(title, msg, default_button, cancel_button)
    candidates = (_preferred,) if _preferred is not None else _MESSAGE_PROGRAMS
    for program in candidates:
        try:
            status = _run(program, args)
        except _LaunchFailed:
            continue
        _preferred = program
        return status == _DEFAULT_EXIT
    raise AlertError("xmessage or equivalent not found.")