"""RU: Утилиты форматирования аргументов командной строки FFmpeg.

EN: Helpers that render values as FFmpeg command-line text.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal


def quote(value: str) -> str:
    """RU: Заключает аргумент в одинарные кавычки для передачи в shell.

    EN: Wrap an argument in single quotes so the shell passes it verbatim.

    Embedded single quotes are closed, escaped and reopened (``'"'"'``), the
    same way ``shlex.quote`` does it, but the value is always quoted.
    """
    return "'" + str(value).replace("'", "'\"'\"'") + "'"


def format_number(value: float) -> str:
    """Render a number in fixed-point, dropping a trailing ``.0`` on integral values.

    FFmpeg rejects exponent notation, so ``5e-05`` is written as ``0.00005``.
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    text = str(number)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def format_duration(value: timedelta) -> str:
    """Render a duration in FFmpeg's seconds syntax (``2s``, ``2.5s``)."""
    # timedelta is microsecond-precise; rounding hides float noise below that.
    seconds = round(value.total_seconds(), 6)
    return f"{format_number(seconds)}s"
