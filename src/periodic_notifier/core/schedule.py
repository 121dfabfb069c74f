"""Schedule expression parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta

_UNIT_SECONDS = {
    "second": 1,
    "minute": 60,
    "hour": 3600,
}

_INTERVAL_PATTERN = re.compile(
    r"^every\s+(?:(?P<count>\d+)\s+)?(?P<unit>second|minute|hour)s?$",
    re.IGNORECASE,
)
_CRON_SECONDS_PATTERN = re.compile(r"^\*/(?P<step>\d+)(?:\s+\*){5}$")


class InvalidScheduleError(ValueError):
    """Raised when a schedule expression cannot be interpreted."""

    def __init__(self, expression: str, reason: str) -> None:
        super().__init__(f"Invalid schedule expression {expression!r}: {reason}")
        self.expression = expression
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Schedule:
    """A fixed-interval trigger cadence."""

    expression: str
    interval: timedelta

    @property
    def interval_seconds(self) -> float:
        return self.interval.total_seconds()


def parse_schedule(expression: str) -> Schedule:
    """Parse an interval phrase or a seconds-step cron expression.

    Supported forms are ``"every 5 seconds"`` (also minutes and hours, and
    ``"every second"``) and the six-field ``"*/5 * * * * *"`` used by timer
    bindings, where the step applies to the seconds field.
    """

    text = expression.strip()

    match = _INTERVAL_PATTERN.match(text)
    if match:
        count = int(match.group("count") or 1)
        if count <= 0:
            raise InvalidScheduleError(expression, "interval must be positive")
        seconds = count * _UNIT_SECONDS[match.group("unit").lower()]
        try:
            interval = timedelta(seconds=seconds)
        except OverflowError as exc:
            raise InvalidScheduleError(expression, "interval too large") from exc
        return Schedule(expression=text, interval=interval)

    match = _CRON_SECONDS_PATTERN.match(text)
    if match:
        step = int(match.group("step"))
        if step <= 0:
            raise InvalidScheduleError(expression, "step must be positive")
        if 60 % step:
            raise InvalidScheduleError(expression, "seconds step must divide 60")
        return Schedule(expression=text, interval=timedelta(seconds=step))

    raise InvalidScheduleError(expression, "unsupported format")


__all__ = ["InvalidScheduleError", "Schedule", "parse_schedule"]
