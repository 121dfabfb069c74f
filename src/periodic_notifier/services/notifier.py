"""Notifier executed by the scheduler on every tick."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol

from ..utils.time import ensure_utc, utc_now

DEFAULT_MESSAGE_PREFIX = "Logging an event at"

Clock = Callable[[], datetime]


class InfoSink(Protocol):
    """Anything able to write an informational record, e.g. ``logging.Logger``."""

    def info(self, msg: str, *args: Any) -> Any:
        """Write ``msg % args`` at informational severity."""


class PeriodicNotifier:
    """Emit one informational record containing the current UTC time per tick.

    The notifier does not own any timing mechanism; register :meth:`on_tick`
    with a scheduler.
    """

    def __init__(
        self,
        sink: InfoSink,
        *,
        clock: Clock = utc_now,
        message_prefix: str = DEFAULT_MESSAGE_PREFIX,
    ) -> None:
        self._sink = sink
        self._clock = clock
        self._message_prefix = message_prefix

    def on_tick(self) -> None:
        """Write a single record with the current timestamp to the sink."""

        self._sink.info("%s %s", self._message_prefix, ensure_utc(self._clock()).isoformat())


__all__ = ["DEFAULT_MESSAGE_PREFIX", "InfoSink", "PeriodicNotifier"]
