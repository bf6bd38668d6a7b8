"""Sampling for log statements that fire on every layout pass.

Layout is recomputed on every statistics or option change, and the render
loop may trigger that many times a second. Data-shape warnings and hover
diagnostics go through :class:`LoggingController` so that a repeated message
is emitted at its primary level at most once per interval and demoted to a
fallback level otherwise.

Rules come from ``JOBCHARTS_LOG_RULES`` as a comma separated list of
``key=interval[:LEVEL[:FALLBACK]]`` entries, e.g.
``stats.shape=none,interaction.hover=0.5:DEBUG:none``.
"""

from __future__ import annotations

import logging
import os
import re
import time
from dataclasses import dataclass
from functools import cache
from typing import Callable, Sequence

LOG_RULES_ENV_VAR = "JOBCHARTS_LOG_RULES"
DEFAULT_INTERVAL_ENV_VAR = "JOBCHARTS_LOG_DEFAULT_INTERVAL"
DEFAULT_FALLBACK_LEVEL = logging.DEBUG
DEFAULT_INTERVAL_SECONDS = 5.0

_RULE_PATTERN = re.compile(
    r"^(?P<key>[^=]+)="
    r"(?P<interval>none|\d+(?:\.\d+)?)"
    r"(?::(?P<level>[A-Za-z]+))?"
    r"(?::(?P<fallback>[A-Za-z]+|none))?$"
)


@dataclass(frozen=True)
class LogRule:
    """How often a keyed log statement may be emitted, and at which levels."""

    interval_seconds: float | None
    level: int | None = None
    fallback_level: int | None = None


class LoggingController:
    def __init__(
        self,
        *,
        default_interval: float | None,
        default_fallback_level: int | None,
        rules: dict[str, LogRule],
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default_rule = LogRule(
            interval_seconds=default_interval,
            fallback_level=default_fallback_level,
        )
        self._rules = rules
        self._monotonic = monotonic
        self._next_emit: dict[str, float] = {}

    def rule_for(self, key: str) -> LogRule:
        return self._rules.get(key, self._default_rule)

    def log(
        self,
        *,
        key: str,
        logger: logging.Logger,
        level: int,
        msg: str,
        args: Sequence[object] | None = None,
        extra: dict[str, object] | None = None,
    ) -> bool:
        """Emit ``msg`` honouring the sampling rule registered for ``key``.

        Returns ``True`` when the primary level was used.
        """

        rule = self.rule_for(key)
        primary_level = rule.level or level
        interval = rule.interval_seconds

        now = self._monotonic()
        if interval is None or now >= self._next_emit.get(key, float("-inf")):
            if interval is not None:
                self._next_emit[key] = now + interval
            logger.log(primary_level, msg, *(args or ()), extra=extra)
            return True

        if rule.fallback_level is not None:
            logger.log(rule.fallback_level, msg, *(args or ()), extra=extra)
        return False

    def reset(self, key: str | None = None) -> None:
        """Forget sampling history for ``key`` (or every key)."""

        if key is None:
            self._next_emit.clear()
        else:
            self._next_emit.pop(key, None)


def _parse_level(name: str | None) -> int | None:
    if not name:
        return None
    resolved = getattr(logging, name.upper(), None)
    if isinstance(resolved, int):
        return resolved
    raise ValueError(f"Unknown log level {name!r}")


def _parse_interval(value: str) -> float | None:
    if value.lower() == "none":
        return None
    return float(value)


def parse_rules(raw_rules: str) -> dict[str, LogRule]:
    rules: dict[str, LogRule] = {}
    for chunk in filter(None, (part.strip() for part in raw_rules.split(","))):
        match = _RULE_PATTERN.match(chunk)
        if not match:
            raise ValueError(
                f"Invalid {LOG_RULES_ENV_VAR} entry {chunk!r}. "
                "Expected 'key=interval[:LEVEL[:FALLBACK]]'."
            )
        fallback_raw = match.group("fallback")
        if fallback_raw is None:
            fallback_level = DEFAULT_FALLBACK_LEVEL
        elif fallback_raw.lower() == "none":
            fallback_level = None
        else:
            fallback_level = _parse_level(fallback_raw)
        rules[match.group("key").strip()] = LogRule(
            interval_seconds=_parse_interval(match.group("interval")),
            level=_parse_level(match.group("level")),
            fallback_level=fallback_level,
        )
    return rules


@cache
def get_logging_controller() -> LoggingController:
    """Return the shared logging controller instance."""

    default_interval_raw = os.getenv(DEFAULT_INTERVAL_ENV_VAR)
    default_interval = (
        DEFAULT_INTERVAL_SECONDS
        if default_interval_raw is None
        else _parse_interval(default_interval_raw)
    )
    rules_raw = os.getenv(LOG_RULES_ENV_VAR, "")

    return LoggingController(
        default_interval=default_interval,
        default_fallback_level=DEFAULT_FALLBACK_LEVEL,
        rules=parse_rules(rules_raw) if rules_raw else {},
    )
