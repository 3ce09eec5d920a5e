"""Timestamp values parsed against a list of strptime layouts."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable

__all__ = ["Clock", "TimestampConfig", "TimestampValue"]

_YEAR_DIRECTIVES = frozenset("YyGcx")
_DATE_DIRECTIVES = frozenset("djmbBhcxUWV")
_DIRECTIVE = re.compile(r"%[-#]?([A-Za-z%])")

# Layouts with a day but no year are parsed against a leap year, so that
# 29 February is accepted, and the year is replaced afterwards.
_YEAR_SUFFIX_FORMAT = "|%Y"
_YEAR_SUFFIX = "|2000"

Clock = Callable[[tzinfo], datetime]


def _system_clock(zone: tzinfo) -> datetime:
    return datetime.now(zone)


@dataclass
class TimestampConfig:
    """Time zone and accepted layouts for a timestamp value.

    Layouts are ``strptime`` formats. A layout without a date takes the
    current date; a layout with a date but no year takes the current year.
    """

    timezone: tzinfo | None = None
    layouts: list[str] = field(default_factory=list)


def _parse_layout(layout: str, text: str) -> tuple[datetime, bool, bool]:
    directives = set(_DIRECTIVE.findall(layout)) - {"%"}
    has_year = bool(directives & _YEAR_DIRECTIVES)
    has_date = bool(directives & _DATE_DIRECTIVES)
    try:
        if has_date and not has_year:
            parsed = datetime.strptime(text + _YEAR_SUFFIX, layout + _YEAR_SUFFIX_FORMAT)
        else:
            parsed = datetime.strptime(text, layout)
    except ValueError as exc:
        raise ValueError(f"cannot parse {text!r} as {layout!r}") from exc
    return parsed, has_year, has_date


def _with_year(moment: datetime, year: int) -> datetime:
    try:
        return moment.replace(year=year)
    except ValueError:
        # 29 February in a common year rolls over to 1 March.
        return moment.replace(year=year, day=28) + timedelta(days=1)


class TimestampValue:
    """A point in time parsed with the first layout that matches."""

    def __init__(
        self,
        value: datetime | None = None,
        config: TimestampConfig | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        config = config or TimestampConfig()
        self.value = value
        self.layouts = list(config.layouts)
        self.location = config.timezone
        self.clock = clock or _system_clock
        self.has_been_set = False

    def set(self, text: str) -> None:
        """Parse ``text`` with the configured layouts, raising ValueError if none fit."""
        if self.location is None:
            self.location = timezone.utc
        if not self.layouts:
            raise ValueError("got nil/empty layouts slice")

        errors: list[str] = []
        for layout in self.layouts:
            try:
                parsed, has_year, has_date = _parse_layout(layout, text)
                break
            except ValueError as exc:
                errors.append(str(exc))
        else:
            raise ValueError("\n".join(errors))

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=self.location)

        now = self.clock(parsed.tzinfo)
        if not has_date and not has_year:
            parsed = parsed.replace(year=now.year, month=now.month, day=now.day)
        elif not has_year:
            parsed = _with_year(parsed, now.year)

        self.value = parsed
        self.has_been_set = True

    def get(self) -> datetime | None:
        return self.value

    def to_string(self, value: datetime | None) -> str:
        """Render ``value``; an unset timestamp renders as an empty string."""
        return "" if value is None else str(value)

    def __str__(self) -> str:
        return self.to_string(self.value)

    def __repr__(self) -> str:
        return f"TimestampValue({self.value!r}, layouts={self.layouts!r})"