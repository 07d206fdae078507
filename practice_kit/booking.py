"""Appointment scheduling for a beauty salon."""

import re
from datetime import datetime, timezone

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTH_NUMBERS = {name.lower(): number for number, name in enumerate(_MONTHS, start=1)}
_WEEKDAY_NAMES = {name.lower() for name in _WEEKDAYS}

_TIME = r"(\d{1,2}):(\d{2}):(\d{2})"
_SCHEDULE_RE = re.compile(r"(\d{1,2})/(\d{2})/(\d{4}) " + _TIME)
_LONG_DATE_RE = re.compile(r"([A-Za-z]+) (\d{1,2}), (\d{4}) " + _TIME)
_WEEKDAY_DATE_RE = re.compile(r"([A-Za-z]+), ([A-Za-z]+) (\d{1,2}), (\d{4}) " + _TIME)
_SHORT_DATE_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4}) " + _TIME)


def _fail(text: str, layout: str) -> ValueError:
    return ValueError(f"cannot parse {text!r} as {layout!r}")


def _build(text, layout, year, month, day, hour, minute, second) -> datetime:
    try:
        return datetime(
            int(year), int(month), int(day), int(hour), int(minute), int(second),
            tzinfo=timezone.utc,
        )
    except ValueError as exc:
        raise _fail(text, layout) from exc


def _month_number(name: str, text: str, layout: str) -> int:
    try:
        return _MONTH_NUMBERS[name.lower()]
    except KeyError:
        raise _fail(text, layout) from None


def schedule(date: str) -> datetime:
    """Parse a date such as "7/13/2020 20:32:00" into a UTC datetime."""
    layout = "M/DD/YYYY H:MM:SS"
    match = _SCHEDULE_RE.fullmatch(date)
    if not match:
        raise _fail(date, layout)
    month, day, year, hour, minute, second = match.groups()
    return _build(date, layout, year, month, day, hour, minute, second)


def has_passed(date: str) -> bool:
    """Tell whether a date such as "October 3, 2019 20:32:00" lies in the past."""
    layout = "Month D, YYYY H:MM:SS"
    match = _LONG_DATE_RE.fullmatch(date)
    if not match:
        raise _fail(date, layout)
    month_name, day, year, hour, minute, second = match.groups()
    month = _month_number(month_name, date, layout)
    moment = _build(date, layout, year, month, day, hour, minute, second)
    return datetime.now(timezone.utc) > moment


def is_afternoon_appointment(date: str) -> bool:
    """Tell whether a date such as "Friday, March 8, 1974 12:02:02" is between 12:00 and 18:00."""
    layout = "Weekday, Month D, YYYY H:MM:SS"
    match = _WEEKDAY_DATE_RE.fullmatch(date)
    if not match:
        raise _fail(date, layout)
    weekday, month_name, day, year, hour, minute, second = match.groups()
    if weekday.lower() not in _WEEKDAY_NAMES:
        raise _fail(date, layout)
    month = _month_number(month_name, date, layout)
    moment = _build(date, layout, year, month, day, hour, minute, second)
    return 12 <= moment.hour < 18


def description(date: str) -> str:
    """Describe an appointment given as "6/6/2005 10:30:00"."""
    layout = "M/D/YYYY H:MM:SS"
    match = _SHORT_DATE_RE.fullmatch(date)
    if not match:
        raise _fail(date, layout)
    month, day, year, hour, minute, second = match.groups()
    moment = _build(date, layout, year, month, day, hour, minute, second)
    formatted = (
        f"{_WEEKDAYS[moment.weekday()]}, {_MONTHS[moment.month - 1]} {moment.day}, "
        f"{moment.year:04d}, at {moment.hour:02d}:{moment.minute:02d}"
    )
    return f"You have an appointment on {formatted}."


def anniversary_date() -> datetime:
    """Return this year's salon anniversary, September 15th at midnight UTC."""
    return datetime(datetime.now().year, 9, 15, tzinfo=timezone.utc)