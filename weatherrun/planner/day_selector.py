"""Forecast window selection, hourly sample lookup and day labeling."""

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from weatherrun.models.forecast import DayForecast, HourSample

WINDOW_DAYS = 5


@dataclass(frozen=True)
class ResolvedConditions:
    """Measurements for one day at the run hour, after day-aggregate fallback."""

    temp: float
    feelslike: float
    humidity: float
    windspeed: float
    precipprob: float
    winddir: float | None
    uvindex: float | None
    severerisk: float | None
    conditions: str


def resolve_api_hour(target_hour: int, target_minute: int) -> int:
    """Round a run time to the nearest hourly sample.

    The date is never rolled forward: 23:45 resolves to hour 0 of the same day.
    """
    if target_minute >= 30:
        return (target_hour + 1) % 24
    return target_hour


def find_window_start(
    days: tuple[DayForecast, ...] | list[DayForecast],
    target_hour: int,
    now: datetime,
) -> int | None:
    """Index of the first day whose run time has not already passed."""
    today_str = now.date().isoformat()
    for i, day in enumerate(days):
        if day.datetime == today_str:
            if target_hour > now.hour:
                return i
        elif day.datetime > today_str:
            return i
    return None


def select_window(
    days: tuple[DayForecast, ...] | list[DayForecast],
    target_hour: int,
    now: datetime,
    window_days: int = WINDOW_DAYS,
) -> list[DayForecast]:
    start = find_window_start(days, target_hour, now)
    if start is None:
        return []
    return list(days[start:start + window_days])


def find_hour_sample(day: DayForecast, hour: int) -> HourSample | None:
    padded = f"{hour:02d}:00:00"
    for sample in day.hours:
        if sample.datetime == padded:
            return sample
    return None


def _pick(hour_value, day_value):
    return hour_value if hour_value is not None else day_value


def resolve_conditions(day: DayForecast, hour: int) -> ResolvedConditions:
    """Measurements at the given hour, each field falling back to the day aggregate."""
    sample = find_hour_sample(day, hour) or HourSample(datetime="")
    return ResolvedConditions(
        temp=_pick(sample.temp, day.temp),
        feelslike=_pick(sample.feelslike, day.feelslike),
        humidity=_pick(sample.humidity, day.humidity),
        windspeed=_pick(sample.windspeed, day.windspeed),
        precipprob=_pick(sample.precipprob, day.precipprob),
        winddir=_pick(sample.winddir, day.winddir),
        uvindex=_pick(sample.uvindex, day.uvindex),
        severerisk=_pick(sample.severerisk, day.severerisk),
        conditions=_pick(sample.conditions, day.conditions),
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return math.floor(value + 0.5)


def day_label(date_str: str, index: int, today: date) -> str:
    """Human label for a day in the window: 'Today', 'Tomorrow' or 'Tuesday, Jan 2'."""
    d = date.fromisoformat(date_str)
    tomorrow = today + timedelta(days=1)
    if index == 0:
        if d == today:
            return "Today"
        if d == tomorrow:
            return "Tomorrow"
    # Kept separate from the index-0 rule; the window may skip calendar days.
    if index == 1 and d == tomorrow:
        return "Tomorrow"
    return f"{d:%A}, {d:%b} {d.day}"
