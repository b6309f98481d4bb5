"""Run planner: orchestrates window selection, scoring and gear advice."""

import logging
from datetime import datetime

from weatherrun.advice.gear import recommend_gear
from weatherrun.advice.labels import format_time_12h
from weatherrun.models.forecast import ForecastDocument
from weatherrun.models.recommendation import RunDaySummary
from weatherrun.planner.day_selector import (
    WINDOW_DAYS,
    day_label,
    resolve_api_hour,
    resolve_conditions,
    round_half_up,
    select_window,
)
from weatherrun.planner.scoring import (
    IDEAL_FEELSLIKE_F,
    PRECIP_WEIGHT,
    mark_top_pick,
    run_score,
)

logger = logging.getLogger(__name__)


def select_and_score(
    forecast: ForecastDocument,
    target_hour: int,
    target_minute: int,
    now: datetime,
    window_days: int = WINDOW_DAYS,
    ideal_feelslike: float = IDEAL_FEELSLIKE_F,
    precip_weight: float = PRECIP_WEIGHT,
) -> list[RunDaySummary]:
    """Score the upcoming run days for a target start time.

    Args:
        forecast: Parsed forecast document.
        target_hour: Run start hour, 0-23, provider local time.
        target_minute: Run start minute, 0-59.
        now: Reference instant used for "today" and day labels.

    Returns:
        Up to ``window_days`` summaries in chronological order, exactly one
        flagged as the top pick. Empty when no remaining day qualifies.
    """
    api_hour = resolve_api_hour(target_hour, target_minute)
    window = select_window(forecast.days, target_hour, now, window_days)
    if not window:
        logger.debug(
            "No eligible run day in %d forecast days for %02d:%02d",
            len(forecast.days), target_hour, target_minute,
        )
        return []

    today = now.date()
    summaries: list[RunDaySummary] = []
    for i, day in enumerate(window):
        resolved = resolve_conditions(day, api_hour)
        summaries.append(
            RunDaySummary(
                date=day.datetime,
                day_label=day_label(day.datetime, i, today),
                temp=round_half_up(resolved.temp),
                feelslike=round_half_up(resolved.feelslike),
                humidity=round_half_up(resolved.humidity),
                windspeed=round_half_up(resolved.windspeed),
                precipprob=round_half_up(resolved.precipprob),
                winddir=resolved.winddir,
                uvindex=resolved.uvindex,
                severerisk=resolved.severerisk,
                conditions=resolved.conditions,
                sunrise=format_time_12h(day.sunrise),
                sunset=format_time_12h(day.sunset),
                score=run_score(
                    resolved.feelslike, resolved.precipprob,
                    ideal_feelslike, precip_weight,
                ),
                gear=recommend_gear(resolved.feelslike),
            )
        )

    return mark_top_pick(summaries)
