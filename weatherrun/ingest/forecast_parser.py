"""Parse a raw Visual Crossing timeline response into a ForecastDocument."""

import logging

from weatherrun.models.forecast import (
    DayForecast,
    ForecastDocument,
    HourSample,
    WeatherAlert,
)

logger = logging.getLogger(__name__)


def parse_forecast(raw: dict) -> ForecastDocument:
    """Build a ForecastDocument, tolerating missing optional fields."""
    days = tuple(_parse_day(d) for d in raw.get("days") or [])
    alerts = tuple(_parse_alert(a) for a in raw.get("alerts") or [])
    address = raw.get("address", "")
    if not days:
        logger.warning("Forecast for %r contains no days", address)
    return ForecastDocument(
        resolved_address=raw.get("resolvedAddress") or address,
        address=address,
        days=days,
        alerts=alerts,
    )


def _parse_day(d: dict) -> DayForecast:
    return DayForecast(
        datetime=d.get("datetime", ""),
        tempmax=_num(d.get("tempmax"), 0.0),
        tempmin=_num(d.get("tempmin"), 0.0),
        temp=_num(d.get("temp"), 0.0),
        feelslike=_num(d.get("feelslike"), 0.0),
        humidity=_num(d.get("humidity"), 0.0),
        windspeed=_num(d.get("windspeed"), 0.0),
        winddir=_num(d.get("winddir")),
        precip=_num(d.get("precip"), 0.0),
        precipprob=_num(d.get("precipprob"), 0.0),
        uvindex=_num(d.get("uvindex")),
        severerisk=_num(d.get("severerisk")),
        conditions=d.get("conditions") or "",
        sunrise=d.get("sunrise") or "",
        sunset=d.get("sunset") or "",
        hours=tuple(_parse_hour(h) for h in d.get("hours") or []),
    )


def _parse_hour(h: dict) -> HourSample:
    return HourSample(
        datetime=h.get("datetime", ""),
        temp=_num(h.get("temp")),
        feelslike=_num(h.get("feelslike")),
        humidity=_num(h.get("humidity")),
        windspeed=_num(h.get("windspeed")),
        winddir=_num(h.get("winddir")),
        precip=_num(h.get("precip")),
        precipprob=_num(h.get("precipprob")),
        uvindex=_num(h.get("uvindex")),
        severerisk=_num(h.get("severerisk")),
        conditions=h.get("conditions"),
    )


def _parse_alert(a: dict) -> WeatherAlert:
    return WeatherAlert(
        event=a.get("event", ""),
        headline=a.get("headline", ""),
        description=a.get("description", ""),
        onset=a.get("onset") or "",
        ends=a.get("ends") or "",
    )


def _num(value, default: float | None = None) -> float | None:
    if value is None:
        return default
    try:
        return float(value)
    except (ValueError, TypeError):
        return default
