"""Output formatters for run reports."""

import json

from weatherrun.advice.conditions import categorize_conditions
from weatherrun.advice.labels import (
    compass_direction,
    format_run_time,
    severe_risk_label,
    uv_label,
)
from weatherrun.models.recommendation import RunDaySummary, RunReport


def format_report_text(r: RunReport) -> str:
    """Plain text report for the terminal."""
    if r.error:
        return f"Error: {r.error}"
    run_time = format_run_time(r.run_hour, r.run_minute)
    lines = [f"=== {r.resolved_address} | Run time {run_time} ==="]
    for alert in r.alerts:
        lines.append(f"ALERT: {alert.event} - {alert.headline}")
    if not r.days:
        lines.append("No upcoming run days left in this forecast.")
    for d in r.days:
        marker = " [TOP PICK]" if d.is_top_pick else ""
        wind = f"{d.windspeed} mph"
        if d.winddir is not None:
            wind += f" {compass_direction(d.winddir)}"
        lines.append(f"{d.day_label} ({d.date}){marker}")
        lines.append(
            f"  {d.temp}F, feels {d.feelslike}F | {d.conditions} | "
            f"{d.precipprob}% rain"
        )
        lines.append(
            f"  Wind {wind} | Humidity {d.humidity}% | "
            f"UV {uv_label(d.uvindex)} | "
            f"Severe risk {severe_risk_label(d.severerisk)}"
        )
        lines.append(f"  Sunrise {d.sunrise} | Sunset {d.sunset}")
        lines.append(f"  Gear: {d.gear}")
    return "\n".join(lines)


def report_to_dict(r: RunReport) -> dict:
    return {
        "location": r.location,
        "resolved_address": r.resolved_address,
        "run_time": format_run_time(r.run_hour, r.run_minute),
        "run_hour": r.run_hour,
        "run_minute": r.run_minute,
        "error": r.error,
        "alerts": [
            {
                "event": a.event,
                "headline": a.headline,
                "description": a.description,
                "onset": a.onset,
                "ends": a.ends,
            }
            for a in r.alerts
        ],
        "days": [_day_to_dict(d) for d in r.days],
    }


def _day_to_dict(d: RunDaySummary) -> dict:
    return {
        "date": d.date,
        "day_label": d.day_label,
        "temp": d.temp,
        "feelslike": d.feelslike,
        "humidity": d.humidity,
        "windspeed": d.windspeed,
        "winddir": d.winddir,
        "wind_compass": compass_direction(d.winddir),
        "precipprob": d.precipprob,
        "uvindex": d.uvindex,
        "uv_label": uv_label(d.uvindex),
        "severerisk": d.severerisk,
        "severe_risk_label": severe_risk_label(d.severerisk),
        "conditions": d.conditions,
        "condition_category": categorize_conditions(d.conditions).value,
        "sunrise": d.sunrise,
        "sunset": d.sunset,
        "score": d.score,
        "is_top_pick": d.is_top_pick,
        "gear": d.gear,
    }


def format_report_json(r: RunReport) -> str:
    """JSON report for programmatic consumption."""
    return json.dumps(report_to_dict(r), indent=2)


def format_share_text(r: RunReport, d: RunDaySummary) -> str:
    """Shareable plain-text report for a single run day."""
    return "\n".join([
        f"WeatherRun Report for {r.resolved_address}",
        f"{d.day_label} at {format_run_time(r.run_hour, r.run_minute)}",
        f"Temp: {d.temp}F / Feels Like: {d.feelslike}F",
        f"Wind: {d.windspeed} mph / Humidity: {d.humidity}%",
        f"Precip: {d.precipprob}% / {d.conditions}",
        f"Sunrise: {d.sunrise} / Sunset: {d.sunset}",
        f"Gear: {d.gear}",
    ])
