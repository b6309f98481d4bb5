"""Display labels for UV, severe risk, wind direction and clock times."""

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]


def uv_label(uvindex: float | None) -> str:
    """WHO UV index band."""
    if uvindex is None:
        return "Unknown"
    if uvindex < 3:
        return "Low"
    if uvindex < 6:
        return "Moderate"
    if uvindex < 8:
        return "High"
    if uvindex < 11:
        return "Very High"
    return "Extreme"


def severe_risk_label(severerisk: float | None) -> str:
    """Coarse label for the provider's 0-100 severe weather risk."""
    if severerisk is None:
        return "Unknown"
    if severerisk < 30:
        return "Low"
    if severerisk < 70:
        return "Moderate"
    return "High"


def compass_direction(degrees: float | None) -> str:
    if degrees is None:
        return ""
    index = int((degrees % 360) / 22.5 + 0.5) % 16
    return COMPASS_POINTS[index]


def format_run_time(hour: int, minute: int) -> str:
    """Format a 24-hour run time as e.g. '5:30 AM'."""
    ampm = "PM" if hour >= 12 else "AM"
    h12 = 12 if hour == 0 else hour - 12 if hour > 12 else hour
    return f"{h12}:{minute:02d} {ampm}"


def format_time_12h(time24: str) -> str:
    """Convert a provider 'HH:MM[:SS]' clock time to 12-hour form.

    Returns an empty string when the provider omitted or garbled the value.
    """
    try:
        h, m = time24.split(":")[:2]
        return format_run_time(int(h), int(m))
    except (ValueError, AttributeError):
        return ""
