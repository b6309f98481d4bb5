"""Visual Crossing forecast document models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WeatherAlert:
    event: str
    headline: str
    description: str
    onset: str
    ends: str


@dataclass(frozen=True)
class HourSample:
    datetime: str  # HH:MM:SS, provider local time
    temp: float | None = None
    feelslike: float | None = None
    humidity: float | None = None
    windspeed: float | None = None
    winddir: float | None = None
    precip: float | None = None
    precipprob: float | None = None
    uvindex: float | None = None
    severerisk: float | None = None
    conditions: str | None = None


@dataclass(frozen=True)
class DayForecast:
    datetime: str  # YYYY-MM-DD, provider local date
    tempmax: float
    tempmin: float
    temp: float
    feelslike: float
    humidity: float
    windspeed: float
    winddir: float | None
    precip: float
    precipprob: float
    uvindex: float | None
    severerisk: float | None
    conditions: str
    sunrise: str
    sunset: str
    hours: tuple[HourSample, ...] = ()


@dataclass(frozen=True)
class ForecastDocument:
    resolved_address: str
    address: str
    days: tuple[DayForecast, ...]
    alerts: tuple[WeatherAlert, ...] = field(default_factory=tuple)
