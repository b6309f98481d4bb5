"""Run-day recommendation models produced by the planner."""

from dataclasses import dataclass, field

from weatherrun.models.forecast import WeatherAlert


@dataclass(frozen=True)
class RunDaySummary:
    date: str
    day_label: str
    temp: int
    feelslike: int
    humidity: int
    windspeed: int
    precipprob: int
    winddir: float | None
    uvindex: float | None
    severerisk: float | None
    conditions: str
    sunrise: str
    sunset: str
    score: float
    gear: str
    is_top_pick: bool = False


@dataclass(frozen=True)
class RunPreferences:
    location: str
    run_hour: int
    run_minute: int


@dataclass(frozen=True)
class RunReport:
    location: str
    resolved_address: str
    run_hour: int
    run_minute: int
    days: tuple[RunDaySummary, ...] = ()
    alerts: tuple[WeatherAlert, ...] = field(default_factory=tuple)
    error: str | None = None
    # HTTP status the provider answered with, when the failure came from it
    error_status: int | None = None

    @property
    def top_pick(self) -> RunDaySummary | None:
        for day in self.days:
            if day.is_top_pick:
                return day
        return None
