"""Tests for report formatters."""

import json
from datetime import datetime

import pytest

from weatherrun.models.forecast import ForecastDocument
from weatherrun.models.recommendation import RunReport
from weatherrun.planner.run_planner import select_and_score
from weatherrun.reporting.formatters import (
    format_report_json,
    format_report_text,
    format_share_text,
)


@pytest.fixture
def report(boston_forecast: ForecastDocument) -> RunReport:
    days = select_and_score(boston_forecast, 8, 0, datetime(2024, 1, 1, 10, 0))
    return RunReport(
        location="02108",
        resolved_address=boston_forecast.resolved_address,
        run_hour=8,
        run_minute=0,
        days=tuple(days),
        alerts=boston_forecast.alerts,
    )


class TestFormatters:
    def test_text(self, report: RunReport):
        text = format_report_text(report)
        assert "Boston, MA, United States | Run time 8:00 AM" in text
        assert "ALERT: Wind Advisory" in text
        assert "Wednesday, Jan 3 (2024-01-03) [TOP PICK]" in text
        assert text.count("[TOP PICK]") == 1
        assert "Wind 13 mph E" in text

    def test_text_error(self):
        report = RunReport(
            location="x", resolved_address="", run_hour=5, run_minute=30,
            error="Location not found. Try a zip code or city name.",
        )
        assert format_report_text(report) == (
            "Error: Location not found. Try a zip code or city name."
        )

    def test_text_no_days(self):
        report = RunReport(location="x", resolved_address="X", run_hour=5, run_minute=30)
        assert "No upcoming run days" in format_report_text(report)

    def test_json(self, report: RunReport):
        data = json.loads(format_report_json(report))
        assert data["run_time"] == "8:00 AM"
        assert data["error"] is None
        assert len(data["days"]) == 5
        thursday = data["days"][2]
        assert thursday["condition_category"] == "rain"
        assert thursday["severe_risk_label"] == "Moderate"
        assert thursday["wind_compass"] == "E"
        assert data["alerts"][0]["headline"].startswith("Wind Advisory issued")

    def test_share(self, report: RunReport):
        top = report.top_pick
        assert top is not None
        assert format_share_text(report, top) == "\n".join([
            "WeatherRun Report for Boston, MA, United States",
            "Wednesday, Jan 3 at 8:00 AM",
            "Temp: 56F / Feels Like: 55F",
            "Wind: 5 mph / Humidity: 60%",
            "Precip: 0% / Clear",
            "Sunrise: 7:13 AM / Sunset: 4:24 PM",
            "Gear: Long sleeve, shorts or tights. Arm sleeves optional.",
        ])
