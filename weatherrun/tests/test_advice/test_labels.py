"""Tests for UV, severe risk, compass and clock labels."""

import pytest

from weatherrun.advice.labels import (
    compass_direction,
    format_run_time,
    format_time_12h,
    severe_risk_label,
    uv_label,
)


class TestUvLabel:
    @pytest.mark.parametrize(
        "uv,expected",
        [(0, "Low"), (2.9, "Low"), (3, "Moderate"), (6, "High"),
         (8, "Very High"), (10, "Very High"), (11, "Extreme"), (None, "Unknown")],
    )
    def test_bands(self, uv, expected):
        assert uv_label(uv) == expected


class TestSevereRiskLabel:
    @pytest.mark.parametrize(
        "risk,expected",
        [(0, "Low"), (29, "Low"), (30, "Moderate"), (69, "Moderate"),
         (70, "High"), (100, "High"), (None, "Unknown")],
    )
    def test_bands(self, risk, expected):
        assert severe_risk_label(risk) == expected


class TestCompassDirection:
    @pytest.mark.parametrize(
        "degrees,expected",
        [(0, "N"), (360, "N"), (11, "N"), (12, "NNE"), (90, "E"),
         (180, "S"), (225, "SW"), (270, "W"), (350, "N")],
    )
    def test_points(self, degrees, expected):
        assert compass_direction(degrees) == expected

    def test_missing(self):
        assert compass_direction(None) == ""


class TestClockFormatting:
    @pytest.mark.parametrize(
        "hour,minute,expected",
        [(5, 30, "5:30 AM"), (0, 0, "12:00 AM"), (12, 5, "12:05 PM"), (23, 45, "11:45 PM")],
    )
    def test_format_run_time(self, hour, minute, expected):
        assert format_run_time(hour, minute) == expected

    def test_format_time_12h(self):
        assert format_time_12h("07:13:00") == "7:13 AM"
        assert format_time_12h("16:22:00") == "4:22 PM"
        assert format_time_12h("06:05") == "6:05 AM"

    def test_format_time_12h_invalid(self):
        assert format_time_12h("") == ""
        assert format_time_12h("sunrise") == ""
