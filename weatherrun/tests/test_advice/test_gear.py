"""Tests for the gear advisor thresholds."""

import pytest

from weatherrun.advice.gear import GEAR_TIERS, WINTER_KIT, gear_tier_index, recommend_gear


class TestRecommendGear:
    @pytest.mark.parametrize(
        "feelslike,expected",
        [
            (95, "Singlet, split shorts, sunglasses. Stay hydrated."),
            (75, "Singlet, split shorts, sunglasses. Stay hydrated."),
            (74.9, "T-shirt and shorts. Light and fast."),
            (60, "T-shirt and shorts. Light and fast."),
            (55, "Long sleeve, shorts or tights. Arm sleeves optional."),
            (45, "Long sleeve, shorts or tights. Arm sleeves optional."),
            (30, "Base layer, tights, gloves, headband."),
            (15, "Insulated jacket, tights, gloves, hat, buff."),
            (14.9, "Full winter kit. Double-layer gloves, balaclava, insulated tights."),
            (-20, "Full winter kit. Double-layer gloves, balaclava, insulated tights."),
        ],
    )
    def test_thresholds_inclusive_lower_bound(self, feelslike, expected):
        assert recommend_gear(feelslike) == expected

    def test_hot_and_cold_differ(self):
        assert recommend_gear(80) != recommend_gear(10)

    def test_deterministic(self):
        assert recommend_gear(52.3) == recommend_gear(52.3)

    def test_total_over_extremes(self):
        assert recommend_gear(float("inf")) == GEAR_TIERS[0][1]
        assert recommend_gear(float("-inf")) == WINTER_KIT


class TestGearTierIndex:
    def test_monotonic(self):
        temps = list(range(-30, 110, 3))
        indexes = [gear_tier_index(t) for t in temps]
        # warmer never gets heavier kit
        assert indexes == sorted(indexes, reverse=True)

    def test_winter_index(self):
        assert gear_tier_index(0) == len(GEAR_TIERS)
