"""Condition categorisation from free-text provider summaries."""

from enum import StrEnum


class ConditionCategory(StrEnum):
    STORM = "storm"
    SNOW = "snow"
    RAIN = "rain"
    FOG = "fog"
    OVERCAST = "overcast"
    CLOUDY = "cloudy"
    WINDY = "windy"
    CLEAR = "clear"


# Precedence matters: "Rain, Partially cloudy" must resolve to RAIN.
CONDITION_RULES: list[tuple[tuple[str, ...], ConditionCategory]] = [
    (("thunder", "lightning"), ConditionCategory.STORM),
    (("snow", "ice", "sleet", "freez"), ConditionCategory.SNOW),
    (("rain", "drizzle", "shower"), ConditionCategory.RAIN),
    (("fog", "mist", "haze"), ConditionCategory.FOG),
    (("overcast",), ConditionCategory.OVERCAST),
    (("cloud", "partly"), ConditionCategory.CLOUDY),
    (("wind", "gust"), ConditionCategory.WINDY),
]


def categorize_conditions(conditions: str | None) -> ConditionCategory:
    text = (conditions or "").lower()
    for keywords, category in CONDITION_RULES:
        if any(k in text for k in keywords):
            return category
    return ConditionCategory.CLEAR
