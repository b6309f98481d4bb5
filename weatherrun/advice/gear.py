"""Gear advisor: maps feels-like temperature to running kit."""

# (inclusive lower bound in F, recommendation), evaluated top-down
GEAR_TIERS: list[tuple[float, str]] = [
    (75, "Singlet, split shorts, sunglasses. Stay hydrated."),
    (60, "T-shirt and shorts. Light and fast."),
    (45, "Long sleeve, shorts or tights. Arm sleeves optional."),
    (30, "Base layer, tights, gloves, headband."),
    (15, "Insulated jacket, tights, gloves, hat, buff."),
]
WINTER_KIT = "Full winter kit. Double-layer gloves, balaclava, insulated tights."


def gear_tier_index(feelslike: float) -> int:
    """Index of the matching tier, 0 = lightest kit, len(GEAR_TIERS) = winter kit."""
    for i, (threshold, _) in enumerate(GEAR_TIERS):
        if feelslike >= threshold:
            return i
    return len(GEAR_TIERS)


def recommend_gear(feelslike: float) -> str:
    """Clothing recommendation for a feels-like temperature."""
    index = gear_tier_index(feelslike)
    if index == len(GEAR_TIERS):
        return WINTER_KIT
    return GEAR_TIERS[index][1]
