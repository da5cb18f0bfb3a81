import enum


class MaterialType(str, enum.Enum):
    FINAL_CURE = "Final Cure"
    EVAPORATION_RETARDER = "Evaporation Retarder"

    @classmethod
    def parse(cls, value):
        # type: (object) -> MaterialType
        """Accept an enum member, its display label, or its member name."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        raise ValueError(
            f"Unknown material type: {value!r}. "
            f"Available: {[m.value for m in cls]}"
        )


# --- Base wage tiers ($/hr), the only wages a quote may use ---

WAGE_TIERS = {
    "Entry-Level Skilled": 30.0,
    "Junior Skilled": 35.0,
    "Senior Skilled": 40.0,
    "Entry Unskilled": 15.0,
    "Junior Unskilled": 18.0,
    "Senior Unskilled": 22.0,
}


def wage_tier_label(wage: float) -> str:
    """Display label for a tier wage, e.g. 'Entry-Level Skilled ($30/hr)'."""
    for label, tier_wage in WAGE_TIERS.items():
        if tier_wage == wage:
            return f"{label} (${tier_wage:.0f}/hr)"
    raise ValueError(
        f"Base wage ${wage} is not a wage tier. "
        f"Available: {sorted(WAGE_TIERS.values())}"
    )
