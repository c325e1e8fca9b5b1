"""Condition-code and temperature lookups for the weather report.

Condition codes follow https://openweathermap.org/weather-conditions.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConditionVisuals:
    """Pictogram and short label for a weather condition."""

    icon: str
    label: str


@dataclass(frozen=True)
class ConditionBand:
    """A half-open range ``[lower, upper)`` of condition codes."""

    lower: int
    upper: int
    label: str
    day_icon: str
    night_icon: str | None = None

    def contains(self, code: int) -> bool:
        return self.lower <= code < self.upper

    def icon_for(self, is_day: bool) -> str:
        if is_day or self.night_icon is None:
            return self.day_icon
        return self.night_icon


# Ordered and non-overlapping; 400-499 is unassigned upstream.
CONDITION_BANDS: tuple[ConditionBand, ...] = (
    ConditionBand(200, 300, "Thunderstorm", "⛈️"),
    ConditionBand(300, 400, "Drizzle", "💧"),
    ConditionBand(500, 600, "Rain", "🌧️"),
    ConditionBand(600, 700, "Snow", "❄️"),
    ConditionBand(700, 800, "Atmosphere", "🌫️"),
    ConditionBand(800, 801, "Clear", "☀️", night_icon="🌙"),
    ConditionBand(801, 802, "Few Clouds", "🌤️"),
    ConditionBand(802, 803, "Scattered Clouds", "⛅️"),
    ConditionBand(803, 804, "Broken Clouds", "☁️"),
    ConditionBand(804, 805, "Overcast Clouds", "☁️☁️"),
)

UNKNOWN_CONDITION = ConditionVisuals(icon="❓", label="Unknown")

# (exclusive lower bound, label), hottest first
TEMPERATURE_BANDS: tuple[tuple[float, str], ...] = (
    (35.0, "Very Hot"),
    (28.0, "Hot"),
    (20.0, "Warm"),
    (10.0, "Cool"),
    (0.0, "Cold"),
)
COLDEST_FEEL = "Very Cold"


def condition_visuals(condition_id: int, icon_code: str) -> ConditionVisuals:
    """Map a condition code to an icon and label.

    Day or night is taken from the icon code suffix (``01d`` / ``01n``).
    Codes outside every band map to :data:`UNKNOWN_CONDITION`.
    """
    is_day = (icon_code or "").endswith("d")
    for band in CONDITION_BANDS:
        if band.contains(condition_id):
            return ConditionVisuals(icon=band.icon_for(is_day), label=band.label)
    return UNKNOWN_CONDITION


def temperature_feel(temp_celsius: float) -> str:
    """Qualitative label for a temperature in degrees Celsius."""
    for lower, label in TEMPERATURE_BANDS:
        if temp_celsius > lower:
            return label
    return COLDEST_FEEL
