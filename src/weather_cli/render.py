"""Formatting of a weather reading into terminal lines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from weather_cli.models.current import WeatherReading
from weather_cli.styles import PlainStyler, Styler
from weather_cli.visuals import condition_visuals, temperature_feel

SEPARATOR = "-" * 36

WINDY_THRESHOLD = 10.0  # m/s, roughly 36 km/h
BREEZY_THRESHOLD = 5.0

WINDY_MESSAGE = "💨 It's quite windy!"
BREEZY_MESSAGE = "🍃 Gentle breeze."

FEEL_EMOJI: dict[str, str] = {
    "Very Hot": "🔥",
    "Hot": "🥵",
    "Cold": "🥶",
    "Very Cold": "🧊",
}


@dataclass(frozen=True)
class AdvisoryRule:
    """A regional temperature advisory.

    A ``"heat"`` rule fires above ``threshold``, a ``"cold"`` rule below it,
    and only when the country code or the city name matches.
    """

    kind: Literal["heat", "cold"]
    threshold: float
    message: str
    country_codes: frozenset[str] = frozenset()
    city_keywords: tuple[str, ...] = ()

    def applies_to(self, reading: WeatherReading) -> bool:
        if self.kind == "heat":
            in_range = reading.temperature > self.threshold
        else:
            in_range = reading.temperature < self.threshold
        return in_range and self.matches_region(reading)

    def matches_region(self, reading: WeatherReading) -> bool:
        if reading.country.upper() in {code.upper() for code in self.country_codes}:
            return True
        city = reading.city.lower()
        return any(keyword.lower() in city for keyword in self.city_keywords)


DEFAULT_ADVISORY_RULES: tuple[AdvisoryRule, ...] = (
    AdvisoryRule(
        kind="heat",
        threshold=30.0,
        message="☀️ It's a hot day, especially for this region!",
        country_codes=frozenset({"IN"}),
        city_keywords=("delhi", "mumbai"),
    ),
    AdvisoryRule(
        kind="cold",
        threshold=10.0,
        message="❄️ It's cold, typical for hilly regions or winter!",
        country_codes=frozenset({"IN"}),
        city_keywords=("shimla", "manali"),
    ),
)


def wind_advisory(wind_speed: float) -> str | None:
    """Return the wind advisory text for a speed in m/s, if any."""
    if wind_speed > WINDY_THRESHOLD:
        return WINDY_MESSAGE
    if wind_speed > BREEZY_THRESHOLD:
        return BREEZY_MESSAGE
    return None


def regional_advisory(
    reading: WeatherReading,
    rules: Sequence[AdvisoryRule] = DEFAULT_ADVISORY_RULES,
) -> AdvisoryRule | None:
    """Return the first advisory rule that applies to ``reading``."""
    return next((rule for rule in rules if rule.applies_to(reading)), None)


def format_feel(label: str) -> str:
    emoji = FEEL_EMOJI.get(label)
    return f"{label} {emoji}" if emoji else label


def render_report(
    reading: WeatherReading,
    show_details: bool = False,
    styler: Styler | None = None,
    advisory_rules: Sequence[AdvisoryRule] = DEFAULT_ADVISORY_RULES,
) -> list[str]:
    """Format ``reading`` as a list of output lines.

    Args:
        reading: Current conditions to display.
        show_details: Also print feels-like temperature, humidity and wind.
        styler: Markup provider; defaults to :class:`PlainStyler`.
        advisory_rules: Regional temperature advisories, first match wins.

    Returns:
        Lines without trailing newlines, starting with the city header.
    """
    s = styler or PlainStyler()
    visuals = condition_visuals(reading.condition_id, reading.icon)
    feel = temperature_feel(reading.temperature)

    lines = [
        f"{s.emphasize(reading.city)}, {s.accent(reading.country)}",
        SEPARATOR,
        f"{visuals.icon}  {s.positive(visuals.label)} ({s.plain(reading.description)})",
        f"🌡️  Temperature: {s.measure(f'{reading.temperature:.1f}°C')} "
        f"({s.feel(format_feel(feel), feel)})",
    ]

    if show_details:
        lines.append(f"🤔 Feels like: {s.measure(f'{reading.feels_like:.1f}°C')}")
        lines.append(f"💧 Humidity: {s.notice(f'{reading.humidity:g}%')}")
        lines.append(f"🌬️  Wind: {s.accent(f'{reading.wind_speed:.1f} m/s')}")

    wind = wind_advisory(reading.wind_speed)
    if wind is not None:
        lines.append(s.notice(wind))

    advisory = regional_advisory(reading, advisory_rules)
    if advisory is not None:
        lines.append(s.warn(advisory.message))

    return lines
