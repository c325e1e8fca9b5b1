"""Current-weather response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr


class WeatherReading(BaseModel):
    """Flattened current conditions for one city, in metric units."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    city: StrictStr
    country: StrictStr
    temperature: StrictFloat
    feels_like: StrictFloat
    humidity: StrictFloat
    wind_speed: StrictFloat
    condition_id: StrictInt
    description: StrictStr
    icon: StrictStr

    @property
    def is_day(self) -> bool:
        """True when the icon code carries the day suffix (e.g. ``01d``)."""
        return self.icon.endswith("d")


class MainMeasurements(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    temp: StrictFloat
    feels_like: StrictFloat
    humidity: StrictFloat


class WeatherCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: StrictInt
    description: StrictStr
    icon: StrictStr


class Wind(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    speed: StrictFloat


class SystemInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: StrictStr


class CurrentWeatherResponse(BaseModel):
    """Subset of the ``/weather`` payload the CLI renders.

    Only the first entry of ``weather`` is used; the service lists the
    primary condition first.
    """

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    main: MainMeasurements
    weather: list[WeatherCondition] = Field(min_length=1)
    wind: Wind
    sys: SystemInfo

    def to_reading(self) -> WeatherReading:
        condition = self.weather[0]
        return WeatherReading(
            city=self.name,
            country=self.sys.country,
            temperature=self.main.temp,
            feels_like=self.main.feels_like,
            humidity=self.main.humidity,
            wind_speed=self.wind.speed,
            condition_id=condition.id,
            description=condition.description,
            icon=condition.icon,
        )
