"""Basic usage examples for the weather client."""

import asyncio
import os

from weather_cli import (
    AsyncWeatherClient,
    NotFoundError,
    WeatherClient,
    condition_visuals,
    render_report,
    temperature_feel,
)


def main() -> None:
    api_key = os.environ["OPENWEATHER_API_KEY"]

    with WeatherClient(api_key) as client:
        # Full report, as the CLI prints it
        print("=== London ===")
        reading = client.current_weather("London")
        for line in render_report(reading, show_details=True):
            print(f"  {line}")

        # Individual lookups
        print("\n=== Oslo ===")
        oslo = client.current_weather("Oslo")
        visuals = condition_visuals(oslo.condition_id, oslo.icon)
        print(f"  {visuals.icon} {visuals.label}, {oslo.temperature:.1f}°C ({temperature_feel(oslo.temperature)})")

        # Unknown cities raise NotFoundError
        try:
            client.current_weather("Atlantis")
        except NotFoundError as exc:
            print(f"\n  {exc}")

    # Same call from asyncio code
    async def fetch_async(city: str) -> None:
        async with AsyncWeatherClient(api_key) as client:
            r = await client.current_weather(city)
        print(f"\n=== {r.city} (async) ===")
        print(f"  {r.temperature:.1f}°C, wind {r.wind_speed:.1f} m/s")

    asyncio.run(fetch_async("Reykjavik"))


if __name__ == "__main__":
    main()
