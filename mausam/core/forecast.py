"""Daily aggregation of OpenWeather 3-hourly forecast samples."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .providers.base import ProviderError
from .timefmt import local_date
from .weather import format_wind_speed, wind_speed_of


@dataclass
class _DayBucket:
    date: str
    temp_min: float
    temp_max: float
    weather: str
    wind_sum: float = 0.0
    wind_count: int = 0

    def add_wind(self, speed: Optional[float]) -> None:
        if speed is None:
            return
        self.wind_sum += speed
        self.wind_count += 1

    def mean_wind(self) -> Optional[float]:
        if not self.wind_count:
            return None
        return self.wind_sum / self.wind_count


def aggregate_daily(
    samples: Iterable[Mapping[str, Any]],
    timezone_offset: int,
    *,
    sunrise: str,
    sunset: str,
    local_time: str,
) -> List[Dict[str, Any]]:
    """Group samples by local calendar date and summarise each day.

    The weather description comes from the first sample of the day. Days
    come out in the order their first sample was seen, which is
    chronological for the time-ordered lists OpenWeather returns.
    ``sunrise``, ``sunset`` and ``local_time`` are stamped on every day.
    """
    buckets: Dict[str, _DayBucket] = {}
    for sample in samples:
        try:
            day = local_date(sample["dt"], timezone_offset)
            temperature = sample["main"]["temp"]
            bucket = buckets.get(day)
            if bucket is None:
                bucket = _DayBucket(
                    date=day,
                    temp_min=temperature,
                    temp_max=temperature,
                    weather=sample["weather"][0]["description"],
                )
                buckets[day] = bucket
            else:
                bucket.temp_min = min(bucket.temp_min, temperature)
                bucket.temp_max = max(bucket.temp_max, temperature)
        except (KeyError, IndexError, TypeError) as exc:
            raise ProviderError(f"malformed forecast sample: missing {exc}") from exc
        bucket.add_wind(wind_speed_of(sample))

    return [
        {
            "date": bucket.date,
            "temp_min": bucket.temp_min,
            "temp_max": bucket.temp_max,
            "weather": bucket.weather,
            "sunrise": sunrise,
            "sunset": sunset,
            "local_time": local_time,
            "wind_speed": format_wind_speed(bucket.mean_wind()),
        }
        for bucket in buckets.values()
    ]


__all__ = ["aggregate_daily"]
