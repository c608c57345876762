"""Reshaping of OpenWeather current-conditions payloads."""
from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Mapping, Optional

from .providers.base import ProviderError
from .timefmt import convert_unix_to_time, format_timezone, get_local_time

MS_TO_KMH = Decimal("3.6")
WIND_UNIT = "Km/hr"


def format_wind_speed(speed_ms: Optional[float]) -> Optional[str]:
    """Convert m/s to a ``"<n> Km/hr"`` label rounded half-up to 2 decimals."""
    if speed_ms is None:
        return None
    kmh = (Decimal(str(speed_ms)) * MS_TO_KMH).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    # drop trailing zeros: 10.00 -> 10, 3.60 -> 3.6
    return f"{format(kmh.normalize(), 'f')} {WIND_UNIT}"


def wind_speed_of(payload: Mapping[str, Any]) -> Optional[float]:
    wind = payload.get("wind") or {}
    return wind.get("speed")


def coordinate_label(payload: Mapping[str, Any], fallback: str) -> str:
    """Build ``Name, Country`` from the payload, or ``fallback`` when unnamed."""
    name = payload.get("name") or ""
    country = (payload.get("sys") or {}).get("country")
    label = f"{name}, {country}" if country else name
    return label.strip() or fallback


def build_current_weather(
    payload: Mapping[str, Any],
    label: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    try:
        main = payload["main"]
        sun = payload["sys"]
        offset = payload.get("timezone") or 0
        return {
            "city": label,
            "temperature": main["temp"],
            "feels_like": main["feels_like"],
            "humidity": main["humidity"],
            "wind_speed": format_wind_speed(wind_speed_of(payload)),
            "sunrise": convert_unix_to_time(sun["sunrise"], offset),
            "sunset": convert_unix_to_time(sun["sunset"], offset),
            "timezone": format_timezone(offset),
            "local_time": get_local_time(offset, now),
            "weather": payload["weather"][0]["description"],
        }
    except (KeyError, IndexError, TypeError) as exc:
        raise ProviderError(f"malformed upstream payload: missing {exc}") from exc


__all__ = ["build_current_weather", "coordinate_label", "format_wind_speed", "wind_speed_of"]
