from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class GeocodeResult:
    """A resolved location as returned by the direct geocoding endpoint."""

    name: str
    latitude: float
    longitude: float
    country: Optional[str] = None
    state: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "GeocodeResult":
        return cls(
            name=payload.get("name") or "",
            latitude=float(payload["lat"]),
            longitude=float(payload["lon"]),
            country=payload.get("country") or None,
            state=payload.get("state") or None,
        )

    @property
    def label(self) -> str:
        """Readable "Name, State, Country" label, skipping absent parts."""
        parts = [self.name]
        parts.extend(part for part in (self.state, self.country) if part)
        return ", ".join(parts)


__all__ = ["GeocodeResult"]
