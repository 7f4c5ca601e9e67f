from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Coordinate(_Frozen):
    latitude: float = 0.0
    longitude: float = 0.0

    @property
    def is_in_range(self) -> bool:
        # Decoded/source values are never clamped, so out-of-range ones can exist
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    def as_lat_lng(self) -> Tuple[float, float]:
        return self.latitude, self.longitude

    def as_lng_lat(self) -> Tuple[float, float]:
        """GeoJSON axis order."""
        return self.longitude, self.latitude


class NamedQuantity(_Frozen):
    """A distance (meters) or duration (seconds) with the provider's display text."""

    text: str = ""
    value: int = 0


class Step(_Frozen):
    distance: NamedQuantity = NamedQuantity()
    duration: NamedQuantity = NamedQuantity()

    # May contain HTML markup, passed through untouched
    instructions: str = ""
    maneuver: str = ""
    travel_mode: str = ""

    path: Tuple[Coordinate, ...] = ()
    start_location: Coordinate = Coordinate()
    end_location: Coordinate = Coordinate()


class Leg(_Frozen):
    distance: NamedQuantity = NamedQuantity()
    duration: NamedQuantity = NamedQuantity()

    start_address: str = ""
    start_location: Coordinate = Coordinate()

    end_address: str = ""
    end_location: Coordinate = Coordinate()

    steps: Tuple[Step, ...] = ()

    @property
    def path(self) -> Tuple[Coordinate, ...]:
        """Step paths joined in order (shared endpoints are not de-duplicated)."""
        return tuple(c for s in self.steps for c in s.path)


class Bounds(_Frozen):
    northeast: Coordinate = Coordinate()
    southwest: Coordinate = Coordinate()


class Route(_Frozen):
    bounds: Bounds = Bounds()
    copyrights: str = ""
    summary: str = ""
    legs: Tuple[Leg, ...] = ()

    @property
    def path(self) -> Tuple[Coordinate, ...]:
        return tuple(c for leg in self.legs for c in leg.path)

    @property
    def step_count(self) -> int:
        return sum(len(leg.steps) for leg in self.legs)
