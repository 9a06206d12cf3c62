"""Road and sea logistics fleets and the factory that hands them out."""

from __future__ import annotations

from enum import Enum

from patternlab.vehicle import Fleet, VehicleType

ROAD_MAX_RANGE = 1500
ROAD_MAX_LOAD = 10000
SEA_MAX_RANGE = 10000
SEA_MAX_LOAD = 1000000


class LogisticType(Enum):
    SEA = "sea"
    ROAD = "road"


class RoadLogistic(Fleet):
    """A fleet of trucks."""

    def __init__(self) -> None:
        super().__init__(VehicleType.TRUCK, ROAD_MAX_LOAD, ROAD_MAX_RANGE)


class SeaLogistic(Fleet):
    """A fleet of ships."""

    def __init__(self) -> None:
        super().__init__(VehicleType.SHIP, SEA_MAX_LOAD, SEA_MAX_RANGE)


_FLEET_CLASSES: dict[LogisticType, type[Fleet]] = {
    LogisticType.SEA: SeaLogistic,
    LogisticType.ROAD: RoadLogistic,
}

_fleets: dict[LogisticType, Fleet] = {}


def create_logistic(kind: LogisticType) -> Fleet:
    """Return the shared fleet for ``kind``, creating it on first use."""
    try:
        return _fleets[kind]
    except KeyError:
        fleet = _fleets[kind] = _FLEET_CLASSES[LogisticType(kind)]()
        return fleet


def reset_logistics() -> None:
    """Forget all shared fleets."""
    _fleets.clear()