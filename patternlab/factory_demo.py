"""Demonstration of the logistics factory: fill a sea and a road fleet."""

from __future__ import annotations

import sys
from typing import Sequence

from patternlab.logistics import LogisticType, create_logistic, reset_logistics
from patternlab.vehicle import City, Fleet

_SEA_ORDERS = [
    (10000, 2000, City.ANTALYA),
    (20000, 1000, City.IZMIR),
    (58000, 5000, City.ISTANBUL),
    (28610, 5000, City.BURSA),
]

_ROAD_ORDERS = [
    (1870, 1500, City.ANTALYA),
    (2000, 1000, City.IZMIR),
    (5000, 1000, City.ISTANBUL),
    (8750, 500, City.BURSA),
]


def _fill_and_report(fleet: Fleet, orders, title: str) -> None:
    for load, range_km, city in orders:
        fleet.create(load, range_km, city)
    print(f"\n-----\n{title}")
    for vehicle in fleet:
        sys.stderr.write(vehicle.describe())


def main(argv: Sequence[str] | None = None) -> int:
    """Build both fleets and print every vehicle."""
    reset_logistics()
    _fill_and_report(create_logistic(LogisticType.SEA), _SEA_ORDERS, "SEA LOGISTIC - SHIPS")
    _fill_and_report(create_logistic(LogisticType.ROAD), _ROAD_ORDERS, "ROAD LOGISTIC - TRUCKS")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())