"""Vehicles, cities and a fleet that spreads overflowing loads."""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class VehicleType(Enum):
    TRUCK = "Truck"
    SHIP = "Ship"

    @property
    def label(self) -> str:
        return self.value


class Region(Enum):
    NORTH = "North"
    SOUTH = "South"

    @property
    def label(self) -> str:
        return self.value


class City(Enum):
    ANTALYA = "Antalya"
    IZMIR = "Izmir"
    BURSA = "Bursa"
    ISTANBUL = "Istanbul"

    @property
    def label(self) -> str:
        return self.value


_CITY_REGIONS = {
    City.ANTALYA: Region.SOUTH,
    City.IZMIR: Region.SOUTH,
    City.BURSA: Region.NORTH,
    City.ISTANBUL: Region.NORTH,
}


class VehicleError(ValueError):
    """Raised when a vehicle cannot be created or loaded."""


def region_for_city(city: City) -> Region:
    """Return the region a city belongs to."""
    return _CITY_REGIONS[city]


@dataclass(eq=False)
class Vehicle:
    """A single vehicle with its capacity, range and current load."""

    name: str
    type: VehicleType
    max_range: float
    load_capacity: float
    city: City
    current_load: float
    range_km: float
    region: Region = field(init=False)
    is_on_road: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        self.region = region_for_city(self.city)

    def describe(self) -> str:
        """Return a multi-line summary of the vehicle."""
        return (
            f"| Name : {self.name}\n"
            f"| Type : {self.type.label}\n"
            f"| Region & City : {self.region.label}, {self.city.label}\n"
            f"| Current Load : {self.current_load / 1000:.2f} TON / "
            f"{self.load_capacity / 1000:.2f} TON\n"
            f"| Range : {self.range_km:.2f} km / {self.max_range:.2f} km\n"
            "----\n"
        )

    def mark_on_road(self) -> None:
        self.is_on_road = True


class Fleet:
    """A collection of vehicles of one type sharing the same limits."""

    def __init__(self, vehicle_type: VehicleType, load_capacity: float, max_range: float) -> None:
        self.vehicle_type = vehicle_type
        self.load_capacity = load_capacity
        self.max_range = max_range
        self._vehicles: list[Vehicle] = []

    def create(self, load: float, range_km: float, city: City) -> Vehicle:
        """Build a vehicle, add it to the fleet and return it."""
        kind = self.vehicle_type.label
        if load <= 0 or range_km <= 0:
            raise VehicleError("Any variable cannot be 0 or negative.")
        if load > self.load_capacity:
            raise VehicleError(f"Exceeds the load capacity of the {kind}.")
        if range_km > self.max_range:
            raise VehicleError(f"Exceeds the max range of the {kind}.")

        vehicle = Vehicle(
            name=f"{kind} {random.randint(0, 2**31 - 1)}",
            type=self.vehicle_type,
            max_range=self.max_range,
            load_capacity=self.load_capacity,
            city=city,
            current_load=load,
            range_km=range_km,
        )
        self._vehicles.append(vehicle)
        return vehicle

    def add_load(self, vehicle: Vehicle, load: float) -> list[Vehicle]:
        """Add ``load`` to ``vehicle``, spilling any excess.

        Excess first fills the other non-full vehicles in the same city, and
        whatever remains goes onto newly created vehicles.  Returns the
        vehicles created for the remainder.
        """
        if vehicle.type is not self.vehicle_type:
            raise VehicleError("Vehicle Type is not match.")

        if vehicle.current_load + load <= vehicle.load_capacity:
            vehicle.current_load += load
            return []

        remained = load - vehicle.load_capacity + vehicle.current_load
        vehicle.current_load = vehicle.load_capacity

        same_city = self.find_by_city(vehicle.city)
        if len(same_city) > 1:
            for other in same_city:
                if other is not vehicle and other.current_load < other.load_capacity:
                    remained -= other.load_capacity - other.current_load
                    other.current_load = other.load_capacity

        created: list[Vehicle] = []
        capacity = vehicle.load_capacity
        while remained > 0:
            created.append(self.create(min(remained, capacity), vehicle.range_km, vehicle.city))
            remained -= capacity
        return created

    def find_by_city(self, city: City) -> list[Vehicle]:
        return [v for v in self._vehicles if v.city is city]

    def mark_on_road(self, vehicle: Vehicle) -> None:
        vehicle.mark_on_road()

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(self._vehicles)

    def __len__(self) -> int:
        return len(self._vehicles)