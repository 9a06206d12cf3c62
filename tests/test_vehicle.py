import pytest

from patternlab.vehicle import (
    City,
    Fleet,
    Region,
    Vehicle,
    VehicleError,
    VehicleType,
    region_for_city,
)

CAPACITY = 10000
MAX_RANGE = 1500


@pytest.fixture
def fleet():
    return Fleet(VehicleType.TRUCK, CAPACITY, MAX_RANGE)


@pytest.mark.parametrize(
    "city, region",
    [
        (City.ANTALYA, Region.SOUTH),
        (City.IZMIR, Region.SOUTH),
        (City.BURSA, Region.NORTH),
        (City.ISTANBUL, Region.NORTH),
    ],
)
def test_region_for_city(city, region):
    assert region_for_city(city) is region


def test_labels_match_source_strings(fleet):
    truck = fleet.create(100, 100, City.ISTANBUL)
    truck_lines = truck.describe().splitlines()
    assert truck_lines[1] == "| Type : Truck"
    assert truck_lines[2] == "| Region & City : North, Istanbul"

    ships = Fleet(VehicleType.SHIP, CAPACITY, MAX_RANGE)
    ship = ships.create(100, 100, City.ANTALYA)
    ship_lines = ship.describe().splitlines()
    assert ship_lines[1] == "| Type : Ship"
    assert ship_lines[2] == "| Region & City : South, Antalya"
    assert ship.name.startswith("Ship ")


def test_create_sets_fields(fleet):
    vehicle = fleet.create(2000, 1000, City.IZMIR)
    assert vehicle.current_load == 2000
    assert vehicle.range_km == 1000
    assert vehicle.load_capacity == CAPACITY
    assert vehicle.max_range == MAX_RANGE
    assert vehicle.region is Region.SOUTH
    assert vehicle.is_on_road is False
    assert vehicle.name.startswith("Truck ")
    assert list(fleet) == [vehicle]


def test_created_vehicles_have_distinct_ids(fleet):
    first = fleet.create(100, 100, City.BURSA)
    second = fleet.create(100, 100, City.BURSA)
    assert first.id != second.id
    assert len(fleet) == 2


@pytest.mark.parametrize(
    "load, range_km",
    [(0, 100), (-5, 100), (100, 0), (100, -1), (CAPACITY + 1, 100), (100, MAX_RANGE + 1)],
)
def test_create_rejects_invalid_values(fleet, load, range_km):
    with pytest.raises(VehicleError):
        fleet.create(load, range_km, City.ANTALYA)
    assert len(fleet) == 0


def test_create_accepts_limits(fleet):
    vehicle = fleet.create(CAPACITY, MAX_RANGE, City.ANTALYA)
    assert vehicle.current_load == CAPACITY
    assert vehicle.range_km == MAX_RANGE


def test_describe_format(fleet):
    vehicle = fleet.create(2000, 1000, City.IZMIR)
    lines = vehicle.describe().splitlines()
    assert lines[0] == f"| Name : {vehicle.name}"
    assert lines[1] == "| Type : Truck"
    assert lines[2] == "| Region & City : South, Izmir"
    assert lines[3] == "| Current Load : 2.00 TON / 10.00 TON"
    assert lines[4] == "| Range : 1000.00 km / 1500.00 km"
    assert lines[5] == "----"


def test_add_load_within_capacity(fleet):
    vehicle = fleet.create(2000, 1000, City.IZMIR)
    created = fleet.add_load(vehicle, 3000)
    assert created == []
    assert vehicle.current_load == 5000
    assert len(fleet) == 1


def test_add_load_up_to_exact_capacity(fleet):
    vehicle = fleet.create(4000, 1000, City.IZMIR)
    assert fleet.add_load(vehicle, CAPACITY - 4000) == []
    assert vehicle.current_load == CAPACITY


def test_add_load_overflow_creates_new_vehicles(fleet):
    vehicle = fleet.create(8000, 1000, City.BURSA)
    created = fleet.add_load(vehicle, 25000)
    assert vehicle.current_load == CAPACITY
    assert all(v.current_load <= CAPACITY for v in fleet)
    assert sum(v.current_load for v in fleet) == 8000 + 25000
    assert all(v.city is City.BURSA and v.range_km == 1000 for v in created)
    assert len(fleet) == 1 + len(created)


def test_add_load_overflow_exact_multiple(fleet):
    vehicle = fleet.create(5000, 1000, City.BURSA)
    created = fleet.add_load(vehicle, 15000)
    assert [v.current_load for v in created] == [CAPACITY]
    assert sum(v.current_load for v in fleet) == 20000


def test_add_load_fills_others_in_same_city(fleet):
    vehicle = fleet.create(9000, 1000, City.ANTALYA)
    neighbour = fleet.create(1000, 1000, City.ANTALYA)
    elsewhere = fleet.create(1000, 1000, City.ISTANBUL)
    created = fleet.add_load(vehicle, 5000)
    assert vehicle.current_load == CAPACITY
    assert neighbour.current_load == CAPACITY
    assert elsewhere.current_load == 1000
    assert created == []


def test_add_load_rejects_wrong_type(fleet):
    ship = Vehicle(
        name="Ship 1",
        type=VehicleType.SHIP,
        max_range=MAX_RANGE,
        load_capacity=CAPACITY,
        city=City.IZMIR,
        current_load=100,
        range_km=100,
    )
    with pytest.raises(VehicleError):
        fleet.add_load(ship, 10)
    assert ship.current_load == 100


def test_find_by_city(fleet):
    a = fleet.create(100, 100, City.IZMIR)
    fleet.create(100, 100, City.BURSA)
    c = fleet.create(100, 100, City.IZMIR)
    assert fleet.find_by_city(City.IZMIR) == [a, c]
    assert fleet.find_by_city(City.ISTANBUL) == []


def test_mark_on_road(fleet):
    vehicle = fleet.create(100, 100, City.IZMIR)
    fleet.mark_on_road(vehicle)
    assert vehicle.is_on_road is True