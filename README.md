# patternlab

Two small, self-contained examples of classic design patterns:

- **Factory method**: a logistics company with road and sea fleets.
  `create_logistic` hands out the shared fleet for a `LogisticType`. Each
  fleet creates vehicles (trucks or ships) within its load and range limits.
  When a load overflows a vehicle, the remainder first fills the other
  vehicles in the same city, and new vehicles are created for whatever is
  left.
- **Singleton**: a configuration manager that reads `version` and `database`
  from a JSON file once and hands every caller the same instance.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Library use

### Logistics

```python
from patternlab.logistics import LogisticType, create_logistic
from patternlab.vehicle import City

sea = create_logistic(LogisticType.SEA)
ship = sea.create(10000, 2000, City.ANTALYA)
extra_ships = sea.add_load(ship, 5000)   # vehicles created for any overflow

for vehicle in sea:
    print(vehicle.describe())
```

- `patternlab.logistics` provides `LogisticType` (`SEA`, `ROAD`),
  `RoadLogistic` (trucks: at most 10000 kg load, 1500 km range) and
  `SeaLogistic` (ships: at most 1000000 kg load, 10000 km range).
  `create_logistic(kind)` returns the same fleet object for a kind on every
  call; `reset_logistics()` forgets the shared fleets.
- `patternlab.vehicle` provides `VehicleType`, `Region`, `City`,
  `region_for_city(city)`, `Vehicle` and `Fleet`. A `Fleet` supports
  `create(load, range_km, city)`, `add_load(vehicle, load)`,
  `find_by_city(city)`, `mark_on_road(vehicle)`, iteration and `len()`.
  `Vehicle.describe()` returns a multi-line summary with the load shown in
  tons.

A zero or negative load or range, a load over the fleet's capacity, a range
over the fleet's maximum, or loading a vehicle of the wrong type raises
`patternlab.vehicle.VehicleError`.

### Configuration

```python
from patternlab.config_manager import get_instance

config = get_instance("static/config.json")
print(config.version.value, config.database.value)
print(config.describe())
```

`get_instance(path)` loads the file on its first successful call (from
`static/config.json` when no path is given) and returns the same
`ConfigManager` on every later call, whatever path is passed, until
`reset_instance()` is called. A missing file, invalid JSON, a JSON value that
is not an object, or a missing or non-string `version` or `database` raises
`ConfigError`. `load_config(path)` reads a file without touching the shared
instance.

`patternlab.utils.read_file(path)` returns a file's whole text.

## Commands

Run the logistics demonstration, which fills a sea fleet and a road fleet and
prints every vehicle (headings go to standard output, vehicle summaries to
standard error):

```
patternlab-factory
```

Run the singleton demonstration, which loads the configuration and prints it
from two threads on standard error:

```
patternlab-singleton [CONFIG]
```

`CONFIG` defaults to `static/config.json` in the current directory. If the
configuration cannot be loaded, the error is printed and the command exits
with status 1.

## What it does not do

Fleets and configuration live only in memory for the life of the process.
Nothing is saved, and the configuration file is only read, never written.