# regcar

Small record-keeping tools built on fixed-size binary records. A car
registry keeps its records in a binary file and pairs the file with an
in-memory hash index. The index maps each plate to the record's position.

What is included:

- `regcar.hashtable`: `HashTable`, a hash table with a fixed number of
  buckets. Each bucket keeps its keys sorted without regard to case. Two keys
  that differ only in case count as the same key. Inserting a key that is
  already present raises `DuplicateKeyError`. The table can report its
  largest and smallest non-empty bucket. Two hash functions come with it:
  `sum_hash` and `shift_hash`.
- `regcar.plates`: `is_valid_plate`, `normalize_plate` and `prompt_plate`
  for number plates in the `ABC-0123` format.
- `regcar.cars`: `Car`, a fixed-size binary record, and `CarFile`, a file of
  such records that is searched in order. Removing a car only marks its
  record as deleted. `compact()` then drops deleted records from the file.
- `regcar.registry`: `CarRegistry`, a car file paired with a hash index
  keyed by plate.
- `regcar.cars_cli`: `CarRegistryApp`, the interactive menu for the car
  registry.
- `regcar.tickets`: `TicketQueue`, a first-in, first-out ticket counter, and
  its menu.
- `regcar.floatlog`: `append_float` and `read_floats`, which append
  little-endian single-precision floats to a binary file and read them back.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

```
regcar-cars [PATH]              # menu: register, show, change, remove and list cars
regcar-tickets                  # menu: issue and call numbered tickets
regcar-floatlog [PATH] [VALUE]  # append a float to a binary file
```

`regcar-cars` uses `carros.dat` in the current directory unless you give it
another path. It compacts the file when it starts. It compacts the file again
when you choose option `0` or when input ends. Cars removed during a session
are then gone for good. Plates must be typed in the `ABC-0123` form, and
lower-case letters are turned into capitals. To remove a car you must
confirm by typing `CONFIRM`.

`regcar-floatlog` asks for anything you leave out. If the file does not
exist, it creates an empty file and stops. If the file exists, it appends
the value.

## Library use

```python
from regcar.hashtable import HashTable, sum_hash, DuplicateKeyError
from regcar.plates import is_valid_plate, normalize_plate

sum_hash("123", 10)            # 0

table = HashTable(10, sum_hash)
table.insert("123", 0)
table.insert("321", 1)
"123" in table                 # True
len(table)                     # 2

try:
    table.insert("123", 5)
except DuplicateKeyError:
    pass                       # the key is already in the table

is_valid_plate("ABC-0123")     # True
is_valid_plate("abc-0123")     # False: letters must be upper case
normalize_plate("abc-0123")    # "ABC-0123"
```

`CarRegistry` is a context manager. On entry it opens its file, drops any
deleted records and indexes the rest. On exit it compacts the file again,
closes it and empties the index:

```python
from regcar.cars import Car
from regcar.registry import CarRegistry

with CarRegistry("cars.dat", 53) as registry:
    registry.add(Car("ABC-0123", "Brand", "Model", "Blue"))
    registry.update("ABC-0123", color="Red")
    registry.get("ABC-0123").color   # "Red"
    registry.delete("ABC-0123")
    registry.is_empty()              # True
```

## What is not included

The package keeps records for cars only. It has no record file, index or
menu for other kinds of records, such as student records. The hash index
lives in memory only and is rebuilt from the car file each time the
registry is opened.