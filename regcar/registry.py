"""Car records on disk with an in-memory hash index by plate."""

from __future__ import annotations

import dataclasses
import os
from typing import Iterator, Optional

from .cars import Car, CarExistsError, CarFile, CarNotFoundError
from .hashtable import DuplicateKeyError, HashTable, shift_hash

DEFAULT_SIZE = 53

_EDITABLE = frozenset({"brand", "model", "color"})


class CarRegistry:
    """A car file whose records are located through a hash table of plates.

    Opening the registry drops deleted records from the file and indexes
    the rest; closing it drops deleted records again and clears the index.
    """

    def __init__(self, path: str | os.PathLike[str], size: int = DEFAULT_SIZE) -> None:
        self.path = os.fspath(path)
        self._file = CarFile(self.path)
        self._index = HashTable(size, shift_hash)
        self._open = False

    def open(self) -> "CarRegistry":
        """Open the file, compact it and build the index."""
        if not self._open:
            self._file.open()
            self._file.compact()
            self._open = True
            self.rebuild_index()
        return self

    def close(self) -> None:
        """Compact the file, close it and empty the index."""
        if self._open:
            self._file.compact()
            self._file.close()
            self._index.clear()
            self._open = False

    def __enter__(self) -> "CarRegistry":
        return self.open()

    def __exit__(self, *args: object) -> None:
        self.close()

    def _require_open(self) -> None:
        if not self._open:
            raise ValueError("car registry is not open")

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, plate: object) -> bool:
        return plate in self._index

    def __iter__(self) -> Iterator[Car]:
        """Active cars in file order."""
        self._require_open()
        return self._file.active()

    def position(self, plate: str) -> Optional[int]:
        """Record index of the car with ``plate``, or None if unregistered."""
        entry = self._index.find(plate)
        return None if entry is None else entry.position

    def _position_of(self, plate: str) -> int:
        self._require_open()
        position = self.position(plate)
        if position is None:
            raise CarNotFoundError(plate)
        return position

    def add(self, car: Car) -> int:
        """Append ``car`` as an active record, index it and return its position."""
        self._require_open()
        if car.plate in self._index:
            raise CarExistsError(car.plate)
        position = self._file.append(dataclasses.replace(car, active=True))
        self._index.insert(car.plate, position)
        return position

    def get(self, plate: str) -> Car:
        """The registered car with ``plate``."""
        return self._file.read(self._position_of(plate))

    def update(self, plate: str, **kwargs: str) -> Car:
        """Change the brand, model or colour of a car and return the stored record."""
        unknown = set(kwargs) - _EDITABLE
        if unknown:
            raise TypeError(f"cannot update field(s): {', '.join(sorted(unknown))}")
        position = self._position_of(plate)
        self._file.write(position, dataclasses.replace(self._file.read(position), **kwargs))
        return self._file.read(position)

    def delete(self, plate: str) -> Car:
        """Mark the car as deleted, drop it from the index and return it as it was."""
        position = self._position_of(plate)
        car = self._file.read(position)
        self._file.write(position, dataclasses.replace(car, active=False))
        self._index.remove(plate)
        return car

    def is_empty(self) -> bool:
        """True if no car is registered."""
        return self._index.is_empty()

    def rebuild_index(self) -> None:
        """Index every active record of the file by plate."""
        self._require_open()
        self._index.clear()
        for position, car in enumerate(self._file.records()):
            if not car.active:
                continue
            try:
                self._index.insert(car.plate, position)
            except DuplicateKeyError:
                continue