"""Fixed-size binary records of cars, kept in a file with logical deletion."""

from __future__ import annotations

import dataclasses
import os
import struct
import tempfile
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

PLATE_SIZE = 9
TEXT_SIZE = 15

# plate, brand, model, colour, two bytes of alignment padding, status
_RECORD = struct.Struct(f"<{PLATE_SIZE}s{TEXT_SIZE}s{TEXT_SIZE}s{TEXT_SIZE}s2xi")
RECORD_SIZE = _RECORD.size

_EDITABLE = frozenset({"brand", "model", "color"})


def _encode(text: str, size: int) -> bytes:
    # Leave room for the terminating NUL; struct pads the rest with zeros.
    return text.encode("utf-8")[: size - 1]


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="ignore")


@dataclass
class Car:
    """One car record."""

    plate: str
    brand: str = ""
    model: str = ""
    color: str = ""
    active: bool = True

    def pack(self) -> bytes:
        """Encode as a fixed-size record; over-long text fields are truncated."""
        return _RECORD.pack(
            _encode(self.plate, PLATE_SIZE),
            _encode(self.brand, TEXT_SIZE),
            _encode(self.model, TEXT_SIZE),
            _encode(self.color, TEXT_SIZE),
            1 if self.active else 0,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "Car":
        """Decode one record produced by :meth:`pack`."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a car record is {RECORD_SIZE} bytes, got {len(data)}")
        plate, brand, model, color, status = _RECORD.unpack(data)
        return cls(
            plate=_decode(plate),
            brand=_decode(brand),
            model=_decode(model),
            color=_decode(color),
            active=status == 1,
        )


class CarNotFoundError(KeyError):
    """Raised when no active car has the given plate."""


class CarExistsError(KeyError):
    """Raised when adding a car whose plate is already registered."""


class CarFile:
    """A file of car records addressed by plate, searched sequentially."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        self._file: Optional[BinaryIO] = None

    def open(self) -> "CarFile":
        """Open the file for reading and writing, creating it if missing."""
        if self._file is None:
            try:
                self._file = open(self.path, "r+b")
            except FileNotFoundError:
                self._file = open(self.path, "w+b")
        return self

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "CarFile":
        return self.open()

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def _handle(self) -> BinaryIO:
        if self._file is None:
            raise ValueError("car file is not open")
        return self._file

    def __len__(self) -> int:
        handle = self._handle
        handle.seek(0, os.SEEK_END)
        return handle.tell() // RECORD_SIZE

    def records(self) -> Iterator[Car]:
        """Every record in file order, deleted ones included."""
        for index in range(len(self)):
            yield self.read(index)

    def active(self) -> Iterator[Car]:
        """Records that have not been deleted, in file order."""
        return (car for car in self.records() if car.active)

    def find(self, plate: str) -> Optional[int]:
        """Index of the active record with ``plate``, or None."""
        for index, car in enumerate(self.records()):
            if car.active and car.plate == plate:
                return index
        return None

    def read(self, index: int) -> Car:
        """The record at ``index``."""
        if not 0 <= index < len(self):
            raise IndexError(index)
        handle = self._handle
        handle.seek(index * RECORD_SIZE)
        return Car.unpack(handle.read(RECORD_SIZE))

    def write(self, index: int, car: Car) -> None:
        """Overwrite the record at ``index``."""
        if not 0 <= index < len(self):
            raise IndexError(index)
        handle = self._handle
        handle.seek(index * RECORD_SIZE)
        handle.write(car.pack())
        handle.flush()

    def append(self, car: Car) -> int:
        """Write ``car`` after the last record and return its index."""
        index = len(self)
        handle = self._handle
        handle.seek(index * RECORD_SIZE)
        handle.write(car.pack())
        handle.flush()
        return index

    def add(self, car: Car) -> int:
        """Store ``car`` as an active record; raise CarExistsError on a taken plate."""
        if self.find(car.plate) is not None:
            raise CarExistsError(car.plate)
        return self.append(dataclasses.replace(car, active=True))

    def _index_of(self, plate: str) -> int:
        index = self.find(plate)
        if index is None:
            raise CarNotFoundError(plate)
        return index

    def get(self, plate: str) -> Car:
        """The active car with ``plate``."""
        return self.read(self._index_of(plate))

    def update(self, plate: str, **kwargs: str) -> Car:
        """Change the brand, model or colour of a car and return the stored record."""
        unknown = set(kwargs) - _EDITABLE
        if unknown:
            raise TypeError(f"cannot update field(s): {', '.join(sorted(unknown))}")
        index = self._index_of(plate)
        self.write(index, dataclasses.replace(self.read(index), **kwargs))
        return self.read(index)

    def delete(self, plate: str) -> Car:
        """Mark the car with ``plate`` as deleted and return it as it was."""
        index = self._index_of(plate)
        car = self.read(index)
        self.write(index, dataclasses.replace(car, active=False))
        return car

    def compact(self) -> int:
        """Rewrite the file without deleted records; return how many were dropped."""
        kept = list(self.active())
        dropped = len(self) - len(kept)
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, temp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as out:
                for car in kept:
                    out.write(car.pack())
        except BaseException:
            os.unlink(temp_path)
            raise
        self.close()
        try:
            os.replace(temp_path, self.path)
        finally:
            self.open()
        return dropped

    def is_empty(self) -> bool:
        """True if the file holds no active record."""
        return next(self.active(), None) is None