"""Interactive menu for the indexed car registry."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, Optional, Sequence

from .cars import Car
from .plates import prompt_plate
from .registry import CarRegistry

DEFAULT_PATH = "carros.dat"

SEPARATOR = "--------------"
MAIN_MENU = (
    "1 - Register a car\n"
    "2 - Show a car\n"
    "3 - Change a car\n"
    "4 - Remove a car\n"
    "5 - List registered cars\n"
    "0 - Quit\n"
)
CHANGE_MENU = (
    "1 - Change brand\n"
    "2 - Change model\n"
    "3 - Change colour\n"
    "4 - Change brand, model and colour\n"
    "0 - Cancel\n"
    "Choose an option: "
)

BRAND_PROMPT = "Brand: "
MODEL_PROMPT = "Model: "
COLOR_PROMPT = "Colour: "
NEW_BRAND_PROMPT = "New brand: "
NEW_MODEL_PROMPT = "New model: "
NEW_COLOR_PROMPT = "New colour: "
CONFIRM_WORD = "CONFIRM"
CONFIRM_PROMPT = f"Really remove this car? Type {CONFIRM_WORD}: "

CAR_SAVED = "Car saved.\n"
CAR_EXISTS = "Car already registered!\n"
CAR_NOT_FOUND = "Car not found in the registry!\n"
CAR_FOUND = "Car found:\n"
CAR_REMOVED = "Car removed.\n"
BRAND_CHANGED = "Brand changed.\n"
MODEL_CHANGED = "Model changed.\n"
COLOR_CHANGED = "Colour changed.\n"
CANCELLED = "Operation cancelled!\n"
NO_CARS = "No cars in the registry!\n"
INVALID_OPTION = "Invalid option!\n"
INVALID_CHANGE_OPTION = "Invalid option! Please choose a valid one.\n"
FILE_COMPACTED = "File compacted.\n"
INDEX_RELEASED = "Index released.\n"
GOODBYE = "Program finished!\n"

Reader = Callable[[], str]
Writer = Callable[[str], object]


def _line(text: str) -> str:
    return text.partition("\n")[0]


def _format_car(car: Car) -> str:
    return (
        f"Plate: {car.plate}\n"
        f"Brand: {car.brand}\n"
        f"Model: {car.model}\n"
        f"Colour: {car.color}\n"
    )


class CarRegistryApp:
    """Menu-driven front end to a :class:`CarRegistry`.

    ``read`` returns one line of input and raises EOFError when input ends;
    ``write`` receives everything shown to the user.
    """

    def __init__(self, path: str | os.PathLike[str], read: Reader, write: Writer) -> None:
        self.registry = CarRegistry(path)
        self.read = read
        self.write = write
        self._actions = {
            1: self.register,
            2: self.show,
            3: self.change,
            4: self.remove,
            5: self.list_all,
        }

    def _ask(self, prompt: str) -> str:
        self.write(prompt)
        return _line(self.read())

    def _read_choice(self) -> Optional[int]:
        try:
            return int(self.read().strip())
        except ValueError:
            return None

    def run(self) -> None:
        """Show the menu and carry out choices until 0 is chosen or input ends."""
        self.registry.open()
        self.write(FILE_COMPACTED)
        try:
            while True:
                self.write(MAIN_MENU)
                choice = self._read_choice()
                if choice == 0:
                    break
                action = self._actions.get(choice) if choice is not None else None
                if action is None:
                    self.write(INVALID_OPTION)
                    continue
                if choice != 1 and self.registry.is_empty():
                    self.write(NO_CARS)
                    continue
                action()
        except EOFError:
            pass
        finally:
            self.registry.close()
        self.write(FILE_COMPACTED)
        self.write(INDEX_RELEASED)
        self.write(GOODBYE)

    def register(self) -> None:
        """Ask for a new car and store it unless its plate is taken."""
        plate = prompt_plate(self.read, self.write)
        if plate in self.registry:
            self.write(CAR_EXISTS)
            return
        brand = self._ask(BRAND_PROMPT)
        model = self._ask(MODEL_PROMPT)
        color = self._ask(COLOR_PROMPT)
        stored = Car(plate, brand, model, color).pack()
        self.registry.add(Car.unpack(stored))
        self.write(CAR_SAVED)

    def show(self) -> None:
        """Ask for a plate and show that car."""
        plate = prompt_plate(self.read, self.write)
        if plate not in self.registry:
            self.write(CAR_NOT_FOUND)
            return
        car = self.registry.get(plate)
        self.write(f"{SEPARATOR}\n{CAR_FOUND}{SEPARATOR}\n{_format_car(car)}{SEPARATOR}\n")

    def change(self) -> None:
        """Ask for a plate and change its brand, model, colour or all three."""
        plate = prompt_plate(self.read, self.write)
        if plate not in self.registry:
            self.write(CAR_NOT_FOUND)
            return
        while True:
            self.write(CHANGE_MENU)
            choice = self._read_choice()
            if choice is not None and 0 <= choice <= 4:
                break
            self.write(INVALID_CHANGE_OPTION)
        if choice == 0:
            self.write(CANCELLED)
            return
        if choice in (1, 4):
            self.registry.update(plate, brand=self._ask(NEW_BRAND_PROMPT))
            self.write(BRAND_CHANGED)
        if choice in (2, 4):
            self.registry.update(plate, model=self._ask(NEW_MODEL_PROMPT))
            self.write(MODEL_CHANGED)
        if choice in (3, 4):
            self.registry.update(plate, color=self._ask(NEW_COLOR_PROMPT))
            self.write(COLOR_CHANGED)

    def remove(self) -> None:
        """Ask for a plate, show the car and delete it once confirmed."""
        plate = prompt_plate(self.read, self.write)
        if plate not in self.registry:
            self.write(CAR_NOT_FOUND)
            return
        car = self.registry.get(plate)
        self.write(f"{SEPARATOR}\n{CAR_FOUND}{SEPARATOR}\n{_format_car(car)}{SEPARATOR}\n")
        if self._ask(CONFIRM_PROMPT) != CONFIRM_WORD:
            self.write(CANCELLED)
            return
        self.registry.delete(plate)
        self.write(CAR_REMOVED)

    def list_all(self) -> None:
        """Show every registered car in file order."""
        for car in self.registry:
            self.write(f"{SEPARATOR}\n{_format_car(car)}{SEPARATOR}\n")


def _stdin_read() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the car registry menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Car registry with a hash index.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH, help="registry file")
    args = parser.parse_args(argv)
    try:
        CarRegistryApp(args.path, _stdin_read, _stdout_write).run()
    except OSError as exc:
        print(f"Could not open the registry file: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())