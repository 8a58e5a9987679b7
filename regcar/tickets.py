"""A first-come, first-served ticket counter."""

from __future__ import annotations

import sys
from collections import deque
from typing import Callable, Optional, Sequence

MENU = (
    "-------------------------\n"
    "Options:\n"
    "1 - Issue a ticket\n"
    "2 - Call a ticket\n"
    "0 - Quit\n"
    "Choose an option: "
)
TICKET_ISSUED = "Ticket {} issued!\n"
TICKET_CALLED = "Ticket {} called!\n"
NO_CUSTOMERS = "Error: no customers waiting!\n"
INVALID_OPTION = "Invalid option!\n"
GOODBYE = "End of program!\n"


class TicketQueue:
    """Hands out ticket numbers from 1 upwards and calls them in order."""

    def __init__(self) -> None:
        self._waiting: deque[int] = deque()
        self._next = 1

    def issue(self) -> int:
        """Hand out the next ticket number and put it in the queue."""
        ticket = self._next
        self._waiting.append(ticket)
        self._next += 1
        return ticket

    def call(self) -> int:
        """Remove and return the oldest waiting ticket."""
        if not self._waiting:
            raise IndexError("no tickets waiting")
        return self._waiting.popleft()

    def head(self) -> int:
        """The oldest waiting ticket, left in the queue."""
        if not self._waiting:
            raise IndexError("no tickets waiting")
        return self._waiting[0]

    def is_empty(self) -> bool:
        return not self._waiting

    def __len__(self) -> int:
        return len(self._waiting)


def run_counter(read: Callable[[], str], write: Callable[[str], object]) -> TicketQueue:
    """Run the counter menu until 0 is chosen or input ends; return the queue."""
    queue = TicketQueue()
    while True:
        write(MENU)
        try:
            line = read()
        except EOFError:
            break
        try:
            choice = int(line.strip())
        except ValueError:
            choice = None
        if choice == 0:
            write(GOODBYE)
            break
        if choice == 1:
            write(TICKET_ISSUED.format(queue.issue()))
        elif choice == 2:
            if queue.is_empty():
                write(NO_CUSTOMERS)
            else:
                write(TICKET_CALLED.format(queue.call()))
        else:
            write(INVALID_OPTION)
    return queue


def _stdin_read() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the ticket counter on standard input and output."""
    run_counter(_stdin_read, _stdout_write)
    return 0


if __name__ == "__main__":
    sys.exit(main())