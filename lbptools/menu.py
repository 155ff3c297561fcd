"""Interactive text menu for working with a bounded stack or queue."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator, Sequence
from typing import Callable, Optional, TextIO

from lbptools.bounded import (
    MAX_SIZE,
    BoundedQueue,
    BoundedStack,
    OverflowError_,
    UnderflowError,
)

__all__ = ["run_menu", "main"]

_MAIN_MENU = (
    "Enter the number of the structure to use",
    "1- Stack ",
    "2- Queue ",
    "3- Exit the program ",
)

_STACK_MENU = (
    "Enter the number of the operation to perform",
    "1- Push ",
    "2- Pop ",
    "3- Is Empty ",
    "4- Is Full ",
    "5- Show stack ",
    "6- Stack size ",
    "7- Top of the stack ",
    "0- Back ",
)

_QUEUE_MENU = (
    "Enter the number of the operation to perform",
    "1- Enqueue ",
    "2- Dequeue ",
    "3- Is Empty ",
    "4- Is Full ",
    "5- Show queue ",
    "6- Queue size ",
    "7- End of the queue ",
    "0- Back ",
)


class _EndOfInput(Exception):
    """The input ran out while the menu was waiting for a number."""


def _integers(stream: TextIO) -> Iterator[int]:
    """Yield whitespace-separated integers, skipping words that are not numbers."""
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                continue


def _show(values: Sequence[int]) -> str:
    return "".join(f"{value} " for value in values)


def _read_size(
    numbers: Iterator[int], say: Callable[[str], None], name: str
) -> Optional[int]:
    """Ask for a size; returns None when the program must stop with an error."""
    say(f"Enter the size of the {name}: ")
    size = next(numbers, None)
    if size is None:
        raise _EndOfInput
    if size > MAX_SIZE:
        say(f"The {name} size exceeds the maximum allowed.")
        return None
    if size < 1:
        say(f"The {name} size must be at least 1.")
        return None
    return size


def _stack_session(
    numbers: Iterator[int], say: Callable[[str], None], rng: random.Random
) -> int | None:
    size = _read_size(numbers, say, "stack")
    if size is None:
        return 1
    stack = BoundedStack(size - 1)
    stack.fill_random(rng)
    while True:
        for line in _STACK_MENU:
            say(line)
        choice = next(numbers, None)
        if choice is None:
            raise _EndOfInput
        if choice == 0:
            return None
        if choice == 1:
            if stack.is_full():
                say("Over Flow")
                continue
            say("Enter a new value for the stack")
            value = next(numbers, None)
            if value is None:
                raise _EndOfInput
            try:
                stack.push(value)
            except OverflowError_:
                say("Over Flow")
        elif choice == 2:
            try:
                stack.pop()
            except UnderflowError:
                say("Under Flow")
        elif choice == 3:
            say("The stack is empty" if stack.is_empty() else "The stack is not empty")
        elif choice == 4:
            say("The stack is full" if stack.is_full() else "The stack is not full")
        elif choice == 5:
            say(_show(stack.items()))
        elif choice == 6:
            say(f"Stack size: {size}")
        elif choice == 7:
            say(f"Top of the stack: {len(stack) + 1}")


def _queue_session(
    numbers: Iterator[int], say: Callable[[str], None], rng: random.Random
) -> int | None:
    size = _read_size(numbers, say, "queue")
    if size is None:
        return 1
    queue = BoundedQueue(size - 1)
    queue.fill_random(rng)
    while True:
        for line in _QUEUE_MENU:
            say(line)
        choice = next(numbers, None)
        if choice is None:
            raise _EndOfInput
        if choice == 0:
            return None
        if choice == 1:
            if queue.is_full():
                say("Over Flow")
                continue
            say("Enter a new value for the queue")
            value = next(numbers, None)
            if value is None:
                raise _EndOfInput
            try:
                queue.enqueue(value)
            except OverflowError_:
                say("Over Flow")
        elif choice == 2:
            try:
                queue.dequeue()
            except UnderflowError:
                say("Under Flow")
        elif choice == 3:
            say("The queue is empty" if queue.is_empty() else "The queue is not empty")
        elif choice == 4:
            say("The queue is full" if queue.is_full() else "The queue is not full")
        elif choice == 5:
            say(_show(queue.items()))
        elif choice == 6:
            say(f"Queue size: {size}")
        elif choice == 7:
            say(f"End of the queue: {len(queue) + 1}")


def run_menu(
    input_stream: TextIO,
    output_stream: TextIO,
    rng: Optional[random.Random] = None,
) -> int:
    """Run the menu reading numbers from ``input_stream``; returns the exit status.

    The status is 1 when a requested size is out of range, otherwise 0.
    Running out of input ends the menu as if exit had been chosen.
    """
    source = rng if rng is not None else random.Random()
    numbers = _integers(input_stream)

    def say(text: str) -> None:
        print(text, file=output_stream)

    say("Slot 0 is reserved as a control slot and is not counted.")
    sessions = {1: _stack_session, 2: _queue_session}
    try:
        while True:
            for line in _MAIN_MENU:
                say(line)
            choice = next(numbers, None)
            if choice is None or choice == 3:
                return 0
            session = sessions.get(choice)
            if session is None:
                continue
            status = session(numbers, say, source)
            if status is not None:
                return status
    except _EndOfInput:
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the menu on standard input and output."""
    return run_menu(sys.stdin, sys.stdout, random.Random())


if __name__ == "__main__":
    sys.exit(main())