"""A bounded integer stack with console helpers."""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterator, TextIO

DEFAULT_CAPACITY = 50

_BORDER = "Base .............................................. Tope"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class StackFullError(Exception):
    """Raised when pushing onto a stack that has reached its capacity."""


class Stack:
    """A last-in, first-out stack of integers with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._values: list[int] = []

    def push(self, value: int) -> None:
        if len(self._values) >= self.capacity:
            raise StackFullError("the stack is full")
        self._values.append(value)

    def pop(self) -> int:
        if not self._values:
            raise IndexError("pop from an empty stack")
        return self._values.pop()

    def top(self) -> int:
        if not self._values:
            raise IndexError("top of an empty stack")
        return self._values[-1]

    def is_empty(self) -> bool:
        return not self._values

    def read(
        self,
        prompt_input: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        """Ask for an integer and push it, or report that the stack is full."""
        prompt_input = prompt_input if prompt_input is not None else input
        output = output if output is not None else sys.stdout
        if len(self._values) >= self.capacity:
            output.write("Error: la pila esta llena")
            return
        match = _LEADING_INT.match(prompt_input("Ingrese un valor entero: "))
        self.push(int(match.group(1)) if match else 0)

    def show(self, output: TextIO | None = None) -> None:
        """Print the stack from base to top."""
        output = output if output is not None else sys.stdout
        body = "".join(f"| {value} " for value in self._values)
        output.write(f"\n{_BORDER}\n\n{body}\n\n{_BORDER}\n\n")

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)