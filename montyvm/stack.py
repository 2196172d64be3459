"""The Monty data structure: a stack that can also work as a queue."""

import enum
from collections import deque

from montyvm.errors import (
    DivisionByZeroError,
    EmptyStackError,
    PushUsageError,
    StackTooShortError,
    ValueOutOfRangeError,
)

_DIGITS = frozenset("0123456789")
_PRINTABLE = range(32, 127)


def _to_int32(value):
    """Wrap an integer to the range of a signed 32-bit int."""
    return (value + 2**31) % 2**32 - 2**31


def _trunc_div(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a, b):
    return a - b * _trunc_div(a, b)


def parse_push_argument(text, line_number):
    """Parse the argument of ``push``; raise PushUsageError if it is not an integer."""
    if text is None:
        raise PushUsageError(line_number)
    negative = len(text) >= 2 and text.startswith("-")
    digits = text[1:] if negative else text
    if not digits or not set(digits) <= _DIGITS:
        raise PushUsageError(line_number)
    value = int(digits)
    return _to_int32(-value if negative else value)


class Mode(enum.Enum):
    """Where ``push`` places new elements."""

    STACK = 1
    QUEUE = 2


class MontyStack:
    """Elements ordered from top to bottom; printing methods return their text."""

    def __init__(self):
        self._items = deque()
        self.mode = Mode.STACK

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def push(self, value):
        """Add a value on top (stack mode) or at the bottom (queue mode)."""
        value = _to_int32(value)
        if self.mode is Mode.QUEUE:
            self._items.append(value)
        else:
            self._items.appendleft(value)

    def pall(self):
        """Return every value, top first, one per line."""
        return "".join(f"{value}\n" for value in self._items)

    def pint(self, line_number):
        """Return the top value as a line."""
        if not self._items:
            raise EmptyStackError(line_number, "pint")
        return f"{self._items[0]}\n"

    def pop(self, line_number):
        """Remove the top element."""
        if not self._items:
            raise EmptyStackError(line_number, "pop")
        self._items.popleft()

    def swap(self, line_number):
        """Exchange the top two elements."""
        if len(self._items) < 2:
            raise StackTooShortError(line_number, "swap")
        self._items[0], self._items[1] = self._items[1], self._items[0]

    def _combine(self, line_number, opcode, operation, divides=False):
        if len(self._items) < 2:
            raise StackTooShortError(line_number, opcode)
        top = self._items[0]
        if divides and top == 0:
            raise DivisionByZeroError(line_number)
        self._items.popleft()
        self._items[0] = _to_int32(operation(self._items[0], top))

    def add(self, line_number):
        """Replace the top two elements by their sum."""
        self._combine(line_number, "add", lambda second, top: second + top)

    def nop(self):
        """Do nothing."""

    def sub(self, line_number):
        """Replace the top two elements by the second minus the top."""
        self._combine(line_number, "sub", lambda second, top: second - top)

    def div(self, line_number):
        """Replace the top two elements by the second divided by the top."""
        self._combine(line_number, "div", _trunc_div, divides=True)

    def mul(self, line_number):
        """Replace the top two elements by their product."""
        self._combine(line_number, "mul", lambda second, top: second * top)

    def mod(self, line_number):
        """Replace the top two elements by the second modulo the top."""
        self._combine(line_number, "mod", _trunc_mod, divides=True)

    def pchar(self, line_number):
        """Return the top value as a character on its own line."""
        if not self._items:
            raise EmptyStackError(line_number, "pchar")
        top = self._items[0]
        if top not in _PRINTABLE:
            raise ValueOutOfRangeError(line_number)
        return f"{chr(top)}\n"

    def pstr(self):
        """Return the characters from the top down to the first non-printable value."""
        chars = []
        for value in self._items:
            if value not in _PRINTABLE:
                break
            chars.append(chr(value))
        return "".join(chars) + "\n"

    def rotl(self):
        """Move the top element to the bottom."""
        self._items.rotate(-1)

    def rotr(self):
        """Move the bottom element to the top."""
        self._items.rotate(1)

    def set_stack_mode(self):
        """Make ``push`` add to the top."""
        self.mode = Mode.STACK

    def set_queue_mode(self):
        """Make ``push`` add to the bottom."""
        self.mode = Mode.QUEUE