"""Errors raised while interpreting Monty bytecode."""


class MontyError(Exception):
    """Base class for interpreter errors; ``str()`` gives the diagnostic."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class FileOpenError(MontyError):
    """The bytecode file could not be opened."""

    def __init__(self, filename):
        super().__init__(f"Error: Can't open file {filename}")
        self.filename = filename


class _LineError(MontyError):
    """An error tied to a line of the bytecode file."""

    def __init__(self, line_number, detail):
        super().__init__(f"L{line_number}: {detail}")
        self.line_number = line_number


class UnknownInstructionError(_LineError):
    """The opcode on a line is not a known instruction."""

    def __init__(self, line_number, opcode):
        super().__init__(line_number, f"unknown instruction {opcode}")
        self.opcode = opcode


class PushUsageError(_LineError):
    """``push`` was given no argument or one that is not an integer."""

    def __init__(self, line_number):
        super().__init__(line_number, "usage: push integer")


class EmptyStackError(_LineError):
    """An instruction needing one element ran on an empty stack."""

    _DETAILS = {"pop": "can't pop an empty stack"}

    def __init__(self, line_number, opcode):
        detail = self._DETAILS.get(opcode, f"can't {opcode}, stack empty")
        super().__init__(line_number, detail)
        self.opcode = opcode


class StackTooShortError(_LineError):
    """An instruction needing two elements ran on a shorter stack."""

    def __init__(self, line_number, opcode):
        super().__init__(line_number, f"can't {opcode}, stack too short")
        self.opcode = opcode


class DivisionByZeroError(_LineError):
    """``div`` or ``mod`` was asked to divide by zero."""

    def __init__(self, line_number):
        super().__init__(line_number, "division by zero")


class ValueOutOfRangeError(_LineError):
    """``pchar`` found a value outside printable ASCII."""

    def __init__(self, line_number):
        super().__init__(line_number, "can't pchar, value out of range")