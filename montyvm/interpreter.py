"""Reading Monty bytecode files and executing them line by line."""

import re
import sys

from montyvm.errors import FileOpenError, MontyError, UnknownInstructionError
from montyvm.stack import MontyStack, parse_push_argument

_SEPARATORS = re.compile(r"[ \t\n]+")
_USAGE = "USAGE: monty file"


class _EmptyFileError(MontyError):
    """The bytecode file holds nothing at all; reported without a message."""

    def __init__(self, path):
        super().__init__("")
        self.path = path


_HANDLERS = {
    "push": lambda stack, arg, n: stack.push(parse_push_argument(arg, n)),
    "pall": lambda stack, arg, n: stack.pall(),
    "pint": lambda stack, arg, n: stack.pint(n),
    "pop": lambda stack, arg, n: stack.pop(n),
    "swap": lambda stack, arg, n: stack.swap(n),
    "add": lambda stack, arg, n: stack.add(n),
    "nop": lambda stack, arg, n: stack.nop(),
    "sub": lambda stack, arg, n: stack.sub(n),
    "div": lambda stack, arg, n: stack.div(n),
    "mul": lambda stack, arg, n: stack.mul(n),
    "mod": lambda stack, arg, n: stack.mod(n),
    "pchar": lambda stack, arg, n: stack.pchar(n),
    "pstr": lambda stack, arg, n: stack.pstr(),
    "rotl": lambda stack, arg, n: stack.rotl(),
    "rotr": lambda stack, arg, n: stack.rotr(),
    "stack": lambda stack, arg, n: stack.set_stack_mode(),
    "queue": lambda stack, arg, n: stack.set_queue_mode(),
}


def is_comment(line):
    """Return True if the first character other than a space is ``#``."""
    for char in line:
        if char != " ":
            return char == "#"
    return False


class Interpreter:
    """Executes Monty instructions against one stack, writing output to ``out``."""

    def __init__(self, out=None):
        self.out = sys.stdout if out is None else out
        self.stack = MontyStack()

    def _emit(self, text):
        self.out.write(text)
        flush = getattr(self.out, "flush", None)
        if flush is not None:
            flush()

    def execute_line(self, line, line_number):
        """Execute one line of bytecode; comments and blank lines do nothing."""
        if is_comment(line):
            return
        tokens = [token for token in _SEPARATORS.split(line) if token]
        if not tokens:
            return
        opcode = tokens[0]
        argument = tokens[1] if len(tokens) > 1 else None
        handler = _HANDLERS.get(opcode)
        if handler is None:
            raise UnknownInstructionError(line_number, opcode)
        output = handler(self.stack, argument, line_number)
        if output is not None:
            self._emit(output)

    def run(self, lines):
        """Execute lines in order, numbering them from 1."""
        for line_number, line in enumerate(lines, start=1):
            self.execute_line(line, line_number)


def _read_lines(path):
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            content = handle.read()
    except OSError as err:
        raise FileOpenError(path) from err
    if not content:
        raise _EmptyFileError(path)
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def run_file(path, out=None):
    """Run the bytecode file at ``path``; return the interpreter that ran it."""
    lines = _read_lines(path)
    interpreter = Interpreter(out)
    interpreter.run(lines)
    return interpreter


def main(argv=None):
    """Command entry point: ``monty file``. Returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write(f"{_USAGE}\n")
        return 1
    try:
        run_file(args[0], sys.stdout)
    except MontyError as err:
        sys.stdout.flush()
        if str(err):
            sys.stderr.write(f"{err}\n")
        return 1
    return 0