# montyvm

An interpreter for Monty bytecode files. Monty is a small language that works on a single stack of integers. The stack can also be switched to work as a queue.

## Installation

```
pip install .
```

## Running a program

```
monty program.m
```

The command takes exactly one argument: the path of the bytecode file. It runs the file one line at a time. An instruction is an opcode, optionally followed by an argument, separated by spaces, tabs or newlines. Extra tokens after the argument are ignored. Blank lines are skipped, and so is any line whose first character other than a space is `#`.

Example `program.m`:

```
# build a stack and print it
push 1
push 2
push 3
pall
add
pint
```

Output:

```
3
2
1
5
```

## Opcodes

| Opcode   | Effect |
|----------|--------|
| `push n` | Push the integer `n` onto the top. In queue mode it is added at the bottom instead. `n` is an optional `-` followed by decimal digits. |
| `pall`   | Print every value, starting from the top, one per line. |
| `pint`   | Print the top value. |
| `pop`    | Remove the top value. |
| `swap`   | Swap the top two values. |
| `add`    | Replace the top two values with their sum. |
| `sub`    | Replace the top two values with the second minus the top. |
| `mul`    | Replace the top two values with their product. |
| `div`    | Replace the top two values with the second divided by the top, truncated toward zero. |
| `mod`    | Replace the top two values with the remainder of the second divided by the top; the remainder has the sign of the second value. |
| `pchar`  | Print the top value as an ASCII character (32 to 126). |
| `pstr`   | Print values from the top as characters, stopping at the first value outside 32 to 126 or at the bottom of the stack, then a newline. |
| `rotl`   | Move the top value to the bottom. |
| `rotr`   | Move the bottom value to the top. |
| `stack`  | Switch to stack (LIFO) mode. This is the default. |
| `queue`  | Switch to queue (FIFO) mode. |
| `nop`    | Do nothing. |

Values are signed 32-bit integers; results that overflow wrap around.

## Errors

On an error the command writes a message to standard error and exits with status 1. Output produced before the error is kept. Messages:

- `L<n>: unknown instruction <opcode>`
- `L<n>: usage: push integer`
- `L<n>: can't pint, stack empty`
- `L<n>: can't pop an empty stack`
- `L<n>: can't pchar, stack empty`
- `L<n>: can't <opcode>, stack too short` (for `swap`, `add`, `sub`, `mul`, `div`, `mod`)
- `L<n>: division by zero`
- `L<n>: can't pchar, value out of range`
- `Error: Can't open file <file>`

With the wrong number of arguments it prints `USAGE: monty file`. An empty file makes it exit with status 1 and no message.

## Using it from Python

```python
import io
from montyvm.interpreter import Interpreter, run_file
from montyvm.errors import MontyError

out = io.StringIO()
interp = Interpreter(out)
interp.run(["push 72\n", "push 105\n", "pstr\n"])
print(out.getvalue())  # "iH\n"

try:
    run_file("program.m", out)
except MontyError as exc:
    print(exc)
```

- `montyvm.interpreter.Interpreter(out=None)` runs instructions against its own `MontyStack` (its `stack` attribute) and writes output to `out`, which defaults to standard output. `execute_line(line, line_number)` runs one line; `run(lines)` runs lines numbered from 1.
- `montyvm.interpreter.run_file(path, out=None)` runs a file and returns the interpreter that ran it.
- `montyvm.interpreter.is_comment(line)` tells whether a line is a comment.
- `montyvm.interpreter.main(argv=None)` is the command; it returns the exit status.
- `montyvm.stack.MontyStack` gives direct access to the operations. Its printing methods (`pall`, `pint`, `pchar`, `pstr`) return their text instead of writing it. It supports `len()` and iteration from top to bottom, and its `mode` attribute is a `montyvm.stack.Mode` (`STACK` or `QUEUE`).
- `montyvm.stack.parse_push_argument(text, line_number)` checks and converts the argument of `push`.
- Every error is a subclass of `montyvm.errors.MontyError`, whose `str()` is the message shown above. Line errors carry `line_number`; `FileOpenError` carries `filename`.

## Running the tests

```
pip install .[test]
pytest
```