"""Interpreter for Monty bytecode files: errors, the stack and the interpreter."""

__version__ = "0.1.0"
__all__ = ["errors", "stack", "interpreter"]