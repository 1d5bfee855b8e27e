"""Built-in evaluators: callables mapping a committed line to response text."""

from __future__ import annotations

import contextlib
import io
from typing import Any, Callable

Evaluator = Callable[[str], str]


def echo(line: str) -> str:
    return line


class PythonEvaluator:
    """Run each line as Python, keeping one namespace for the whole session.

    Expressions answer with their repr (and are bound to ``_``); statements
    answer with whatever they printed. Errors raised by the evaluated code
    become the response text instead of escaping into the console.
    """

    def __init__(self, namespace: dict[str, Any] | None = None):
        self.namespace = namespace if namespace is not None else {"__name__": "__console__"}

    def __call__(self, line: str) -> str:
        source = line.strip()
        if not source:
            return ""
        out = io.StringIO()
        try:
            with contextlib.redirect_stdout(out):
                try:
                    code = compile(source, "<console>", "eval")
                except SyntaxError:
                    exec(compile(source, "<console>", "exec"), self.namespace)
                    return out.getvalue().rstrip("\n")
                value = eval(code, self.namespace)
        except Exception as e:
            return f"{type(e).__name__}: {e}"
        printed = out.getvalue().rstrip("\n")
        if value is None:
            return printed
        self.namespace["_"] = value
        return f"{printed}\n{value!r}" if printed else repr(value)


EVALUATORS: dict[str, Callable[[], Evaluator]] = {
    "echo": lambda: echo,
    "python": PythonEvaluator,
}


def get_evaluator(name: str) -> Evaluator:
    """Build a fresh evaluator by name."""
    factory = EVALUATORS.get(name)
    if factory is None:
        valid = ", ".join(sorted(EVALUATORS))
        raise ValueError(f"Unknown evaluator '{name}'. Valid: {valid}")
    return factory()
