"""Call-by-value reduction.

Only the outermost application is ever contracted, and only once its argument
has been reduced to a value (an abstraction). Abstraction bodies are left alone.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ast import App, Lam, Term
from .strategy import Path, Strategy


def locate_call_by_value(term: Term) -> Path | None:
    path: list[str] = []
    while True:
        match term:
            case App(Lam(), arg) if arg.is_value:
                return tuple(path)
            case App(f, a) if f.is_value:
                path.append("arg")
                term = a
            case App(f, _):
                path.append("func")
                term = f
            case _:
                return None


@dataclass(frozen=True)
class CallByValue(Strategy):
    name = "call-by-value"

    def locate(self, term: Term) -> Path | None:
        return locate_call_by_value(term)


__all__ = ["CallByValue", "locate_call_by_value"]
