"""Lazy (call-by-name) reduction.

Walks down the function side of the outermost application until it exposes an
abstraction, then contracts with the argument unevaluated. Arguments may be
duplicated by substitution and are never reduced on their own.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ast import App, Lam, Term
from .strategy import Path, Strategy


def locate_lazy(term: Term) -> Path | None:
    depth = 0
    while True:
        match term:
            case App(Lam(), _):
                return ("func",) * depth
            case App(f, _):
                depth += 1
                term = f
            case _:
                return None


@dataclass(frozen=True)
class Lazy(Strategy):
    name = "lazy"

    def locate(self, term: Term) -> Path | None:
        return locate_lazy(term)


__all__ = ["Lazy", "locate_lazy"]
