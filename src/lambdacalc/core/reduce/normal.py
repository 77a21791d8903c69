"""Normal-order reduction: leftmost, outermost redex first, including under binders."""

from __future__ import annotations

from dataclasses import dataclass

from ..ast import App, Lam, Term
from .strategy import Path, Strategy, Trail, unwind


def locate_normal(term: Term) -> Path | None:
    # Pre-order, left first: the first redex met is the leftmost, outermost one.
    stack: list[tuple[Term, Trail]] = [(term, None)]
    while stack:
        t, trail = stack.pop()
        match t:
            case Lam(_, body):
                stack.append((body, ("body", trail)))
            case App(Lam(), _):
                return unwind(trail)
            case App(f, a):
                stack.append((a, ("arg", trail)))
                stack.append((f, ("func", trail)))
    return None


@dataclass(frozen=True)
class Normal(Strategy):
    name = "normal"

    def locate(self, term: Term) -> Path | None:
        return locate_normal(term)


__all__ = ["Normal", "locate_normal"]
