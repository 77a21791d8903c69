"""Full beta reduction.

Any redex in the tree may be picked. This policy searches depth-first and
left-biased, so the innermost, leftmost redex is contracted before the
application that contains it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ast import App, Lam, Term
from .strategy import Path, Strategy, Trail, unwind


def locate_full(term: Term) -> Path | None:
    # Post-order: an application is only a candidate once both sides are done.
    stack: list[tuple[Term, Trail, bool]] = [(term, None, False)]
    while stack:
        t, trail, children_done = stack.pop()
        match t:
            case Lam(_, body):
                stack.append((body, ("body", trail), False))
            case App(f, _) if children_done:
                if isinstance(f, Lam):
                    return unwind(trail)
            case App(f, a):
                stack.append((t, trail, True))
                stack.append((a, ("arg", trail), False))
                stack.append((f, ("func", trail), False))
    return None


@dataclass(frozen=True)
class Full(Strategy):
    name = "full"

    def locate(self, term: Term) -> Path | None:
        return locate_full(term)


__all__ = ["Full", "locate_full"]
