"""Shared small-step driver for beta-reduction strategies.

A strategy is a pure policy, ``locate``, that points at the redex it wants
contracted next. Everything else (contracting it, rebuilding the spine above
it, iterating to a fixed point) lives here and is written once.

A path is a tuple of field names (``"func"``, ``"arg"`` or ``"body"``) leading
from the root of a term to the redex.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import ClassVar, TypeAlias

from ..ast import App, Lam, Term
from ..errors import StepLimitExceeded
from ..subst import Shadowing, subst

logger = logging.getLogger(__name__)

Path: TypeAlias = tuple[str, ...]

# Reversed path built by consing edges onto a parent trail while searching.
Trail: TypeAlias = "tuple[str, Trail] | None"


class Context:
    """Per-evaluation state passed to ``step``.

    None of the built-in strategies need any; it exists so a stateful strategy
    (one that counts steps, say) can keep its state out of the strategy object.
    """


def contract(redex: Term, shadowing: Shadowing = Shadowing.STOP) -> Term:
    """Beta-contract ``(λx.M) N`` to ``M[x := N]``."""

    match redex:
        case App(Lam(name, body), arg):
            return subst(body, name, arg, shadowing)

    raise TypeError(f"Not a redex: {redex!r}")


def unwind(trail: Trail) -> Path:
    """Turn a search trail back into a root-first path."""

    edges: list[str] = []
    while trail is not None:
        edge, trail = trail
        edges.append(edge)
    return tuple(reversed(edges))


def subterm(term: Term, path: Path) -> Term:
    """Return the subterm of ``term`` found by following ``path``."""

    for edge in path:
        term = getattr(term, edge)
    return term


def replace_at(term: Term, path: Path, new: Term) -> Term:
    """Return ``term`` with the subterm at ``path`` swapped for ``new``."""

    spine: list[tuple[Term, str]] = []
    for edge in path:
        spine.append((term, edge))
        term = getattr(term, edge)
    for parent, edge in reversed(spine):
        # noinspection PyArgumentList
        new = replace(parent, **{edge: new})
    return new


@dataclass(frozen=True)
class Strategy(ABC):
    """A redex-selection policy plus the generic step/evaluate loop."""

    shadowing: Shadowing = Shadowing.STOP

    name: ClassVar[str]

    @abstractmethod
    def locate(self, term: Term) -> Path | None:
        """Return the path to the next redex, or ``None`` in normal form."""

    def step(self, term: Term, ctx: Context | None = None) -> Term | None:
        """Perform one reduction step, or return ``None`` if there is no redex."""

        path = self.locate(term)
        if path is None:
            return None
        redex = subterm(term, path)
        logger.debug("%s: contracting %s at %s", self.name, redex, path or "root")
        return replace_at(term, path, contract(redex, self.shadowing))

    def trace(self, term: Term, ctx: Context | None = None) -> Iterator[Term]:
        """Yield ``term`` and then every term it steps to.

        The iterator is lazy and ends once normal form is reached, so it never
        ends for terms without one. Bound it with ``itertools.islice``.
        """

        current: Term | None = term
        while current is not None:
            yield current
            current = self.step(current, ctx)

    def evaluate(self, term: Term, ctx: Context | None = None) -> Term:
        """Step ``term`` until no redex is left.

        Does not return for terms that have no normal form under this strategy.
        """

        steps = 0
        while (reduced := self.step(term, ctx)) is not None:
            term = reduced
            steps += 1
        logger.debug("%s: normal form after %d steps", self.name, steps)
        return term

    def evaluate_bounded(
        self, term: Term, max_steps: int, ctx: Context | None = None
    ) -> Term:
        """Like ``evaluate`` but give up after ``max_steps`` steps.

        Raises:
            StepLimitExceeded: no normal form was reached within the budget.
        """

        if max_steps < 0:
            raise ValueError("max_steps must be non-negative")
        for steps in range(max_steps + 1):
            reduced = self.step(term, ctx)
            if reduced is None:
                logger.debug("%s: normal form after %d steps", self.name, steps)
                return term
            if steps == max_steps:
                break
            term = reduced
        logger.warning("%s: step budget of %d exhausted", self.name, max_steps)
        raise StepLimitExceeded(self.name, max_steps, term)


__all__ = [
    "Path",
    "Trail",
    "Context",
    "Strategy",
    "contract",
    "unwind",
    "subterm",
    "replace_at",
]
