"""Nameless (de Bruijn index) encoding of lambda-calculus terms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .ast import App, Lam, Term, Var
from .errors import UnboundVariableError
from .vars import free_vars


@dataclass(frozen=True)
class DBTerm:
    """Base class for nameless terms."""


@dataclass(frozen=True)
class DBVar(DBTerm):
    """De Bruijn variable pointing to the binder at ``index``.

    Args:
        index: Zero-based index counting binders outward from the use site.
            ``0`` refers to the innermost binder, ``1`` to the next, etc.
            Free variables get indices past every enclosing binder.
    """

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("De Bruijn indices must be non-negative")


@dataclass(frozen=True)
class DBLam(DBTerm):
    """Abstraction whose bound variable is ``DBVar(0)`` in ``body``."""

    body: DBTerm


@dataclass(frozen=True)
class DBApp(DBTerm):
    """Function application."""

    func: DBTerm
    arg: DBTerm


def to_debruijn(term: Term, context: Sequence[str] | None = None) -> DBTerm:
    """Convert a named ``term`` into its de Bruijn form.

    Args:
        term: Named term to convert.
        context: Naming context for the free variables of ``term``, outermost
            first. When omitted it is seeded with the free variables of
            ``term`` in sorted order.

    Raises:
        UnboundVariableError: ``term`` uses a free variable missing from
            ``context``.
    """

    names = list(sorted(free_vars(term)) if context is None else context)

    def convert(t: Term) -> DBTerm:
        match t:
            case Var(name):
                for depth, bound in enumerate(reversed(names)):
                    if bound == name:
                        return DBVar(depth)
                raise UnboundVariableError(name, tuple(names))
            case Lam(name, body):
                names.append(name)
                try:
                    return DBLam(convert(body))
                finally:
                    names.pop()
            case App(f, a):
                return DBApp(convert(f), convert(a))

        raise TypeError(f"Unexpected term in to_debruijn: {t!r}")

    return convert(term)


__all__ = ["DBTerm", "DBVar", "DBLam", "DBApp", "to_debruijn"]
