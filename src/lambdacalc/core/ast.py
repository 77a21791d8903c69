"""Abstract syntax tree nodes for the untyped lambda calculus."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """Base class for all lambda-calculus terms.

    Terms are immutable value trees. Equality is structural on identifier
    names, so ``Lam("x", Var("x")) != Lam("y", Var("y"))`` even though the two
    are alpha-equivalent.
    """

    @property
    def is_value(self) -> bool:
        """Whether the term is a value (an abstraction) in the pure calculus."""
        return False

    @property
    def is_redex(self) -> bool:
        """Whether the term itself is a beta-redex ``(λx.M) N``."""
        return False

    def has_head_redex(self) -> bool:
        """Whether a redex is reachable through applications only.

        Both sides of every application are searched but abstraction bodies
        never are.
        """
        return False

    def __str__(self) -> str:
        # Deferred import avoids cycles when pretty-printing dataclass reprs.
        from lambdacalc.core.pretty import pretty

        return pretty(self)


@dataclass(frozen=True)
class Var(Term):
    """A reference to a binder, or a free name."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Variable names must be non-empty")


@dataclass(frozen=True)
class Lam(Term):
    """Abstraction ``λname.body`` introducing exactly one binder."""

    name: str
    body: Term

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Binder names must be non-empty")

    @property
    def is_value(self) -> bool:
        return True


@dataclass(frozen=True)
class App(Term):
    """Function application."""

    func: Term
    arg: Term

    @property
    def is_redex(self) -> bool:
        return isinstance(self.func, Lam)

    def has_head_redex(self) -> bool:
        pending: list[Term] = [self]
        while pending:
            t = pending.pop()
            if isinstance(t, App):
                if t.is_redex:
                    return True
                pending.append(t.arg)
                pending.append(t.func)
        return False


__all__ = ["Term", "Var", "Lam", "App"]
