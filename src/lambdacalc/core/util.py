from __future__ import annotations

from lambdacalc.core.ast import App, Lam, Term, Var


def apply_term(term: Term, *args: Term | str) -> Term:
    """Apply ``args`` to ``term`` left-associatively.

    Strings are taken as variable names, which keeps test fixtures and
    hand-built terms short.

    Args:
        term: Function being applied.
        *args: Arguments to apply, ordered left-to-right.

    Returns:
        The left-associated application ``(((term arg0) arg1) ...)``.
    """
    result: Term = term
    for arg in args:
        result = App(result, as_term(arg))
    return result


def lams(*names: str, body: Term | str) -> Term:
    """Build a right-nested abstraction chain ``λn0.λn1. ... body``.

    The first name binds outermost.
    """
    result = as_term(body)
    for name in reversed(names):
        result = Lam(name, result)
    return result


def decompose_app(term: Term) -> tuple[Term, tuple[Term, ...]]:
    """Split ``f a0 a1 ...`` into its head ``f`` and arguments ``(a0, a1, ...)``."""
    args: list[Term] = []
    head = term
    while isinstance(head, App):
        args.append(head.arg)
        head = head.func
    return head, tuple(reversed(args))


def as_term(value: Term | str) -> Term:
    if isinstance(value, str):
        return Var(value)
    return value


__all__ = ["apply_term", "lams", "decompose_app", "as_term"]
