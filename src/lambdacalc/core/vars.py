"""Queries about the identifiers occurring in a term."""

from __future__ import annotations

from .ast import App, Lam, Term, Var


def free_vars(term: Term) -> frozenset[str]:
    """Return the identifiers used in ``term`` but not bound by an enclosing ``Lam``.

    Walks the term with an explicit stack so deeply nested terms do not run into
    the interpreter's recursion limit.
    """

    found: set[str] = set()
    stack: list[tuple[Term, frozenset[str]]] = [(term, frozenset())]
    while stack:
        t, bound = stack.pop()
        match t:
            case Var(name):
                if name not in bound:
                    found.add(name)
            case Lam(name, body):
                stack.append((body, bound | {name}))
            case App(f, a):
                stack.append((a, bound))
                stack.append((f, bound))
            case _:
                raise TypeError(f"Unexpected term in free_vars: {t!r}")
    return frozenset(found)


def all_names(term: Term) -> frozenset[str]:
    """Return every identifier in ``term``: free, bound, and binder names alike."""

    found: set[str] = set()
    stack: list[Term] = [term]
    while stack:
        t = stack.pop()
        match t:
            case Var(name):
                found.add(name)
            case Lam(name, body):
                found.add(name)
                stack.append(body)
            case App(f, a):
                stack.append(a)
                stack.append(f)
            case _:
                raise TypeError(f"Unexpected term in all_names: {t!r}")
    return frozenset(found)


__all__ = ["free_vars", "all_names"]
