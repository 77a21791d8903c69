"""Pretty-printing utilities for lambda-calculus terms."""

from __future__ import annotations

from .ast import App, Lam, Term, Var

ATOM_PREC = 2
APP_PREC = 1
LAM_PREC = 0


def _maybe_paren(
    text: str, child_prec: int, parent_prec: int, *, allow_equal: bool
) -> str:
    if child_prec < parent_prec or (child_prec == parent_prec and not allow_equal):
        return f"({text})"
    return text


def pretty(term: Term) -> str:
    """Return a human-friendly string for ``term``.

    Abstraction bodies extend as far right as possible and application
    associates to the left, so ``λx.x y`` is ``Lam("x", App(x, y))``.
    """

    # Each entry is a term plus whether its children are already rendered.
    done: list[tuple[str, int]] = []
    work: list[tuple[Term, bool]] = [(term, False)]
    while work:
        t, children_done = work.pop()
        match t:
            case Var(name):
                done.append((name, ATOM_PREC))

            case App() if children_done:
                arg_text, arg_prec = done.pop()
                func_text, func_prec = done.pop()
                func_disp = _maybe_paren(
                    func_text, func_prec, APP_PREC, allow_equal=True
                )
                arg_disp = _maybe_paren(arg_text, arg_prec, APP_PREC, allow_equal=False)
                done.append((f"{func_disp} {arg_disp}", APP_PREC))

            case App(f, a):
                work.append((t, True))
                work.append((a, False))
                work.append((f, False))

            case Lam(name, _) if children_done:
                body_text, _ = done.pop()
                done.append((f"λ{name}.{body_text}", LAM_PREC))

            case Lam(_, body):
                work.append((t, True))
                work.append((body, False))

            case _:
                raise TypeError(f"Cannot pretty-print unknown term: {t!r}")

    return done.pop()[0]


__all__ = ["pretty"]
