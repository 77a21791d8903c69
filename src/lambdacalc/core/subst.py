"""Capture-avoiding substitution and alpha-renaming for named terms."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .ast import App, Lam, Term, Var
from .vars import all_names, free_vars

logger = logging.getLogger(__name__)

PRIME = "'"


class Shadowing(Enum):
    """What ``subst`` does at an abstraction that rebinds the substituted name.

    ``RENAME`` alpha-renames the binder and keeps substituting into the renamed
    body. Since every occurrence of the name in the body belonged to the
    binder, nothing is replaced, but the binder comes out primed.

    ``STOP`` is the textbook rule: the abstraction shadows the name, so it is
    returned unchanged.
    """

    RENAME = "rename"
    STOP = "stop"


def _mint(base: str, count: int, avoid: frozenset[str]) -> tuple[str, int]:
    """Return the next primed variant of ``base`` not in ``avoid``, and its count."""

    count += 1
    candidate = base + PRIME * count
    while candidate in avoid:
        count += 1
        candidate = base + PRIME * count
    return candidate, count


@dataclass(frozen=True)
class _Rebuild:
    """Work-stack marker: reassemble ``node`` from the results of its children.

    ``node`` is a template whose children are the originals. Children that come
    back unchanged (by identity) keep the template as-is.
    """

    node: Lam | App

    def __call__(self, results: list[Term]) -> Term:
        match self.node:
            case Lam(n, body):
                body1 = results.pop()
                return self.node if body1 is body else Lam(n, body1)
            case App(f, a):
                a1 = results.pop()
                f1 = results.pop()
                if f1 is f and a1 is a:
                    return self.node
                return App(f1, a1)

        raise TypeError(f"Cannot rebuild: {self.node!r}")


def rewrite(
    term: Term, name: str, current: str, count: int, avoid: frozenset[str]
) -> tuple[Term, int]:
    """Rewrite occurrences of ``name`` in ``term`` to ``current``.

    Nested binders that reuse ``name`` are given a fresh primed name of their
    own and their bodies are rewritten to it. The prime count is threaded
    through the return value so sibling rebinders never share a name.

    Args:
        term: Term to rewrite, usually the body of the binder being renamed.
        name: Identifier being retired.
        current: Name that free occurrences of ``name`` should become.
        count: Highest prime count minted so far.
        avoid: Names a freshly minted binder may not take.

    Returns:
        The rewritten term and the updated prime count.
    """

    results: list[Term] = []
    work: list[tuple[Term, str] | _Rebuild] = [(term, current)]
    while work:
        item = work.pop()
        if isinstance(item, _Rebuild):
            results.append(item(results))
            continue
        t, cur = item
        match t:
            case Var(n):
                results.append(Var(cur) if n == name else t)
            case Lam(n, body):
                if n == name:
                    # Minted before the body is visited, so counts grow left to right.
                    fresh, count = _mint(name, count, avoid)
                    work.append(_Rebuild(Lam(fresh, body)))
                    work.append((body, fresh))
                else:
                    work.append(_Rebuild(t))
                    work.append((body, cur))
            case App(f, a):
                work.append(_Rebuild(t))
                work.append((a, cur))
                work.append((f, cur))
            case _:
                raise TypeError(f"Unexpected term in rewrite: {t!r}")
    return results.pop(), count


def rename(lam: Lam, avoid: frozenset[str] = frozenset()) -> Lam:
    """Alpha-convert ``lam`` so its binder gets a fresh primed name.

    The new name avoids every identifier in the body and anything in
    ``avoid``. Freshness is only guaranteed against those names.
    """

    avoid = avoid | all_names(lam.body) | {lam.name}
    fresh, count = _mint(lam.name, 0, avoid)
    body, _ = rewrite(lam.body, lam.name, fresh, count, avoid)
    logger.debug("renamed binder %s to %s", lam.name, fresh)
    return Lam(fresh, body)


def subst(
    term: Term,
    x: str,
    replacement: Term,
    shadowing: Shadowing = Shadowing.STOP,
) -> Term:
    """Substitute ``replacement`` for the free occurrences of ``x`` in ``term``.

    Binders that would capture a free variable of ``replacement`` are renamed
    first. Unchanged subterms are returned as-is, so the result shares
    structure with ``term``.
    """

    fv = free_vars(replacement)
    return _subst(term, x, replacement, fv, shadowing)


def _subst(
    term: Term,
    x: str,
    replacement: Term,
    fv: frozenset[str],
    shadowing: Shadowing,
) -> Term:
    results: list[Term] = []
    work: list[Term | _Rebuild] = [term]
    while work:
        item = work.pop()
        match item:
            case _Rebuild():
                results.append(item(results))
            case Var(n):
                results.append(replacement if n == x else item)
            case Lam(n, body):
                if n == x and shadowing is Shadowing.STOP:
                    results.append(item)
                    continue
                lam = rename(item, fv | {x}) if n == x or n in fv else item
                work.append(_Rebuild(lam))
                work.append(lam.body)
            case App(f, a):
                work.append(_Rebuild(item))
                work.append(a)
                work.append(f)
            case _:
                raise TypeError(f"Unexpected term in subst: {item!r}")
    return results.pop()


__all__ = ["PRIME", "Shadowing", "rewrite", "rename", "subst"]
