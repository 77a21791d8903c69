import pytest

from lambdacalc.core.ast import App, Lam, Term, Var
from lambdacalc.core.subst import Shadowing, rename, rewrite, subst
from lambdacalc.core.util import apply_term, lams
from lambdacalc.core.vars import free_vars


# ------------- Variables and applications -------------


def test_variable_with_same_name() -> None:
    assert subst(Var("x"), "x", Var("y")) == Var("y")


def test_variable_with_different_name() -> None:
    assert subst(Var("x"), "y", Var("z")) == Var("x")


def test_application_with_overlapping_name() -> None:
    assert subst(App(Var("x"), Var("y")), "y", Var("z")) == App(Var("x"), Var("z"))


def test_application_with_no_matching_name() -> None:
    term = App(Var("x"), Var("y"))
    assert subst(term, "a", Var("z")) == term


def test_unchanged_subterms_are_shared() -> None:
    term = App(Var("a"), Lam("b", Var("b")))
    assert subst(term, "x", Var("y")) is term


# ------------- Abstractions -------------


def test_abstraction_with_bound_name_different() -> None:
    term = Lam("x", App(Var("x"), Var("y")))
    assert subst(term, "y", Var("z")) == Lam("x", App(Var("x"), Var("z")))


def test_abstraction_renames_binder_captured_by_replacement() -> None:
    assert subst(Lam("y", Var("x")), "x", Var("y")) == Lam("y'", Var("y"))


def test_abstraction_renames_binder_and_its_uses() -> None:
    term = Lam("y", App(Var("x"), Var("y")))
    assert subst(term, "x", Var("y")) == Lam("y'", App(Var("y"), Var("y'")))


def test_renamed_binder_skips_names_already_in_body() -> None:
    term = Lam("y", App(Var("x"), Var("y'")))
    assert subst(term, "x", Var("y")) == Lam("y''", App(Var("y"), Var("y'")))


def test_shadowing_binder_stops_substitution_by_default() -> None:
    term = Lam("x", App(Var("x"), Var("y")))
    assert subst(term, "x", Var("y")) is term


def test_shadowing_binder_is_renamed_when_requested() -> None:
    term = Lam("x", App(Var("x"), Var("y")))
    result = subst(term, "x", Var("y"), Shadowing.RENAME)
    assert result == Lam("x'", App(Var("x'"), Var("y")))


def test_substitution_continues_past_rename() -> None:
    term = Lam("x", App(Var("x"), Var("y")))
    replacement = Lam("y", App(Var("x"), Var("y")))
    assert subst(term, "y", replacement) == Lam(
        "x'", App(Var("x'"), Lam("y", App(Var("x"), Var("y"))))
    )


@pytest.mark.parametrize(
    ("lam", "x", "replacement"),
    [
        (Lam("y", App(Var("x"), Var("y"))), "x", Var("y")),
        (lams("y", "z", body=apply_term(Var("x"), "y", "z")), "x", App(Var("y"), Var("z"))),
        (Lam("y", App(Var("x"), Var("y'"))), "x", Var("y")),
        (Lam("y", App(Var("x"), Lam("x", Var("x")))), "x", Lam("q", Var("y"))),
    ],
)
def test_capture_avoidance_preserves_free_variables(
    lam: Term, x: str, replacement: Term
) -> None:
    assert x in free_vars(lam)
    result = subst(lam, x, replacement)
    assert free_vars(result) == (free_vars(lam) - {x}) | free_vars(replacement)


def test_subst_rejects_non_terms() -> None:
    with pytest.raises(TypeError):
        subst("x", "x", Var("y"))  # type: ignore[arg-type]


# ------------- Renaming -------------


def test_rename_simple_abstraction() -> None:
    term = Lam("x", App(Var("x"), Var("y")))
    assert rename(term) == Lam("x'", App(Var("x'"), Var("y")))


def test_rename_leaves_other_names_alone() -> None:
    term = Lam("x", Lam("y", App(Var("x"), Var("y"))))
    assert rename(term) == Lam("x'", Lam("y", App(Var("x'"), Var("y"))))


def test_rename_nested_abstraction_with_same_bound_name() -> None:
    term = Lam(
        "x",
        apply_term(Var("x"), Lam("y", Var("y")), Lam("x", Var("x"))),
    )
    assert rename(term) == Lam(
        "x'",
        apply_term(Var("x'"), Lam("y", Var("y")), Lam("x''", Var("x''"))),
    )


def test_rename_restores_outer_name_after_nested_binder() -> None:
    term = Lam("x", App(Lam("x", Var("x")), Var("x")))
    assert rename(term) == Lam("x'", App(Lam("x''", Var("x''")), Var("x'")))


def test_rename_gives_sibling_rebinders_distinct_names() -> None:
    term = Lam("x", App(Lam("x", Var("x")), Lam("x", Var("x"))))
    assert rename(term) == Lam(
        "x'", App(Lam("x''", Var("x''")), Lam("x'''", Var("x'''")))
    )


def test_rename_avoids_requested_names() -> None:
    assert rename(Lam("x", Var("x")), frozenset({"x'"})) == Lam("x''", Var("x''"))


def test_rewrite_threads_prime_count() -> None:
    term = App(Lam("x", Var("x")), Lam("x", Var("x")))
    rewritten, count = rewrite(term, "x", "x'", 1, frozenset())
    assert count == 3
    assert rewritten == App(Lam("x''", Var("x''")), Lam("x'''", Var("x'''")))


def test_rewrite_without_occurrences_keeps_term_and_count() -> None:
    term = App(Var("a"), Lam("b", Var("b")))
    rewritten, count = rewrite(term, "x", "x'", 1, frozenset())
    assert rewritten is term
    assert count == 1


# ------------- Deep terms -------------


def test_subst_handles_very_deep_terms() -> None:
    term = Var("x")
    for _ in range(5_000):
        term = Lam("w", App(term, Var("x")))
    result = subst(Lam("y", term), "x", Var("y"))
    assert isinstance(result, Lam)
    assert result.name == "y'"
    assert free_vars(result) == {"y"}


def test_rewrite_handles_very_deep_rebinders() -> None:
    term = Var("x")
    for _ in range(3_000):
        term = Lam("x", term)
    rewritten, count = rewrite(term, "x", "x'", 1, frozenset())
    assert count == 3_001
    for _ in range(3_000):
        rewritten = rewritten.body
    assert rewritten == Var("x" + "'" * 3_001)
