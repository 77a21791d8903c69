"""Error types raised at the boundaries of the reduction core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .ast import Term


class LambdaCalcError(Exception):
    """Base class for every error raised by ``lambdacalc``."""


@dataclass
class UnboundVariableError(LambdaCalcError):
    """An identifier has no entry in the naming context used for de Bruijn indices."""

    name: str
    context: Sequence[str]

    def __str__(self) -> str:
        return f"Unbound variable {self.name!r} in naming context {list(self.context)!r}"


@dataclass
class StepLimitExceeded(LambdaCalcError):
    """A bounded evaluation used up its step budget before reaching normal form."""

    strategy: str
    max_steps: int
    term: Term

    def __str__(self) -> str:
        return (
            f"{self.strategy} evaluation did not reach normal form "
            f"within {self.max_steps} steps:\n"
            f"  last term = {self.term}"
        )


@dataclass
class UnknownStrategyError(LambdaCalcError, KeyError):
    """No reduction strategy is registered under the requested name."""

    name: str
    known: Sequence[str] = ()

    def __str__(self) -> str:
        return f"Unknown strategy {self.name!r}; expected one of {sorted(self.known)!r}"


__all__ = [
    "LambdaCalcError",
    "UnboundVariableError",
    "StepLimitExceeded",
    "UnknownStrategyError",
]
