"""Beta-reduction strategies sharing one step/evaluate driver."""

from .call_by_value import CallByValue
from .full import Full
from .lazy import Lazy
from .normal import Normal
from .registry import STRATEGIES, strategy_by_name
from .strategy import Context, Path, Strategy, contract

__all__ = [
    "CallByValue",
    "Context",
    "Full",
    "Lazy",
    "Normal",
    "Path",
    "STRATEGIES",
    "Strategy",
    "contract",
    "strategy_by_name",
]
