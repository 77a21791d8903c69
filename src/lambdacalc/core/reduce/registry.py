"""Lookup of reduction strategies by name."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from ..errors import UnknownStrategyError
from .call_by_value import CallByValue
from .full import Full
from .lazy import Lazy
from .normal import Normal
from .strategy import Strategy

STRATEGIES: MappingProxyType[str, type[Strategy]] = MappingProxyType(
    {cls.name: cls for cls in (CallByValue, Lazy, Normal, Full)}
)


def strategy_by_name(name: str, **options: Any) -> Strategy:
    """Instantiate the strategy registered as ``name``.

    ``options`` are passed to the strategy's constructor, e.g. ``shadowing``.

    Raises:
        UnknownStrategyError: no strategy is registered under ``name``.
    """

    try:
        cls = STRATEGIES[name]
    except KeyError:
        raise UnknownStrategyError(name, tuple(STRATEGIES)) from None
    return cls(**options)


__all__ = ["STRATEGIES", "strategy_by_name"]
