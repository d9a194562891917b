"""Shared types for guttr: SideMultipliers, BaseConfig, Breakpoint, GuttrConfig."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypedDict

SIDES = ('top', 'right', 'bottom', 'left')
DEFAULT_MULTIPLIER = 0.5
DEFAULT_GUTTER = 16
DEFAULT_UNIT = 'px'

# Key of the default (non media-query) padding entry in a gutter result
DEFAULT_KEY = 'padding'


class SideMultipliers(TypedDict, total=False):
    """Fraction of the gutter applied to each side. Missing sides mean 0.5."""

    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True)
class BaseConfig:
    """Base spacing. A field left as None is treated as not supplied."""

    gutter: float | None = None
    unit: str | None = None
    multipliers: Mapping[str, float] | None = None


@dataclass(frozen=True)
class Breakpoint:
    """A responsive breakpoint, keyed in the output by its media query."""

    media_query: str | None
    gutter: float | None = None  # None: breakpoint is skipped entirely
    unit: str | None = None  # None: inherit the base unit


@dataclass(frozen=True)
class GuttrConfig:
    """Base spacing plus breakpoints in the order they apply."""

    base: BaseConfig = field(default_factory=BaseConfig)
    breakpoints: Mapping[str, Breakpoint] | None = None


DEFAULT_CONFIG = GuttrConfig(
    base=BaseConfig(
        gutter=DEFAULT_GUTTER,
        unit=DEFAULT_UNIT,
        multipliers=MappingProxyType({side: DEFAULT_MULTIPLIER for side in SIDES}),
    ),
    breakpoints=MappingProxyType({}),
)


def multipliers_equal(a: Mapping[str, float], b: Mapping[str, float]) -> bool:
    """Compare two multiplier sets on the four sides only."""
    return all(a.get(side) == b.get(side) for side in SIDES)
