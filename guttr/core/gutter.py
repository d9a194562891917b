"""Gutter generator: default padding plus per-breakpoint overrides.

Breakpoints are walked in configuration order. Multiplier overrides carry
forward from one breakpoint to the next, and a breakpoint is only emitted
when its padding differs from the one computed just before it (whether that
one was emitted or not).
"""

from collections.abc import Mapping
from typing import Any

from guttr.core.padding import build_padding
from guttr.core.types import DEFAULT_CONFIG, DEFAULT_KEY, GuttrConfig, multipliers_equal


def generate_gutter(
    config: GuttrConfig | None = None,
    base_multipliers: Mapping[str, float] | None = None,
    breakpoint_multipliers: Mapping[str, Mapping[str, float]] | None = None,
) -> dict[str, Any]:
    """Generate gutter padding rules for `config`.

    Args:
        config: base spacing and breakpoints, DEFAULT_CONFIG when None.
        base_multipliers: side multipliers for the default padding, e.g.
            ``{'top': 1}``. None uses ``config.base.multipliers``; an empty
            mapping is taken as-is, so every side falls back to 0.5.
        breakpoint_multipliers: overrides keyed by breakpoint name, e.g.
            ``{'medium': {'top': 2}}``.

    Returns:
        ``{'padding': '8px 8px 8px 8px', '<media query>': {'padding': ...}, ...}``
    """
    if config is None:
        config = DEFAULT_CONFIG
    if base_multipliers is None:
        base_multipliers = config.base.multipliers or {}
    if breakpoint_multipliers is None:
        breakpoint_multipliers = {}

    gutters: dict[str, Any] = {
        DEFAULT_KEY: build_padding(config.base.gutter, config.base.unit, base_multipliers),
    }
    last_pad = gutters[DEFAULT_KEY]
    last_multipliers = dict(base_multipliers)

    for name, point in (config.breakpoints or {}).items():
        if point.gutter is None:
            continue
        unit = point.unit or config.base.unit

        multipliers = {**last_multipliers, **(breakpoint_multipliers.get(name) or {})}
        if not multipliers_equal(last_multipliers, multipliers):
            last_multipliers = multipliers

        padding = build_padding(point.gutter, unit, multipliers)
        if padding != last_pad:
            gutters[point.media_query] = {DEFAULT_KEY: padding}
        last_pad = padding

    return gutters
