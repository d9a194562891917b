"""Configuration factory: bind a config once, generate gutters many times.

Usage:

    site_gutter = guttr({
        'base': {'gutter': 16, 'unit': 'px'},
        'breakpoints': {
            'large': {'gutter': 28, 'mediaQuery': '@media(min-width: 1300px)'},
        },
    })

    site_gutter()                                # default multipliers
    site_gutter({'right': 0}, {'large': {'top': 1}})
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields, replace
from typing import Any

from guttr.core.config_parser import parse_config
from guttr.core.gutter import generate_gutter
from guttr.core.types import DEFAULT_CONFIG, GuttrConfig


def merge_config(user_config: GuttrConfig | Mapping[str, Any] | None = None) -> GuttrConfig:
    """Merge a partial user config over DEFAULT_CONFIG.

    `base` is merged field by field (user fields win). `breakpoints`, when
    given, replaces the default set as a whole.
    """
    if user_config is None:
        return DEFAULT_CONFIG
    if not isinstance(user_config, GuttrConfig):
        user_config = parse_config(user_config)

    overrides = {f.name: getattr(user_config.base, f.name) for f in fields(user_config.base)}
    base = replace(DEFAULT_CONFIG.base, **{k: v for k, v in overrides.items() if v is not None})
    if user_config.breakpoints is not None:
        breakpoints = user_config.breakpoints
    else:
        breakpoints = DEFAULT_CONFIG.breakpoints
    return GuttrConfig(base=base, breakpoints=breakpoints)


class Guttr:
    """A gutter generator bound to one merged configuration."""

    def __init__(self, user_config: GuttrConfig | Mapping[str, Any] | None = None):
        self.config = merge_config(user_config)

    def __call__(
        self,
        base_multipliers: Mapping[str, float] | None = None,
        breakpoint_multipliers: Mapping[str, Mapping[str, float]] | None = None,
    ) -> dict[str, Any]:
        return generate_gutter(self.config, base_multipliers, breakpoint_multipliers)

    def __repr__(self) -> str:
        return f'Guttr({self.config!r})'


def guttr(user_config: GuttrConfig | Mapping[str, Any] | None = None) -> Guttr:
    """Create a gutter generator for `user_config`."""
    return Guttr(user_config)
