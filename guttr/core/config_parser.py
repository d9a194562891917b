"""JSON config parsing and command-line multiplier parsing.

A config file has the same shape as the dict accepted by guttr():

    {
      "base": {"gutter": 16, "unit": "px"},
      "breakpoints": {
        "small": {"gutter": 16, "mediaQuery": "@media(min-width: 768px)"},
        "large": {"gutter": 28, "mediaQuery": "@media(min-width: 1300px)"}
      }
    }

Breakpoint order in the file is the order they are applied in.
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any

from guttr.core.types import SIDES, BaseConfig, Breakpoint, GuttrConfig, SideMultipliers


def parse_config_file(path: str) -> GuttrConfig:
    """Parse a JSON config file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_config_string(text)


def parse_config_string(text: str) -> GuttrConfig:
    """Parse a JSON config from a string."""
    return parse_config(json.loads(text), require_media_query=True)


def parse_config(data: Mapping[str, Any], require_media_query: bool = False) -> GuttrConfig:
    """Build a GuttrConfig from a plain mapping. Missing fields stay None.

    With `require_media_query`, a breakpoint that has a gutter but no media
    query is rejected. Breakpoints without a gutter are never checked since
    they are skipped when generating.
    """
    _expect_mapping(data, 'config')
    base = _parse_base(data.get('base') or {})
    breakpoints = data.get('breakpoints')
    if breakpoints is not None:
        _expect_mapping(breakpoints, 'breakpoints')
        breakpoints = {
            name: _parse_breakpoint(name, entry, require_media_query) for name, entry in breakpoints.items()
        }
    return GuttrConfig(base=base, breakpoints=breakpoints)


def _expect_mapping(value: Any, what: str) -> None:
    if not isinstance(value, Mapping):
        raise ValueError(f'{what} must be an object, got {type(value).__name__}')


def _parse_base(data: Any) -> BaseConfig:
    _expect_mapping(data, 'base')
    multipliers = data.get('multipliers')
    if multipliers is not None:
        _expect_mapping(multipliers, 'base.multipliers')
        multipliers = dict(multipliers)
    return BaseConfig(
        gutter=data.get('gutter'),
        unit=data.get('unit'),
        multipliers=multipliers,
    )


def _parse_breakpoint(name: str, data: Any, require_media_query: bool) -> Breakpoint:
    _expect_mapping(data, f'breakpoint {name!r}')
    media_query = data.get('mediaQuery', data.get('media_query'))
    if require_media_query and media_query is None and data.get('gutter') is not None:
        raise ValueError(f'breakpoint {name!r} has no mediaQuery')
    return Breakpoint(
        media_query=media_query,
        gutter=data.get('gutter'),
        unit=data.get('unit'),
    )


def parse_multipliers(text: str) -> SideMultipliers:
    """Parse ``top=1,right=0.25`` into ``{'top': 1.0, 'right': 0.25}``."""
    result: SideMultipliers = {}
    for part in text.split(','):
        part = part.strip()
        if not part:
            continue
        side, sep, raw_value = part.partition('=')
        side = side.strip()
        if not sep:
            raise ValueError(f'expected side=value, got {part!r}')
        if side not in SIDES:
            raise ValueError(f'unknown side {side!r}, expected one of: {", ".join(SIDES)}')
        try:
            result[side] = float(raw_value)
        except ValueError:
            raise ValueError(f'multiplier for {side} is not a number: {raw_value.strip()!r}') from None
    return result


def parse_breakpoint_multipliers(items: Iterable[str]) -> dict[str, SideMultipliers]:
    """Parse ``['small:left=1', 'medium:top=2']`` into per-breakpoint overrides.

    The same breakpoint may be given more than once; later sides win.
    """
    result: dict[str, SideMultipliers] = {}
    for item in items:
        name, sep, rest = item.partition(':')
        name = name.strip()
        if not sep or not name:
            raise ValueError(f'expected name:side=value, got {item!r}')
        result.setdefault(name, {}).update(parse_multipliers(rest))
    return result
