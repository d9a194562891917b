"""guttr: responsive CSS padding gutters scaled from one base spacing value."""

from guttr.core.gutter import generate_gutter
from guttr.core.padding import build_padding
from guttr.core.types import DEFAULT_CONFIG, BaseConfig, Breakpoint, GuttrConfig, SideMultipliers
from guttr.factory import Guttr, guttr, merge_config

__all__ = [
    'DEFAULT_CONFIG',
    'BaseConfig',
    'Breakpoint',
    'Guttr',
    'GuttrConfig',
    'SideMultipliers',
    'build_padding',
    'generate_gutter',
    'guttr',
    'merge_config',
]
