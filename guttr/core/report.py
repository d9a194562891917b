"""Report builder: CSS and JSON output for gutter results."""

import json
from collections.abc import Mapping
from typing import Any

from guttr.core.types import DEFAULT_KEY


def format_css(gutters: Mapping[str, Any], selector: str = '.gutter') -> str:
    """Format a gutter result as CSS rules for `selector`."""
    lines = [f'{selector} {{', f'  padding: {gutters[DEFAULT_KEY]};', '}']

    for media_query, rule in gutters.items():
        if media_query == DEFAULT_KEY:
            continue
        lines.append(f'{media_query} {{')
        lines.append(f'  {selector} {{')
        lines.append(f'    padding: {rule[DEFAULT_KEY]};')
        lines.append('  }')
        lines.append('}')
    return '\n'.join(lines)


def format_json(gutters: Mapping[str, Any]) -> str:
    """Format a gutter result as JSON, keeping breakpoint order."""
    return json.dumps(gutters, indent=2)
