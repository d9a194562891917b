"""Environment variable loading for guttr.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Variables read by the command line:
  GUTTR_CONFIG    default JSON config file for `guttr gutter`
  GUTTR_SELECTOR  default CSS selector for `guttr gutter`
"""

import os
from pathlib import Path

CONFIG_VAR = 'GUTTR_CONFIG'
SELECTOR_VAR = 'GUTTR_SELECTOR'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value, KEY="value" and `export KEY=value`."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip().removeprefix('export ').strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def default_config_path() -> str | None:
    """Config file named by GUTTR_CONFIG, if set and non-empty."""
    return os.environ.get(CONFIG_VAR) or None


def default_selector(fallback: str = '.gutter') -> str:
    return os.environ.get(SELECTOR_VAR) or fallback
