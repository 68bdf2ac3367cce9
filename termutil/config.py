"""
termutil shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

ENV_PREFIX = "TERMUTIL_"


def load_env(path=None):
    """Read KEY=VALUE pairs from the .env file, then overlay TERMUTIL_* process env."""
    path = path or ENV_PATH
    env = {}
    if os.path.exists(path):
        with open(path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip().strip("\"'")
    for key, val in os.environ.items():
        if key.startswith(ENV_PREFIX):
            env[key] = val
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.3.0"

VALID_COLOR_SYSTEMS = {"standard", "256", "truecolor"}

PIPE_MAX_SIZE_PATH = "/proc/sys/fs/pipe-max-size"
DEFAULT_PIPE_SIZE = 4096

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env and the environment)
# ---------------------------------------------------------------------------

env = load_env()

DEFAULT_WIDTH = _env_int("TERMUTIL_DEFAULT_WIDTH", 80)
DEFAULT_HEIGHT = _env_int("TERMUTIL_DEFAULT_HEIGHT", 25)
PRETTY_ENABLED = _env_bool("TERMUTIL_PRETTY", True)
COLOR_SYSTEM = env.get("TERMUTIL_COLOR_SYSTEM", "256")
if COLOR_SYSTEM not in VALID_COLOR_SYSTEMS:
    COLOR_SYSTEM = "256"
UNICODE_BORDERS = _env_bool("TERMUTIL_UNICODE_BORDERS", False)
SYNTAX_THEME = env.get("TERMUTIL_SYNTAX_THEME", "monokai")

# ---------------------------------------------------------------------------
# Runtime flags (set by the CLI)
# ---------------------------------------------------------------------------

RUNTIME_QUIET = False
