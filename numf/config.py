"""Environment defaults and .env loading.

WHY: People who always want ``0x``-prefixed, byte-padded output should
not have to type ``-pP`` on every call. Defaults live in the environment
(or a .env file next to where numf runs) so shells and scripts can set
them once.

HOW: python-dotenv loads the .env file on import. Defaults are read
with os.getenv() into module-level constants; boolean switches go
through env_flag().

RULES:
- Explicit CLI flags always override these defaults
- NUMF_DEFAULT_FORMAT is a format name (hex, bin, oct, dec, base64,
  base32, raw); the CLI validates it
- Boolean variables accept 1/true/yes/on, anything else is false
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the current working directory
load_dotenv()

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean switch from the environment.

    Unset or blank variables fall back to default.
    """
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


DEFAULT_FORMAT = os.getenv("NUMF_DEFAULT_FORMAT", "hex")
DEFAULT_PREFIX = env_flag("NUMF_PREFIX", False)
DEFAULT_PADDING = env_flag("NUMF_PADDING", False)
DEFAULT_UPPERCASE = env_flag("NUMF_UPPERCASE", True)
LOG_LEVEL = os.getenv("NUMF_LOG_LEVEL", "WARNING").upper()
