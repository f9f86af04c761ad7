"""Runtime configuration with environment overrides.

Values come from the process environment, optionally seeded from a
``.env`` file in the working directory. Everything here is read once at
import; the resulting ``CONFIG`` object is immutable.

Recognised variables:

- ``SANSKRIT_LOG_LEVEL``: log level used by the command-line front end
- ``SANSKRIT_DEFAULT_SCRIPT``: output script when none is requested
  (``IAST`` or ``Devanagari``)
- ``SANSKRIT_NFC_INPUT``: NFC-normalize and strip zero-width characters
  from ``apply_sandhi`` inputs (``1``/``0``)
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SCRIPT = "IAST"
DEFAULT_NFC_INPUT = True

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class EngineConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    default_script: str = DEFAULT_SCRIPT
    nfc_input: bool = DEFAULT_NFC_INPUT

    @property
    def numeric_log_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def load_config() -> EngineConfig:
    """Build an EngineConfig from the current environment."""
    return EngineConfig(
        log_level=os.getenv("SANSKRIT_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        default_script=os.getenv("SANSKRIT_DEFAULT_SCRIPT", DEFAULT_SCRIPT),
        nfc_input=_env_flag("SANSKRIT_NFC_INPUT", DEFAULT_NFC_INPUT),
    )


CONFIG = load_config()
