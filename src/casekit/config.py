from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .logger import logger
from .styles import CaseStyle

load_dotenv()

_FALSY = {"0", "false", "off", "no"}
_TRUTHY = {"1", "true", "on", "yes"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning("Ignoring unrecognised value %r for %s", raw, name)
    return default


@dataclass
class CliConfig:
    default_style: CaseStyle = CaseStyle.KEBAB
    split_on_dot: bool = False

    @classmethod
    def from_env(cls) -> "CliConfig":
        """
        Read ``CASEKIT_DEFAULT_STYLE`` and ``CASEKIT_SPLIT_ON_DOT``
        (``.env`` files are honoured).
        """
        raw_style = os.getenv("CASEKIT_DEFAULT_STYLE")
        style = cls.default_style
        if raw_style and raw_style.strip():
            try:
                style = CaseStyle.parse(raw_style.strip())
            except ValueError:
                logger.error_raise(
                    f"CASEKIT_DEFAULT_STYLE has unknown case style {raw_style!r}",
                    exc=ValueError,
                )
        return cls(
            default_style=style,
            split_on_dot=_env_flag("CASEKIT_SPLIT_ON_DOT", cls.split_on_dot),
        )
