from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_DELIMITER = "\n"
DEFAULT_LOG_LEVEL = "WARNING"

DELIMITER_PRESETS: dict[str, str] = {
    "lines": "\n",
    "words": " ",
    "chars": "",
}

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
}


class ConfigError(Exception):
    pass


def decode_delimiter(value: str) -> str:
    """Expand backslash escapes such as `\\n` and `\\t` in a delimiter."""
    out: list[str] = []
    chars = iter(value)

    for char in chars:
        if char != "\\":
            out.append(char)
            continue

        escaped = next(chars, None)
        if escaped is None:
            raise ConfigError(f"trailing backslash in delimiter '{value}'")
        if escaped not in ESCAPES:
            raise ConfigError(f"unknown escape '\\{escaped}' in delimiter '{value}'")
        out.append(ESCAPES[escaped])

    return "".join(out)


def parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigError(f"invalid log level '{name}'")
    return level


@dataclass
class Settings:
    delimiter: str = DEFAULT_DELIMITER
    log_level: int = logging.WARNING
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> Settings:
        delimiter = env.get("TOKENDIFF_DELIMITER")
        level = env.get("TOKENDIFF_LOG_LEVEL") or DEFAULT_LOG_LEVEL

        return cls(
            delimiter=(
                decode_delimiter(delimiter)
                if delimiter is not None
                else DEFAULT_DELIMITER
            ),
            log_level=parse_log_level(level),
            log_file=env.get("TOKENDIFF_LOG_FILE") or None,
        )
