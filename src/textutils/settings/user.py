"""User-configurable settings loaded from textutils.yaml."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import ClassVar, Final

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from textutils.errors import ConfigError

logger: Final = logging.getLogger(__name__)

# Load environment variables from .env file(s)
load_dotenv()

CONFIG_ENV_VAR: Final = "TEXTUTILS_CONFIG"


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """Defaults for the commands. Command-line options always win over
    these values.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("textutils.yaml"),
        Path("~/.config/textutils/config.yaml").expanduser(),
        Path("/etc/textutils/config.yaml"),
    ]

    # head / tail
    head_lines: int = Field(10, ge=0, description="Lines printed by head when -n is omitted")
    tail_lines: int = Field(10, ge=0, description="Trailing lines printed by tail when -n is omitted")

    # cut / comm
    cut_delimiter: str = Field("\t", description="Field delimiter for cut (one byte)")
    comm_delimiter: str = Field("\t", description="Column delimiter for comm output")

    # Column widths
    number_width: int = Field(6, ge=1, description="Width of line numbers printed by cat")
    count_width: int = Field(8, ge=1, description="Width of each wc column")

    # fortune
    fortune_sources: list[Path] = Field(
        default_factory=list, description="Fortune files or directories used when none are given"
    )
    fortune_seed: int | None = Field(None, ge=0, description="Random seed for fortune")

    # ---- validators ----
    @field_validator("cut_delimiter")
    @classmethod
    def validate_cut_delimiter(cls, v: str) -> str:
        if len(v.encode("utf-8")) != 1:
            raise ValueError(f'cut_delimiter "{v}" must be a single byte')
        return v

    @field_validator("fortune_sources")
    @classmethod
    def expand_sources(cls, v: list[Path]) -> list[Path]:
        return [p.expanduser() for p in v]

    @classmethod
    def find_config(cls) -> Path | None:
        """Locate a config file.

        Returns:
            The first existing config path, or None when no file is found

        Raises:
            ConfigError: If TEXTUTILS_CONFIG names a file that does not exist
        """
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise ConfigError(f"Config file from {CONFIG_ENV_VAR} not found: {path}")
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        return None

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object; built-in defaults when no file exists

        Raises:
            ConfigError: If the config file is missing, unreadable or invalid
        """
        if path is None:
            path = cls.find_config()
            if path is None:
                logger.debug("No config file found, using defaults")
                return cls()
        elif not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        logger.debug("Loading config from %s", path)
        try:
            raw = _interpolate_env(path.read_text(encoding="utf-8"))
            data = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise ConfigError(f"Invalid configuration:\n{err}") from err

    def to_yaml(self) -> str:
        """Dump the effective settings as YAML."""
        return yaml.safe_dump(self.model_dump(mode="json"), sort_keys=False)
