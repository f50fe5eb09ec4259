"""Configuration management for the container."""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _is_level_name(name: str) -> bool:
    return isinstance(name, str) and isinstance(logging.getLevelName(name.upper()), int)


@dataclass
class Config:
    """Container configuration."""

    # Resolution settings
    follow_binding_chains: bool = False
    detect_cycles: bool = True

    # Logging level applied to the "wirebox" logger, empty leaves it alone
    log_level: str = ""

    def __post_init__(self) -> None:
        if self.log_level and not _is_level_name(self.log_level):
            logger.warning(f"Ignoring unknown log level {self.log_level!r}")
            self.log_level = ""

    @classmethod
    def get_config_path(cls) -> Path:
        """Location of the config file, ~/.wirebox/config.json."""
        return Path.home() / ".wirebox" / "config.json"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Build a config from known keys, ignoring the rest."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def load(cls) -> "Config":
        """Read the config file, or return defaults if it is missing or unreadable."""
        path = cls.get_config_path()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return cls()
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning(f"Ignoring unreadable config file {path}: {exc}")
            return cls()

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {path}: expected a JSON object")
            return cls()
        return cls.from_dict(data)

    def save(self) -> None:
        """Write the config file, creating its directory if needed."""
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")

    def apply_logging(self) -> None:
        """Set the level of the package logger if one is configured."""
        if self.log_level:
            logging.getLogger("wirebox").setLevel(self.log_level.upper())
