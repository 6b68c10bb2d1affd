import dataclasses
import logging
import rtoml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

@dataclass
class LoadingScreenSettings:
    """Presentation of the built-in loading screen ([loading_screen] table)."""
    title: str = "LOADING"
    width: float = 400.0
    height: float = 150.0
    finalizing_text: str = "Finalizing..."

@dataclass
class OrchestratorConfig:
    """
    Central configuration for applications built on the orchestrator.

    Responsibilities:
    1. Logging setup (level and optional log file).
    2. Look of the built-in loading screen.

    Expected TOML layout:
        log_level = "DEBUG"
        log_file = "logs/loading.log"

        [loading_screen]
        title = "PROCESSING"
        finalizing_text = "Finalizing Graphics..."
    """
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    loading_screen: LoadingScreenSettings = field(default_factory=LoadingScreenSettings)

    @classmethod
    def load(cls, config_path: Union[str, Path]) -> "OrchestratorConfig":
        """
        Reads a TOML config file. A missing file gives the defaults; a file
        that cannot be read or parsed is reported and the defaults are used.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = rtoml.load(f)
        except (rtoml.TomlParsingError, UnicodeDecodeError, OSError) as e:
            logger.warning("Failed to read %s: %s", config_path.name, e)
            return cls()

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrchestratorConfig":
        config = cls()

        if "log_level" in data:
            config.log_level = str(data["log_level"]).upper()
        if data.get("log_file"):
            config.log_file = Path(data["log_file"])

        screen_data = data.get("loading_screen", {})
        if not isinstance(screen_data, dict):
            logger.warning("'loading_screen' must be a table, got %s; using defaults", type(screen_data).__name__)
            return config

        defaults = {f.name: f.default for f in dataclasses.fields(LoadingScreenSettings)}
        for key, value in screen_data.items():
            if key not in defaults:
                logger.warning("Unknown loading_screen setting '%s' ignored", key)
                continue

            value = _coerce(value, type(defaults[key]))
            if value is None:
                logger.warning("loading_screen.%s must be %s; keeping default", key, type(defaults[key]).__name__)
                continue
            setattr(config.loading_screen, key, value)

        return config

def _coerce(value: Any, expected: type) -> Any:
    """Returns `value` as `expected`, or None if it does not fit. Ints are accepted for floats."""
    if isinstance(value, bool):
        return value if expected is bool else None
    if expected is float and isinstance(value, (int, float)):
        return float(value)
    return value if isinstance(value, expected) else None
