"""
System configuration for tradejournal.

One configuration for the whole application, loaded from YAML:

    analytics:   HOW trades are analyzed (fees, ordering, pattern thresholds)
    export:      WHERE and HOW CSV exports are written
    logging:     Logging output

Resolution order for the config file:
    1. Explicit path passed to SystemConfig.load() / get_system_config()
    2. $TRADEJOURNAL_CONFIG
    3. config/system.yaml (relative to the working directory)
    4. Built-in defaults

Partial files are deep-merged over the defaults, and ``${VAR}`` references
inside string values are substituted from the environment.
"""

import os
import re
from dataclasses import asdict, dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any, Literal

import yaml

from tradejournal.system.log_system import DEFAULT_LOG_FILE
from tradejournal.system.log_system import LoggingConfig as LoggerConfig

CONFIG_ENV_VAR = "TRADEJOURNAL_CONFIG"
DEFAULT_CONFIG_PATH = Path("config/system.yaml")

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


@dataclass
class AnalyticsConfig:
    """Analytics settings.

    Attributes:
        fee_rate: Fee charged per side as a fraction of notional (0.001 = 0.1%)
        min_trades_for_patterns: Minimum journal size before pattern insights are produced
        chronological: Sort trades by created_at before computing order-dependent metrics
    """

    fee_rate: Decimal = Decimal("0.001")
    min_trades_for_patterns: int = 10
    chronological: bool = False

    def __post_init__(self) -> None:
        self.fee_rate = Decimal(str(self.fee_rate))
        if self.fee_rate < 0:
            raise ValueError(f"fee_rate must be non-negative, got {self.fee_rate}")
        if self.min_trades_for_patterns < 1:
            raise ValueError(f"min_trades_for_patterns must be >= 1, got {self.min_trades_for_patterns}")


@dataclass
class ExportConfig:
    """CSV export settings."""

    default_output_dir: str = "output/exports"
    trades_filename: str = "trades-export.csv"
    report_filename: str = "performance-report.csv"
    date_format: str = "%Y-%m-%d"


@dataclass
class LoggingConfig:
    """Logging section of the system config (plain strings, YAML friendly)."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json"] = "console"
    timestamp_format: Literal["iso", "compact", "time", "short"] = "compact"
    enable_file: bool = True
    file_path: str = DEFAULT_LOG_FILE
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    file_rotation: bool = True
    max_file_size_mb: int = 10
    backup_count: int = 3
    console_width: int = 0

    def to_logger_config(self) -> LoggerConfig:
        """Convert to the pydantic config consumed by LoggerFactory."""
        return LoggerConfig(
            level=self.level,
            format=self.format,
            timestamp_format=self.timestamp_format,
            enable_file=self.enable_file,
            file_path=Path(self.file_path),
            file_level=self.file_level,
            file_rotation=self.file_rotation,
            max_file_size_mb=self.max_file_size_mb,
            backup_count=self.backup_count,
            console_width=self.console_width,
        )


@dataclass
class SystemConfig:
    """Complete system configuration."""

    analytics: AnalyticsConfig = field(default_factory=AnalyticsConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "SystemConfig":
        """
        Load configuration, merging the resolved YAML file over defaults.

        Args:
            path: Explicit config file. Falls back to $TRADEJOURNAL_CONFIG,
                then config/system.yaml.

        Returns:
            SystemConfig. Built-in defaults when no file exists.
        """
        config_path = _resolve_config_path(path)

        data: dict[str, Any] = {}
        if config_path is not None and config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"Config file must contain a mapping: {config_path}")

        merged = _deep_merge(asdict(cls()), _substitute_env_vars(data))
        return cls._from_dict(merged)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "SystemConfig":
        """Build a SystemConfig from a (possibly partial) dictionary."""
        return cls(
            analytics=AnalyticsConfig(**data.get("analytics", {})),
            export=ExportConfig(**data.get("export", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )


def _resolve_config_path(path: Path | str | None) -> Path | None:
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base. Override wins on conflict."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _substitute_env_vars(value: Any) -> Any:
    """Replace ${VAR} in strings (recursively). Undefined variables are left as-is."""
    if isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env_vars(v) for v in value]
    if isinstance(value, str):
        return _ENV_PATTERN.sub(lambda m: os.environ.get(m.group(1), m.group(0)), value)
    return value


_system_config: SystemConfig | None = None


def get_system_config(path: Path | str | None = None) -> SystemConfig:
    """
    Get the system config singleton.

    An explicit path always loads (and caches) that file.
    """
    global _system_config
    if path is not None or _system_config is None:
        _system_config = SystemConfig.load(path)
    return _system_config


def reload_system_config(path: Path | str | None = None) -> SystemConfig:
    """Force a reload of the system config singleton."""
    global _system_config
    _system_config = SystemConfig.load(path)
    return _system_config
