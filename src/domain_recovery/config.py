"""
Configuration for the domain recovery engine.

This module defines the configuration structures (logging, engine output
options) and loads them from a JSON file or from the environment. An
optional `.env` file is honoured through python-dotenv.

The engine's lookup tables (brand list, TLD values, comparable sales,
registrar directory) are versioned code, not configuration.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from domain_recovery.exceptions import ConfigurationError


DEFAULT_CONFIG_PATH = Path.home() / ".domain_recovery" / "config.json"

ENV_LOG_LEVEL = "DOMAIN_RECOVERY_LOG_LEVEL"
ENV_LOG_FORMAT = "DOMAIN_RECOVERY_LOG_FORMAT"
ENV_AUDIT_KEY = "DOMAIN_RECOVERY_AUDIT_KEY"
ENV_CURRENCY = "DOMAIN_RECOVERY_CURRENCY"
ENV_COMPARABLES_LIMIT = "DOMAIN_RECOVERY_COMPARABLES_LIMIT"

VALID_LOG_LEVELS = ("debug", "info", "warn", "error")
VALID_OUTPUT_FORMATS = ("json", "text", "both")


@dataclass
class LoggingConfig:
    """Logging and audit configuration."""

    level: str = "info"
    audit_mode: bool = False
    audit_signing_key: Optional[str] = None
    output_format: str = "both"  # 'json', 'text', 'both'


@dataclass
class EngineConfig:
    """Output options of the valuation and analysis pipeline."""

    currency: str = "USD"
    comparables_limit: int = 5
    comparable_similarity_threshold: int = 40
    include_comparables: bool = True


@dataclass
class AppConfig:
    """Main configuration combining all sub-configurations."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    startup_self_test: bool = False


def create_default_config() -> AppConfig:
    """Create the default configuration (text logging, USD, five comparables)."""
    return AppConfig(
        logging=LoggingConfig(level="info", output_format="text"),
        engine=EngineConfig(),
        startup_self_test=False,
    )


def config_from_dict(data: dict) -> AppConfig:
    """
    Build an AppConfig from a decoded JSON mapping.

    Args:
        data: Mapping with optional 'logging', 'engine' and 'startup_self_test' keys

    Returns:
        AppConfig with defaults for missing keys

    Raises:
        ConfigurationError: If a section or value has the wrong type
    """
    if not isinstance(data, dict):
        raise ConfigurationError(
            code="invalid_config",
            message="Configuration root must be a JSON object",
            details={"type": type(data).__name__},
        )

    try:
        logging_data = data.get("logging", {}) or {}
        logging_config = LoggingConfig(
            level=str(logging_data.get("level", "info")),
            audit_mode=bool(logging_data.get("audit_mode", False)),
            audit_signing_key=logging_data.get("audit_signing_key"),
            output_format=str(logging_data.get("output_format", "text")),
        )

        engine_data = data.get("engine", {}) or {}
        engine_config = EngineConfig(
            currency=str(engine_data.get("currency", "USD")),
            comparables_limit=int(engine_data.get("comparables_limit", 5)),
            comparable_similarity_threshold=int(
                engine_data.get("comparable_similarity_threshold", 40)
            ),
            include_comparables=bool(engine_data.get("include_comparables", True)),
        )
    except (AttributeError, TypeError, ValueError) as e:
        raise ConfigurationError(
            code="invalid_config",
            message=f"Invalid configuration value: {e}",
        ) from e

    return AppConfig(
        logging=logging_config,
        engine=engine_config,
        startup_self_test=bool(data.get("startup_self_test", False)),
    )


def config_to_dict(config: AppConfig) -> dict:
    """Convert an AppConfig to a JSON-serializable mapping."""
    return {
        "logging": {
            "level": config.logging.level,
            "audit_mode": config.logging.audit_mode,
            "audit_signing_key": config.logging.audit_signing_key,
            "output_format": config.logging.output_format,
        },
        "engine": {
            "currency": config.engine.currency,
            "comparables_limit": config.engine.comparables_limit,
            "comparable_similarity_threshold": config.engine.comparable_similarity_threshold,
            "include_comparables": config.engine.include_comparables,
        },
        "startup_self_test": config.startup_self_test,
    }


def load_config_from_file(config_path: Union[str, Path]) -> Optional[AppConfig]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        AppConfig if the file exists, None if it does not

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    config_path = Path(config_path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return None
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            code="invalid_json",
            message=f"Configuration file is not valid JSON: {e}",
            details={"path": str(config_path)},
        ) from e
    except OSError as e:
        raise ConfigurationError(
            code="unreadable",
            message=f"Could not read configuration file: {e}",
            details={"path": str(config_path)},
        ) from e

    return config_from_dict(data)


def save_config_to_file(config: AppConfig, config_path: Union[str, Path]) -> bool:
    """
    Save configuration to a JSON file.

    Args:
        config: AppConfig to save
        config_path: Path to save the configuration

    Returns:
        True if successful, False otherwise
    """
    config_path = Path(config_path)
    try:
        # Ensure parent directory exists
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config_to_dict(config), f, indent=2, ensure_ascii=False)

        return True

    except (OSError, TypeError):
        return False


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def load_config_from_env(
    env_file: Optional[Union[str, Path]] = None,
    base: Optional[AppConfig] = None,
) -> AppConfig:
    """
    Build configuration from environment variables.

    Variables already set in the process environment take precedence over
    the `.env` file.

    Args:
        env_file: Optional path to a .env file (defaults to python-dotenv's search)
        base: Configuration to override (defaults to create_default_config())

    Returns:
        AppConfig with environment overrides applied
    """
    load_dotenv(dotenv_path=env_file, override=False)

    config = base or create_default_config()

    level = (os.getenv(ENV_LOG_LEVEL) or config.logging.level).strip().lower()
    output_format = (os.getenv(ENV_LOG_FORMAT) or config.logging.output_format).strip().lower()
    audit_key = (os.getenv(ENV_AUDIT_KEY) or "").strip()
    currency = (os.getenv(ENV_CURRENCY) or config.engine.currency).strip().upper()

    return AppConfig(
        logging=LoggingConfig(
            level=level,
            audit_mode=bool(audit_key) or config.logging.audit_mode,
            audit_signing_key=audit_key or config.logging.audit_signing_key,
            output_format=output_format,
        ),
        engine=EngineConfig(
            currency=currency,
            comparables_limit=_int_env(ENV_COMPARABLES_LIMIT, config.engine.comparables_limit),
            comparable_similarity_threshold=config.engine.comparable_similarity_threshold,
            include_comparables=config.engine.include_comparables,
        ),
        startup_self_test=config.startup_self_test,
    )
