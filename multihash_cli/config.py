"""
Multihash CLI - Configuration

Configuration management for the multihash CLI.
Supports a JSON configuration file, environment variables and a .env file.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "MULTIHASH_"

OUTPUT_FORMATS = ("human", "json")


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Algorithm used by `encode` when --algorithm is not given
    default_algorithm: str = "sha2-256"

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    # Output
    default_output_format: str = "human"  # "human" or "json"

    def __post_init__(self) -> None:
        if self.default_output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {self.default_output_format!r}, "
                f"expected one of {OUTPUT_FORMATS}"
            )


def load_config_from_env() -> CLIConfig:
    """Load configuration from environment variables."""
    return CLIConfig(
        default_algorithm=os.getenv(f"{ENV_PREFIX}DEFAULT_ALGORITHM", "sha2-256"),
        log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING"),
        log_file=os.getenv(f"{ENV_PREFIX}LOG_FILE"),
        default_output_format=os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT", "human"),
    )


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")

    config = CLIConfig()
    return CLIConfig(
        default_algorithm=data.get("default_algorithm", config.default_algorithm),
        log_level=data.get("log_level", config.log_level),
        log_file=data.get("log_file", config.log_file),
        default_output_format=data.get("default_output_format", config.default_output_format),
    )


def load_config(config_path: Path | None = None) -> CLIConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    config = CLIConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        default_paths = [
            Path.cwd() / "multihash.json",
            Path.cwd() / ".multihash.json",
            Path.home() / ".config" / "multihash" / "config.json",
        ]
        for default_path in default_paths:
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    # Override with environment variables
    env_config = load_config_from_env()

    if os.getenv(f"{ENV_PREFIX}DEFAULT_ALGORITHM"):
        config.default_algorithm = env_config.default_algorithm
    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config.log_level = env_config.log_level
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config.log_file = env_config.log_file
    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.default_output_format = env_config.default_output_format

    return config


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """{
  "default_algorithm": "sha2-256",
  "log_level": "WARNING",
  "log_file": null,
  "default_output_format": "human"
}
"""
