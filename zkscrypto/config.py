"""
zkscrypto Configuration
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field, asdict
from typing import List, Optional

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_size_mb: int = 100
    backup_count: int = 5


@dataclass
class CryptoConfig:
    """
    Library configuration.

    verify_after_sign: check every fresh signature before returning it
    hex_prefix: prefix non-empty hex strings with "0x" for all artifact types
    """
    verify_after_sign: bool = True
    hex_prefix: bool = False

    log: LogConfig = field(default_factory=LogConfig)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.log.level.upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log.level}")

        if self.log.max_size_mb < 1:
            errors.append("log max_size_mb must be at least 1")

        if self.log.backup_count < 0:
            errors.append("log backup_count cannot be negative")

        return errors

    def save(self, path: str) -> None:
        """Save configuration to file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: str) -> "CryptoConfig":
        """
        Load configuration from file.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not a JSON object
            TypeError: If the log section has unknown keys
        """
        with open(path, 'r') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a JSON object, got {type(data).__name__}")

        config = cls(
            verify_after_sign=data.get("verify_after_sign", True),
            hex_prefix=data.get("hex_prefix", False),
        )

        if "log" in data:
            config.log = LogConfig(**data["log"])

        logger.info(f"Configuration loaded from {path}")
        return config

    def to_dict(self) -> dict:
        """Export configuration as dictionary."""
        return {
            "verify_after_sign": self.verify_after_sign,
            "hex_prefix": self.hex_prefix,
            "log": asdict(self.log),
        }


_active_config = CryptoConfig()


def get_config() -> CryptoConfig:
    """Get the process-wide configuration."""
    return _active_config


def set_config(config: CryptoConfig) -> None:
    """
    Replace the process-wide configuration.

    Raises:
        ValueError: If the configuration does not validate
    """
    global _active_config
    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid configuration: {'; '.join(errors)}")
    _active_config = config


def setup_logging(config: LogConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers = [logging.StreamHandler()]

    if config.file:
        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
    )
