"""
ERC-5564 Configuration
"""

from __future__ import annotations
import json
import logging
from logging.handlers import RotatingFileHandler
from dataclasses import dataclass, field, asdict
from typing import List, Optional

from eip5564.constants import SCHEME_ID_SECP256K1

logger = logging.getLogger(__name__)


@dataclass
class ScanConfig:
    """Announcement scanning configuration."""
    max_workers: Optional[int] = None       # None = scan inline
    require_view_tag: bool = False


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_size_mb: int = 100
    backup_count: int = 5


@dataclass
class StealthConfig:
    """
    Complete configuration.

    All settings for using the stealth address protocol.
    """
    scheme_id: int = SCHEME_ID_SECP256K1

    # Sub-configurations
    scan: ScanConfig = field(default_factory=ScanConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.scheme_id != SCHEME_ID_SECP256K1:
            errors.append(f"Unsupported scheme id: {self.scheme_id}")

        if self.scan.max_workers is not None and self.scan.max_workers < 1:
            errors.append("max_workers must be at least 1")

        if not isinstance(getattr(logging, self.log.level.upper(), None), int):
            errors.append(f"Invalid log level: {self.log.level}")

        if self.log.max_size_mb < 1:
            errors.append("max_size_mb must be at least 1")

        return errors

    def save(self, path: str) -> None:
        """Save configuration to file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: str) -> "StealthConfig":
        """Load configuration from file."""
        with open(path, 'r') as f:
            data = json.load(f)

        config = cls(
            scheme_id=data.get("scheme_id", SCHEME_ID_SECP256K1),
        )

        if "scan" in data:
            config.scan = ScanConfig(**data["scan"])

        if "log" in data:
            config.log = LogConfig(**data["log"])

        logger.info(f"Configuration loaded from {path}")
        return config

    def to_dict(self) -> dict:
        """Export configuration as dictionary."""
        return {
            "scheme_id": self.scheme_id,
            "scan": asdict(self.scan),
            "log": asdict(self.log),
        }


def setup_logging(config: LogConfig) -> None:
    """
    Configure root logging from a LogConfig.

    Any handlers already attached to the root logger are replaced.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = logging.Formatter(config.format)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        handlers.append(RotatingFileHandler(
            config.file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding="utf-8",
        ))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logger.debug("Logging configured at %s", logging.getLevelName(level))
