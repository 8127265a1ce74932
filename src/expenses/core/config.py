#!/usr/bin/env python3
"""
Configuration Management for the Expense Tracker

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .currency import is_valid_currency

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class MoneyConfig:
    """Currency defaults for display and storage."""

    default_currency: str = "USD"
    locale: str = "en-US"


@dataclass
class ExchangeConfig:
    """Exchange-rate snapshot settings."""

    rates_file: Path
    rates_ttl_hours: int = 6

    @property
    def max_age(self) -> timedelta:
        return timedelta(hours=self.rates_ttl_hours)


@dataclass
class Config:
    """
    Main configuration class for the expense tracker.

    Loads configuration from environment variables with defaults and
    validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    cache_dir: Path

    # Component configurations
    money: MoneyConfig
    exchange: ExchangeConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("EXPENSES_ENV", "development"))

        # Base directories
        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_expenses"
            base_dir = Path(os.getenv("EXPENSES_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("EXPENSES_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        cache_dir = data_dir / "cache"

        # Ensure directories exist
        for directory in [data_dir, cache_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        money = MoneyConfig(
            default_currency=os.getenv("EXPENSES_DEFAULT_CURRENCY", "USD").upper(),
            locale=os.getenv("EXPENSES_LOCALE", "en-US"),
        )

        exchange = ExchangeConfig(
            rates_file=Path(os.getenv("EXPENSES_RATES_FILE", str(cache_dir / "exchange_rates.json"))),
            rates_ttl_hours=int(os.getenv("EXPENSES_RATES_TTL_HOURS", "6")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            cache_dir=cache_dir,
            money=money,
            exchange=exchange,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [("data_dir", self.data_dir), ("cache_dir", self.cache_dir)]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if not is_valid_currency(self.money.default_currency):
            errors.append(f"EXPENSES_DEFAULT_CURRENCY is not an ISO 4217 code: {self.money.default_currency}")

        if self.exchange.rates_ttl_hours <= 0:
            errors.append("Exchange rate TTL must be positive")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Reduce noise from external libraries in production
        if self.environment == Environment.PRODUCTION:
            logging.getLogger("babel").setLevel(logging.WARNING)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, Enum):
                result[field_name] = {
                    nested_name: str(nested_value) if isinstance(nested_value, Path) else nested_value
                    for nested_name, nested_value in field_value.__dict__.items()
                }
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
