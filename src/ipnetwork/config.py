"""Configuration for the ipnetwork command-line tool."""

import os
import logging

DEFAULT_MAX_ITEMS = 256


class Config:
    """CLI configuration."""

    def __init__(self, log_level: str = "INFO", max_items: int = DEFAULT_MAX_ITEMS):
        self.log_level = log_level.upper()
        self.max_items = max_items

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables.

        Reads LOG_LEVEL and IPNETWORK_MAX_ITEMS from the environment.

        Raises:
            ValueError: If IPNETWORK_MAX_ITEMS is not a non-negative integer.
        """
        log_level = os.getenv("LOG_LEVEL", "INFO")
        raw_max_items = os.getenv("IPNETWORK_MAX_ITEMS")

        max_items = DEFAULT_MAX_ITEMS
        if raw_max_items:
            try:
                max_items = int(raw_max_items)
            except ValueError:
                raise ValueError(
                    f"IPNETWORK_MAX_ITEMS must be an integer, got {raw_max_items!r}"
                ) from None
            if max_items < 0:
                raise ValueError(
                    f"IPNETWORK_MAX_ITEMS must not be negative, got {max_items}"
                )

        return cls(log_level=log_level, max_items=max_items)

    def setup_logging(self) -> None:
        """Configure logging for the application."""
        logging.basicConfig(
            level=getattr(logging, self.log_level, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        # Reduce noise from third-party libraries
        logging.getLogger("dotenv").setLevel(logging.WARNING)

    def __repr__(self) -> str:
        return f"Config(log_level={self.log_level!r}, max_items={self.max_items})"
