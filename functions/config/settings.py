"""Modular feasibility configuration settings.

Loads configuration from environment variables with sensible defaults.
The square-footage assumptions below feed every cost-per-square-foot figure
in the package, so they live here as named values rather than inline numbers.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load .env file for local overrides (assumptions, log level)
load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Square-footage assumptions
    average_unit_sqft: int = field(default_factory=lambda: int(os.getenv("AVERAGE_UNIT_SQFT", "720")))
    default_building_sqft: int = field(default_factory=lambda: int(os.getenv("DEFAULT_BUILDING_SQFT", "17360")))

    # Sample projects keep their stored scores instead of generated ones
    sample_project_names: tuple = field(default_factory=lambda: tuple(
        name.strip()
        for name in os.getenv(
            "SAMPLE_PROJECT_NAMES",
            "Serenity Village,Mountain View Apartments,University Housing Complex,Workforce Commons",
        ).split(",")
        if name.strip()
    ))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def validate(self) -> None:
        """Validate that the square-footage assumptions are usable.

        Raises:
            ValueError: If an assumption is not a positive number.
        """
        if self.average_unit_sqft <= 0:
            raise ValueError("AVERAGE_UNIT_SQFT must be positive")
        if self.default_building_sqft <= 0:
            raise ValueError("DEFAULT_BUILDING_SQFT must be positive")


# Singleton settings instance
settings = Settings()
