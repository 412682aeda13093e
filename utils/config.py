"""
Configuration management.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from core.valuation_engine.models import BuildingPolicy


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


@dataclass
class Config:
    """
    Application configuration.

    Loads from environment variables with sensible defaults.
    """

    # Server
    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # Valuation
    building_policy: str = field(
        default_factory=lambda: os.getenv("BUILDING_POLICY", BuildingPolicy.YIELD_BACKED.value)
    )
    projection_years: Optional[int] = field(
        default_factory=lambda: _optional_int("PROJECTION_YEARS")
    )

    # Reporting
    reports_dir: str = field(default_factory=lambda: os.getenv("REPORTS_DIR", "./reports"))
    currency: str = field(default_factory=lambda: os.getenv("CURRENCY", "INR"))

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment."""
        return cls()

    def policy(self) -> BuildingPolicy:
        """
        Resolve the configured building policy.

        Raises:
            ValueError: If the name matches no policy
        """
        policy = BuildingPolicy.from_string(self.building_policy)
        if policy is None:
            valid = ", ".join(p.value for p in BuildingPolicy)
            raise ValueError(
                f"Unknown building policy {self.building_policy!r} (expected one of: {valid})"
            )
        return policy

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "host": self.host,
            "port": self.port,
            "debug": self.debug,
            "log_level": self.log_level,
            "building_policy": self.building_policy,
            "projection_years": self.projection_years,
            "reports_dir": self.reports_dir,
            "currency": self.currency,
        }
