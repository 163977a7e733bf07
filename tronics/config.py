"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Server settings
    HOST: str = os.getenv("HOST", "localhost")
    PORT: int = int(os.getenv("PORT", "8080"))
    REQUEST_LOGGING: bool = os.getenv("REQUEST_LOGGING", "false").lower() == "true"

    # Registry settings
    KEY_POLICY: str = os.getenv("KEY_POLICY", "monotonic")
    SEED_PRODUCTS: str = os.getenv("SEED_PRODUCTS", "")

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.
        """
        return self.ENVIRONMENT.lower() == "production"

    @property
    def seed_products(self) -> list[str]:
        """Names seeded into the registry at startup, in order."""
        return [name.strip() for name in self.SEED_PRODUCTS.split(",") if name.strip()]

    def __init__(self):
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        logging.basicConfig(level=self.log_level)
        self.logger = logging.getLogger(__name__)

        self.logger.debug(
            f"Config initialized with environment={self.ENVIRONMENT}, "
            f"key_policy={self.KEY_POLICY}, log_level={self.log_level}"
        )


# Create a global settings instance for import
settings = Settings()
