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

    # Catalog settings
    CATALOG_TITLE: str = os.getenv("CATALOG_TITLE", "Catálogo Lozorio Móveis")
    MAX_PRODUCTS: int = int(os.getenv("MAX_PRODUCTS", "10000"))
    NEW_PRODUCT_DAYS: int = int(os.getenv("NEW_PRODUCT_DAYS", "30"))
    INFINITE_SCROLL_BATCH_SIZE: int = int(
        os.getenv("INFINITE_SCROLL_BATCH_SIZE", "24")
    )

    # Gallery settings
    GALLERY_MAX_IMAGES: int = int(os.getenv("GALLERY_MAX_IMAGES", "50"))

    # CORS
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "*")

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.
        """
        return self.ENVIRONMENT.lower() == "production"

    @property
    def cors_origins(self) -> list[str]:
        """Return the configured CORS origins as a list."""
        return [
            origin.strip()
            for origin in self.CORS_ALLOW_ORIGINS.split(",")
            if origin.strip()
        ]

    def __init__(self):
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        logging.basicConfig(level=self.log_level)
        self.logger = logging.getLogger(__name__)

        self.logger.debug(
            f"Config initialized with environment={self.ENVIRONMENT}, "
            f"debug={self.debug}, log_level={self.log_level}"
        )


# Create a global settings instance for import
settings = Settings()
