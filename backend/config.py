"""Centralized configuration — all env vars in one place."""

import os

# Browsers treat the hostname and the numeric loopback as distinct origins.
DEFAULT_CORS_ORIGINS = ",".join([
    "http://localhost:5267",
    "https://localhost:7157",
    "http://127.0.0.1:5267",
    "https://127.0.0.1:7157",
])


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
            if origin.strip()
        ]
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # Product list cache
        self.product_cache_ttl_seconds: int = int(os.getenv("PRODUCT_CACHE_TTL_SECONDS", "600"))

        # Where the client looks for the API
        self.api_base_url: str = os.getenv("API_BASE_URL", "http://127.0.0.1:5002")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of env vars whose values are unusable."""
        problems = []
        if self.product_cache_ttl_seconds <= 0:
            problems.append("PRODUCT_CACHE_TTL_SECONDS")
        if self.is_production and "*" in self.cors_origins:
            problems.append("CORS_ORIGINS")
        return problems


settings = Settings()
