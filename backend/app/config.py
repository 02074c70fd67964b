"""
PostSearch Backend: Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py (logging, server binding, entry point wiring)
       and by the OpenSearch store factory.
When:  Loaded once at module import time; validated before the app starts.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults that work against a local single-node
    OpenSearch on port 9200.
    """

    # ── OpenSearch ────────────────────────────────────────────────────────
    # Format: comma-separated URLs, e.g. "https://os-1:9200,https://os-2:9200"
    opensearch_hosts: str = Field(
        default="http://localhost:9200",
        description="OpenSearch node URLs (comma separated)",
    )
    opensearch_username: Optional[str] = Field(default=None)
    opensearch_password: Optional[str] = Field(default=None)
    opensearch_verify_certs: bool = Field(default=False)

    @property
    def opensearch_hosts_list(self) -> List[str]:
        """Splits comma-separated hosts into the list the client expects."""
        return [host.strip() for host in self.opensearch_hosts.split(",") if host.strip()]

    # ── Posts Resource ────────────────────────────────────────────────────
    # The fixed (index, type) pair every store call is bound to
    posts_index: str = Field(default="node_api")
    posts_type: str = Field(default="posts")

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8080, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # OPENSEARCH_HOSTS and opensearch_hosts both work
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that the store connection settings are usable.
        When:  Called during app startup (lifespan).
        How:   Collects every problem and raises one ValueError listing them.
        """
        errors = []
        if not self.opensearch_hosts_list:
            errors.append("OPENSEARCH_HOSTS is empty. Set at least one node URL.")
        if self.opensearch_username and not self.opensearch_password:
            errors.append(
                "OPENSEARCH_USERNAME is set but OPENSEARCH_PASSWORD is not. "
                "Set both or neither."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance: configuration is immutable after startup
settings = Settings()
