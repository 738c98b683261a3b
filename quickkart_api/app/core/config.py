"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts against a local MongoDB without any setup.  In a
production deployment override ``DB_URI`` and ``DB_NAME`` via the
environment.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "QuickKart Store Layout API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # MongoDB connection string and database name.  These are the two
    # values the service cannot run without.
    db_uri: str = os.getenv("DB_URI", "mongodb://localhost:27017")
    db_name: str = os.getenv("DB_NAME", "quickkart")

    # Path suffix the GraphQL endpoint is mounted under.
    graphql_path: str = os.getenv("GRAPHQL_PATH", "/quickkart")
    # Serve the GraphiQL IDE on GET requests to the GraphQL path.
    graphiql: bool = _env_flag("GRAPHIQL", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
