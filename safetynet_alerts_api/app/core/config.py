"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration, serving the bundled
``data.json`` document.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "SafetyNet Alerts API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path of the JSON document holding persons, fire stations and
    # medical records.  A relative path is resolved against the
    # ``safetynet_alerts_api`` package directory by ``core.store``.
    data_file: str = os.getenv("DATA_FILE", "data.json")

    # Persons strictly younger than this are reported as children.
    child_age_limit: int = int(os.getenv("CHILD_AGE_LIMIT", "18"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
