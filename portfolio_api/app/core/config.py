"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and match
the fixed values the services historically used (planner on port
8080, a single allowed origin ``http://localhost:4200``).
"""

import os
from dataclasses import dataclass
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Investment Portfolio API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  The frontend is served from a single origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:4200")

    # Listening addresses for the two services started by ``run.py``.
    planner_host: str = os.getenv("PLANNER_HOST", "0.0.0.0")
    planner_port: int = int(os.getenv("PLANNER_PORT", "8080"))
    portfolio_host: str = os.getenv("PORTFOLIO_HOST", "0.0.0.0")
    portfolio_port: int = int(os.getenv("PORTFOLIO_PORT", "8081"))

    # Whether each store starts with the demo assets.
    seed_assets: bool = _env_flag("SEED_ASSETS", "true")

    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` split into a list, ignoring blanks."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
