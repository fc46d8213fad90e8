"""
Centralized configuration module for application-wide settings.

Every setting is read from the environment through a small getter so tests
can change variables before the app is created. ``create_app(config=...)``
overrides take precedence over the values returned here.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes")

# backend/beer_api/core -> project root
PROJECT_ROOT = Path(__file__).resolve().parents[3]


def load_environment() -> None:
    """
    Load variables from a .env file.

    Only loads when DATABASE_URL is not already defined by the environment,
    so container and CI settings are never overridden by a stray .env file.
    """
    if not os.getenv("DATABASE_URL"):
        load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


# ===========================
# Environment
# ===========================


def get_environment() -> str:
    """
    Get the deployment environment name.

    Environment Variables:
        FLASK_ENV: 'development' (default) or 'production'
    """
    return os.getenv("FLASK_ENV", "development")


def is_production() -> bool:
    return get_environment() == "production"


def is_testing() -> bool:
    """True when TESTING is set to a truthy value."""
    return _flag("TESTING", "")


# ===========================
# Database Configuration
# ===========================


def get_database_url() -> str:
    """
    Get the SQLAlchemy database URL.

    Environment Variables:
        DATABASE_URL: Any SQLAlchemy URL
            Default: 'sqlite:///./beer.db'

    Examples:
        >>> # In .env file:
        >>> # DATABASE_URL=postgresql://beer:beer@db:5432/beer
        >>> url = get_database_url()
    """
    return os.getenv("DATABASE_URL", "sqlite:///./beer.db")


# ===========================
# Logging Configuration
# ===========================


def get_log_level() -> str:
    """
    Get the root log level.

    Environment Variables:
        LOG_LEVEL: Standard level name
            Default: 'INFO' in production, 'DEBUG' otherwise
    """
    default = "INFO" if is_production() else "DEBUG"
    return os.getenv("LOG_LEVEL", default).upper()


def get_log_to_file() -> bool:
    """
    Whether rotating log files are written under logs/.

    Environment Variables:
        LOG_TO_FILE: "1" (default) writes files, "0" logs to stdout only
    """
    return _flag("LOG_TO_FILE", "1")


# ===========================
# Views Configuration
# ===========================


def get_template_folder() -> str:
    """
    Get the Jinja template folder.

    Environment Variables:
        TEMPLATE_FOLDER: Absolute path to the templates directory
            Default: <project root>/frontend/templates
    """
    default = PROJECT_ROOT / "frontend" / "templates"
    return os.getenv("TEMPLATE_FOLDER", str(default))


# ===========================
# Observability Configuration
# ===========================


def get_metrics_enabled() -> bool:
    """
    Whether the Prometheus /metrics endpoint is exposed.

    Environment Variables:
        METRICS_ENABLED: Default 'true'
    """
    return _flag("METRICS_ENABLED", "true")


def get_sentry_dsn() -> str | None:
    """
    Get the Sentry DSN.

    Returns:
        str | None: DSN if configured; Sentry stays disabled otherwise
    """
    return os.getenv("SENTRY_DSN") or None


def get_port() -> int:
    """Development server port (PORT, default 5000)."""
    try:
        return int(os.getenv("PORT", "5000"))
    except ValueError:
        logger.warning(
            "Invalid PORT value, falling back to 5000",
            extra={"context": {"PORT": os.getenv("PORT")}},
        )
        return 5000


def get_settings() -> dict:
    """Snapshot of all settings as Flask config keys."""
    return {
        "ENV_NAME": get_environment(),
        "TESTING": is_testing(),
        "DATABASE_URL": get_database_url(),
        "LOG_LEVEL": get_log_level(),
        "LOG_TO_FILE": get_log_to_file(),
        "TEMPLATE_FOLDER": get_template_folder(),
        "METRICS_ENABLED": get_metrics_enabled(),
        "SENTRY_DSN": get_sentry_dsn(),
        "PORT": get_port(),
    }


def log_settings(settings: dict) -> None:
    """
    Log the active configuration.

    Should be called during application startup; the database URL password
    is masked.
    """
    logger.info(
        "Configuration initialized",
        extra={
            "context": {
                "environment": settings.get("ENV_NAME"),
                "database_url": mask_url_password(str(settings.get("DATABASE_URL"))),
                "log_level": settings.get("LOG_LEVEL"),
                "metrics_enabled": settings.get("METRICS_ENABLED"),
                "sentry_enabled": bool(settings.get("SENTRY_DSN")),
            }
        },
    )


def mask_url_password(url: str) -> str:
    """Hide the password part of a database URL for logging."""
    import re

    return re.sub(r"(://[^:/?#]+):[^@]*@", r"\1:***@", url)
