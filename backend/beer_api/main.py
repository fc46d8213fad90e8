import logging
from typing import Any, Mapping, Optional

from flask import Flask
from werkzeug.exceptions import HTTPException, InternalServerError

from beer_api.controllers.beer_controller import create_beer_blueprint
from beer_api.core.api_utils import json_error
from beer_api.core.config import get_settings, load_environment, log_settings
from beer_api.core.interfaces.service_interface import BeerServiceInterface
from beer_api.core.logging_config import setup_logging
from beer_api.utils.template_helpers import register_template_helpers

logger = logging.getLogger(__name__)


def _build_default_service(database_url: str) -> BeerServiceInterface:
    """Wire the SQL repository behind the beer service and ensure tables exist."""
    from beer_api.db.session import create_tables, get_engine, get_sessionmaker
    from beer_api.repositories.beer_repository import BeerRepository
    from beer_api.services.beer_service import BeerService

    create_tables(get_engine(database_url))
    return BeerService(BeerRepository(get_sessionmaker(database_url)))


def _init_sentry(app: Flask) -> None:
    sentry_dsn = app.config.get("SENTRY_DSN")
    if not sentry_dsn:
        logger.info(
            "Sentry not initialized (SENTRY_DSN not set)",
            extra={"context": {"environment": app.config.get("ENV_NAME")}},
        )
        return

    import sentry_sdk
    from sentry_sdk.integrations.flask import FlaskIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    sentry_sdk.init(
        dsn=sentry_dsn,
        environment=app.config.get("ENV_NAME"),
        integrations=[FlaskIntegration(), SqlalchemyIntegration()],
        traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        send_default_pii=False,
    )
    logger.info(
        "Sentry initialized",
        extra={"context": {"environment": app.config.get("ENV_NAME")}},
    )


def _init_metrics(app: Flask) -> None:
    if not app.config.get("METRICS_ENABLED"):
        return

    from prometheus_client import CollectorRegistry
    from prometheus_flask_exporter import PrometheusMetrics

    # Own registry per app so repeated create_app() calls don't collide
    metrics = PrometheusMetrics(app, registry=CollectorRegistry())
    metrics.info("app_info", "Application information", environment=app.config.get("ENV_NAME"))
    app.extensions["prometheus_metrics"] = metrics
    logger.info(
        "Prometheus metrics initialized",
        extra={"context": {"metrics_endpoint": "/metrics"}},
    )


def _register_error_handlers(app: Flask) -> None:
    """Keep the {"message": ...} shape for errors raised outside the beer handlers."""

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        response = json_error(error.description or error.name, error.code or 500)
        valid_methods = getattr(error, "valid_methods", None)
        if valid_methods:
            response.headers["Allow"] = ", ".join(valid_methods)
        return response

    @app.errorhandler(InternalServerError)
    def handle_internal_error(error: InternalServerError):
        logger.error(
            "Unhandled exception",
            extra={"context": {"error": str(error.original_exception or error)}},
        )
        return json_error("An unexpected error occurred", 500)


def create_app(
    service: Optional[BeerServiceInterface] = None,
    config: Optional[Mapping[str, Any]] = None,
) -> Flask:
    """
    Application factory.

    Args:
        service: Use-case implementation for the beer routes. Defaults to the
            SQL-backed BeerService.
        config: Flask config overrides applied on top of environment settings.
    """
    load_environment()
    settings = get_settings()
    if config:
        settings.update(config)

    app = Flask(__name__, template_folder=settings["TEMPLATE_FOLDER"])
    app.config.update(settings)

    setup_logging(
        app=app,  # Pass app to register request/response hooks
        log_level=app.config["LOG_LEVEL"],
        enable_sql_timing=app.config["ENV_NAME"] != "production",
        log_to_file=app.config["LOG_TO_FILE"],
        use_json_format=app.config["ENV_NAME"] == "production",
    )
    log_settings(app.config)

    _init_sentry(app)
    _init_metrics(app)
    _register_error_handlers(app)
    register_template_helpers(app)

    if service is None:
        service = _build_default_service(app.config["DATABASE_URL"])
    app.register_blueprint(create_beer_blueprint(service))

    logger.info(
        "Beer API ready",
        extra={
            "context": {
                "service": type(service).__name__,
                "template_folder": app.template_folder,
            }
        },
    )
    return app
