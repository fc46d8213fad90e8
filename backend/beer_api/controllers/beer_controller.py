"""
Beer controller for handling HTTP requests following SOLID principles.

This controller:
- Handles HTTP concerns only (Single Responsibility)
- Depends on the use-case abstraction, injected at blueprint creation
  (Dependency Inversion)
- Keeps no per-request state: handlers close over the service only

Try it:
    curl http://localhost:5000/v1/beer
    curl -H 'Accept: application/json' http://localhost:5000/v1/beer/1
    curl -X POST http://localhost:5000/v1/beer \\
         -H 'Content-Type: application/json' \\
         -d '{"name": "Skol", "type": 1, "style": 2}'
"""

import logging

from flask import Blueprint, current_app, request
from jinja2 import TemplateError

from ..core.api_utils import empty_response, json_body, json_error, text_error
from ..core.exceptions import (
    BeerValidationError,
    InvalidBeerIdError,
    PayloadDecodeError,
)
from ..core.interfaces.service_interface import BeerServiceInterface
from ..core.negotiation import ResponseFormat, negotiate_format
from ..core.request_parsing import decode_beer, parse_beer_id
from ..domain.entities import merge_beer

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "index.html"
INDEX_TITLE = "Beers"


def create_beer_blueprint(service: BeerServiceInterface) -> Blueprint:
    """Build the /v1/beer blueprint bound to ``service``."""
    beer_bp = Blueprint("beer", __name__, url_prefix="/v1/beer")

    # Flask answers OPTIONS for every rule automatically.
    beer_bp.add_url_rule("", "list_beers", _list_beers(service), methods=["GET"])
    beer_bp.add_url_rule("/<raw_id>", "get_beer", _get_beer(service), methods=["GET"])
    beer_bp.add_url_rule("", "store_beer", _store_beer(service), methods=["POST"])
    beer_bp.add_url_rule("/<raw_id>", "update_beer", _update_beer(service), methods=["PUT"])
    beer_bp.add_url_rule(
        "/<raw_id>", "remove_beer", _remove_beer(service), methods=["DELETE"]
    )
    return beer_bp


def _client_error(message: str, status_code: int, **context):
    logger.warning(
        message,
        extra={"context": {"path": request.path, "status_code": status_code, **context}},
    )
    return json_error(message, status_code)


def _server_error(message: str, operation: str, **context):
    logger.error(
        f"Beer {operation} failed",
        extra={"context": {"path": request.path, "error": message, **context}},
        exc_info=True,
    )
    return json_error(message, 500)


def _list_beers(service: BeerServiceInterface):
    def list_beers():
        """List all beers as JSON or as the rendered index page."""
        if negotiate_format(request.headers.get("Accept")) is ResponseFormat.JSON:
            return _list_beers_json(service)
        return _list_beers_html(service)

    return list_beers


def _list_beers_json(service: BeerServiceInterface):
    try:
        beers = service.get_all()
    except Exception as e:
        return _server_error(str(e), "list")
    return json_body([beer.to_dict() for beer in beers])


def _list_beers_html(service: BeerServiceInterface):
    try:
        template = current_app.jinja_env.get_template(INDEX_TEMPLATE)
    except TemplateError as e:
        logger.error(
            "Failed to load index template",
            extra={"context": {"template": INDEX_TEMPLATE, "error": str(e)}},
        )
        return text_error(f"Error parsing {e}", 500)

    try:
        beers = service.get_all()
    except Exception as e:
        logger.error(
            "Beer list failed",
            extra={"context": {"path": request.path, "error": str(e)}},
            exc_info=True,
        )
        return text_error(str(e), 500)

    try:
        html = template.render(Title=INDEX_TITLE, Beers=beers)
    except Exception as e:
        logger.error(
            "Failed to render index template",
            extra={"context": {"template": INDEX_TEMPLATE, "error": str(e)}},
            exc_info=True,
        )
        return text_error(str(e), 500)
    return current_app.response_class(html, status=200, mimetype="text/html")


def _get_beer(service: BeerServiceInterface):
    def get_beer(raw_id: str):
        """Fetch one beer by id."""
        try:
            beer_id = parse_beer_id(raw_id)
        except InvalidBeerIdError as e:
            return _client_error(str(e), 400)

        try:
            beer = service.get(beer_id)
        except Exception as e:
            return _client_error(str(e), 404, beer_id=beer_id)

        return json_body(beer.to_dict())

    return get_beer


def _store_beer(service: BeerServiceInterface):
    def store_beer():
        """Create a beer from the JSON body. The new id is not returned."""
        try:
            beer = decode_beer(request.get_data())
            beer.validate()
        except (PayloadDecodeError, BeerValidationError) as e:
            return _client_error(str(e), 400)

        try:
            service.store(beer)
        except Exception as e:
            return _server_error(str(e), "store")

        return empty_response(201)

    return store_beer


def _update_beer(service: BeerServiceInterface):
    def update_beer(raw_id: str):
        """Replace name, type and style of an existing beer."""
        try:
            beer_id = parse_beer_id(raw_id)
        except InvalidBeerIdError as e:
            return _client_error(str(e), 400)

        # Existence is confirmed before the body is even looked at
        try:
            existing = service.get(beer_id)
        except Exception as e:
            return _client_error(str(e), 404, beer_id=beer_id)

        try:
            incoming = decode_beer(request.get_data())
            incoming.validate()
        except (PayloadDecodeError, BeerValidationError) as e:
            return _client_error(str(e), 400, beer_id=beer_id)

        try:
            service.update(merge_beer(existing, incoming))
        except Exception as e:
            return _server_error(str(e), "update", beer_id=beer_id)

        return empty_response(204)

    return update_beer


def _remove_beer(service: BeerServiceInterface):
    def remove_beer(raw_id: str):
        """Delete a beer. Any removal failure is reported as 404."""
        try:
            beer_id = parse_beer_id(raw_id)
        except InvalidBeerIdError as e:
            return _client_error(str(e), 400)

        try:
            service.remove(beer_id)
        except Exception as e:
            return _client_error(str(e), 404, beer_id=beer_id)

        return empty_response(204)

    return remove_beer
