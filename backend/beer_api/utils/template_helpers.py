"""Template helper functions for consistent UI rendering.

This module provides Jinja2 template functions for:
- Beer type and style labels with fallbacks
- Beer name formatting with fallbacks
"""

import logging
from typing import Any, Optional

from beer_api.domain.entities import BeerStyle, BeerType

logger = logging.getLogger(__name__)

# Labels that do not read well as title-cased enum names
_STYLE_LABELS = {BeerStyle.IPA: "IPA"}


def _label(enum_cls, value: Any, overrides: dict, fallback: str) -> str:
    if isinstance(value, bool):
        return fallback
    try:
        member = enum_cls(value)
    except (ValueError, TypeError):
        logger.debug(
            "Unknown code rendered with fallback label",
            extra={"context": {"enum": enum_cls.__name__, "value": value}},
        )
        return fallback
    return overrides.get(member, member.name.title())


def format_beer_type(value: Any, fallback: str = "Unknown") -> str:
    """Format a beer type code as a label.

    Examples:
        format_beer_type(1)   # "Ale"
        format_beer_type(99)  # "Unknown"
    """
    return _label(BeerType, value, {}, fallback)


def format_beer_style(value: Any, fallback: str = "Unknown") -> str:
    """Format a beer style code as a label.

    Examples:
        format_beer_style(10)  # "IPA"
        format_beer_style(12)  # "Pilsner"
    """
    return _label(BeerStyle, value, _STYLE_LABELS, fallback)


def format_beer_name(beer: Optional[Any], fallback: str = "Unnamed") -> str:
    """Return the beer's trimmed name, or ``fallback`` when missing/blank."""
    if not beer:
        return fallback
    name = str(getattr(beer, "name", "") or "").strip()
    return name or fallback


def register_template_helpers(app) -> None:
    """Expose the helpers as Jinja globals on ``app``."""
    app.jinja_env.globals.update(
        {
            "format_beer_type": format_beer_type,
            "format_beer_style": format_beer_style,
            "format_beer_name": format_beer_name,
        }
    )
