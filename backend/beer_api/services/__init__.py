# Services package initialization

from . import beer_service

__all__ = ["beer_service"]
