# Controllers package initialization
# This file makes the controllers directory a Python package
# and allows importing controller modules

from . import beer_controller

__all__ = [
    "beer_controller",
]
