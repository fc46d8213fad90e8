# Interfaces package initialization
# This file makes the interfaces directory a Python package

from . import service_interface

__all__ = [
    "service_interface",
]
