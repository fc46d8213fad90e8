# Domain package: entities and repository contracts

from .entities import Beer, BeerStyle, BeerType, merge_beer
from .interfaces import IBeerReader, IBeerRepository, IBeerWriter

__all__ = [
    "Beer",
    "BeerStyle",
    "BeerType",
    "merge_beer",
    "IBeerReader",
    "IBeerWriter",
    "IBeerRepository",
]
