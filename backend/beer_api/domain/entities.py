"""
Domain entities - Pure business logic, no framework dependencies.

Following SOLID principles:
- Single Responsibility: Each entity represents one business concept
- Open/Closed: Entities can be extended without modification
"""

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional

from beer_api.core.exceptions import BeerValidationError


class BeerType(IntEnum):
    """Beer type codes accepted by the catalogue."""

    ALE = 1
    LAGER = 2
    MALT = 3
    STOUT = 4


class BeerStyle(IntEnum):
    """Beer style codes accepted by the catalogue."""

    AMBER = 1
    BLONDE = 2
    BROWN = 3
    CREAM = 4
    DARK = 5
    PALE = 6
    STRONG = 7
    WHEAT = 8
    RED = 9
    IPA = 10
    LIME = 11
    PILSNER = 12
    GOLDEN = 13
    FRUIT = 14
    HONEY = 15


def _is_member(enum_cls, value) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value in {member.value for member in enum_cls}


@dataclass
class Beer:
    """Domain entity representing a Beer in the catalogue.

    This is the pure business representation, independent of:
    - Database implementation (SQLAlchemy)
    - HTTP frameworks (Flask)

    ``type`` and ``style`` hold the raw integer codes so that a payload
    carrying an unknown code can still be decoded and then rejected by
    ``validate()``.
    """

    id: Optional[int] = None
    name: str = ""
    type: int = 0
    style: int = 0

    def validate(self) -> None:
        """Check domain rules, raising BeerValidationError on the first failure."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise BeerValidationError("name is required")
        if not _is_member(BeerType, self.type):
            raise BeerValidationError(f"invalid beer type: {self.type}")
        if not _is_member(BeerStyle, self.style):
            raise BeerValidationError(f"invalid beer style: {self.style}")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "style": self.style,
        }


def merge_beer(existing: Beer, incoming: Beer) -> Beer:
    """Copy the caller-editable fields of ``incoming`` onto ``existing``.

    Identity (and anything else only persistence knows about) stays as it
    was fetched; ``name``, ``style`` and ``type`` are overwritten.
    """
    return replace(
        existing,
        name=incoming.name,
        style=incoming.style,
        type=incoming.type,
    )
