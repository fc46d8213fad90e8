"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Beer


class IBeerReader(ABC):
    """Interface for beer read operations - Interface Segregation Principle."""

    @abstractmethod
    def get_by_id(self, beer_id: int) -> Optional[Beer]:
        """Get beer by ID, or None when it does not exist."""
        pass

    @abstractmethod
    def list_all(self) -> List[Beer]:
        """Get all beers ordered by ID."""
        pass


class IBeerWriter(ABC):
    """Interface for beer write operations - Interface Segregation Principle."""

    @abstractmethod
    def add(self, beer: Beer) -> Beer:
        """Persist a new beer and return it with its assigned ID."""
        pass

    @abstractmethod
    def update(self, beer: Beer) -> Beer:
        """Overwrite an existing beer."""
        pass

    @abstractmethod
    def delete(self, beer_id: int) -> bool:
        """Delete a beer. Returns False when nothing was deleted."""
        pass


class IBeerRepository(IBeerReader, IBeerWriter):
    """Complete beer repository interface combining read/write operations."""

    pass
