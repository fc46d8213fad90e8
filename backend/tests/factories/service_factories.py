"""
Test doubles for the beer use-case and repository interfaces.

``InMemoryBeerService`` is a working fake that records every call, so
controller tests can assert what reached the use-case. The mock factories
build ``Mock(spec=...)`` objects for tests that only need canned answers.
"""

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple
from unittest.mock import Mock

from beer_api.core.exceptions import BeerNotFoundError
from beer_api.core.interfaces.service_interface import BeerServiceInterface
from beer_api.domain.entities import Beer
from beer_api.domain.interfaces import IBeerRepository


class InMemoryBeerService(BeerServiceInterface):
    """Dict-backed use-case with optional forced failures."""

    def __init__(self, beers: Iterable[Beer] = ()):
        self.beers: Dict[int, Beer] = {b.id: replace(b) for b in beers}
        self.calls: List[Tuple[str, object]] = []
        self.failures: Dict[str, Exception] = {}

    def fail(self, operation: str, error: Exception) -> None:
        """Make ``operation`` raise ``error`` from now on."""
        self.failures[operation] = error

    def _enter(self, operation: str, argument: object = None) -> None:
        self.calls.append((operation, argument))
        if operation in self.failures:
            raise self.failures[operation]

    def called(self, operation: str) -> List[object]:
        return [arg for name, arg in self.calls if name == operation]

    def get_all(self) -> List[Beer]:
        self._enter("get_all")
        return [replace(b) for _, b in sorted(self.beers.items())]

    def get(self, beer_id: int) -> Beer:
        self._enter("get", beer_id)
        if beer_id not in self.beers:
            raise BeerNotFoundError(beer_id)
        return replace(self.beers[beer_id])

    def store(self, beer: Beer) -> Beer:
        self._enter("store", replace(beer))
        new_id = max(self.beers, default=0) + 1
        created = replace(beer, id=new_id)
        self.beers[new_id] = created
        return replace(created)

    def update(self, beer: Beer) -> Beer:
        self._enter("update", replace(beer))
        if beer.id not in self.beers:
            raise BeerNotFoundError(beer.id)
        self.beers[beer.id] = replace(beer)
        return replace(beer)

    def remove(self, beer_id: int) -> None:
        self._enter("remove", beer_id)
        if beer_id not in self.beers:
            raise BeerNotFoundError(beer_id)
        del self.beers[beer_id]


class BeerRepositoryFactory:
    """Factory for creating beer repository mocks."""

    @staticmethod
    def create_mock_full(beers: Optional[List[Beer]] = None) -> Mock:
        mock_repo = Mock(spec=IBeerRepository)
        mock_repo.list_all.return_value = list(beers or [])
        mock_repo.get_by_id.return_value = None
        mock_repo.add.side_effect = lambda beer: replace(beer, id=1)
        mock_repo.update.side_effect = lambda beer: beer
        mock_repo.delete.return_value = False
        return mock_repo
