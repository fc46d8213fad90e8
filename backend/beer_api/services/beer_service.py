import logging
from typing import List

from ..core.exceptions import BeerNotFoundError
from ..core.interfaces.service_interface import BeerServiceInterface
from ..domain.entities import Beer
from ..domain.interfaces import IBeerRepository

logger = logging.getLogger(__name__)


class BeerService(BeerServiceInterface):
    """Use-case implementation over a beer repository."""

    def __init__(self, repository: IBeerRepository):
        self.repository = repository

    def get_all(self) -> List[Beer]:
        return self.repository.list_all()

    def get(self, beer_id: int) -> Beer:
        beer = self.repository.get_by_id(beer_id)
        if beer is None:
            raise BeerNotFoundError(beer_id)
        return beer

    def store(self, beer: Beer) -> Beer:
        created = self.repository.add(beer)
        logger.info(
            "Beer stored",
            extra={"context": {"beer_id": created.id, "name": created.name}},
        )
        return created

    def update(self, beer: Beer) -> Beer:
        return self.repository.update(beer)

    def remove(self, beer_id: int) -> None:
        if not self.repository.delete(beer_id):
            raise BeerNotFoundError(beer_id)
        logger.info("Beer removed", extra={"context": {"beer_id": beer_id}})
