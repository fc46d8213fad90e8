from typing import List

from beer_api.domain.entities import Beer


class BeerServiceInterface:
    """Use-case capability the beer controller depends on.

    Implementations signal failure by raising; the controller maps the
    exception to a status code. They must be safe to call from concurrent
    requests.
    """

    def get_all(self) -> List[Beer]:
        raise NotImplementedError

    def get(self, beer_id: int) -> Beer:
        raise NotImplementedError

    def store(self, beer: Beer) -> Beer:
        raise NotImplementedError

    def update(self, beer: Beer) -> Beer:
        raise NotImplementedError

    def remove(self, beer_id: int) -> None:
        raise NotImplementedError
