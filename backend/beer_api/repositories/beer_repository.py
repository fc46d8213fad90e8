import logging
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from beer_api.core.exceptions import BeerNotFoundError, BeerRepositoryError
from beer_api.db.base import BeerModel
from beer_api.db.session import get_sessionmaker
from beer_api.domain.entities import Beer
from beer_api.domain.interfaces import IBeerRepository

logger = logging.getLogger(__name__)


class BeerRepository(IBeerRepository):
    """SQLAlchemy-backed beer storage.

    Takes a session factory rather than a session: each call opens its own
    session, so one repository can serve concurrent requests.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        self.session_factory = session_factory or get_sessionmaker()

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                "Beer repository operation failed",
                extra={"context": {"operation": operation, "error": str(e)}},
                exc_info=True,
            )
            raise BeerRepositoryError(operation, e) from e
        finally:
            db.close()

    def list_all(self) -> List[Beer]:
        with self._session("list") as db:
            rows = db.scalars(select(BeerModel).order_by(BeerModel.id.asc())).all()
            return [self._to_domain(row) for row in rows]

    def get_by_id(self, beer_id: int) -> Optional[Beer]:
        with self._session("get") as db:
            row = db.get(BeerModel, beer_id)
            return self._to_domain(row) if row else None

    def add(self, beer: Beer) -> Beer:
        with self._session("add") as db:
            row = BeerModel(name=beer.name, type=beer.type, style=beer.style)
            db.add(row)
            db.commit()
            db.refresh(row)
            return self._to_domain(row)

    def update(self, beer: Beer) -> Beer:
        with self._session("update") as db:
            row = db.get(BeerModel, beer.id)
            if row is None:
                raise BeerNotFoundError(beer.id)
            row.name = beer.name
            row.type = beer.type
            row.style = beer.style
            db.commit()
            db.refresh(row)
            return self._to_domain(row)

    def delete(self, beer_id: int) -> bool:
        with self._session("delete") as db:
            row = db.get(BeerModel, beer_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True

    def _to_domain(self, row: BeerModel) -> Beer:
        return Beer(
            id=row.id,
            name=row.name,
            type=row.type,
            style=row.style,
        )
