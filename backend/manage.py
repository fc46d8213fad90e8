"""Management commands for the Beer API backend application."""

from __future__ import annotations

import logging

import click

from beer_api.core.config import get_port, load_environment
from beer_api.db.session import create_tables, get_sessionmaker
from beer_api.domain.entities import Beer, BeerStyle, BeerType
from beer_api.repositories.beer_repository import BeerRepository
from beer_api.services.beer_service import BeerService

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

SAMPLE_BEERS = [
    Beer(name="Skol", type=BeerType.LAGER, style=BeerStyle.PILSNER),
    Beer(name="Guinness", type=BeerType.STOUT, style=BeerStyle.DARK),
    Beer(name="Colorado Appia", type=BeerType.ALE, style=BeerStyle.HONEY),
    Beer(name="Eisenbahn Weizenbier", type=BeerType.ALE, style=BeerStyle.WHEAT),
]


def _service() -> BeerService:
    load_environment()
    create_tables()
    return BeerService(BeerRepository(get_sessionmaker()))


@click.group()
def cli() -> None:
    """Entry point for management commands."""


@cli.command("init-db")
def init_db() -> None:
    """Create the database tables."""
    load_environment()
    create_tables()
    logging.info("Database tables created.")


@cli.command("seed")
def seed() -> None:
    """Insert the sample catalogue unless beers already exist."""
    service = _service()
    existing = service.get_all()
    if existing:
        logging.info("%d beer(s) already present; no changes made.", len(existing))
        return

    for beer in SAMPLE_BEERS:
        beer.validate()
        created = service.store(Beer(name=beer.name, type=int(beer.type), style=int(beer.style)))
        logging.info("Seeded beer %s (id=%s).", created.name, created.id)


@cli.command("list-beers")
def list_beers() -> None:
    """Print the catalogue."""
    for beer in _service().get_all():
        click.echo(f"{beer.id}\t{beer.name}\ttype={beer.type}\tstyle={beer.style}")


@cli.command("runserver")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", type=int, default=None, help="Defaults to the PORT variable.")
@click.option("--debug/--no-debug", default=False, show_default=True)
def runserver(host: str, port: int | None, debug: bool) -> None:
    """Run the development server."""
    from beer_api.main import create_app

    app = create_app()
    app.run(host=host, port=port or get_port(), debug=debug)


if __name__ == "__main__":
    cli()
