from datetime import date

import pytest

from kmdb import create_app
from kmdb.config import TestConfig
from kmdb.dto import ActorDTO, GenreDTO, MovieDTO
from kmdb.models import db
from kmdb.services.actors import ActorService
from kmdb.services.genres import GenreService
from kmdb.services.movies import MovieService


@pytest.fixture
def app():
    # fresh in-memory database per test
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_context(app):
    with app.app_context():
        yield
        db.session.remove()


@pytest.fixture
def movie_service(app_context):
    return MovieService()


@pytest.fixture
def actor_service(app_context):
    return ActorService()


@pytest.fixture
def genre_service(app_context):
    return GenreService()


@pytest.fixture
def make_actor(actor_service):
    def _make(name="Jane Doe", birth_date=date(1980, 5, 1)):
        return actor_service.create_actor(ActorDTO(name=name, birth_date=birth_date))
    return _make


@pytest.fixture
def make_genre(genre_service):
    def _make(name="Drama"):
        return genre_service.create_genre(GenreDTO(name=name))
    return _make


@pytest.fixture
def make_movie(movie_service):
    def _make(title="Nova", release_year=1999, duration=90, actor_ids=(), genre_ids=()):
        return movie_service.create_movie(MovieDTO(
            title=title,
            release_year=release_year,
            duration=duration,
            actor_ids=list(actor_ids),
            genre_ids=list(genre_ids),
        ))
    return _make
