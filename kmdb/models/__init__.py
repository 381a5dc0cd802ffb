from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event

db = SQLAlchemy()

# SQLite INTEGER is a signed 64-bit value
MIN_INTEGER = -2**63
MAX_INTEGER = 2**63 - 1


def fits_integer(value):
    return MIN_INTEGER <= value <= MAX_INTEGER


def register_sqlite_functions(engine):
    """Replace SQLite's ASCII-only lower() so ilike/icontains fold every letter."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def unicode_lower(dbapi_connection, connection_record):
        dbapi_connection.create_function(
            "lower", 1, lambda value: value.lower() if isinstance(value, str) else value
        )


# Movie owns both join tables; Actor.movies and Genre.movies are the inverse side
movie_actor = db.Table(
    "movie_actor",
    db.Column("movie_id", db.Integer, db.ForeignKey("movie.id"), primary_key=True),
    db.Column("actor_id", db.Integer, db.ForeignKey("actor.id"), primary_key=True),
)

movie_genre = db.Table(
    "movie_genre",
    db.Column("movie_id", db.Integer, db.ForeignKey("movie.id"), primary_key=True),
    db.Column("genre_id", db.Integer, db.ForeignKey("genre.id"), primary_key=True),
)

from kmdb.models.actor import Actor  # noqa: E402
from kmdb.models.genre import Genre  # noqa: E402
from kmdb.models.movie import Movie  # noqa: E402
