"""Data access for movies, actors and genres.

Each repository wraps the Flask-SQLAlchemy session; the services decide
when to commit.
"""
from kmdb.models import db, fits_integer
from kmdb.models.actor import Actor
from kmdb.models.genre import Genre
from kmdb.models.movie import Movie


class BaseRepository:
    model = None

    def find_by_id(self, entity_id):
        if not fits_integer(entity_id):
            return None
        return db.session.get(self.model, entity_id)

    def find_all_by_ids(self, ids):
        """Bulk lookup; ids that do not resolve are left out."""
        ids = [i for i in ids or () if fits_integer(i)]
        if not ids:
            return []
        query = db.select(self.model).where(self.model.id.in_(ids)).order_by(self.model.id)
        return list(db.session.scalars(query))

    def find_page(self, offset, limit):
        query = db.select(self.model).order_by(self.model.id).offset(offset).limit(limit)
        return list(db.session.scalars(query))

    def count(self):
        return db.session.scalar(db.select(db.func.count()).select_from(self.model))

    def save(self, entity):
        db.session.add(entity)
        db.session.flush()
        return entity

    def delete(self, entity):
        db.session.delete(entity)
        db.session.flush()


class MovieRepository(BaseRepository):
    model = Movie

    def find_by_title_containing(self, title):
        query = db.select(Movie).where(Movie.title.icontains(title, autoescape=True)).order_by(Movie.id)
        return list(db.session.scalars(query))

    def find_by_release_year(self, release_year):
        if not fits_integer(release_year):
            return []
        query = db.select(Movie).where(Movie.release_year == release_year).order_by(Movie.id)
        return list(db.session.scalars(query))


class ActorRepository(BaseRepository):
    model = Actor

    def find_by_name_containing(self, name):
        query = db.select(Actor).where(Actor.name.icontains(name, autoescape=True)).order_by(Actor.id)
        return list(db.session.scalars(query))

    def find_by_name_and_birth_date(self, name, birth_date):
        query = db.select(Actor).where(Actor.name == name, Actor.birth_date == birth_date)
        return db.session.scalars(query).first()


class GenreRepository(BaseRepository):
    model = Genre

    def find_by_name(self, name):
        return db.session.scalars(db.select(Genre).where(Genre.name == name)).first()
