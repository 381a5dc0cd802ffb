from sqlalchemy.orm import validates

from kmdb.errors import ValidationFailed
from kmdb.models import db, movie_actor, movie_genre, MAX_INTEGER

MIN_RELEASE_YEAR = 1880
MAX_RELEASE_YEAR = 2024

class Movie(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    release_year = db.Column(db.Integer, nullable=False)
    duration = db.Column(db.Integer)  # minutes

    genres = db.relationship("Genre", secondary=movie_genre, back_populates="movies")
    actors = db.relationship("Actor", secondary=movie_actor, back_populates="movies")

    @validates("title")
    def validate_title(self, key, value):
        if value is None:
            raise ValidationFailed("Title cannot be null")
        return value

    @validates("release_year")
    def validate_release_year(self, key, value):
        if value is None:
            raise ValidationFailed("Release year cannot be null")
        if value < MIN_RELEASE_YEAR:
            raise ValidationFailed(f"Release year can not be earlier than {MIN_RELEASE_YEAR}")
        if value > MAX_RELEASE_YEAR:
            raise ValidationFailed(f"Release year can not be later than {MAX_RELEASE_YEAR}")
        return value

    @validates("duration")
    def validate_duration(self, key, value):
        if value is not None and value < 1:
            raise ValidationFailed("Duration must be at least 1 minute")
        if value is not None and value > MAX_INTEGER:
            raise ValidationFailed("Duration is out of range")
        return value

    def __repr__(self):
        return f"<Movie {self.id}:{self.title} ({self.release_year})>"
