import logging

from kmdb.dto import GenreDTO
from kmdb.errors import DuplicateResource, NotFound, ValidationFailed
from kmdb.models.genre import Genre
from kmdb.repositories import GenreRepository, MovieRepository
from kmdb.schemas.fields import is_blank
from kmdb.services import transactional
from kmdb.services.pagination import paginate

logger = logging.getLogger(__name__)


def map_genre_to_dto(genre):
    return GenreDTO(id=genre.id, name=genre.name)


class GenreService:
    def __init__(self, genres=None, movies=None):
        self.genres = genres or GenreRepository()
        self.movies = movies or MovieRepository()

    @transactional(read_only=True)
    def list_genres(self, page, size):
        return paginate(self.genres, page, size, map_genre_to_dto)

    @transactional(read_only=True)
    def get_genre(self, genre_id):
        return map_genre_to_dto(self._find_genre(genre_id))

    @transactional(read_only=True)
    def find_genres_by_name(self, name):
        genre = self.genres.find_by_name(name)
        return [map_genre_to_dto(genre)] if genre else []

    # TODO: enforce unique names once existing rows are deduplicated; find_by_name is ready for it
    @transactional
    def create_genre(self, dto):
        if is_blank(dto.name):
            raise ValidationFailed("Genre name cannot be empty or blank.")

        genre = self.genres.save(Genre(name=dto.name))
        logger.info("Created genre %s '%s'", genre.id, genre.name)
        return map_genre_to_dto(genre)

    @transactional
    def update_genre(self, genre_id, dto):
        if is_blank(dto.name):
            raise ValidationFailed("Genre name cannot be empty or blank.")
        genre = self._find_genre(genre_id)

        genre.name = dto.name
        genre = self.genres.save(genre)
        logger.info("Updated genre %s", genre.id)
        return map_genre_to_dto(genre)

    @transactional
    def delete_genre(self, genre_id, force=False):
        genre = self._find_genre(genre_id)
        movies = list(genre.movies)

        if movies and not force:
            logger.warning("Refusing to delete genre %s linked to %d movie(s)", genre_id, len(movies))
            raise DuplicateResource(
                f"Cannot delete genre '{genre.name}' because it is associated with {len(movies)} movie(s)."
            )

        for movie in movies:
            movie.genres.remove(genre)
            self.movies.save(movie)

        self.genres.delete(genre)
        logger.info("Deleted genre %s (force=%s)", genre_id, force)

    def _find_genre(self, genre_id):
        genre = self.genres.find_by_id(genre_id)
        if genre is None:
            raise NotFound(f"Genre not found with id: {genre_id}")
        return genre
